"""Abstract YAML node tree.

The composer builds these from parser events, the decoder consumes them, the
encoder produces them, and the emitter turns them back into text.
"""

NULL = 'null'
BOOL = 'bool'
INT = 'int'
FLOAT = 'float'
STR = 'str'

SCALAR_KINDS = (NULL, BOOL, INT, FLOAT, STR)


class Node:
    """Base class for YAML nodes."""

    id = None

    def __init__(self, value=None, start_mark=None, end_mark=None):
        self.value = value
        self.start_mark = start_mark
        self.end_mark = end_mark

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, repr(self._key())))

    def _key(self):
        return self.value

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.value)


class ScalarNode(Node):
    """Resolved scalar: ``kind`` is one of SCALAR_KINDS."""
    id = 'scalar'

    def __init__(self, kind, value=None, start_mark=None, end_mark=None):
        if kind not in SCALAR_KINDS:
            raise ValueError("unknown scalar kind %r" % (kind,))
        super().__init__(value, start_mark, end_mark)
        self.kind = kind

    def _key(self):
        # keeps 1, 1.0 and True apart
        return (self.kind, self.value)

    def __repr__(self):
        return 'ScalarNode(%r, %r)' % (self.kind, self.value)


class CollectionNode(Node):
    """Base class for collection nodes."""

    def __init__(self, value=None, start_mark=None, end_mark=None,
                 flow_style=None):
        super().__init__([] if value is None else value, start_mark, end_mark)
        self.flow_style = flow_style

    def _key(self):
        return tuple(self.value)


class SequenceNode(CollectionNode):
    """Ordered list of nodes."""
    id = 'sequence'


class MappingNode(CollectionNode):
    """Ordered list of (key node, value node) pairs."""
    id = 'mapping'


class TaggedNode(Node):
    """A node carrying an explicit, non core-schema tag."""
    id = 'tagged'

    def __init__(self, tag, node, start_mark=None, end_mark=None):
        super().__init__(node, start_mark, end_mark)
        self.tag = tag

    @property
    def node(self):
        return self.value

    def _key(self):
        return (self.tag, self.value)

    def __repr__(self):
        return 'TaggedNode(%r, %r)' % (self.tag, self.value)


class RepresentationNode(Node):
    """Unresolved scalar: the raw source text, its style and optional tag."""
    id = 'representation'

    def __init__(self, value, style=None, tag=None,
                 start_mark=None, end_mark=None):
        super().__init__(value, start_mark, end_mark)
        self.style = style
        self.tag = tag

    def _key(self):
        return (self.value, self.style, self.tag)

    def __repr__(self):
        return 'RepresentationNode(%r, %r, %r)' % (
            self.value, self.style, self.tag)


class AliasNode(Node):
    """Reference to an anchored node (``*anchor``)."""
    id = 'alias'

    @property
    def anchor(self):
        return self.value


class BadValueNode(Node):
    """Scalar whose text does not fit its explicit core-schema tag."""
    id = 'bad_value'

    def __init__(self, value=None, tag=None, start_mark=None, end_mark=None):
        super().__init__(value, start_mark, end_mark)
        self.tag = tag

    def _key(self):
        return (self.value, self.tag)
