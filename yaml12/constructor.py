"""Decoder - converts yaml12 node trees to host values.

Scalars become None, bool, int, float or str; sequences become lists;
mappings become dicts with string keys.  Tags survive as TaggedValue
wrappers.  Aliases and malformed scalars abort the whole conversion.
"""

import math

from .config import get_max_depth
from .error import (
    EmitterError, UnsupportedConstructError, MalformedScalarError,
    MalformedKeyError, NestingDepthError, TypeMismatchError,
)
from .emitter import render_node
from . import nodes
from .nodes import (
    ScalarNode, SequenceNode, MappingNode, TaggedNode, RepresentationNode,
    AliasNode, BadValueNode,
)
from .scalars import INT64_MIN, INT64_MAX, format_scalar
from .values import TaggedValue


def widen_int(value):
    """Keep ``value`` as int when it fits 64 bits, otherwise make it a float."""
    if INT64_MIN <= value <= INT64_MAX:
        return value
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def attach_tag(value, tag):
    """Attach tag text to ``value`` without changing the value's kind."""
    if not tag:
        return value
    if isinstance(value, TaggedValue):
        return TaggedValue(value.value, tag, value.keys)
    return TaggedValue(value, tag)


class Decoder:
    """Recursive node-to-value converter.

    Constructors are looked up by node class in ``yaml_constructors``; the
    first failure anywhere in the tree propagates, so no partial result is
    ever returned.
    """

    yaml_constructors = {}

    def __init__(self, max_depth=None):
        self.max_depth = get_max_depth(max_depth)
        self.depth = 0

    def construct_document(self, node):
        """Construct the host value for a document's root node."""
        if node is None:
            return None
        self.depth = 0
        return self.construct_object(node)

    def construct_object(self, node):
        constructor = None
        for node_type in type(node).__mro__:
            if node_type in self.yaml_constructors:
                constructor = self.yaml_constructors[node_type]
                break
        if constructor is None:
            raise TypeMismatchError(
                "cannot decode node of type %s" % type(node).__name__)
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        try:
            return constructor(self, node)
        finally:
            self.depth -= 1

    def construct_scalar(self, node):
        if node.kind == nodes.INT:
            return widen_int(node.value)
        return node.value

    def construct_sequence(self, node):
        return [self.construct_object(child) for child in node.value]

    def construct_mapping(self, node):
        mapping = {}
        for key_node, value_node in node.value:
            key = self.render_key(key_node)
            if key in mapping:
                raise MalformedKeyError(
                    "Unsupported YAML: duplicate mapping key %r" % key)
            mapping[key] = self.construct_object(value_node)
        return mapping

    def construct_tagged(self, node):
        return attach_tag(self.construct_object(node.node), str(node.tag))

    def construct_representation(self, node):
        if node.tag is None:
            return node.value
        return attach_tag(node.value, str(node.tag))

    def construct_alias(self, node):
        raise UnsupportedConstructError(
            None, None,
            "Unsupported YAML: YAML aliases are not supported (found alias %r)"
            % node.anchor,
            node.start_mark)

    def construct_bad_value(self, node):
        raise MalformedScalarError(
            None, None,
            "Unsupported YAML: Encountered an invalid YAML scalar value %r%s"
            % (node.value, ' for tag %s' % node.tag if node.tag else ''),
            node.start_mark)

    def render_key(self, node):
        """Render a mapping key node as a dict key string.

        Scalar keys use their canonical text; any other key is re-serialized
        as compact YAML.
        """
        if isinstance(node, ScalarNode):
            return format_scalar(node)[1]
        if isinstance(node, RepresentationNode) and node.tag is None:
            return node.value
        try:
            return render_node(node, max_depth=self.max_depth - self.depth)
        except EmitterError as exc:
            raise MalformedKeyError(
                "Unsupported YAML: failed to render mapping key: %s" % exc
            ) from exc

    @classmethod
    def add_constructor(cls, node_type, constructor):
        """Add a constructor for a node class."""
        if 'yaml_constructors' not in cls.__dict__:
            cls.yaml_constructors = cls.yaml_constructors.copy()
        cls.yaml_constructors[node_type] = constructor


Decoder.add_constructor(ScalarNode, Decoder.construct_scalar)
Decoder.add_constructor(SequenceNode, Decoder.construct_sequence)
Decoder.add_constructor(MappingNode, Decoder.construct_mapping)
Decoder.add_constructor(TaggedNode, Decoder.construct_tagged)
Decoder.add_constructor(RepresentationNode, Decoder.construct_representation)
Decoder.add_constructor(AliasNode, Decoder.construct_alias)
Decoder.add_constructor(BadValueNode, Decoder.construct_bad_value)
