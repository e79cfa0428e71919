"""Document emitter - renders yaml12 node trees as YAML text.

Nodes are converted to PyYAML representation nodes and written by PyYAML's
Serializer through an Emitter subclass.  Framing of the result (document
start and end markers) is done here rather than by the emitter, so the
persisted and display forms differ only by the markers added or removed.
"""

import io

import yaml
from yaml.emitter import Emitter as _Emitter
from yaml.events import DocumentStartEvent, StreamEndEvent
from yaml.serializer import Serializer

from .config import get_max_depth
from .error import (
    EmitterError, NestingDepthError, UnsupportedConstructError,
    MalformedScalarError,
)
from . import nodes
from .nodes import (
    ScalarNode, SequenceNode, MappingNode, TaggedNode, RepresentationNode,
    AliasNode, BadValueNode,
)
from .resolver import Resolver, STR_TAG, SEQ_TAG, MAP_TAG
from .scalars import format_scalar

DOCUMENT_START = '---\n'
DOCUMENT_END = '...\n'

# no line folding inside rendered mapping keys
_KEY_WIDTH = 1 << 30


class Emitter(_Emitter):
    """PyYAML emitter that writes custom-tagged scalars plain when it can.

    PyYAML quotes every scalar whose tag is not implied by its text, giving
    ``!timestamp '2024-01-02'``.  An explicit tag makes the plain form just as
    unambiguous, so plain style is kept whenever the text allows it.  The
    open-ended ``...`` PyYAML appends after a plain root scalar is left out;
    document end markers are added by ``frame_documents``.  A ``---`` line
    is always followed by a line break.
    """

    def choose_scalar_style(self):
        if self.analysis is None:
            self.analysis = self.analyze_scalar(self.event.value)
        if (not self.event.style and not self.canonical
                and self.event.tag is not None
                and not any(self.event.implicit)
                and not (self.simple_key_context
                         and (self.analysis.empty or self.analysis.multiline))
                and (self.flow_level and self.analysis.allow_flow_plain
                     or (not self.flow_level
                         and self.analysis.allow_block_plain))):
            return ''
        return super().choose_scalar_style()

    def expect_document_start(self, first=False):
        if isinstance(self.event, StreamEndEvent):
            self.open_ended = False
        super().expect_document_start(first)
        if isinstance(self.event, DocumentStartEvent) and self.column > 0:
            # the root node starts on the line after "---"
            self.write_indent()


class Dumper(Emitter, Serializer, Resolver):
    """PyYAML back end wired to the yaml12 Emitter and core-schema Resolver."""

    def __init__(self, stream, explicit_start=True, width=None,
                 allow_unicode=True):
        Emitter.__init__(self, stream, width=width,
                         allow_unicode=allow_unicode)
        Serializer.__init__(self, explicit_start=explicit_start)
        Resolver.__init__(self)


class NodeConverter:
    """Converts yaml12 nodes into PyYAML representation nodes."""

    def __init__(self, resolver, flow_style=False, max_depth=None):
        self.resolver = resolver
        self.flow_style = flow_style
        self.max_depth = get_max_depth() if max_depth is None else max_depth
        self.depth = 0

    def convert(self, node):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        try:
            if isinstance(node, ScalarNode):
                return self.convert_scalar(node)
            if isinstance(node, SequenceNode):
                return yaml.SequenceNode(
                    SEQ_TAG, [self.convert(child) for child in node.value],
                    flow_style=self.flow_style)
            if isinstance(node, MappingNode):
                return yaml.MappingNode(
                    MAP_TAG,
                    [(self.convert(key), self.convert(value))
                     for key, value in node.value],
                    flow_style=self.flow_style)
            if isinstance(node, TaggedNode):
                return self.convert_tagged(node)
            if isinstance(node, RepresentationNode):
                return self.convert_representation(node)
            if isinstance(node, AliasNode):
                raise UnsupportedConstructError(
                    None, None,
                    "YAML aliases are not supported (found alias %r)"
                    % node.anchor, node.start_mark)
            if isinstance(node, BadValueNode):
                raise MalformedScalarError(
                    None, None,
                    "Encountered an invalid YAML scalar value %r" % node.value,
                    node.start_mark)
            raise EmitterError("cannot emit node of type %s"
                               % type(node).__name__)
        finally:
            self.depth -= 1

    def convert_scalar(self, node):
        tag, text = format_scalar(node)
        style = None
        # A final line break would be lost when the single-document form
        # drops its last newline, so such strings are left to PyYAML.
        if node.kind == nodes.STR and '\n' in text \
                and not text.endswith('\n'):
            style = '|'
        return yaml.ScalarNode(tag, text, style=style)

    def convert_tagged(self, node):
        inner = self.convert(node.node)
        if isinstance(inner, yaml.ScalarNode) and inner.style is None \
                and self.resolver.resolve(yaml.ScalarNode, inner.value,
                                          (True, False)) != inner.tag:
            # plain text would re-read as another kind
            inner.style = "'"
        inner.tag = node.tag.to_uri()
        return inner

    def convert_representation(self, node):
        if node.tag is not None:
            tag = node.tag.to_uri()
        elif node.style is None:
            tag = self.resolver.resolve(yaml.ScalarNode, node.value,
                                        (True, False))
        else:
            tag = STR_TAG
        return yaml.ScalarNode(tag, node.value, style=node.style)


def _serialize(nodes_, explicit_start, flow_style=False, width=None,
               max_depth=None):
    stream = io.StringIO()
    dumper = Dumper(stream, explicit_start=explicit_start, width=width)
    converter = NodeConverter(dumper, flow_style, max_depth)
    try:
        dumper.open()
        for node in nodes_:
            dumper.serialize(converter.convert(node))
        dumper.close()
    except yaml.YAMLError as exc:
        raise EmitterError(str(exc)) from exc
    finally:
        dumper.dispose()
    return stream.getvalue()


def serialize_documents(nodes_, multi=False, max_depth=None):
    """Render document root nodes as one YAML stream.

    Every document starts with ``---``.  In single-document mode only the
    first node is written and the final line break is dropped.  No nodes
    give the empty string.
    """
    if not nodes_:
        return ''
    if not multi:
        nodes_ = nodes_[:1]
    text = _serialize(nodes_, True, max_depth=max_depth)
    if not multi and text.endswith('\n'):
        text = text[:-1]
    return text


def frame_documents(text, multi=False):
    """Add the trailing document-end marker of persisted output."""
    if not text:
        return ''
    if multi:
        return text + DOCUMENT_END
    return text + '\n' + DOCUMENT_END


def strip_document_start(text):
    """Drop a leading ``---`` line, for single-value display."""
    if text.startswith(DOCUMENT_START):
        return text[len(DOCUMENT_START):]
    return text


def render_node(node, max_depth=None):
    """Render one node as compact single-line YAML without markers."""
    text = _serialize([node], False, flow_style=True, width=_KEY_WIDTH,
                      max_depth=max_depth)
    text = strip_document_start(text)
    if text.endswith('\n'):
        text = text[:-1]
    return text
