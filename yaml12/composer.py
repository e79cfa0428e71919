"""Composer - converts PyYAML event streams to yaml12 node trees.

PyYAML's reader, scanner and parser do the grammar work; the Composer turns
the resulting events into the node model of ``yaml12.nodes``, resolving plain
scalars with the YAML 1.2 core-schema Resolver.  Aliases are kept as
AliasNode instead of being replaced by the anchored node.
"""

import logging

import yaml
from yaml.events import (
    StreamStartEvent, StreamEndEvent,
    AliasEvent, ScalarEvent,
    SequenceStartEvent, SequenceEndEvent,
    MappingStartEvent, MappingEndEvent,
)
from yaml.parser import Parser
from yaml.reader import Reader
from yaml.scanner import Scanner

from .config import get_max_depth
from .error import ParseError, NestingDepthError
from .nodes import (
    SequenceNode, MappingNode, TaggedNode, RepresentationNode, AliasNode,
)
from .resolver import (
    Resolver, NULL_TAG, BOOL_TAG, INT_TAG, FLOAT_TAG, STR_TAG, SEQ_TAG, MAP_TAG,
)
from .scalars import construct_scalar
from .tags import Tag

logger = logging.getLogger(__name__)

# tags construct_scalar turns into plain ScalarNodes
_SCALAR_TAGS = (NULL_TAG, BOOL_TAG, INT_TAG, FLOAT_TAG, STR_TAG)


class Composer:
    """Builds yaml12 nodes from parser events.

    Expects subclasses to provide:
    - check_event(*choices) -> bool
    - get_event() -> Event
    - peek_event() -> Event
    - resolve(kind, value, implicit) -> tag  (from Resolver)

    With ``resolve_scalars`` false every scalar is kept as a
    RepresentationNode holding its source text.
    """

    def __init__(self, resolve_scalars=True, max_depth=None):
        self.resolve_scalars = resolve_scalars
        self.max_depth = get_max_depth(max_depth)
        self.depth = 0

    def check_node(self):
        # Drop StreamStartEvent
        if self.check_event(StreamStartEvent):
            self.get_event()
        return not self.check_event(StreamEndEvent)

    def get_node(self):
        if not self.check_event(StreamEndEvent):
            return self.compose_document()

    def compose_document(self):
        # Drop DocumentStartEvent
        self.get_event()
        node = self.compose_node()
        # Drop DocumentEndEvent
        self.get_event()
        return node

    def compose_node(self):
        if self.check_event(AliasEvent):
            event = self.get_event()
            return AliasNode(event.anchor, event.start_mark, event.end_mark)
        # a TaggedNode wrapper is a level of its own, as in the decoder
        levels = 2 if self.wraps_in_tag(self.peek_event()) else 1
        self.depth += levels
        if self.depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        try:
            if self.check_event(ScalarEvent):
                return self.compose_scalar_node()
            if self.check_event(SequenceStartEvent):
                return self.compose_sequence_node()
            return self.compose_mapping_node()
        finally:
            self.depth -= levels

    def wraps_in_tag(self, event):
        """True when the node for ``event`` will be wrapped in a TaggedNode."""
        tag = event.tag
        if tag is None or tag == '!':
            return False
        if isinstance(event, ScalarEvent):
            return self.resolve_scalars and tag not in _SCALAR_TAGS
        if isinstance(event, SequenceStartEvent):
            return tag != SEQ_TAG
        return tag != MAP_TAG

    def compose_scalar_node(self):
        event = self.get_event()
        tag = event.tag
        if not self.resolve_scalars:
            return RepresentationNode(
                event.value, event.style,
                Tag.from_uri(tag) if tag not in (None, '!') else None,
                event.start_mark, event.end_mark)
        if tag is None or tag == '!':
            # the non-specific "!" tag marks the scalar as a string
            resolved = STR_TAG if tag == '!' else self.resolve(
                yaml.ScalarNode, event.value, event.implicit)
            return construct_scalar(resolved, event.value,
                                    event.start_mark, event.end_mark)
        node = construct_scalar(tag, event.value,
                                event.start_mark, event.end_mark)
        if node is not None:
            return node
        # A tagged plain scalar resolves like an untagged one.
        resolved = self.resolve(yaml.ScalarNode, event.value,
                                (event.style is None, True))
        inner = construct_scalar(resolved, event.value,
                                 event.start_mark, event.end_mark)
        return TaggedNode(Tag.from_uri(tag), inner,
                          event.start_mark, event.end_mark)

    def compose_sequence_node(self):
        start_event = self.get_event()
        node = SequenceNode([], start_event.start_mark, None,
                            flow_style=start_event.flow_style)
        while not self.check_event(SequenceEndEvent):
            node.value.append(self.compose_node())
        end_event = self.get_event()
        node.end_mark = end_event.end_mark
        return self._tag_collection(start_event.tag, SEQ_TAG, node)

    def compose_mapping_node(self):
        start_event = self.get_event()
        node = MappingNode([], start_event.start_mark, None,
                           flow_style=start_event.flow_style)
        while not self.check_event(MappingEndEvent):
            key_node = self.compose_node()
            value_node = self.compose_node()
            node.value.append((key_node, value_node))
        end_event = self.get_event()
        node.end_mark = end_event.end_mark
        return self._tag_collection(start_event.tag, MAP_TAG, node)

    @staticmethod
    def _tag_collection(tag, default_tag, node):
        if tag is None or tag == '!' or tag == default_tag:
            return node
        return TaggedNode(Tag.from_uri(tag), node, node.start_mark, node.end_mark)


class Loader(Reader, Scanner, Parser, Composer, Resolver):
    """PyYAML front end wired to the yaml12 Composer and core-schema Resolver."""

    def __init__(self, stream, resolve_scalars=True, max_depth=None):
        Reader.__init__(self, stream)
        Scanner.__init__(self)
        Parser.__init__(self)
        Composer.__init__(self, resolve_scalars, max_depth)
        Resolver.__init__(self)


def compose_all(text, resolve_scalars=True, max_depth=None):
    """Parse ``text`` and return the root node of every document.

    Raises:
        ParseError: if the text is not well-formed YAML
        NestingDepthError: if a document nests deeper than ``max_depth``
    """
    documents = []
    try:
        # the reader rejects non-printable characters while being built
        loader = Loader(text, resolve_scalars, max_depth)
    except yaml.YAMLError as exc:
        raise ParseError.from_engine(exc) from exc
    try:
        while loader.check_node():
            documents.append(loader.get_node())
    except yaml.YAMLError as exc:
        raise ParseError.from_engine(exc) from exc
    finally:
        loader.dispose()
    logger.debug("composed %d document(s)", len(documents))
    return documents
