"""
yaml12 - YAML 1.2 conversion between Python values and YAML text

PyYAML does the tokenizing, parsing and writing; yaml12 decides how every
Python value maps onto YAML nodes and back:

- scalars follow the YAML 1.2 core schema (``yes`` and ``on`` are strings)
- explicit tags round-trip through TaggedValue
- dates and datetimes are written as ``!timestamp`` scalars
- non-string mapping keys come back as their compact YAML text
- aliases are rejected instead of silently shared

Example:
    >>> import yaml12
    >>> yaml12.parse_yaml("name: Alice\\nage: 30")
    {'name': 'Alice', 'age': 30}
    >>> yaml12.format_yaml({"name": "Alice", "tags": ["a", "b"]})
    'name: Alice\\ntags:\\n- a\\n- b'
"""

import logging
import sys

from yaml12.composer import compose_all
from yaml12.config import DEFAULT_MAX_DEPTH, get_max_depth
from yaml12.constructor import Decoder
from yaml12.emitter import (
    serialize_documents, frame_documents, strip_document_start,
)
from yaml12.error import (
    YAMLError,
    MarkedYAMLError,
    ParseError,
    UnsupportedConstructError,
    MalformedScalarError,
    EmitterError,
    NestingDepthError,
    TypeMismatchError,
    MalformedTagError,
    MalformedKeyError,
    InvalidTemporalValueError,
)
from yaml12.nodes import (
    Node,
    ScalarNode,
    SequenceNode,
    MappingNode,
    TaggedNode,
    RepresentationNode,
    AliasNode,
    BadValueNode,
)
from yaml12.representer import Encoder
from yaml12.tags import Tag, parse_tag
from yaml12.timestamps import encode_date, encode_timestamp
from yaml12.values import (
    NA,
    Vector,
    TaggedValue,
    LOGICAL,
    INTEGER,
    DOUBLE,
    CHARACTER,
    DATE,
    TIMESTAMP,
    is_na,
    get_tag,
    untag,
)

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def _collapse_lines(text):
    """Join line-wise input with newlines."""
    if isinstance(text, bytes):
        try:
            return text.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ParseError(problem='YAML parse error: %s' % exc) from exc
    if isinstance(text, str):
        return text
    try:
        lines = list(text)
    except TypeError:
        raise TypeMismatchError(
            "`text` must be a string or a sequence of strings, got %s"
            % type(text).__name__) from None
    for line in lines:
        if not isinstance(line, str):
            if line is None or line is NA:
                raise TypeMismatchError("`text` must not contain missing lines")
            raise TypeMismatchError(
                "`text` must contain only strings, got %s" % type(line).__name__)
    return '\n'.join(lines)


def decode(node, max_depth=None):
    """Convert one node tree into a Python value."""
    return Decoder(max_depth).construct_document(node)


def encode(value, unbox_singletons=True, max_depth=None):
    """Convert one Python value into a node tree."""
    return Encoder(unbox_singletons, max_depth).represent(value)


def parse_yaml(text, multi=False, resolve=True, max_depth=None):
    """Parse YAML text into Python values.

    Args:
        text: A string, or a sequence of lines that are joined with "\\n"
        multi: Return a list with every document instead of the first one
        resolve: When false, scalars are not typed: every scalar comes back
            as its source text
        max_depth: Nesting limit (default: yaml12.config.get_max_depth())

    Returns:
        The first document's value, or None for an empty stream.  With
        ``multi``, a list of every document's value.

    Raises:
        ParseError: if the text is not well-formed YAML
        UnsupportedConstructError: on aliases and invalid tagged scalars
        MalformedKeyError: if two mapping keys render to the same text

    Example:
        >>> parse_yaml(["- 1", "- !point [2, 3]"])
        [1, TaggedValue([2, 3], tag='!point')]
    """
    max_depth = get_max_depth(max_depth)
    documents = compose_all(_collapse_lines(text), resolve, max_depth)
    decoder = Decoder(max_depth)
    if multi:
        return [decoder.construct_document(node) for node in documents]
    if not documents:
        return None
    if len(documents) > 1:
        logger.debug("ignoring %d document(s) after the first",
                     len(documents) - 1)
    return decoder.construct_document(documents[0])


def read_yaml(path, multi=False, resolve=True, max_depth=None):
    """Read and parse a UTF-8 YAML file; see parse_yaml()."""
    with open(path, 'rb') as fp:
        text = fp.read()
    return parse_yaml(text, multi=multi, resolve=resolve, max_depth=max_depth)


def _render(value, multi, max_depth):
    encoder = Encoder(max_depth=max_depth)
    if multi:
        if not isinstance(value, (list, tuple)):
            raise TypeMismatchError(
                "`value` must be a list when multi=True, got %s"
                % type(value).__name__)
        documents = [encoder.represent(document) for document in value]
    else:
        documents = [encoder.represent(value)]
    return serialize_documents(documents, multi, max_depth)


def format_yaml(value, multi=False, max_depth=None):
    """Render a Python value as YAML text for display.

    A single document is returned without its leading ``---`` line and
    without an end marker.  With ``multi``, ``value`` must be a list of
    documents, which are rendered as one stream with their start markers.

    Example:
        >>> format_yaml([1, 2])
        '- 1\\n- 2'
    """
    text = _render(value, multi, get_max_depth(max_depth))
    if multi:
        return text
    return strip_document_start(text)


def write_yaml(value, path=None, multi=False, max_depth=None):
    """Write a Python value as a framed YAML document.

    The output always starts with ``---`` and ends with ``...``.  Writing
    zero documents (``multi=True`` with an empty list) writes nothing.

    Args:
        value: Value to write (a list of documents with ``multi``)
        path: File path or text stream; None writes to sys.stdout
        multi: Write each element of ``value`` as its own document
        max_depth: Nesting limit
    """
    output = frame_documents(
        _render(value, multi, get_max_depth(max_depth)), multi)
    if path is None:
        sys.stdout.write(output)
        destination = '<stdout>'
    elif hasattr(path, 'write'):
        path.write(output)
        destination = getattr(path, 'name', '<stream>')
    else:
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write(output)
        destination = path
    logger.debug("wrote %d characters to %s", len(output), destination)


__all__ = [
    "parse_yaml",
    "read_yaml",
    "format_yaml",
    "write_yaml",
    "encode",
    "decode",
    "encode_date",
    "encode_timestamp",
    "Encoder",
    "Decoder",
    "NA",
    "Vector",
    "TaggedValue",
    "LOGICAL",
    "INTEGER",
    "DOUBLE",
    "CHARACTER",
    "DATE",
    "TIMESTAMP",
    "is_na",
    "get_tag",
    "untag",
    "Tag",
    "parse_tag",
    "Node",
    "ScalarNode",
    "SequenceNode",
    "MappingNode",
    "TaggedNode",
    "RepresentationNode",
    "AliasNode",
    "BadValueNode",
    "YAMLError",
    "MarkedYAMLError",
    "ParseError",
    "UnsupportedConstructError",
    "MalformedScalarError",
    "EmitterError",
    "NestingDepthError",
    "TypeMismatchError",
    "MalformedTagError",
    "MalformedKeyError",
    "InvalidTemporalValueError",
    "DEFAULT_MAX_DEPTH",
]
