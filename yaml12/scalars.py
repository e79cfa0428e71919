"""Scalar construction and formatting.

``construct_scalar`` turns scalar text plus a core-schema tag into a typed
ScalarNode; ``format_scalar`` turns a ScalarNode back into the canonical text
the emitter writes.  The decoder renders scalar mapping keys with the same
``format_scalar``, so a key reads exactly as the value would be written.
"""

import math

from . import nodes
from .nodes import ScalarNode, BadValueNode
from .resolver import (
    NULL_TAG, BOOL_TAG, INT_TAG, FLOAT_TAG, STR_TAG,
    NULL_REGEXP, BOOL_REGEXP, INT_REGEXP, FLOAT_REGEXP,
)
from .tags import Tag

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

KIND_TAGS = {
    nodes.NULL: NULL_TAG,
    nodes.BOOL: BOOL_TAG,
    nodes.INT: INT_TAG,
    nodes.FLOAT: FLOAT_TAG,
    nodes.STR: STR_TAG,
}


def construct_int(value):
    """Construct an int from a YAML 1.2 core-schema integer string."""
    if value.startswith('0o'):
        return int(value[2:], 8)
    if value.startswith('0x'):
        return int(value[2:], 16)
    return int(value, 10)


def construct_float(value):
    """Construct a float from a YAML 1.2 core-schema float string."""
    lowered = value.lower()
    if lowered.endswith('.inf'):
        return -math.inf if lowered.startswith('-') else math.inf
    if lowered == '.nan':
        return math.nan
    return float(value)


def construct_scalar(tag, value, start_mark=None, end_mark=None):
    """Build the node for scalar text resolved (or forced) to a core tag.

    Returns a ScalarNode, or a BadValueNode when the text does not match the
    grammar of ``tag``.  Tags outside null/bool/int/float/str return None.
    """
    if tag == STR_TAG:
        return ScalarNode(nodes.STR, value, start_mark, end_mark)
    if tag == NULL_TAG:
        kind, regexp, data = nodes.NULL, NULL_REGEXP, None
    elif tag == BOOL_TAG:
        kind, regexp = nodes.BOOL, BOOL_REGEXP
        data = value.lower() == 'true'
    elif tag == INT_TAG:
        kind, regexp = nodes.INT, INT_REGEXP
        data = construct_int(value) if INT_REGEXP.match(value) else None
    elif tag == FLOAT_TAG:
        kind, regexp = nodes.FLOAT, FLOAT_REGEXP
        data = construct_float(value) if FLOAT_REGEXP.match(value) else None
    else:
        return None
    if not regexp.match(value):
        return BadValueNode(value, Tag.from_uri(tag), start_mark, end_mark)
    return ScalarNode(kind, data, start_mark, end_mark)


def format_float(value):
    """Canonical text of a float: shortest repr, YAML spellings for specials."""
    if math.isnan(value):
        return '.nan'
    if math.isinf(value):
        return '.inf' if value > 0 else '-.inf'
    text = repr(value)
    if '.' not in text and 'e' not in text:
        text += '.0'
    return text


def format_scalar(node):
    """Return (tag, text) for a ScalarNode."""
    kind, value = node.kind, node.value
    if kind == nodes.NULL:
        text = 'null'
    elif kind == nodes.BOOL:
        text = 'true' if value else 'false'
    elif kind == nodes.INT:
        text = str(value)
    elif kind == nodes.FLOAT:
        text = format_float(value)
    else:
        text = value
    return KIND_TAGS[kind], text
