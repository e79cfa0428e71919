"""Encoder - converts host values to yaml12 node trees.

Dispatch order for one value:

1. A TaggedValue whose tag is not a core-schema tag: the wrapped value is
   encoded as if untagged, then wrapped in a TaggedNode.
2. Dates and datetimes: rendered by ``yaml12.timestamps`` and tagged
   ``!timestamp``.
3. Everything else by type, through ``yaml_representers`` (exact type) and
   ``yaml_multi_representers`` (any class in the type's MRO).
"""

import datetime

from .config import get_max_depth
from .error import (
    TypeMismatchError, MalformedKeyError, NestingDepthError,
)
from . import nodes
from .nodes import ScalarNode, SequenceNode, MappingNode, TaggedNode
from .scalars import INT64_MIN, INT64_MAX
from .tags import TIMESTAMP_TAG, custom_tag
from .timestamps import (
    encode_date, encode_timestamp, date_to_days, datetime_to_seconds,
)
from . import values
from .values import NA, Vector, TaggedValue, is_na


def null_node():
    return ScalarNode(nodes.NULL, None)


def timestamp_node(text):
    return TaggedNode(TIMESTAMP_TAG, ScalarNode(nodes.STR, text))


def apply_tag(tag, node):
    """Wrap ``node`` in ``tag``; an outer tag replaces an inner one."""
    if isinstance(node, TaggedNode):
        node = node.node
    return TaggedNode(tag, node)


class Encoder:
    """Recursive value-to-node converter.

    With ``unbox_singletons`` (the default) a one-element Vector encodes as a
    bare scalar; without it every Vector encodes as a sequence.  Plain lists
    and tuples always encode as sequences.
    """

    yaml_representers = {}
    yaml_multi_representers = {}

    def __init__(self, unbox_singletons=True, max_depth=None):
        self.unbox_singletons = unbox_singletons
        self.max_depth = get_max_depth(max_depth)
        self.depth = 0

    def represent(self, data):
        """Encode one document's value."""
        self.depth = 0
        return self.represent_data(data)

    def represent_data(self, data):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        try:
            data_type = type(data)
            if data_type in self.yaml_representers:
                return self.yaml_representers[data_type](self, data)
            for base in data_type.__mro__:
                if base in self.yaml_multi_representers:
                    return self.yaml_multi_representers[base](self, data)
            raise TypeMismatchError(
                "Unsupported type %r for YAML conversion" % data_type.__name__)
        finally:
            self.depth -= 1

    def represent_tagged_value(self, data):
        tag = custom_tag(data.tag)
        if data.keys is not None:
            node = self.represent_keyed(data.value, data.keys)
        else:
            node = self.represent_data(data.value)
        if tag is None:
            return node
        return apply_tag(tag, node)

    def represent_none(self, data):
        return null_node()

    def represent_bool(self, data):
        return ScalarNode(nodes.BOOL, data)

    def represent_int(self, data):
        data = int(data)
        if INT64_MIN <= data <= INT64_MAX:
            return ScalarNode(nodes.INT, data)
        return self.represent_float(float(data))

    def represent_float(self, data):
        if is_na(data):
            return null_node()
        return ScalarNode(nodes.FLOAT, float(data))

    def represent_str(self, data):
        return ScalarNode(nodes.STR, str(data))

    def represent_date(self, data):
        return timestamp_node(encode_date(date_to_days(data)))

    def represent_datetime(self, data):
        return timestamp_node(encode_timestamp(datetime_to_seconds(data)))

    def represent_list(self, data):
        return SequenceNode([self.represent_data(item) for item in data])

    def represent_dict(self, data):
        return self.represent_mapping(
            data.keys(), [self.represent_data(value) for value in data.values()])

    def represent_mapping(self, keys, value_nodes):
        mapping = MappingNode([])
        seen = set()
        for key, value_node in zip(keys, value_nodes):
            key_node = self.represent_data(key)
            if key_node in seen:
                raise MalformedKeyError("duplicate mapping key %r" % (key,))
            seen.add(key_node)
            mapping.value.append((key_node, value_node))
        return mapping

    def represent_keyed(self, data, keys):
        """Encode a collection as a mapping whose keys come from ``keys``."""
        if not isinstance(keys, (list, tuple)):
            raise MalformedKeyError(
                "`keys` must be a list, got %s" % type(keys).__name__)
        if isinstance(data, dict):
            items = list(data.values())
        elif isinstance(data, (list, tuple, Vector)):
            items = list(data)
        else:
            raise MalformedKeyError(
                "`keys` can only be attached to a list or dict, got %s"
                % type(data).__name__)
        if len(keys) != len(items):
            raise MalformedKeyError(
                "`keys` must have the same length as the collection "
                "(%d keys for %d items)" % (len(keys), len(items)))
        # the mapping is a level of its own, below the TaggedValue
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingDepthError(self.max_depth)
        try:
            if isinstance(data, Vector):
                value_nodes = [self.represent_vector_item(data.kind, item)
                               for item in items]
            else:
                value_nodes = [self.represent_data(item) for item in items]
            return self.represent_mapping(keys, value_nodes)
        finally:
            self.depth -= 1

    def represent_vector(self, data):
        item_nodes = [self.represent_vector_item(data.kind, item)
                      for item in data.items]
        if self.unbox_singletons and len(item_nodes) == 1:
            return item_nodes[0]
        return SequenceNode(item_nodes)

    def represent_vector_item(self, kind, item):
        if item is None or is_na(item):
            return null_node()
        if kind == values.LOGICAL:
            if isinstance(item, bool):
                return self.represent_bool(item)
        elif kind == values.INTEGER:
            if isinstance(item, int) and not isinstance(item, bool):
                return self.represent_int(item)
        elif kind == values.DOUBLE:
            if isinstance(item, (int, float)) and not isinstance(item, bool):
                return self.represent_float(item)
        elif kind == values.CHARACTER:
            if isinstance(item, str):
                return self.represent_str(item)
        elif kind == values.DATE:
            if isinstance(item, datetime.datetime):
                return self.represent_datetime(item)
            if isinstance(item, datetime.date):
                return self.represent_date(item)
            if isinstance(item, (int, float)) and not isinstance(item, bool):
                return timestamp_node(encode_date(item))
        elif kind == values.TIMESTAMP:
            if isinstance(item, datetime.datetime):
                return self.represent_datetime(item)
            if isinstance(item, (int, float)) and not isinstance(item, bool):
                return timestamp_node(encode_timestamp(item))
        raise TypeMismatchError(
            "Unsupported item of type %r in a %s vector"
            % (type(item).__name__, kind))

    @classmethod
    def add_representer(cls, data_type, representer):
        """Add a representer for a specific type."""
        if 'yaml_representers' not in cls.__dict__:
            cls.yaml_representers = cls.yaml_representers.copy()
        cls.yaml_representers[data_type] = representer

    @classmethod
    def add_multi_representer(cls, data_type, representer):
        """Add a multi-representer for a type and its subclasses."""
        if 'yaml_multi_representers' not in cls.__dict__:
            cls.yaml_multi_representers = cls.yaml_multi_representers.copy()
        cls.yaml_multi_representers[data_type] = representer


Encoder.add_representer(TaggedValue, Encoder.represent_tagged_value)
Encoder.add_representer(type(None), Encoder.represent_none)
Encoder.add_representer(type(NA), Encoder.represent_none)
Encoder.add_representer(bool, Encoder.represent_bool)
Encoder.add_representer(Vector, Encoder.represent_vector)

# subclasses (IntEnum, OrderedDict, namedtuple, ...) are covered through the MRO
Encoder.add_multi_representer(int, Encoder.represent_int)
Encoder.add_multi_representer(float, Encoder.represent_float)
Encoder.add_multi_representer(str, Encoder.represent_str)
Encoder.add_multi_representer(list, Encoder.represent_list)
Encoder.add_multi_representer(tuple, Encoder.represent_list)
Encoder.add_multi_representer(dict, Encoder.represent_dict)
Encoder.add_multi_representer(datetime.datetime, Encoder.represent_datetime)
Encoder.add_multi_representer(datetime.date, Encoder.represent_date)
