"""Host-side value model.

Plain Python values (None, bool, int, float, str, list, tuple, dict and the
datetime types) map onto YAML directly.  This module adds the pieces plain
Python lacks:

- NA, a missing value usable in place of any scalar;
- Vector, a typed atomic vector, the kind of value the encoder's
  vector/scalar duality applies to;
- TaggedValue, a wrapper carrying an explicit YAML tag and/or a list of raw
  mapping keys alongside a value.
"""

import math
from collections.abc import Sequence

LOGICAL = 'logical'
INTEGER = 'integer'
DOUBLE = 'double'
CHARACTER = 'character'
DATE = 'date'
TIMESTAMP = 'timestamp'

VECTOR_KINDS = (LOGICAL, INTEGER, DOUBLE, CHARACTER, DATE, TIMESTAMP)
TEMPORAL_KINDS = (DATE, TIMESTAMP)


class _NAType:
    """Singleton marking a missing scalar."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NA'

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_NAType, ())


NA = _NAType()


def is_na(value):
    """True for NA and for float NaN."""
    if value is NA:
        return True
    return isinstance(value, float) and math.isnan(value)


class Vector(Sequence):
    """A typed atomic vector.

    ``kind`` is one of VECTOR_KINDS.  Items are Python scalars of the matching
    type, or NA.  Numeric kinds also accept NaN as missing.  ``date`` items are
    day offsets from 1970-01-01 and ``timestamp`` items are seconds since
    1970-01-01T00:00:00Z.
    """

    __slots__ = ('kind', 'items')

    def __init__(self, kind, items=()):
        if kind not in VECTOR_KINDS:
            raise ValueError("unknown vector kind %r (expected one of %s)"
                             % (kind, ', '.join(VECTOR_KINDS)))
        self.kind = kind
        self.items = list(items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self.kind, self.items[index])
        return self.items[index]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.kind == other.kind and self.items == other.items

    __hash__ = None

    def __repr__(self):
        return 'Vector(%r, %r)' % (self.kind, self.items)


class TaggedValue:
    """A value with out-of-band YAML metadata.

    Attributes:
        value: The wrapped value; its kind is unchanged by the wrapper
        tag: Explicit YAML tag text such as ``"!point"``, or None
        keys: For collections, a list of raw mapping keys parallel to the
            collection's items, or None
    """

    __slots__ = ('value', 'tag', 'keys')

    def __init__(self, value, tag=None, keys=None):
        self.value = value
        self.tag = tag
        self.keys = keys

    def __eq__(self, other):
        if not isinstance(other, TaggedValue):
            return NotImplemented
        return (self.value, self.tag, self.keys) == \
            (other.value, other.tag, other.keys)

    __hash__ = None

    def __repr__(self):
        args = [repr(self.value)]
        if self.tag is not None:
            args.append('tag=%r' % (self.tag,))
        if self.keys is not None:
            args.append('keys=%r' % (self.keys,))
        return 'TaggedValue(%s)' % ', '.join(args)


def get_tag(value):
    """Return the explicit tag text of ``value``, or None."""
    if isinstance(value, TaggedValue):
        return value.tag
    return None


def untag(value):
    """Strip any TaggedValue wrappers from ``value``."""
    while isinstance(value, TaggedValue):
        value = value.value
    return value
