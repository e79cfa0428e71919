"""YAML 1.2 core-schema tag resolver.

PyYAML ships a YAML 1.1 resolver, under which ``yes``, ``on`` or ``0b101``
are not strings.  This resolver registers the YAML 1.2 core schema instead.
It is used on both sides: by the composer to type plain scalars, and by the
serializer to decide whether a string has to be quoted to survive a re-read.
"""

import re

from yaml.resolver import BaseResolver

from .tags import CORE_TAG_PREFIX

NULL_TAG = CORE_TAG_PREFIX + 'null'
BOOL_TAG = CORE_TAG_PREFIX + 'bool'
INT_TAG = CORE_TAG_PREFIX + 'int'
FLOAT_TAG = CORE_TAG_PREFIX + 'float'
STR_TAG = CORE_TAG_PREFIX + 'str'
SEQ_TAG = CORE_TAG_PREFIX + 'seq'
MAP_TAG = CORE_TAG_PREFIX + 'map'

NULL_REGEXP = re.compile(r'^(?:~|null|Null|NULL|)$')

BOOL_REGEXP = re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$')

INT_REGEXP = re.compile(r'''^(?:[-+]?[0-9]+
                            |0o[0-7]+
                            |0x[0-9a-fA-F]+)$''', re.X)

FLOAT_REGEXP = re.compile(r'''^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
                              |[-+]?\.(?:inf|Inf|INF)
                              |\.(?:nan|NaN|NAN))$''', re.X)


class Resolver(BaseResolver):
    """Resolver for the YAML 1.2 core schema."""
    pass


Resolver.add_implicit_resolver(
    BOOL_TAG, BOOL_REGEXP, list('tTfF'))

# int must be registered before float: "1" matches both
Resolver.add_implicit_resolver(
    INT_TAG, INT_REGEXP, list('-+0123456789'))

Resolver.add_implicit_resolver(
    FLOAT_TAG, FLOAT_REGEXP, list('-+0123456789.'))

Resolver.add_implicit_resolver(
    NULL_TAG, NULL_REGEXP, ['~', 'n', 'N', ''])
