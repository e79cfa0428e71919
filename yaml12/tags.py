"""YAML tag handling.

A tag is a handle (namespace prefix) plus a suffix (type name).  Tags travel
through the host side as plain strings such as ``"!point"`` or
``"ex:!point"``; this module converts between those strings, the tag URIs
PyYAML works with, and Tag objects.
"""

from .error import MalformedTagError

CORE_TAG_PREFIX = 'tag:yaml.org,2002:'

TIMESTAMP_TAG_TEXT = '!timestamp'

_CORE_SCHEMA_PREFIXES = (
    '!!',
    '!<' + CORE_TAG_PREFIX,
    '!' + CORE_TAG_PREFIX,
    '<' + CORE_TAG_PREFIX,
    CORE_TAG_PREFIX,
)


class Tag:
    """An explicit node tag: ``handle`` + ``suffix``.

    ``str(tag)`` gives the host-side text.  The primary handle ``!`` and the
    secondary handle ``!!`` render directly before the suffix; any other
    non-empty handle is joined to the suffix with ``!``.  An empty handle
    means the suffix is a complete tag URI.
    """

    __slots__ = ('handle', 'suffix')

    def __init__(self, handle, suffix):
        self.handle = handle
        self.suffix = suffix

    def __str__(self):
        if self.handle in ('!', '!!', ''):
            return self.handle + self.suffix
        return '%s!%s' % (self.handle, self.suffix)

    def __repr__(self):
        return 'Tag(%r, %r)' % (self.handle, self.suffix)

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (self.handle, self.suffix) == (other.handle, other.suffix)

    def __hash__(self):
        return hash((self.handle, self.suffix))

    @property
    def is_core(self):
        return self.handle == '!!'

    def to_uri(self):
        """Return the tag string handed to the PyYAML emitter."""
        if self.handle == '!!':
            return CORE_TAG_PREFIX + self.suffix
        return str(self)

    @classmethod
    def from_uri(cls, uri):
        """Build a Tag from a tag string reported by the PyYAML parser."""
        if uri.startswith(CORE_TAG_PREFIX):
            return cls('!!', uri[len(CORE_TAG_PREFIX):])
        pos = uri.rfind('!')
        if pos < 0:
            return cls('', uri)
        return cls(uri[:pos] or '!', uri[pos + 1:])


TIMESTAMP_TAG = Tag('!', 'timestamp')


def is_core_schema_tag(text):
    """True when ``text`` names one of YAML's built-in core-schema tags."""
    return text.strip().startswith(_CORE_SCHEMA_PREFIXES)


def parse_tag(text):
    """Parse a host-side tag string into a Tag.

    The string is split at its last ``!``: what precedes it is the handle
    (``!`` when empty, ``!!`` for a leading ``!!``), what follows it is the
    suffix.

    Raises:
        MalformedTagError: if ``text`` is not a string, is empty, contains no
            ``!``, or has nothing after its last ``!``.
    """
    if not isinstance(text, str):
        raise MalformedTagError(
            "YAML tag must be a single string, got %s" % type(text).__name__)
    text = text.strip()
    if not text:
        raise MalformedTagError("YAML tag must not be the empty string")
    pos = text.rfind('!')
    if pos < 0 or pos + 1 >= len(text):
        raise MalformedTagError("Invalid YAML tag `%s`" % text)
    handle = text[:pos]
    if handle == '!':
        # "!!suffix" is the secondary handle, not a local tag
        handle = '!!'
    return Tag(handle or '!', text[pos + 1:])


def custom_tag(text):
    """Return the Tag to attach for a host tag string, or None.

    Core-schema tags carry no information beyond the node kind, so they are
    treated as if no tag had been given.
    """
    if text is None:
        return None
    if isinstance(text, str) and is_core_schema_tag(text):
        return None
    return parse_tag(text)
