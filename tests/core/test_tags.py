"""Tests for tag parsing and tag URI conversion."""

import pytest
from yaml12 import Tag, parse_tag, MalformedTagError
from yaml12.tags import custom_tag, is_core_schema_tag, CORE_TAG_PREFIX


class TestParseTag:
    """Host-side tag strings."""

    @pytest.mark.parametrize('text, handle, suffix', [
        ('!point', '!', 'point'),
        ('!!binary', '!!', 'binary'),
        ('!e!point', '!e', 'point'),
        ('ex:!point', 'ex:', 'point'),
        ('  !padded  ', '!', 'padded'),
    ])
    def test_split_at_last_bang(self, text, handle, suffix):
        """Handle is everything before the last '!', suffix after it."""
        assert parse_tag(text) == Tag(handle, suffix)

    @pytest.mark.parametrize('text', ['', ' ', 'point', 'ex:!', '!', None, 3])
    def test_malformed(self, text):
        """Empty, bang-less and suffix-less tags are rejected."""
        with pytest.raises(MalformedTagError):
            parse_tag(text)


class TestTagText:
    """str() and to_uri()."""

    def test_primary(self):
        """'!' handles are written directly before the suffix."""
        assert str(Tag('!', 'point')) == '!point'

    def test_secondary(self):
        """'!!' handles too, and map to the core prefix as URIs."""
        tag = Tag('!!', 'binary')
        assert str(tag) == '!!binary'
        assert tag.is_core
        assert tag.to_uri() == CORE_TAG_PREFIX + 'binary'

    def test_named(self):
        """Other handles are joined to the suffix with '!'."""
        assert str(Tag('!e', 'point')) == '!e!point'
        assert Tag('!e', 'point').to_uri() == '!e!point'

    def test_verbatim(self):
        """An empty handle means the suffix is a full URI."""
        assert str(Tag('', 'tag:example.com,2024:point')) == \
            'tag:example.com,2024:point'


class TestFromUri:
    """Tags reported by the parser."""

    def test_core(self):
        """Core URIs come back as '!!' tags."""
        assert Tag.from_uri(CORE_TAG_PREFIX + 'set') == Tag('!!', 'set')

    def test_local(self):
        """Local tags."""
        assert Tag.from_uri('!point') == Tag('!', 'point')

    def test_uri_without_bang(self):
        """A URI with no '!' is kept whole."""
        tag = Tag.from_uri('tag:example.com,2024:point')
        assert tag == Tag('', 'tag:example.com,2024:point')

    def test_round_trip(self):
        """from_uri inverts to_uri for parseable tags."""
        for text in ('!point', '!!map', '!e!point', 'ex:!point'):
            tag = parse_tag(text)
            assert Tag.from_uri(tag.to_uri()) == tag


class TestCoreSchema:
    """Core-schema tags are treated as no tag."""

    @pytest.mark.parametrize('text', [
        '!!str', '!!int', '!<tag:yaml.org,2002:map>',
        'tag:yaml.org,2002:seq', ' !!null',
    ])
    def test_core(self, text):
        """Every spelling of a core tag is recognized."""
        assert is_core_schema_tag(text)
        assert custom_tag(text) is None

    def test_none(self):
        """No tag."""
        assert custom_tag(None) is None

    def test_custom(self):
        """Custom tags are parsed."""
        assert custom_tag('!point') == Tag('!', 'point')
        assert not is_core_schema_tag('!point')
