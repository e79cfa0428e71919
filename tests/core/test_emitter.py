"""Tests for writing YAML text (format_yaml, write_yaml) and round trips."""

import datetime
import io
import math

import pytest
import yaml12
from yaml12 import NA, Vector, TaggedValue


class TestFormatScalars:
    """Display form of single values."""

    @pytest.mark.parametrize('value, expected', [
        (5, '5'),
        (-2.5, '-2.5'),
        (1.0, '1.0'),
        (math.inf, '.inf'),
        (None, 'null'),
        (NA, 'null'),
        (True, 'true'),
        ('hello', 'hello'),
        ('yes', 'yes'),
    ])
    def test_plain(self, value, expected):
        """Scalars that need no quoting."""
        assert yaml12.format_yaml(value) == expected

    @pytest.mark.parametrize('value', ['123', 'true', 'null', '~', '1.5', '', '.inf'])
    def test_quoted_when_ambiguous(self, value):
        """Strings that would re-read as another kind are quoted."""
        text = yaml12.format_yaml(value)
        assert text[0] in '\'"'
        assert yaml12.parse_yaml(text) == value

    def test_multiline_string(self):
        """Strings with line breaks use literal block style."""
        value = "first\nsecond"
        text = yaml12.format_yaml(value)
        assert text == '|-\n  first\n  second'
        assert yaml12.parse_yaml(text) == value

    def test_final_line_break_kept(self):
        """A string ending in a line break keeps it in the display form."""
        for value in ("first\nsecond\n", "one line\n", {'a': "x\ny\n"}):
            assert yaml12.parse_yaml(yaml12.format_yaml(value)) == value

    def test_unicode(self):
        """Non-ASCII text is written as is."""
        assert yaml12.format_yaml('Zoë') == 'Zoë'


class TestFormatCollections:
    """Block layout of collections."""

    def test_empty(self):
        """Empty collections use flow style."""
        assert yaml12.format_yaml([]) == '[]'
        assert yaml12.format_yaml({}) == '{}'

    def test_mapping(self):
        """Block mappings and sequences."""
        assert yaml12.format_yaml({'a': 1, 'b': [1, 2]}) == 'a: 1\nb:\n- 1\n- 2'

    def test_sequence(self):
        """A sequence of mixed scalars."""
        assert yaml12.format_yaml([1, 'a', None]) == '- 1\n- a\n- null'

    def test_vector(self):
        """A vector of length one is a scalar, longer ones are sequences."""
        assert yaml12.format_yaml(Vector('character', ['x'])) == 'x'
        assert yaml12.format_yaml(Vector('character', ['x', 'y'])) == '- x\n- y'

    def test_non_string_key(self):
        """Complex keys are written with '?'."""
        text = yaml12.format_yaml({(1, 2): 'x'})
        assert yaml12.parse_yaml(text) == {'[1, 2]': 'x'}


class TestFormatTags:
    """Tags in the output."""

    def test_date(self):
        """Dates are !timestamp scalars in plain style."""
        assert yaml12.format_yaml(datetime.date(2024, 1, 2)) == '!timestamp 2024-01-02'

    def test_tagged_int(self):
        """Tagged numbers stay plain."""
        assert yaml12.format_yaml(TaggedValue(5, tag='!foo')) == '!foo 5'

    def test_tagged_numeric_string(self):
        """A tagged string that looks like a number is quoted."""
        assert yaml12.format_yaml(TaggedValue('123', tag='!foo')) == "!foo '123'"

    def test_tagged_collection(self):
        """Tags on collections."""
        text = yaml12.format_yaml({'p': TaggedValue([2, 3], tag='!point')})
        assert yaml12.parse_yaml(text) == {'p': TaggedValue([2, 3], tag='!point')}

    def test_core_tag_dropped(self):
        """Core-schema tags do not appear in the output."""
        assert yaml12.format_yaml(TaggedValue('x', tag='!!str')) == 'x'


class TestMulti:
    """Multi-document output."""

    def test_format_multi(self):
        """Every document starts with '---'."""
        assert yaml12.format_yaml([1, 'a'], multi=True) == '---\n1\n---\na\n'

    def test_format_multi_empty(self):
        """Zero documents give empty text."""
        assert yaml12.format_yaml([], multi=True) == ''

    def test_multi_needs_list(self):
        """multi=True takes a list of documents."""
        with pytest.raises(yaml12.TypeMismatchError):
            yaml12.format_yaml(5, multi=True)


class TestWrite:
    """Persisted framing."""

    def test_single(self):
        """A single document is framed by '---' and '...'."""
        out = io.StringIO()
        yaml12.write_yaml(5, out)
        assert out.getvalue() == '---\n5\n...\n'

    def test_single_mapping(self):
        """The root collection starts on the line after '---'."""
        out = io.StringIO()
        yaml12.write_yaml({'a': 1}, out)
        assert out.getvalue() == '---\na: 1\n...\n'

    def test_multi(self):
        """One end marker after the last document."""
        out = io.StringIO()
        yaml12.write_yaml([1, 2], out, multi=True)
        assert out.getvalue() == '---\n1\n---\n2\n...\n'

    def test_multi_empty(self):
        """Nothing is written for zero documents."""
        out = io.StringIO()
        yaml12.write_yaml([], out, multi=True)
        assert out.getvalue() == ''

    def test_file(self, tmp_path):
        """Paths are written as UTF-8 and can be read back."""
        path = tmp_path / 'out.yaml'
        yaml12.write_yaml({'name': 'Zoë'}, str(path))
        assert path.read_text(encoding='utf-8') == '---\nname: Zoë\n...\n'
        assert yaml12.read_yaml(str(path)) == {'name': 'Zoë'}

    def test_stdout(self, capsys):
        """No path writes to standard output."""
        yaml12.write_yaml([1])
        assert capsys.readouterr().out == '---\n- 1\n...\n'

    def test_display_is_persisted_without_markers(self):
        """format_yaml is write_yaml minus the framing lines."""
        value = {'a': [1, {'b': None}], 'c': 'text'}
        out = io.StringIO()
        yaml12.write_yaml(value, out)
        assert out.getvalue() == '---\n' + yaml12.format_yaml(value) + '\n...\n'


class TestRoundTrip:
    """Decoding what was encoded gives the value back."""

    @pytest.mark.parametrize('value', [
        None,
        True,
        0,
        -(2 ** 63),
        3.25,
        '',
        'plain',
        'with: colon',
        '  leading spaces',
        "multi\nline",
        "trailing newline\n",
        [],
        {},
        [1, [2, [3]], {'a': None}],
        {'nested': {'deep': ['x', 'y']}, 'n': 1.5},
        TaggedValue(1, tag='!point'),
        TaggedValue('2024-01-02', tag='!timestamp'),
        TaggedValue({'a': 1}, tag='!obj'),
        TaggedValue(1, tag='!e!point'),
        TaggedValue(1, tag='ex:!point'),
        TaggedValue('1', tag='!num'),
    ])
    def test_round_trip(self, value):
        """Values survive format_yaml followed by parse_yaml."""
        assert yaml12.parse_yaml(yaml12.format_yaml(value)) == value

    def test_multi_round_trip(self):
        """Document lists survive a multi-document round trip."""
        documents = [1, {'a': [True]}, None, 'x']
        text = yaml12.format_yaml(documents, multi=True)
        assert yaml12.parse_yaml(text, multi=True) == documents

    def test_persisted_round_trip(self):
        """The framed form parses like the display form."""
        out = io.StringIO()
        yaml12.write_yaml({'a': 1}, out)
        assert yaml12.parse_yaml(out.getvalue()) == {'a': 1}

    def test_special_floats(self):
        """Infinities and NaN."""
        data = yaml12.parse_yaml(yaml12.format_yaml([math.inf, -math.inf]))
        assert data == [math.inf, -math.inf]
        assert yaml12.parse_yaml(yaml12.format_yaml(math.nan)) is None

    def test_date_round_trip(self):
        """Dates come back as their tagged text."""
        assert yaml12.parse_yaml(yaml12.format_yaml(datetime.date(1999, 12, 31))) == \
            TaggedValue('1999-12-31', tag='!timestamp')

    def test_unresolved_values(self):
        """resolve=False keeps scalar text, quoted or not."""
        text = "a: 1\nb: '2'\nc: !x y"
        value = yaml12.parse_yaml(text, resolve=False)
        assert value == {'a': '1', 'b': '2', 'c': TaggedValue('y', tag='!x')}


class TestEmitterFailures:
    """Errors raised while writing."""

    def test_unsupported_type(self):
        """format_yaml fails on values without a YAML form."""
        with pytest.raises(yaml12.TypeMismatchError):
            yaml12.format_yaml({'a': object()})

    def test_depth(self):
        """format_yaml honors max_depth."""
        with pytest.raises(yaml12.NestingDepthError):
            yaml12.format_yaml([[[1]]], max_depth=2)
