"""Tests for the command line entry point and process-wide settings."""

import pytest
import yaml12
from yaml12.__main__ import main
from yaml12.config import DEFAULT_MAX_DEPTH, get_max_depth


class TestMain:
    """python -m yaml12"""

    def test_normalizes_file(self, tmp_path):
        """Input is decoded and written back as one framed document."""
        source = tmp_path / 'in.yaml'
        source.write_text("b: yes\na: [1, 0x10]\n", encoding='utf-8')
        target = tmp_path / 'out.yaml'
        assert main([str(source), '-o', str(target)]) == 0
        assert target.read_text(encoding='utf-8') == \
            '---\nb: yes\na:\n- 1\n- 16\n...\n'

    def test_multi(self, tmp_path, capsys):
        """--multi keeps every document."""
        source = tmp_path / 'in.yaml'
        source.write_text("--- 1\n--- 2\n", encoding='utf-8')
        assert main([str(source), '--multi']) == 0
        assert capsys.readouterr().out == '---\n1\n---\n2\n...\n'

    def test_first_document_only(self, tmp_path, capsys):
        """Without --multi later documents are dropped."""
        source = tmp_path / 'in.yaml'
        source.write_text("--- 1\n--- 2\n", encoding='utf-8')
        assert main([str(source)]) == 0
        assert capsys.readouterr().out == '---\n1\n...\n'

    def test_parse_error(self, tmp_path, capsys):
        """Malformed input is reported on stderr."""
        source = tmp_path / 'in.yaml'
        source.write_text("a: [1\n", encoding='utf-8')
        assert main([str(source)]) == 1
        assert capsys.readouterr().err.startswith('Error: ')

    def test_alias_error(self, tmp_path, capsys):
        """Unsupported constructs are reported too."""
        source = tmp_path / 'in.yaml'
        source.write_text("a: &x 1\nb: *x\n", encoding='utf-8')
        assert main([str(source)]) == 1
        assert 'aliases' in capsys.readouterr().err

    def test_control_character(self, tmp_path, capsys):
        """Input the reader rejects gives exit status 1, not a traceback."""
        source = tmp_path / 'in.yaml'
        source.write_text("a: \x07\n", encoding='utf-8')
        assert main([str(source)]) == 1
        assert capsys.readouterr().err.startswith('Error: YAML parse error')

    def test_invalid_utf8(self, tmp_path, capsys):
        """A file that is not UTF-8 gives exit status 1."""
        source = tmp_path / 'in.yaml'
        source.write_bytes(b"a: \xff\n")
        assert main([str(source)]) == 1
        assert capsys.readouterr().err.startswith('Error: YAML parse error')

    def test_missing_file(self, tmp_path, capsys):
        """A missing input file fails cleanly."""
        assert main([str(tmp_path / 'nope.yaml')]) == 1
        assert 'Error: ' in capsys.readouterr().err

    def test_conflicting_verbosity(self):
        """-v and -q are mutually exclusive."""
        with pytest.raises(SystemExit):
            main(['-v', '-q'])


class TestMaxDepth:
    """YAML12_MAX_DEPTH and the max_depth argument."""

    def test_default(self, monkeypatch):
        """Without configuration the default applies."""
        monkeypatch.delenv('YAML12_MAX_DEPTH', raising=False)
        assert get_max_depth() == DEFAULT_MAX_DEPTH

    def test_environment(self, monkeypatch):
        """The environment variable overrides the default."""
        monkeypatch.setenv('YAML12_MAX_DEPTH', '2')
        assert get_max_depth() == 2
        with pytest.raises(yaml12.NestingDepthError):
            yaml12.parse_yaml("[[[1]]]")

    def test_argument_wins(self, monkeypatch):
        """An explicit max_depth beats the environment."""
        monkeypatch.setenv('YAML12_MAX_DEPTH', '2')
        assert get_max_depth(10) == 10
        assert yaml12.parse_yaml("[[[1]]]", max_depth=10) == [[[1]]]

    def test_bad_environment(self, monkeypatch):
        """A non-numeric environment value is an error."""
        monkeypatch.setenv('YAML12_MAX_DEPTH', 'deep')
        with pytest.raises(ValueError):
            get_max_depth()

    @pytest.mark.parametrize('value, error', [
        (0, ValueError), (-3, ValueError), ('5', TypeError),
        (2.0, TypeError), (True, TypeError),
    ])
    def test_bad_argument(self, value, error):
        """max_depth must be a positive int."""
        with pytest.raises(error):
            get_max_depth(value)
