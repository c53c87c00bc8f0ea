"""Tests for env-file rendering and reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from vault2file.util.env_file import EnvFile, quote, render_line, unquote


class TestQuote:
    @pytest.mark.parametrize("value, expected", [
        ("plain", '"plain"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("C:\\path", '"C:\\\\path"'),
        ("a\nb", '"a\\nb"'),
        ("a\tb", '"a\\tb"'),
        ("\r\a\b\f\v", '"\\r\\a\\b\\f\\v"'),
        ("\x00\x1b\x7f", '"\\x00\\x1b\\x7f"'),
        ("héllo ☃", '"héllo ☃"'),
        ("\u00a0", '"\\u00a0"'),
        ("$HOME `x` 'q'", "\"$HOME `x` 'q'\""),
    ])
    def test_escapes(self, value: str, expected: str) -> None:
        assert quote(value) == expected

    def test_non_bmp_non_printable(self) -> None:
        assert quote("\U000e0001") == '"\\U000e0001"'


class TestRenderLine:
    def test_format(self) -> None:
        assert render_line("A", "plain") == 'A="plain"\n'

    def test_multiline_value_stays_on_one_line(self) -> None:
        line = render_line("KEY", "-----BEGIN-----\nabc\n-----END-----")
        assert line.count("\n") == 1
        assert line == 'KEY="-----BEGIN-----\\nabc\\n-----END-----"\n'


class TestUnquote:
    @pytest.mark.parametrize("value", [
        "plain", "", 'q"uote', "back\\slash", "multi\nline\ttab", "\x00\x7f", "☃\u00a0",
    ])
    def test_inverts_quote(self, value: str) -> None:
        assert unquote(quote(value)) == value

    def test_single_quotes_stripped(self) -> None:
        assert unquote("'raw \\n'") == "raw \\n"

    def test_bare_value(self) -> None:
        assert unquote("bare") == "bare"

    def test_unknown_escape_kept(self) -> None:
        assert unquote('"a\\qb"') == "a\\qb"


class TestEnvFile:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert EnvFile(tmp_path / "nope.env").read_all() == {}

    def test_reads_rendered_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "app.env"
        path.write_text(render_line("A", "x y") + render_line("B", 'q"\n'))
        env = EnvFile(path)
        assert env.read_all() == {"A": "x y", "B": 'q"\n'}
        assert env.read("B") == 'q"\n'
        assert env.read("C") == ""

    def test_skips_comments_and_junk(self, tmp_path: Path) -> None:
        path = tmp_path / ".env"
        path.write_text("# comment\n\nnot a pair\nexport VAULT_ADDR=http://vault:8200\nX = 'y'\n")
        assert EnvFile(path).read_all() == {"VAULT_ADDR": "http://vault:8200", "X": "y"}
