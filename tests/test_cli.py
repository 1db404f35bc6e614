"""Tests for cli/strip.py - jsonc-strip entry point."""

import io
import json
import sys

import pytest

from cli.strip import build_parser, main

pytestmark = pytest.mark.usefixtures("clear_config_cache")


class TestBuildParser:
    """Tests for build_parser()."""

    def test_defaults_to_stdin(self):
        """Should read stdin when no files are given."""
        args = build_parser().parse_args([])
        assert args.files == ["-"]
        assert args.check is False
        assert args.indent is None


class TestMain:
    """Tests for main()."""

    def test_strips_file(self, tmp_path, capsys):
        """Should print the stripped text."""
        source = tmp_path / "a.json5"
        source.write_text("{a: 1, // one\n}")

        assert main([str(source)]) == 0
        assert capsys.readouterr().out == '{"a": 1\n}\n'

    def test_reads_stdin(self, monkeypatch, capsys):
        """Should strip stdin when given '-'."""
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"[0x10,]")))

        assert main(["-"]) == 0
        assert capsys.readouterr().out == "[16]\n"

    def test_indent(self, tmp_path, capsys):
        """Should re-encode the decoded value with --indent."""
        source = tmp_path / "a.json5"
        source.write_text("{b: [1,],}")

        assert main(["--indent", "2", str(source)]) == 0
        assert json.loads(capsys.readouterr().out) == {"b": [1]}

    def test_check_reports_invalid(self, fixtures_dir, capsys):
        """Should exit 1 and report a file that does not decode."""
        assert main(["--check", str(fixtures_dir / "invalid.json5")]) == 1
        assert "invalid JSON after stripping" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """Should exit 1 for an unreadable file and keep going."""
        good = tmp_path / "good.json5"
        good.write_text("[1]")

        assert main([str(tmp_path / "missing.json5"), str(good)]) == 1
        captured = capsys.readouterr()
        assert "missing.json5" in captured.err
        assert captured.out == "[1]\n"

    def test_cached(self, settings_file, capsys):
        """Should decode through the side cache with --cached."""
        assert main(["--cached", "--suffix", ".out.json", str(settings_file)]) == 0

        assert json.loads(capsys.readouterr().out)["server"]["port"] == 8080
        assert (settings_file.parent / "settings.out.json").exists()

    def test_cached_invalid_utf8(self, tmp_path, capsys):
        """Should exit 1 when a cached document is not valid UTF-8."""
        source = tmp_path / "bad.json5"
        source.write_bytes(b'["\xff",]')

        assert main(["--cached", str(source)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, capsys):
        """Should exit 1 when the config file is broken."""
        (tmp_path / "jsonc.config.json").write_text("{broken")

        assert main([]) == 1
        assert "Invalid jsonc.config.json" in capsys.readouterr().err
