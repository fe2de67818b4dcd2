#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Unit tests for the bbml command-line entry point."""

import io
import logging

import pytest

from bbml import __version__
from bbml.cli import build_options, create_parser, main

LINK_MARKUP = '<p>see <a href="https://example.com/a">docs</a></p>'


@pytest.fixture
def page(isolated_cwd):
    path = isolated_cwd / "page.html"
    path.write_text(LINK_MARKUP, encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.input == "-"
        assert args.target_width is None
        assert args.max_depth is None
        assert args.html_parser is None
        assert args.log_level == "WARNING"
        assert not args.plain

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_parser_is_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--parser", "xml"])

        assert exc_info.value.code == 2

    def test_build_options_uses_cli_values(self, isolated_cwd):
        args = create_parser().parse_args(["--width", "40", "--max-depth", "20", "--no-config"])

        options = build_options(args)

        assert options.target_width == 40
        assert options.max_depth == 20
        assert options.html_parser == "html.parser"


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for main()."""

    def test_renders_file_with_link_list(self, page, capsys):
        assert main([str(page), "--no-config"]) == 0

        out = capsys.readouterr().out
        assert "seedocs[0]" in out
        assert "Links:" in out
        assert "[0] https://example.com/a" in out

    def test_no_links(self, page, capsys):
        assert main([str(page), "--no-config", "--no-links"]) == 0

        out = capsys.readouterr().out
        assert "seedocs[0]" in out
        assert "Links:" not in out

    def test_plain_output(self, page, capsys):
        assert main([str(page), "--no-config", "--plain", "--no-links"]) == 0

        assert capsys.readouterr().out == "seedocs[0]\n"

    def test_reads_stdin(self, isolated_cwd, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<ol><li>one</li><li>two</li></ol>"))

        assert main(["-", "--no-config", "--plain"]) == 0

        assert capsys.readouterr().out == "1. one\n2. two\n\n"

    def test_link_list_labels_are_aligned(self, isolated_cwd, capsys):
        path = isolated_cwd / "many.html"
        path.write_text("".join(f'<a href="/{i}">{i}</a>' for i in range(11)), encoding="utf-8")

        assert main([str(path), "--no-config", "--plain"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert "[0]  /0" in lines
        assert "[9]  /9" in lines
        assert "[10] /10" in lines

    def test_link_lookup(self, page, capsys):
        assert main([str(page), "--no-config", "--link", "0"]) == 0

        assert capsys.readouterr().out.strip() == "https://example.com/a"

    def test_missing_link_is_an_error(self, page, capsys):
        assert main([str(page), "--no-config", "--link", "3"]) == 1

        assert "No link found with index 3" in capsys.readouterr().err

    def test_missing_input_file(self, isolated_cwd, capsys):
        assert main([str(isolated_cwd / "absent.html"), "--no-config"]) == 2

        assert "could not read" in capsys.readouterr().err

    def test_invalid_width(self, page, capsys):
        assert main([str(page), "--no-config", "--width", "1"]) == 2

        assert "target_width" in capsys.readouterr().err

    def test_depth_limit_is_a_render_error(self, isolated_cwd, capsys):
        path = isolated_cwd / "deep.html"
        path.write_text("<span>" * 5 + "x" + "</span>" * 5, encoding="utf-8")

        assert main([str(path), "--no-config", "--max-depth", "3"]) == 1

        assert "nesting depth" in capsys.readouterr().err

    def test_discovered_config_is_applied(self, isolated_cwd, capsys):
        (isolated_cwd / ".bbml.toml").write_text("target-width = 12\n", encoding="utf-8")
        path = isolated_cwd / "table.html"
        path.write_text("<table><tr><td>" + "x" * 20 + "</td></tr></table>", encoding="utf-8")

        assert main([str(path), "--plain"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "┌" + "─" * 10 + "┐"

    def test_cli_width_overrides_config(self, isolated_cwd, capsys):
        (isolated_cwd / ".bbml.toml").write_text("target-width = 12\n", encoding="utf-8")
        path = isolated_cwd / "table.html"
        path.write_text("<table><tr><td>" + "x" * 20 + "</td></tr></table>", encoding="utf-8")

        assert main([str(path), "--plain", "--width", "70"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "┌" + "─" * 20 + "┐"

    def test_explicit_config_errors_are_usage_errors(self, isolated_cwd, page, capsys):
        config = isolated_cwd / "settings.ini"
        config.write_text("[bbml]\n", encoding="utf-8")

        assert main([str(page), "--config", str(config)]) == 2

        assert "Unsupported configuration file format" in capsys.readouterr().err

    def test_invalid_config_value_is_a_usage_error(self, isolated_cwd, page, capsys):
        config = isolated_cwd / "bbml.json"
        config.write_text('{"max_depth": 0}', encoding="utf-8")

        assert main([str(page), "--config", str(config)]) == 2

        assert "max_depth" in capsys.readouterr().err

    def test_log_file(self, isolated_cwd, page):
        log_file = isolated_cwd / "bbml.log"

        assert main([str(page), "--no-config", "--log-level", "DEBUG", "--log-file", str(log_file)]) == 0
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()

        assert "Registered link [0]" in log_file.read_text(encoding="utf-8")
