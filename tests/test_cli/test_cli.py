"""Tests for the objkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from objkit import __version__
from objkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "rect" in result.output
        assert "selector" in result.output
        assert "json" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_choice(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "LOUD", "rect", "1", "2"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# rect command
# ---------------------------------------------------------------------------


class TestRectCommand:
    def test_area(self) -> None:
        result = CliRunner().invoke(cli, ["rect", "10", "20"])
        assert result.exit_code == 0
        assert "area:   200" in result.output

    def test_non_numeric(self) -> None:
        result = CliRunner().invoke(cli, ["rect", "ten", "20"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_builds_in_order(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["selector", "element:a", "attr:href", "pseudo-class:nth-of-type(2)"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "a[href]:nth-of-type(2)"

    def test_repeated_class(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "id:main", "class:a", "class:b"])
        assert result.exit_code == 0
        assert result.output.strip() == "#main.a.b"

    def test_order_error(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "id:x", "element:a"])
        assert result.exit_code == 1
        assert "Selector error (element)" in result.output

    def test_duplicate_error(self) -> None:
        result = CliRunner().invoke(
            cli, ["selector", "pseudo-element:after", "pseudo-element:before"]
        )
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_malformed_part(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "div"])
        assert result.exit_code == 2
        assert "kind:value" in result.output

    def test_unknown_kind(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "tag:div"])
        assert result.exit_code == 2
        assert "unknown kind" in result.output

    def test_requires_parts(self) -> None:
        result = CliRunner().invoke(cli, ["selector"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# json command
# ---------------------------------------------------------------------------


class TestJsonCommand:
    def test_canonical_output(self) -> None:
        result = CliRunner().invoke(cli, ["json", '{ "width": 10, "height" : 20 }'])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":10,"height":20}'

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["json", "{not valid json"])
        assert result.exit_code == 1
        assert "Parse error" in result.output
