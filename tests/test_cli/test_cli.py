"""Tests for the objkit CLI commands."""
from __future__ import annotations

import json
import logging

import pytest

from objkit import __version__
from objkit.cli import cli
from objkit.codec import ShapeRegistry


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output

    def test_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        for command in ("rectangle", "decode", "selector", "combine"):
            assert command in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_selector_logs_appends(self, runner, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="objkit"):
            result = runner.invoke(cli, ["--verbose", "selector", "--element", "p", "--class", "x"])
        assert result.exit_code == 0
        assert result.output.strip() == "p.x"
        messages = [r.getMessage() for r in caplog.records]
        assert "Appended ELEMENT fragment 'p' -> 'p'" in messages
        assert "Appended CLASS fragment 'x' -> 'p.x'" in messages


# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------


class TestEnvironmentErrors:
    def test_non_integer_indent(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "1", "2"], env={"OBJKIT_INDENT": "two"})
        assert result.exit_code == 2
        assert "Error: OBJKIT_INDENT must be an integer, got 'two'" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_unknown_log_level(self, runner) -> None:
        result = runner.invoke(
            cli, ["selector", "--element", "p"], env={"OBJKIT_LOG_LEVEL": "loud"}
        )
        assert result.exit_code == 2
        assert "Error: OBJKIT_LOG_LEVEL must be one of" in result.output
        assert "'LOUD'" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_valid_env_values(self, runner) -> None:
        result = runner.invoke(
            cli,
            ["rectangle", "1", "2", "--json"],
            env={"OBJKIT_INDENT": "2", "OBJKIT_LOG_LEVEL": "info"},
        )
        assert result.exit_code == 0
        assert result.output.strip() == '{\n  "width": 1,\n  "height": 2\n}'


# ---------------------------------------------------------------------------
# rectangle / decode
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_area(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_float_area(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "2.5", "4"])
        assert result.exit_code == 0
        assert result.output.strip() == "10.0"

    def test_json(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "10", "20", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width": 10, "height": 20}'

    def test_json_sorted_and_indented(self, runner) -> None:
        result = runner.invoke(cli, ["--sort-keys", "--indent", "2", "rectangle", "1", "2", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{\n  "height": 2,\n  "width": 1\n}'

    def test_sort_keys_from_env(self, runner) -> None:
        result = runner.invoke(
            cli, ["rectangle", "1", "2", "--json"], env={"OBJKIT_SORT_KEYS": "true"}
        )
        assert result.output.strip() == '{"height": 2, "width": 1}'

    def test_not_a_number(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "wide", "2"])
        assert result.exit_code == 2
        assert "not a number" in result.output


class TestDecodeCommand:
    def test_decode_rectangle(self, runner) -> None:
        result = runner.invoke(cli, ["decode", "rectangle", '{"width": 3, "height": 4}'])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"width": 3, "height": 4}

    def test_malformed_json(self, runner) -> None:
        result = runner.invoke(cli, ["decode", "rectangle", "{"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_wrong_arity(self, runner) -> None:
        result = runner.invoke(cli, ["decode", "rectangle", "[1]"])
        assert result.exit_code == 1
        assert "Cannot construct create_rectangle" in result.output

    def test_unknown_shape(self, runner) -> None:
        result = runner.invoke(cli, ["decode", "circle", "[1]"])
        assert result.exit_code == 1
        assert "Unknown shape 'circle'" in result.output
        assert "rectangle" in result.output

    def test_key_error_in_constructor_is_not_unknown_shape(self, runner, monkeypatch) -> None:
        registry = ShapeRegistry()

        @registry.register("lookup")
        def lookup(key):
            return {"a": 1}[key]

        monkeypatch.setattr("objkit.cli.rectangle.default_registry", registry)
        result = runner.invoke(cli, ["decode", "lookup", '["missing"]'])
        assert isinstance(result.exception, KeyError)
        assert "Unknown shape" not in result.output


# ---------------------------------------------------------------------------
# selector / combine
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_canonical_order(self, runner) -> None:
        result = runner.invoke(
            cli,
            [
                "selector",
                "--pseudo-class", "focus",
                "--attr", 'href$=".png"',
                "--element", "a",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_repeated_classes(self, runner) -> None:
        result = runner.invoke(
            cli, ["selector", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_pseudo_element(self, runner) -> None:
        result = runner.invoke(cli, ["selector", "--element", "p", "--pseudo-element", "first-line"])
        assert result.output.strip() == "p::first-line"

    def test_requires_a_part(self, runner) -> None:
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 2
        assert "At least one selector part" in result.output


class TestCombineCommand:
    def test_combine(self, runner) -> None:
        result = runner.invoke(cli, ["combine", "div#x", "+", "span"])
        assert result.exit_code == 0
        assert result.output.strip() == "div#x + span"

    def test_invalid_combinator(self, runner) -> None:
        result = runner.invoke(cli, ["combine", "div", "|", "span"])
        assert result.exit_code == 1
        assert "Invalid combinator" in result.output
