"""Tests for the css-builder CLI commands."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from css_builder import __version__
from css_builder.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "assemble CSS selectors" in result.output

    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert "render" in result.output
        assert "build" in result.output
        assert "inspect" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ["-v", "render", 'element("div")'])
        assert result.exit_code == 0
        assert result.output == "div\n"
        assert calls[0]["level"] == logging.DEBUG


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_chain(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", 'id("main").class("container")'])
        assert result.exit_code == 0
        assert result.output == "#main.container\n"

    def test_render_combine(self, runner: CliRunner) -> None:
        recipe = 'combine(element("div"), "+", combine(element("table"), "~", element("tr")))'
        result = runner.invoke(cli, ["render", recipe])
        assert result.exit_code == 0
        assert result.output == "div + table ~ tr\n"

    def test_render_from_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "selector.recipe"
        path.write_text('element("a").pseudo_class("hover")\n', encoding="utf-8")
        result = runner.invoke(cli, ["render", "--file", str(path)])
        assert result.exit_code == 0
        assert result.output == "a:hover\n"

    def test_order_error_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", 'id("main").element("div")'])
        assert result.exit_code == 1
        assert "should be arranged" in result.output

    def test_syntax_error_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "element("])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_strict_rejects_token(self, runner: CliRunner) -> None:
        recipe = 'combine(element("a"), "xyz", element("b"))'
        assert runner.invoke(cli, ["render", recipe]).output == "a xyz b\n"
        result = runner.invoke(cli, ["render", "--strict", recipe])
        assert result.exit_code == 1
        assert "Unsupported combinator" in result.output

    def test_missing_recipe_exits_2(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"])
        assert result.exit_code == 2

    def test_recipe_and_file_together_exits_2(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "selector.recipe"
        path.write_text('element("a")', encoding="utf-8")
        result = runner.invoke(cli, ["render", 'element("b")', "--file", str(path)])
        assert result.exit_code == 2
        assert "not both" in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_all_fragments(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "build",
                "--pseudo-element", "after",
                "--class", "wide",
                "--element", "input",
                "--attr", "disabled",
                "--class", "required",
                "--id", "name",
                "--pseudo-class", "focus",
            ],
        )
        assert result.exit_code == 0
        assert result.output == "input#name.wide.required[disabled]:focus::after\n"

    def test_build_single_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["build", "--id", "main"])
        assert result.output == "#main\n"

    def test_build_without_options(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 2

    def test_build_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["build", "--help"])
        assert "--pseudo-class" in result.output
        assert "--pseudo-element" in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_tree_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["inspect", 'combine(element("ul").class("menu"), ">", element("li"))']
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "combine '>'"
        assert lines[1].startswith("  simple 'ul.menu'")
        assert "class='menu'" in lines[1]
        assert lines[2].startswith("  simple 'li'")
        assert lines[-1] == "Rendered: ul.menu > li"

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", "--json", 'element("a").attr("href")'])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "fragments": [
                {"kind": "element", "value": "a"},
                {"kind": "attribute", "value": "href"},
            ]
        }
