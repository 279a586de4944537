"""CLI command: css-builder render -- render a recipe to a selector string."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_builder.config import BuilderConfig
from css_builder.errors import SelectorError
from css_builder.model.selector import Selector
from css_builder.recipe import parse_recipe


def load_recipe(recipe: str | None, file: str | None, strict: bool) -> Selector:
    """Parse a recipe given inline or in a file, exiting on error."""
    if file is not None:
        if recipe is not None:
            click.echo("Error: give either a RECIPE argument or --file, not both", err=True)
            sys.exit(2)
        recipe = Path(file).read_text(encoding="utf-8")
    if not recipe:
        click.echo("Error: provide a RECIPE argument or --file", err=True)
        sys.exit(2)
    try:
        return parse_recipe(recipe, BuilderConfig(strict_combinators=strict))
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("recipe", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read the recipe from a file")
@click.option("--strict/--no-strict", default=False, help="Only allow ' ', '>', '+' and '~'")
def render(recipe: str | None, file: str | None, strict: bool) -> None:
    """Render a selector recipe such as 'element("a").attr("href").pseudo_class("focus")'."""
    selector = load_recipe(recipe, file, strict)
    click.echo(selector.render())
