"""CLI command: css-builder inspect -- display a selector tree."""

from __future__ import annotations

import click

from css_builder.cli.render import load_recipe
from css_builder.model.selector import CombinedSelector, Selector, SimpleSelector
from css_builder.serialization import selector_to_json


def _describe(selector: Selector, depth: int = 0) -> list[str]:
    pad = "  " * depth
    if isinstance(selector, CombinedSelector):
        lines = [f"{pad}combine {selector.combinator!r}"]
        lines += _describe(selector.left, depth + 1)
        lines += _describe(selector.right, depth + 1)
        return lines
    if isinstance(selector, SimpleSelector):
        parts = [f"{kind}={value!r}" for kind, value in selector.fragments()]
        return [f"{pad}simple {selector.render()!r}  " + "  ".join(parts)]
    return [f"{pad}{selector.render()!r}"]


@click.command()
@click.argument("recipe", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="Read the recipe from a file")
@click.option("--strict/--no-strict", default=False, help="Only allow ' ', '>', '+' and '~'")
@click.option("--json", "as_json", is_flag=True, help="Print the tree as JSON")
def inspect(recipe: str | None, file: str | None, strict: bool, as_json: bool) -> None:
    """Parse a recipe and display its selector tree.

    Shows one line per node, indented by depth, with each simple
    selector's fragments.
    """
    selector = load_recipe(recipe, file, strict)
    if as_json:
        click.echo(selector_to_json(selector, indent=2))
        return
    for line in _describe(selector):
        click.echo(line)
    click.echo()
    click.echo(f"Rendered: {selector.render()}")
