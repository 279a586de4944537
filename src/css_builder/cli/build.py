"""CLI command: css-builder build -- assemble one compound selector from options."""

from __future__ import annotations

import sys

import click

from css_builder.errors import SelectorError
from css_builder.model.fragment import FragmentKind
from css_builder.model.selector import SimpleSelector


@click.command()
@click.option("--element", help="Element (type) selector")
@click.option("--id", "id_", help="Id selector, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute selector body, repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable")
@click.option("--pseudo-element", help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector; fragments are applied in CSS order."""
    fragments: list[tuple[FragmentKind, str]] = []
    if element is not None:
        fragments.append((FragmentKind.ELEMENT, element))
    if id_ is not None:
        fragments.append((FragmentKind.ID, id_))
    fragments += [(FragmentKind.CLASS, v) for v in classes]
    fragments += [(FragmentKind.ATTRIBUTE, v) for v in attrs]
    fragments += [(FragmentKind.PSEUDO_CLASS, v) for v in pseudo_classes]
    if pseudo_element is not None:
        fragments.append((FragmentKind.PSEUDO_ELEMENT, pseudo_element))

    if not fragments:
        click.echo("Error: no fragments given", err=True)
        sys.exit(2)

    selector = SimpleSelector()
    try:
        for kind, value in fragments:
            selector.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.render())
