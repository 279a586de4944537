"""css-builder CLI entry point: Click group with subcommands."""

import logging

import click

from css_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-builder")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """css-builder - assemble CSS selectors from fragments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from css_builder.cli.build import build  # noqa: E402
from css_builder.cli.inspect import inspect  # noqa: E402
from css_builder.cli.render import render  # noqa: E402

cli.add_command(render)
cli.add_command(build)
cli.add_command(inspect)
