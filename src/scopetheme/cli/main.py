"""scopetheme CLI entry point: Click group with subcommands."""

import logging

import click

from scopetheme import __version__


@click.group()
@click.version_option(version=__version__, prog_name="scopetheme")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """scopetheme - resolve syntax scopes to styles from tmTheme files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from scopetheme.cli.validate import validate  # noqa: E402
from scopetheme.cli.inspect import inspect  # noqa: E402
from scopetheme.cli.resolve import resolve  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(resolve)
