"""stylecascade CLI entry point: Click group with subcommands."""

import logging

import click

from stylecascade import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylecascade")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped rules and conditions.")
def cli(verbose: bool) -> None:
    """stylecascade - resolve the effective CSS declarations for an element."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylecascade.cli.rules import rules  # noqa: E402
from stylecascade.cli.resolve import resolve  # noqa: E402

cli.add_command(rules)
cli.add_command(resolve)
