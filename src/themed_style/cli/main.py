"""themed-style CLI entry point: Click group with subcommands."""

import logging

import click

from themed_style import __version__


@click.group()
@click.version_option(version=__version__, prog_name="themed-style")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution decisions to stderr")
def cli(verbose: bool) -> None:
    """themed-style - build-time theme selection for Vue SFC <style> blocks."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from themed_style.cli.transform import transform  # noqa: E402
from themed_style.cli.validate import validate  # noqa: E402
from themed_style.cli.inspect import inspect  # noqa: E402

cli.add_command(transform)
cli.add_command(validate)
cli.add_command(inspect)
