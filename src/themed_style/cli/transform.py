"""CLI command: themed-style transform -- apply a theme to a .vue file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themed_style.loader import load
from themed_style.parser import ParseError
from themed_style.reporter.console import ConsoleReporter


@click.command()
@click.argument("vuefile", type=click.Path(exists=True, dir_okay=False))
@click.option("--theme", default=None, help="Active theme name")
@click.option("--debug", is_flag=True, help="Echo the framed output to stderr")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout",
)
def transform(vuefile: str, theme: str | None, debug: bool, output: str | None) -> None:
    """Strip or swap the <style> blocks of a Vue SFC for THEME.

    Suppressed blocks are blanked out so line numbers stay the same.
    """
    vue_path = Path(vuefile)

    try:
        source = vue_path.read_text(encoding="utf-8")
        result = load(
            source,
            {"theme": theme, "debug": debug},
            resource_path=str(vue_path),
            reporter=ConsoleReporter(err=True),
        )
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"Invalid component: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result, nl=False)
