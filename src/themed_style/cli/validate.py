"""CLI command: themed-style validate -- lint theming attributes of a .vue file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themed_style.model.diagnostic import Severity
from themed_style.parser import ParseError, parse_component
from themed_style.validation import validate as run_validate


@click.command()
@click.argument("vuefile", type=click.Path(exists=True, dir_okay=False))
def validate(vuefile: str) -> None:
    """Parse a Vue SFC and check its theme/replace/id attributes.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    vue_path = Path(vuefile)

    try:
        source = vue_path.read_text(encoding="utf-8")
        component = parse_component(source)
    except (ParseError, ValueError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(component)

    if not diagnostics:
        click.echo(f"OK: {vue_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
