"""CLI command: themed-style inspect -- display style blocks and decisions."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themed_style.parser import ParseError, parse_component
from themed_style.transforms import resolve


@click.command()
@click.argument("vuefile", type=click.Path(exists=True, dir_okay=False))
@click.option("--theme", default=None, help="Active theme name")
def inspect(vuefile: str, theme: str | None) -> None:
    """Parse a Vue SFC and show what happens to each <style> block.

    Lists scope, theme, replace and id per block, with the keep/suppress decision.
    """
    vue_path = Path(vuefile)

    try:
        source = vue_path.read_text(encoding="utf-8")
        component = parse_component(source)
    except (ParseError, ValueError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"File:   {vue_path.name}")
    click.echo(f"Theme:  {theme if theme is not None else '(none)'}")
    sections = [name for name in ("template", "script") if getattr(component, name)]
    click.echo(f"Blocks: {', '.join(sections) or '-'}")
    if component.custom_blocks:
        click.echo(f"Custom: {', '.join(b.type for b in component.custom_blocks)}")
    click.echo()

    click.echo("Styles:")
    decisions = resolve(component.styles, theme)
    for style, decision in zip(component.styles, decisions):
        parts = [f"  #{decision.index}"]
        parts.append("scoped" if style.scoped else "global")
        if style.theme:
            parts.append(f"theme={style.theme}")
        if style.replace is True:
            parts.append("replace")
        elif style.replace:
            parts.append(f"replace={style.replace}")
        if style.block_id:
            parts.append(f"id={style.block_id}")
        parts.append("-> suppress" if decision.suppress else "-> keep")
        if decision.reason:
            parts.append(f"({decision.reason})")
        click.echo("  ".join(parts))
