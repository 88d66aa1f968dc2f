"""ConsoleReporter: echoes transformed output to the terminal."""

from __future__ import annotations

import click

from themed_style.reporter.base import frame


class ConsoleReporter:
    """Reporter that writes framed output to stdout (or stderr with ``err=True``)."""

    def __init__(self, err: bool = False) -> None:
        self.err = err

    def report(self, filename: str, output: str) -> None:
        click.echo(frame(filename, output), err=self.err)
