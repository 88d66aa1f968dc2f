"""Reporter protocol definition."""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """Protocol for sinks that receive the transformed output of one file."""

    def report(self, filename: str, output: str) -> None: ...


def frame(filename: str, output: str) -> str:
    """Bracket *output* with begin/end markers naming *filename*."""
    return (
        f"---------- Begin {filename} ----------\n"
        f"{output}\n"
        f"---------- End {filename} ----------"
    )
