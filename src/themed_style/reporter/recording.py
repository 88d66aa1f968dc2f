"""RecordingReporter: keeps every report in memory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Report:
    """A single recorded report."""

    filename: str
    output: str


class RecordingReporter:
    """Reporter that records reports instead of printing them.

    Optionally forwards each report to an inner reporter.
    """

    def __init__(self, inner: object | None = None) -> None:
        self._inner = inner
        self._records: list[Report] = []

    def report(self, filename: str, output: str) -> None:
        self._records.append(Report(filename=filename, output=output))
        if self._inner is not None:
            self._inner.report(filename, output)  # type: ignore[union-attr]

    def reports(self) -> list[Report]:
        """Return the list of all recorded reports."""
        return list(self._records)

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
