"""LoggingReporter: sends transformed output to a stdlib logger."""

from __future__ import annotations

import logging

from themed_style.reporter.base import frame


class LoggingReporter:
    """Reporter that logs framed output at DEBUG level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger("themed_style")

    def report(self, filename: str, output: str) -> None:
        self._log.debug("%s", frame(filename, output))
