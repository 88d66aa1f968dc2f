"""Debug reporters that receive the transformed output of each file."""

from themed_style.reporter.base import Reporter, frame
from themed_style.reporter.console import ConsoleReporter
from themed_style.reporter.log import LoggingReporter
from themed_style.reporter.recording import RecordingReporter, Report

__all__ = [
    "Reporter",
    "ConsoleReporter",
    "LoggingReporter",
    "RecordingReporter",
    "Report",
    "frame",
]
