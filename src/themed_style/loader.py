"""Host entry point: transform one SFC source string for the active theme."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from themed_style.model.options import ThemeOptions, resolve_options
from themed_style.parser import parse_component
from themed_style.reporter.base import Reporter
from themed_style.reporter.console import ConsoleReporter
from themed_style.serializer import serialize
from themed_style.transforms import apply_transforms

logger = logging.getLogger(__name__)


def transform(
    source: str,
    options: ThemeOptions,
    *,
    resource_path: str = "",
    reporter: Reporter | None = None,
) -> str:
    """Parse, resolve themes, and serialize *source* with resolved *options*."""
    component = parse_component(source)
    component = apply_transforms(component, theme=options.theme)
    output = serialize(component)

    if options.debug:
        sink = reporter if reporter is not None else ConsoleReporter()
        sink.report(os.path.basename(resource_path), output)
    return output


def load(
    source: str,
    config: Mapping[str, Any] | None = None,
    *,
    resource_path: str = "",
    reporter: Reporter | None = None,
) -> str:
    """Transform *source* using host build configuration *config*.

    Recognized config keys are ``theme`` and ``debug``; anything missing falls
    back to the defaults. *resource_path* names the file for debug reports.
    """
    options = resolve_options(config)
    logger.debug("Transforming %s with theme=%r", resource_path or "<source>", options.theme)
    return transform(source, options, resource_path=resource_path, reporter=reporter)


class ThemedStyleLoader:
    """Holds resolved options for a host that invokes the transform per file."""

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.options = resolve_options(config)
        self.reporter = reporter

    def __call__(self, source: str, resource_path: str = "") -> str:
        return transform(
            source, self.options, resource_path=resource_path, reporter=self.reporter
        )
