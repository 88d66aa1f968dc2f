"""Theme options: the resolved build configuration for one transform call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class ThemeOptions:
    """Active theme and debug flag.

    Attributes:
        theme: Name of the active theme. ``None`` means no theme is active, so
            every themed style block is suppressed and no base block is replaced.
        debug: Report the transformed output to the debug sink.
    """

    theme: str | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        if self.theme is not None and not isinstance(self.theme, str):
            raise ValueError(f"'theme' must be a string or None, got {self.theme!r}")
        if not isinstance(self.debug, bool):
            raise ValueError(f"'debug' must be a boolean, got {self.debug!r}")


_OPTION_NAMES = frozenset(f.name for f in fields(ThemeOptions))


def resolve_options(config: Mapping[str, Any] | None = None) -> ThemeOptions:
    """Overlay host-supplied *config* onto the default options.

    Missing keys fall back to the defaults and unknown keys are ignored.
    """
    if not config:
        return ThemeOptions()
    overrides = {k: v for k, v in config.items() if k in _OPTION_NAMES}
    return ThemeOptions(**overrides)
