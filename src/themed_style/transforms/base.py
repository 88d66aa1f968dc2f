"""Base protocol for component transforms."""

from __future__ import annotations

from typing import Protocol

from themed_style.model.component import Component


class Transform(Protocol):
    """A component-to-component transformation step."""

    def apply(self, component: Component) -> Component: ...
