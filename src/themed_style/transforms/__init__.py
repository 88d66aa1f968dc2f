from __future__ import annotations

from themed_style.model.component import Component
from themed_style.transforms.base import Transform
from themed_style.transforms.theme import (
    ThemeResolutionTransform,
    resolve,
    should_suppress,
    spacer,
)


def apply_transforms(
    component: Component,
    theme: str | None = None,
    custom_transforms: list[Transform] | None = None,
) -> Component:
    """Apply theme resolution (and any custom transforms) to *component*."""
    transforms: list[Transform] = [ThemeResolutionTransform(theme)]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        component = t.apply(component)
    return component


__all__ = [
    "Transform",
    "ThemeResolutionTransform",
    "apply_transforms",
    "resolve",
    "should_suppress",
    "spacer",
]
