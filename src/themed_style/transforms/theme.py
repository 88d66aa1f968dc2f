"""Theme resolution transform: blanks out style blocks that the active theme excludes."""

from __future__ import annotations

import logging
from dataclasses import replace

from themed_style.model.component import AttrValue, Component, StyleBlock
from themed_style.model.decision import ReplacementDecision

logger = logging.getLogger(__name__)

# Signalling attributes that are not valid on an emitted <style> tag.
PRIVATE_ATTRS = frozenset({"theme", "replace", "id"})


def spacer(content: str) -> str:
    """Return blank lines occupying as many lines as *content*."""
    return "\n" * content.count("\n")


def _replaces(candidate: StyleBlock, base: StyleBlock) -> bool:
    target = candidate.replace
    if target is True:
        return True
    if base.block_id is not None and target == base.block_id:
        return True
    return False


def decide(
    style: StyleBlock, styles: list[StyleBlock], theme: str | None, index: int = 0
) -> ReplacementDecision:
    """Decide whether *style* is suppressed given all sibling *styles*.

    Rules:
        - A themed block survives only when its theme is the active one.
        - A base block is suppressed when an active-theme block of the same
          scope class carries ``replace`` (boolean) or ``replace="<id>"``
          naming the base block's ``id``.

    Every sibling is considered regardless of position.
    """
    if style.is_themed:
        if style.theme == theme:
            return ReplacementDecision(index, False, f"active theme {theme!r}")
        return ReplacementDecision(index, True, f"inactive theme {style.theme!r}")

    for candidate in styles:
        if candidate.theme is None or candidate.theme != theme:
            continue
        if candidate.scoped != style.scoped:
            continue
        if _replaces(candidate, style):
            if candidate.replace is True:
                reason = f"replaced by theme {theme!r}"
            else:
                reason = f"replaced by theme {theme!r} targeting id {style.block_id!r}"
            return ReplacementDecision(index, True, reason)
    return ReplacementDecision(index, False, "base block")


def should_suppress(style: StyleBlock, styles: list[StyleBlock], theme: str | None) -> bool:
    """Return True if *style* must be blanked out for the active *theme*."""
    return decide(style, styles, theme).suppress


def resolve(styles: list[StyleBlock], theme: str | None) -> list[ReplacementDecision]:
    """Compute one decision per style block, in order."""
    return [decide(s, styles, theme, index=i) for i, s in enumerate(styles)]


def _strip_private_attrs(style: StyleBlock) -> dict[str, AttrValue]:
    return {k: v for k, v in style.attrs.items() if k not in PRIVATE_ATTRS}


class ThemeResolutionTransform:
    """Apply the active theme to a component's ``<style>`` blocks.

    Suppressed blocks keep their tag but have their content swapped for a
    spacer of equal line count. Every block loses its ``theme``, ``replace``
    and ``id`` attributes.
    """

    def __init__(self, theme: str | None = None) -> None:
        self.theme = theme

    def apply(self, component: Component) -> Component:
        decisions = resolve(component.styles, self.theme)
        new_styles: list[StyleBlock] = []
        for style, decision in zip(component.styles, decisions):
            logger.debug("%s", decision)
            content = spacer(style.content) if decision.suppress else style.content
            new_styles.append(
                replace(style, content=content, attrs=_strip_private_attrs(style))
            )
        return replace(component, styles=new_styles)
