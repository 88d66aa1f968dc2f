"""Validation rules for themed style blocks.

Each rule is a function taking a Component and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

from themed_style.model.component import Component
from themed_style.model.diagnostic import Diagnostic, Severity


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_theme_has_value(component: Component) -> list[Diagnostic]:
    """A ``theme`` attribute must name a theme."""
    diagnostics: list[Diagnostic] = []
    for i, style in enumerate(component.styles):
        if "theme" in style.attrs and not style.is_themed:
            diagnostics.append(
                Diagnostic(
                    rule="check_theme_has_value",
                    severity=Severity.ERROR,
                    message="Style block has a theme attribute without a theme name.",
                    block_index=i,
                    fix='Use theme="<name>" or remove the attribute.',
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Semantic rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_replace_on_base_block(component: Component) -> list[Diagnostic]:
    """``replace`` only has an effect on themed blocks. WARNING."""
    diagnostics: list[Diagnostic] = []
    for i, style in enumerate(component.styles):
        if "theme" in style.attrs:
            continue  # check_theme_has_value covers valueless themes
        if "replace" in style.attrs:
            diagnostics.append(
                Diagnostic(
                    rule="check_replace_on_base_block",
                    severity=Severity.WARNING,
                    message="replace on a block without a theme never replaces anything.",
                    block_index=i,
                    fix="Add a theme attribute or remove replace.",
                )
            )
    return diagnostics


def check_replace_target_exists(component: Component) -> list[Diagnostic]:
    """``replace="<id>"`` should name a base block of the same scope. WARNING."""
    diagnostics: list[Diagnostic] = []
    for i, style in enumerate(component.styles):
        target = style.replace
        if not style.is_themed or not isinstance(target, str):
            continue
        found = any(
            not other.is_themed
            and other.scoped == style.scoped
            and other.block_id == target
            for other in component.styles
        )
        if not found:
            scope = "scoped" if style.scoped else "non-scoped"
            diagnostics.append(
                Diagnostic(
                    rule="check_replace_target_exists",
                    severity=Severity.WARNING,
                    message=(
                        f"replace='{target}' does not match the id of any "
                        f"{scope} base style block."
                    ),
                    block_index=i,
                    fix=f'Add id="{target}" to a {scope} block without a theme.',
                )
            )
    return diagnostics


def check_duplicate_ids(component: Component) -> list[Diagnostic]:
    """Style block ids should be unique. WARNING."""
    diagnostics: list[Diagnostic] = []
    seen: dict[str, int] = {}
    for i, style in enumerate(component.styles):
        block_id = style.block_id
        if block_id is None:
            continue
        if block_id in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_ids",
                    severity=Severity.WARNING,
                    message=(
                        f"id '{block_id}' is already used by style#{seen[block_id]}."
                    ),
                    block_index=i,
                    fix="Give each style block a distinct id.",
                )
            )
        else:
            seen[block_id] = i
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_theme_has_value,
    check_replace_on_base_block,
    check_replace_target_exists,
    check_duplicate_ids,
]
