"""Core component model: Block, StyleBlock, and Component dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Presence attributes (``<style scoped>``) carry ``True``; everything else is text.
AttrValue = Union[bool, str]


def _check_attrs(block_type: str, attrs: dict[str, AttrValue]) -> None:
    for name, value in attrs.items():
        if value is not True and not isinstance(value, str):
            raise ValueError(
                f"<{block_type}> attribute {name!r} must be a string or True, "
                f"got {value!r}"
            )


@dataclass(frozen=True)
class Block:
    """A top-level SFC section: template, script, or a custom block."""

    type: str
    content: str = ""
    attrs: dict[str, AttrValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.type:
            raise ValueError("Block type must be a non-empty string")
        _check_attrs(self.type, self.attrs)


@dataclass(frozen=True)
class StyleBlock:
    """A single ``<style>`` section.

    ``theme``, ``replace`` and ``id`` are signalling attributes read by the
    theme resolution step and stripped before serialization.
    """

    content: str = ""
    attrs: dict[str, AttrValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_attrs("style", self.attrs)

    @property
    def type(self) -> str:
        return "style"

    @property
    def scoped(self) -> bool:
        return self.attrs.get("scoped") is True

    @property
    def theme(self) -> str | None:
        """Return the theme name, or None for a base block."""
        value = self.attrs.get("theme")
        if isinstance(value, str) and value:
            return value
        return None

    @property
    def is_themed(self) -> bool:
        return self.theme is not None

    @property
    def replace(self) -> AttrValue | None:
        return self.attrs.get("replace")

    @property
    def block_id(self) -> str | None:
        value = self.attrs.get("id")
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Component:
    """The full parsed single-file component."""

    template: Block | None = None
    script: Block | None = None
    styles: list[StyleBlock] = field(default_factory=list)
    custom_blocks: list[Block] = field(default_factory=list)
