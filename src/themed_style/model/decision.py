"""Per-block outcome of theme resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementDecision:
    """Whether the style block at ``index`` is blanked out, and why."""

    index: int
    suppress: bool
    reason: str = ""

    def __str__(self) -> str:
        action = "suppress" if self.suppress else "keep"
        if self.reason:
            return f"style#{self.index}: {action} ({self.reason})"
        return f"style#{self.index}: {action}"
