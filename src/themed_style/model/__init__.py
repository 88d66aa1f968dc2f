"""Model layer -- public type re-exports."""

from themed_style.model.component import AttrValue, Block, Component, StyleBlock
from themed_style.model.decision import ReplacementDecision
from themed_style.model.diagnostic import Diagnostic, Severity
from themed_style.model.options import ThemeOptions, resolve_options

__all__ = [
    # component
    "AttrValue",
    "Block",
    "StyleBlock",
    "Component",
    # options
    "ThemeOptions",
    "resolve_options",
    # resolution
    "ReplacementDecision",
    # diagnostic
    "Severity",
    "Diagnostic",
]
