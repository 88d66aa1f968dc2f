"""Build-time theming for Vue single-file component styles."""

__version__ = "0.1.0"

from themed_style.loader import ThemedStyleLoader, load, transform  # noqa: E402
from themed_style.model import Component, StyleBlock, ThemeOptions  # noqa: E402

__all__ = [
    "__version__",
    "ThemedStyleLoader",
    "load",
    "transform",
    "Component",
    "StyleBlock",
    "ThemeOptions",
]
