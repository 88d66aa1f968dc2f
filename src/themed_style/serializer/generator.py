"""Regenerate SFC markup from a Component."""

from __future__ import annotations

from collections.abc import Mapping

from themed_style.model.component import AttrValue, Block, Component, StyleBlock


def gen_attrs(attrs: Mapping[str, AttrValue]) -> str:
    """Compose the attribute portion of an opening tag.

    Example:
        gen_attrs({"lang": "scss", "scoped": True})

        => ' lang="scss" scoped'
    """
    parts = []
    for name, value in attrs.items():
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{value}"')
    return "".join(parts)


def gen_section(block: Block | StyleBlock | None) -> str:
    """Render one block as ``<tag attrs>content</tag>`` plus a newline.

    A missing block renders as an empty string.
    """
    if block is None:
        return ""
    tag = block.type
    return f"<{tag}{gen_attrs(block.attrs)}>{block.content}</{tag}>\n"


def serialize(component: Component) -> str:
    """Reconstruct SFC source from *component*.

    Custom blocks come first, each followed by a blank line, then the
    template, the script and the style blocks in their original order.
    """
    output = ""
    for block in component.custom_blocks:
        output += f"<{block.type}{gen_attrs(block.attrs)}>{block.content}</{block.type}>\n\n"

    template = gen_section(component.template)
    script = gen_section(component.script)
    styles = "\n".join(gen_section(s) for s in component.styles)
    output += f"{template}\n{script}\n{styles}"
    return output
