"""Top-level block splitter for Vue single-file components.

Only the outermost tags are interpreted: ``<template>``, ``<script>`` and
``<style>`` fill their slots on :class:`Component`, and any other tag becomes a
custom block. Block content is kept byte-for-byte so that line numbers survive
the round trip through the serializer.
"""

from __future__ import annotations

import logging
import re
import textwrap

from lark import Lark
from lark.exceptions import LarkError

from themed_style.model.component import AttrValue, Block, Component, StyleBlock
from themed_style.parser.errors import ParseError
from themed_style.parser.transformer import build_attribute_parser

__all__ = ["parse_component"]

logger = logging.getLogger(__name__)

# Matches an opening tag: <tag attrs> or <tag attrs/>
_START_TAG_RE = re.compile(
    r"""
    <(?P<tag>[a-zA-Z][^\s/>]*)               # tag name
    (?P<attrs>(?:[^>"']|"[^"]*"|'[^']*')*?)  # attributes; quoted values may hold '>'
    (?P<self_closing>/?)>
    """,
    re.VERBOSE,
)

_TEMPLATE_TOKEN_RE = re.compile(
    r"""
    (?P<comment><!--.*?-->)
    | (?P<close></template\s*>)
    | (?P<open><template(?=[\s/>])(?:[^>"']|"[^"]*"|'[^']*')*?(?P<self_closing>/?)>)
    """,
    re.VERBOSE | re.DOTALL,
)

_SINGLETON_TAGS = ("template", "script")


def _location(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *offset* in *source*."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _parse_attrs(
    parser: Lark, raw: str, source: str, offset: int
) -> dict[str, AttrValue]:
    try:
        return parser.parse(raw)  # type: ignore[return-value]
    except LarkError as e:
        raise ParseError(
            f"Malformed attributes {raw.strip()!r}", *_location(source, offset)
        ) from e


def _find_close(source: str, tag: str, start: int, open_offset: int) -> tuple[int, int]:
    """Return (content_end, resume_at) for the block opened just before *start*.

    ``<template>`` may nest inside itself, so its close tag is found by
    counting. Every other block is raw text up to its first close tag.
    """
    if tag == "template":
        depth = 1
        for m in _TEMPLATE_TOKEN_RE.finditer(source, start):
            if m.group("comment"):
                continue
            if m.group("close"):
                depth -= 1
                if depth == 0:
                    return m.start(), m.end()
            elif not m.group("self_closing"):
                depth += 1
    else:
        close_re = re.compile(rf"</{re.escape(tag)}\s*>")
        m = close_re.search(source, start)
        if m is not None:
            return m.start(), m.end()
    raise ParseError(f"Unclosed <{tag}> block", *_location(source, open_offset))


def parse_component(source: str, *, deindent: bool = True) -> Component:
    """Split SFC *source* into its template, script, style and custom blocks.

    When *deindent* is set, the common leading indentation of every block
    except ``<template>`` is removed. The number of lines never changes.

    Raises :class:`ParseError` for unclosed blocks, malformed opening tags and
    a second ``<template>`` or ``<script>``.
    """
    parser = build_attribute_parser()
    singletons: dict[str, Block] = {}
    styles: list[StyleBlock] = []
    custom_blocks: list[Block] = []

    pos = 0
    while True:
        lt = source.find("<", pos)
        if lt == -1:
            break

        if source.startswith("<!--", lt):
            end = source.find("-->", lt + 4)
            if end == -1:
                raise ParseError("Unterminated comment", *_location(source, lt))
            pos = end + 3
            continue

        match = _START_TAG_RE.match(source, lt)
        if match is None:
            # Stray text between blocks is dropped, as is an orphan close tag.
            if source[lt + 1 : lt + 2].isalpha():
                raise ParseError("Malformed opening tag", *_location(source, lt))
            pos = lt + 1
            continue

        tag = match.group("tag")
        attrs = _parse_attrs(parser, match.group("attrs"), source, lt)
        if match.group("self_closing"):
            content = ""
            pos = match.end()
        else:
            content_end, pos = _find_close(source, tag, match.end(), lt)
            content = source[match.end() : content_end]
        if deindent and tag != "template":
            content = textwrap.dedent(content)

        if tag == "style":
            styles.append(StyleBlock(content=content, attrs=attrs))
        elif tag in _SINGLETON_TAGS:
            if tag in singletons:
                raise ParseError(
                    f"Only one <{tag}> block is allowed", *_location(source, lt)
                )
            singletons[tag] = Block(type=tag, content=content, attrs=attrs)
        else:
            custom_blocks.append(Block(type=tag, content=content, attrs=attrs))

    logger.debug(
        "Parsed component: template=%s script=%s styles=%d custom=%d",
        "template" in singletons,
        "script" in singletons,
        len(styles),
        len(custom_blocks),
    )
    return Component(
        template=singletons.get("template"),
        script=singletons.get("script"),
        styles=styles,
        custom_blocks=custom_blocks,
    )
