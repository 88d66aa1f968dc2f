"""Lark Transformer that converts an opening-tag attribute list into a dict."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer

from themed_style.model.component import AttrValue

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class AttributeTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree of ``name="value"`` pairs into a mapping."""

    # ---- value coercion ----

    def double_quoted(self, items: list[Token]) -> str:
        return str(items[0])[1:-1]

    def single_quoted(self, items: list[Token]) -> str:
        return str(items[0])[1:-1]

    def unquoted(self, items: list[Token]) -> str:
        return str(items[0])

    # ---- structural ----

    def attribute(self, items: list[object]) -> tuple[str, AttrValue]:
        name = str(items[0])
        value = items[1] if len(items) > 1 else ""
        # A bare attribute and an empty value both mean "present".
        return (name, value or True)  # type: ignore[return-value]

    def start(self, items: list[tuple[str, AttrValue]]) -> dict[str, AttrValue]:
        return dict(items)


def build_attribute_parser() -> Lark:
    """Build an LALR parser that yields attribute dicts directly."""
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        transformer=AttributeTransformer(),
    )
