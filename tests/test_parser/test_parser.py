"""Comprehensive tests for the SFC block parser."""

from pathlib import Path

import pytest

from themed_style.model.component import Component
from themed_style.parser import ParseError, parse_component

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Fixture helpers
# ---------------------------------------------------------------------------


def _load(name: str) -> Component:
    return parse_component((FIXTURES / name).read_text())


# ---------------------------------------------------------------------------
# Fixture file tests
# ---------------------------------------------------------------------------


class TestThemedButton:
    @pytest.fixture()
    def component(self) -> Component:
        return _load("themed_button.vue")

    def test_has_template_and_script(self, component: Component) -> None:
        assert component.template is not None
        assert component.script is not None

    def test_style_count(self, component: Component) -> None:
        assert len(component.styles) == 6

    def test_style_order_preserved(self, component: Component) -> None:
        colors = [s.content.split("color: ")[1].split(";")[0] for s in component.styles]
        assert colors == ["red", "orange", "yellow", "green", "blue", "indigo"]

    def test_scoped_flags(self, component: Component) -> None:
        assert [s.scoped for s in component.styles] == [False, False, False, True, True, True]

    def test_themes(self, component: Component) -> None:
        assert [s.theme for s in component.styles] == [None, "a", "b", None, "a", "b"]

    def test_boolean_replace(self, component: Component) -> None:
        assert component.styles[2].replace is True
        assert component.styles[4].replace is True
        assert component.styles[0].replace is None

    def test_no_custom_blocks(self, component: Component) -> None:
        assert component.custom_blocks == []


class TestCard:
    @pytest.fixture()
    def component(self) -> Component:
        return _load("card.vue")

    def test_custom_block(self, component: Component) -> None:
        assert len(component.custom_blocks) == 1
        block = component.custom_blocks[0]
        assert block.type == "i18n"
        assert '"title": "Card"' in block.content

    def test_nested_template_kept_in_content(self, component: Component) -> None:
        assert component.template is not None
        content = component.template.content
        assert '<template v-if="title">' in content
        assert content.rstrip().endswith("</div>")

    def test_script_attrs(self, component: Component) -> None:
        assert component.script is not None
        assert component.script.attrs == {"lang": "ts"}

    def test_style_ids(self, component: Component) -> None:
        assert [s.block_id for s in component.styles] == ["layout", "colors", None]

    def test_targeted_replace(self, component: Component) -> None:
        assert component.styles[2].replace == "colors"
        assert component.styles[2].theme == "dark"


# ---------------------------------------------------------------------------
# Content handling
# ---------------------------------------------------------------------------


class TestContent:
    def test_content_is_exact(self) -> None:
        c = parse_component("<style>\n.a {\n  color: red;\n}\n</style>")
        assert c.styles[0].content == "\n.a {\n  color: red;\n}\n"

    def test_empty_source(self) -> None:
        c = parse_component("")
        assert c == Component()

    def test_text_between_blocks_is_dropped(self) -> None:
        c = parse_component("hello\n<script>x</script>\nworld")
        assert c.script is not None
        assert c.script.content == "x"
        assert c.template is None

    def test_top_level_comment_ignored(self) -> None:
        c = parse_component("<!-- <style>.x{}</style> -->\n<style>.y{}</style>")
        assert len(c.styles) == 1
        assert c.styles[0].content == ".y{}"

    def test_script_content_is_raw_text(self) -> None:
        src = "<script>\nconst s = '<template>';\n</script>"
        c = parse_component(src)
        assert c.script is not None
        assert c.script.content == "\nconst s = '<template>';\n"
        assert c.template is None

    def test_deindent_style(self) -> None:
        src = "<style>\n    .a {\n        color: red;\n    }\n</style>"
        c = parse_component(src)
        assert c.styles[0].content == "\n.a {\n    color: red;\n}\n"

    def test_deindent_disabled(self) -> None:
        src = "<style>\n    .a {}\n</style>"
        c = parse_component(src, deindent=False)
        assert c.styles[0].content == "\n    .a {}\n"

    def test_template_not_deindented(self) -> None:
        src = "<template>\n    <div />\n</template>"
        c = parse_component(src)
        assert c.template is not None
        assert c.template.content == "\n    <div />\n"

    def test_deindent_keeps_line_count(self) -> None:
        src = "<style>\n    .a {\n\n        color: red;\n    }\n</style>"
        c = parse_component(src)
        assert c.styles[0].content.count("\n") == 5

    def test_self_closing_custom_block(self) -> None:
        c = parse_component('<docs src="./README.md" />\n<template><p /></template>')
        assert len(c.custom_blocks) == 1
        assert c.custom_blocks[0].type == "docs"
        assert c.custom_blocks[0].content == ""
        assert c.custom_blocks[0].attrs == {"src": "./README.md"}

    def test_deeply_nested_templates(self) -> None:
        src = (
            "<template><template v-if=\"a\"><template v-if=\"b\">x</template>"
            "</template></template><style>.s{}</style>"
        )
        c = parse_component(src)
        assert c.template is not None
        assert c.template.content.count("<template") == 2
        assert len(c.styles) == 1


# ---------------------------------------------------------------------------
# Attribute parsing
# ---------------------------------------------------------------------------


class TestAttributes:
    def _attrs(self, tag_attrs: str) -> dict:
        return parse_component(f"<style{tag_attrs}>x</style>").styles[0].attrs

    def test_no_attributes(self) -> None:
        assert self._attrs("") == {}

    def test_boolean_attribute(self) -> None:
        assert self._attrs(" scoped") == {"scoped": True}

    def test_double_quoted(self) -> None:
        assert self._attrs(' theme="dark"') == {"theme": "dark"}

    def test_single_quoted(self) -> None:
        assert self._attrs(" theme='dark'") == {"theme": "dark"}

    def test_unquoted(self) -> None:
        assert self._attrs(" lang=scss") == {"lang": "scss"}

    def test_spaces_around_equals(self) -> None:
        assert self._attrs(' lang = "scss"') == {"lang": "scss"}

    def test_empty_value_is_presence(self) -> None:
        assert self._attrs(' replace=""') == {"replace": True}

    def test_insertion_order(self) -> None:
        attrs = self._attrs(' scoped lang="scss" theme="a" replace')
        assert list(attrs) == ["scoped", "lang", "theme", "replace"]

    def test_quoted_value_with_angle_bracket(self) -> None:
        assert self._attrs(' data-x="a>b"') == {"data-x": "a>b"}

    def test_duplicate_attribute_last_wins(self) -> None:
        assert self._attrs(' theme="a" theme="b"') == {"theme": "b"}

    def test_multiline_attributes(self) -> None:
        assert self._attrs('\n  scoped\n  theme="a"\n') == {"scoped": True, "theme": "a"}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unclosed_fixture(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            _load("unclosed.vue")
        assert exc_info.value.line == 5
        assert exc_info.value.column == 1
        assert "<style>" in str(exc_info.value)

    def test_unclosed_template(self) -> None:
        with pytest.raises(ParseError):
            parse_component("<template><template></template>")

    def test_duplicate_template(self) -> None:
        with pytest.raises(ParseError, match="Only one <template>"):
            parse_component("<template>a</template>\n<template>b</template>")

    def test_duplicate_script(self) -> None:
        with pytest.raises(ParseError, match="Only one <script>"):
            parse_component("<script>a</script><script>b</script>")

    def test_unterminated_comment(self) -> None:
        with pytest.raises(ParseError, match="Unterminated comment"):
            parse_component("<!-- never closed")

    def test_malformed_attributes(self) -> None:
        with pytest.raises(ParseError, match="Malformed attributes"):
            parse_component('<style ="a">x</style>')

    def test_missing_attribute_value(self) -> None:
        with pytest.raises(ParseError, match="Malformed attributes"):
            parse_component("<style theme==a>x</style>")

    def test_error_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_component("\n\n  <style>")
        assert exc_info.value.line == 3
        assert exc_info.value.column == 3
