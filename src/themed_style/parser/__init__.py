from themed_style.parser.blocks import parse_component
from themed_style.parser.errors import ParseError

__all__ = ["parse_component", "ParseError"]
