from themed_style.serializer.generator import gen_attrs, gen_section, serialize

__all__ = ["gen_attrs", "gen_section", "serialize"]
