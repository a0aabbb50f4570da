"""Table module - Decoding of box-drawing tables printed by the warp binary."""

from warp_client.table.parser import (
    TableGlyphs,
    TableParser,
    DEFAULT_GLYPHS,
    parse_profiles,
)

__all__ = ["TableGlyphs", "TableParser", "DEFAULT_GLYPHS", "parse_profiles"]
