from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import logging

from warp_client.core.types import Profile

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class TableGlyphs:
    """
    Characters that give a rendered table its structure.

    Attributes:
        vertical: Outer vertical border. Lines without it carry no data.
        column_separator: Divider between two cells of a row.
        header_marker: Text that identifies the header row.
        border_rules: Horizontal rule glyphs of header and row separators.
        edge_glyphs: Border characters stripped from both ends of a cell.
    """
    vertical: str = "│"
    column_separator: str = "┆"
    header_marker: str = "ID"
    border_rules: Tuple[str, ...] = ("═", "╌")
    edge_glyphs: str = "│┃║┌┐└┘├┤┬┴┼╭╮╯╰╞╡╪"

DEFAULT_GLYPHS = TableGlyphs()

class TableParser:
    """
    Splits a rendered table into rows of cell strings.
    """
    def __init__(self, glyphs: TableGlyphs = DEFAULT_GLYPHS):
        self.glyphs = glyphs

    def is_data_line(self, line: str) -> bool:
        """
        Checks whether a line can hold a data row.

        Args:
            line (str): A single line of the rendered table.

        Returns:
            bool: False for header, rule and border lines.
        """
        glyphs = self.glyphs
        if glyphs.vertical not in line:
            return False
        if glyphs.header_marker and glyphs.header_marker in line:
            return False
        return not any(rule in line for rule in glyphs.border_rules)

    def split_cells(self, line: str) -> list[str]:
        strip_chars = self.glyphs.edge_glyphs + " \t"
        return [part.strip(strip_chars) for part in line.split(self.glyphs.column_separator)]

    def rows(self, text: str) -> list[list[str]]:
        """
        Extracts the data rows of a table.

        Args:
            text (str): The rendered table.

        Returns:
            list[list[str]]: Cells of every data row, in order.
        """
        return [self.split_cells(line) for line in text.splitlines() if self.is_data_line(line)]

def parse_profiles(text: str, glyphs: TableGlyphs = DEFAULT_GLYPHS) -> list[Profile]:
    """
    Parses the output of `warp agent profile list` into profiles.

    Rows that do not have exactly two non-empty cells are skipped.

    Args:
        text (str): Stdout of the listing command.
        glyphs (TableGlyphs, optional): Glyph set of the table. Defaults to DEFAULT_GLYPHS.

    Returns:
        list[Profile]: Profiles in table order. Duplicates are kept.
    """
    profiles: list[Profile] = []
    for cells in TableParser(glyphs).rows(text):
        if len(cells) != 2 or not cells[0] or not cells[1]:
            logger.debug("Skipping malformed profile row", extra={"cells": cells})
            continue
        profiles.append(Profile(id=cells[0], name=cells[1]))
    logger.debug(f"Parsed {len(profiles)} profiles")
    return profiles
