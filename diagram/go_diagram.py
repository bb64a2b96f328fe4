"""Parsed diagram model.

A Diagram is built once from notation text (see diagram.loaders) and is
read-only afterwards. Renderers and exporters only query it.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

import numpy as np

from diagram.cell_symbol import CellSymbol, StoneColor, classify
from diagram.constants import BORDER_MARKER
from diagram.layout import BoundingBox, Geometry, char_at
from shared.render_config import GlyphSize


@dataclass(frozen=True, eq=False)
class Diagram:
    """A single board position with its metadata and derived layout.

    Attributes:
        first_color: Color that plays move 1 ("B" or "W")
        coordinates: Whether coordinate labels are drawn (already forced off
            when the borders cannot anchor both axes)
        board_size: Board size used for coordinate numbering and SGF export
        title: Title text from the header line
        grid: Read-only (rows, cols) character array, padded with spaces
        link_map: Read-only mapping of anchor character to link target
        bounds: Playable area and framed sides
        geometry: Pixel geometry of the rendered image
        glyph: Glyph box the geometry was derived from
    """

    first_color: StoneColor
    coordinates: bool
    board_size: int
    title: str
    grid: np.ndarray
    link_map: Mapping[str, str]
    bounds: BoundingBox
    geometry: Geometry
    glyph: GlyphSize = field(default_factory=GlyphSize)
    symbols: tuple[tuple[CellSymbol, ...], ...] = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "link_map", MappingProxyType(dict(self.link_map)))
        symbols = tuple(tuple(classify(str(ch)) for ch in row) for row in self.grid)
        object.__setattr__(self, "symbols", symbols)

    @property
    def rows(self) -> list[str]:
        """Grid rows as strings."""
        return ["".join(row) for row in self.grid]

    @property
    def html_title(self) -> str:
        """Title escaped for inclusion in HTML."""
        return html.escape(self.title)

    def char_at(self, row: int, col: int) -> str:
        return char_at(self.grid, row, col)

    def symbol_at(self, row: int, col: int) -> CellSymbol:
        if 0 <= row < len(self.symbols) and 0 <= col < len(self.symbols[row]):
            return self.symbols[row][col]
        return classify("")

    def is_anchor(self, char: str) -> bool:
        return char in self.link_map

    def playable_cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, col, char) for every cell of the playable area, row by row."""
        b = self.bounds
        for row in range(b.start_row, b.end_row + 1):
            for col in range(b.start_col, b.end_col + 1):
                yield row, col, self.char_at(row, col)

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        """Pixel center of a grid cell."""
        g = self.geometry
        x = (col - self.bounds.start_col) * g.cell_diameter + g.radius + g.offset_x
        y = (row - self.bounds.start_row) * g.cell_diameter + g.radius + g.offset_y
        return x, y

    def link_area(self, row: int, col: int) -> tuple[int, int, int, int]:
        """Pixel rectangle (x, y, x2, y2) covered by a grid cell, inclusive."""
        g = self.geometry
        x = (col - self.bounds.start_col) * g.cell_diameter + g.offset_x
        y = (row - self.bounds.start_row) * g.cell_diameter + g.offset_y
        return x, y, x + g.cell_diameter - 1, y + g.cell_diameter - 1

    def intersection_type(self, row: int, col: int) -> str:
        """Return the framed sides adjacent to a cell.

        The result concatenates "U", "B", "L", "R" (in that order) for each
        orthogonal neighbour that is a border cell. An empty string is an
        intersection in the middle of the board.
        """
        sides = ""
        if self.char_at(row - 1, col) == BORDER_MARKER:
            sides += "U"
        if self.char_at(row + 1, col) == BORDER_MARKER:
            sides += "B"
        if self.char_at(row, col - 1) == BORDER_MARKER:
            sides += "L"
        if self.char_at(row, col + 1) == BORDER_MARKER:
            sides += "R"
        return sides

    def __repr__(self) -> str:
        b = self.bounds
        return (
            f"Diagram(title={self.title!r}, first_color={self.first_color}, "
            f"rows={b.start_row}..{b.end_row}, cols={b.start_col}..{b.end_col}, "
            f"links={len(self.link_map)})"
        )
