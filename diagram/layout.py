"""Grid normalisation, border detection and image geometry.

The diagram body is reduced to a list of rows in which every frame character
is replaced by BORDER_MARKER. Four probe cells then decide which sides of the
board are framed, and the playable area is whatever lies inside the frame.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from diagram.constants import BORDER_CHARS, BORDER_MARKER, ROW_SENTINEL
from shared.render_config import GlyphSize

logger = logging.getLogger(__name__)

_BORDER_RE = re.compile(f"[{re.escape(BORDER_CHARS)}]")
_STRIP_RE = re.compile(r"[ \t\r$]")
_LINEBREAKS_RE = re.compile(r"\n+")


@dataclass(frozen=True)
class BoundingBox:
    """Playable area inside any detected border frame (inclusive indices)."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int
    top_border: bool = False
    bottom_border: bool = False
    left_border: bool = False
    right_border: bool = False

    @property
    def rows(self) -> int:
        return self.end_row - self.start_row + 1

    @property
    def cols(self) -> int:
        return self.end_col - self.start_col + 1

    @property
    def height_defined(self) -> bool:
        """Both top and bottom edges of the board are visible."""
        return self.top_border and self.bottom_border

    @property
    def width_defined(self) -> bool:
        """Both left and right edges of the board are visible."""
        return self.left_border and self.right_border

    def is_valid(self) -> bool:
        return (
            self.start_row <= self.end_row
            and self.start_col <= self.end_col
            and self.end_row >= 0
            and self.end_col >= 0
        )


@dataclass(frozen=True)
class Geometry:
    """Pixel geometry of the rendered image."""

    cell_diameter: int
    radius: float
    image_width: int
    image_height: int
    offset_x: int
    offset_y: int


def normalize_rows(body: str) -> list[str]:
    """Turn raw diagram rows into normalised grid rows.

    Frame characters become BORDER_MARKER, whitespace and stray "$" are
    dropped, and every row ends with a single ROW_SENTINEL.

    Args:
        body: Diagram rows joined with newlines

    Returns:
        List of row strings (at least one, possibly just the sentinel)
    """
    diag = _BORDER_RE.sub(BORDER_MARKER, body)
    diag = _STRIP_RE.sub("", diag)
    diag = _LINEBREAKS_RE.sub(ROW_SENTINEL + "\n", diag).strip()
    return (diag + ROW_SENTINEL).split("\n")


def char_at(rows, row: int, col: int) -> str:
    """Return the character at (row, col), or "" when out of range.

    Negative indices are out of range (no wrap-around).
    """
    if row < 0 or col < 0 or row >= len(rows):
        return ""
    line = rows[row]
    if col >= len(line):
        return ""
    return str(line[col])


def detect_bounds(rows: list[str]) -> BoundingBox:
    """Find the framed sides and the playable area of a normalised grid.

    The probe order matters: the left and right probes use the start and end
    rows after the top and bottom adjustments.
    """
    start_row = 0
    start_col = 0
    end_row = len(rows) - 1

    top_border = char_at(rows, 0, 1) == BORDER_MARKER
    if top_border:
        start_row += 1

    bottom_border = char_at(rows, end_row, 1) == BORDER_MARKER
    if bottom_border:
        end_row -= 1

    left_border = char_at(rows, start_row, 0) == BORDER_MARKER
    if left_border:
        start_col = 1

    end_col = len(rows[start_row]) - 2 if 0 <= start_row < len(rows) else -1
    right_border = char_at(rows, end_row, end_col) == BORDER_MARKER
    if right_border:
        end_col -= 1

    bounds = BoundingBox(
        start_row=start_row,
        start_col=start_col,
        end_row=end_row,
        end_col=end_col,
        top_border=top_border,
        bottom_border=bottom_border,
        left_border=left_border,
        right_border=right_border,
    )
    logger.debug(f"Detected bounds: {bounds}")
    return bounds


def coordinates_possible(bounds: BoundingBox) -> bool:
    """Labels need one horizontal and one vertical edge to anchor both axes."""
    return (bounds.top_border or bounds.bottom_border) and (
        bounds.left_border or bounds.right_border
    )


def derive_geometry(bounds: BoundingBox, glyph: GlyphSize, coordinates: bool) -> Geometry:
    """Compute image size and offsets for the playable area.

    Args:
        bounds: Detected bounding box
        glyph: Glyph box the cell size is derived from
        coordinates: Whether coordinate margins are reserved (caller has
            already checked coordinates_possible)

    Returns:
        Geometry for the rendered image
    """
    diameter = int(np.floor(np.sqrt(glyph.height ** 2 + glyph.width ** 2)))
    image_width = diameter * (1 + bounds.end_col - bounds.start_col) + 4
    image_height = diameter * (1 + bounds.end_row - bounds.start_row) + 4
    offset_x = 2
    offset_y = 2

    if coordinates:
        x = glyph.width * 2 + 4
        y = glyph.height + 2
        image_width += x
        offset_x += x
        image_height += y
        offset_y += y

    return Geometry(
        cell_diameter=diameter,
        radius=diameter / 2,
        image_width=image_width,
        image_height=image_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )


def to_grid(rows: list[str]) -> np.ndarray:
    """Pad rows with the sentinel into a read-only rectangular character array."""
    width = max(len(row) for row in rows)
    grid = np.array([list(row.ljust(width, ROW_SENTINEL)) for row in rows], dtype="<U1")
    grid.flags.writeable = False
    return grid
