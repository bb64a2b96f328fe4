"""Loader for Sensei's Library diagram notation.

Syntax of the first line:

    $$(B|W)(c)(size)(title)
      |     |  |     +--> title of the diagram
      |     |  +--> board size (for SGF and coordinates, default 19)
      |     +--> show coordinates in the diagram image
      +--> first move is by black (B) or white (W)

All parts are optional. Every following "$$" line is either a diagram row or
a bracket link of the form ``$$ [anchor|target]``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable

from diagram.constants import ANCHOR_PATTERN, DEFAULT_BOARD_SIZE, DEFAULT_FIRST_COLOR
from diagram.errors import InvalidDiagram, ParseError
from diagram.go_diagram import Diagram
from diagram.layout import (
    coordinates_possible,
    derive_geometry,
    detect_bounds,
    normalize_rows,
    to_grid,
)
from shared.render_config import GlyphSize

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^\$\$([WB])?(c)?(\d+)?(.*)")
_ROW_RE = re.compile(r"^\$\$\s*([^[\s].*)")
_LINK_RE = re.compile(r"^\$\$\s*\[(.*)\|(.*)\]")
_ANCHOR_RE = re.compile(ANCHOR_PATTERN)


def parse_header(line: str) -> tuple[str, bool, int, str]:
    """Parse the directive line.

    Args:
        line: First line of the notation

    Returns:
        Tuple of (first_color, coordinates, board_size, title)

    Raises:
        ParseError: If the line is not empty and not a "$$" line
    """
    line = line.strip()
    if not line:
        return DEFAULT_FIRST_COLOR, False, DEFAULT_BOARD_SIZE, ""

    match = _HEADER_RE.match(line)
    if match is None:
        raise ParseError(f"Invalid header: expected '$$' directive line, got '{line}'")

    first_color = "W" if match.group(1) == "W" else "B"
    coordinates = match.group(2) is not None
    board_size = int(match.group(3)) if match.group(3) is not None else DEFAULT_BOARD_SIZE
    title = match.group(4).strip()
    return first_color, coordinates, board_size, title


def parse_body(lines: list[str]) -> tuple[str, dict[str, str]]:
    """Split body lines into diagram rows and link definitions.

    Args:
        lines: All lines after the header

    Returns:
        Tuple of (rows joined with newlines, link map)
    """
    body = ""
    link_map: dict[str, str] = {}

    for line in lines:
        line = line.strip()

        row_match = _ROW_RE.match(line)
        if row_match:
            body += row_match.group(1) + "\n"
            continue

        link_match = _LINK_RE.match(line)
        if link_match:
            anchor = link_match.group(1).strip()
            if _ANCHOR_RE.match(anchor):
                link_map[anchor] = link_match.group(2).strip()
            else:
                logger.debug(f"Ignoring link with invalid anchor '{anchor}'")

    return body, link_map


def parse_diagram_string(text: str, glyph: GlyphSize | None = None) -> Diagram:
    """Parse diagram notation into a Diagram.

    Args:
        text: Complete notation (header line plus "$$" body lines)
        glyph: Glyph box the geometry is derived from (default 16x8)

    Returns:
        Diagram with normalised grid, bounds and geometry

    Raises:
        ParseError: If the input is not text or the header is malformed
        InvalidDiagram: If the playable area is empty or the image too small
    """
    if not isinstance(text, str):
        raise ParseError(f"Diagram notation must be text, got {type(text).__name__}")
    glyph = glyph or GlyphSize()

    lines = text.split("\n")
    first_color, coordinates, board_size, title = parse_header(lines[0])
    body, link_map = parse_body(lines[1:])

    rows = normalize_rows(body)
    bounds = detect_bounds(rows)

    if coordinates and not coordinates_possible(bounds):
        # cannot determine X *and* Y coordinates
        logger.debug("Coordinates requested but borders are missing; disabling")
        coordinates = False

    geometry = derive_geometry(bounds, glyph, coordinates)

    if not bounds.is_valid():
        raise InvalidDiagram(f"Diagram has no playable area: {bounds}", bounds)
    if geometry.image_width < glyph.width or geometry.image_height < glyph.height:
        raise InvalidDiagram(
            f"Image {geometry.image_width}x{geometry.image_height} is smaller than "
            f"the glyph box {glyph.width}x{glyph.height}",
            bounds,
        )

    return Diagram(
        first_color=first_color,
        coordinates=coordinates,
        board_size=board_size,
        title=title,
        grid=to_grid(rows),
        link_map=link_map,
        bounds=bounds,
        geometry=geometry,
        glyph=glyph,
    )


class DiagramLoader:
    """Loads a diagram from a notation file."""

    def __init__(
        self,
        filename: str | Path,
        glyph: GlyphSize | None = None,
        status_reporter: Callable[[str], None] | None = None,
    ):
        self.filename = Path(filename)
        self.glyph = glyph or GlyphSize()
        self._status_reporter = status_reporter

    def set_status_reporter(self, reporter: Callable[[str], None] | None) -> None:
        """Set or update the status reporter callback."""
        self._status_reporter = reporter

    def load(self) -> Diagram:
        """Read and parse the notation file.

        Raises:
            FileNotFoundError: If the file does not exist
            ParseError, InvalidDiagram: See parse_diagram_string
        """
        self._report(f"Loading diagram from: {self.filename}")
        text = self.filename.read_text(encoding="utf-8")
        diagram = parse_diagram_string(text, self.glyph)
        b = diagram.bounds
        self._report(
            f"Parsed '{diagram.title}': {b.rows}x{b.cols} playable cells, "
            f"{len(diagram.link_map)} link(s)"
        )
        return diagram

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_reporter:
            self._status_reporter(message)
        else:
            logger.info(message)
