"""Renders a Diagram into a backend-agnostic ImageDescription.

Painting order:
1. Background fill
2. Coordinate labels (if enabled)
3. Board border frame
4. Each playable cell, row by row: link highlight, then its symbol

Pixel layout of a cell: the cell at (row, col) is a square of side
cell_diameter whose top-left corner is offset by (offset_x, offset_y) from
the image origin; stones and intersections are centred in it.
"""

from __future__ import annotations

import logging

from diagram.cell_symbol import EmptyMark, Letter, MoveNumber, Stone
from diagram.constants import COORDINATE_CHARS, other_color
from diagram.go_diagram import Diagram
from shared.render_data import (
    Circle,
    DrawCommand,
    Fill,
    ImageDescription,
    Line,
    PaletteColor,
    Rectangle,
    Text,
)

logger = logging.getLogger(__name__)

_STONE_COLORS: dict[str, PaletteColor] = {"B": "black", "W": "white"}


class DiagramRenderer:
    """Turns diagrams into draw commands."""

    BACKGROUND_COLOR: PaletteColor = "goban"
    LINE_COLOR: PaletteColor = "black"
    STONE_EDGE_COLOR: PaletteColor = "black"
    MARKUP_COLOR: PaletteColor = "red"
    LINK_COLOR: PaletteColor = "link"
    COORD_COLOR: PaletteColor = "black"

    HOSHI_RADIUS = 3
    LETTER_HALO_GROWTH = 4  # letter background square is larger than a marker

    def render(self, diagram: Diagram) -> ImageDescription:
        """Render a diagram.

        Args:
            diagram: Parsed diagram (already validated by the parser)

        Returns:
            ImageDescription with the image size and all draw commands
        """
        g = diagram.geometry
        commands: list[DrawCommand] = [Fill(self.BACKGROUND_COLOR)]

        if diagram.coordinates:
            commands.extend(self.draw_coordinates(diagram))

        commands.extend(self.draw_goban_border(diagram))

        for row, col, char in diagram.playable_cells():
            commands.extend(self.draw_cell(diagram, row, col, char))

        logger.debug(
            f"Rendered '{diagram.title}' at {g.image_width}x{g.image_height} "
            f"with {len(commands)} draw commands"
        )
        return ImageDescription(
            width=g.image_width,
            height=g.image_height,
            commands=tuple(commands),
            title=diagram.title,
        )

    # Cells ----------------------------------------------------------------------

    def draw_cell(self, diagram: Diagram, row: int, col: int, char: str) -> list[DrawCommand]:
        """Draw commands for a single playable cell."""
        x, y = diagram.cell_center(row, col)
        radius = diagram.geometry.radius
        glyph = diagram.glyph
        commands: list[DrawCommand] = []

        # linked cells get a highlighted background
        if diagram.is_anchor(char):
            x0, y0, x1, y1 = diagram.link_area(row, col)
            commands.append(Rectangle(x0, y0, x1, y1, fill=self.LINK_COLOR))

        symbol = diagram.symbol_at(row, col)

        if isinstance(symbol, Stone):
            commands.append(self.draw_stone(x, y, radius, _STONE_COLORS[symbol.color]))
            if symbol.marker is not None:
                commands.extend(self.mark_intersection(x, y, radius, self.MARKUP_COLOR, symbol.marker))

        elif isinstance(symbol, EmptyMark):
            commands.extend(self.draw_intersection(x, y, radius, diagram.intersection_type(row, col)))
            if symbol.kind == "hoshi":
                commands.append(self.draw_hoshi(x, y, self.LINE_COLOR))
            elif symbol.kind != "plain":
                commands.extend(self.mark_intersection(x, y, radius, self.MARKUP_COLOR, symbol.kind))

        elif isinstance(symbol, MoveNumber):
            color = symbol.color(diagram.first_color)
            commands.append(self.draw_stone(x, y, radius, _STONE_COLORS[color]))
            commands.append(
                self.draw_label(x, y, symbol.label, _STONE_COLORS[other_color(color)], glyph.width, glyph.height)
            )

        elif isinstance(symbol, Letter):
            commands.extend(self.draw_intersection(x, y, radius, diagram.intersection_type(row, col)))
            halo = self.LINK_COLOR if diagram.is_anchor(symbol.char) else self.BACKGROUND_COLOR
            commands.extend(
                self.mark_intersection(x, y, radius + self.LETTER_HALO_GROWTH, halo, "square")
            )
            commands.append(
                self.draw_label(x, y, symbol.char, self.LINE_COLOR, glyph.width, glyph.height, size=glyph.height + 2)
            )

        return commands

    def draw_stone(self, x: float, y: float, radius: float, color: PaletteColor) -> Circle:
        return Circle(x, y, radius, outline=self.STONE_EDGE_COLOR, fill=color)

    def draw_hoshi(self, x: float, y: float, color: PaletteColor) -> Circle:
        return Circle(x, y, self.HOSHI_RADIUS, outline=color, fill=color)

    def mark_intersection(
        self, x: float, y: float, radius: float, color: PaletteColor, kind: str
    ) -> list[DrawCommand]:
        """Draw board markup centred on a cell.

        Args:
            x, y: Cell center
            radius: Marker radius (the circle marker is three concentric
                rings of half this size, the square is a filled box)
            color: Marker color
            kind: "circle" or "square"
        """
        if kind == "circle":
            return [
                Circle(x, y, (radius - 2) / 2, outline=color),
                Circle(x, y, (radius - 1) / 2, outline=color),
                Circle(x, y, radius / 2, outline=color),
            ]
        if kind == "square":
            half = radius / 2
            return [Rectangle(x - half + 2, y - half + 2, x + half - 2, y + half - 2, fill=color)]
        return []

    def draw_intersection(self, x: float, y: float, radius: float, sides: str) -> list[DrawCommand]:
        """Draw the grid lines of an empty intersection.

        Args:
            x, y: Cell center
            radius: Half the cell size
            sides: Framed sides from Diagram.intersection_type; no line is
                drawn toward a framed side
        """
        commands: list[DrawCommand] = []
        if "U" not in sides:
            commands.append(Line(x, y - radius, x, y, self.LINE_COLOR))
        if "B" not in sides:
            commands.append(Line(x, y + radius, x, y, self.LINE_COLOR))
        if "L" not in sides:
            commands.append(Line(x - radius, y, x, y, self.LINE_COLOR))
        if "R" not in sides:
            commands.append(Line(x + radius, y, x, y, self.LINE_COLOR))

        # linear board (one row or one column wide)
        if sides in ("UB", "LR"):
            commands.append(self.draw_hoshi(x, y, self.LINE_COLOR))
        return commands

    def draw_label(
        self,
        x: float,
        y: float,
        text: str,
        color: PaletteColor,
        glyph_width: int,
        glyph_height: int,
        size: int | None = None,
    ) -> Text:
        """Center a one- or two-character label on a cell."""
        x_offset = glyph_width if len(text) == 2 else glyph_width / 2
        return Text(x - x_offset, y - glyph_height / 2, text, color, size or glyph_height)

    # Frame ----------------------------------------------------------------------

    def draw_coordinates(self, diagram: Diagram) -> list[DrawCommand]:
        """Row numbers on the left, column letters along the top."""
        b = diagram.bounds
        g = diagram.geometry
        w = diagram.glyph.width
        h = diagram.glyph.height
        commands: list[DrawCommand] = []

        if b.bottom_border:
            coord_y = b.rows
        else:
            coord_y = diagram.board_size

        if b.left_border:
            coord_x = 0
        else:
            coord_x = max(0, diagram.board_size - b.end_col - 1)

        left_x = 2 + w
        img_y = g.offset_y + g.radius - h / 2
        for _ in range(b.rows):
            x_offset = w if coord_y >= 10 else w / 2
            commands.append(Text(left_x - x_offset, img_y, str(coord_y), self.COORD_COLOR, h))
            img_y += g.cell_diameter
            coord_y -= 1

        top_y = 2
        img_x = g.offset_x + g.radius - w / 2
        for _ in range(b.cols):
            if coord_x < len(COORDINATE_CHARS):
                commands.append(Text(img_x, top_y, COORDINATE_CHARS[coord_x], self.COORD_COLOR, h))
            img_x += g.cell_diameter
            coord_x += 1

        return commands

    def draw_goban_border(self, diagram: Diagram) -> list[DrawCommand]:
        """Two-tone edge on framed sides, a light "open" edge elsewhere."""
        b = diagram.bounds
        width = diagram.geometry.image_width
        height = diagram.geometry.image_height
        right = width - 1
        bottom = height - 1

        xl1, xl2 = (2, 1) if b.left_border else (0, 0)
        xr1, xr2 = (2, 1) if b.right_border else (0, 0)
        yt1, yt2 = (2, 1) if b.top_border else (0, 0)
        yb1, yb2 = (2, 1) if b.bottom_border else (0, 0)

        commands: list[DrawCommand] = []

        if b.top_border:
            commands += [
                self._pixel(0, 0),
                self._pixel(right, 0),
                Line(xl1, 0, right - xr1, 0, "border"),
                Line(xl2, 1, right - xr2, 1, "border_highlight"),
            ]
        else:
            commands.append(Line(0, 0, right, 0, "open"))

        if b.bottom_border:
            commands += [
                self._pixel(0, bottom),
                self._pixel(right, bottom),
                Line(xl1, bottom, right - xr1, bottom, "border"),
                Line(xl2, bottom - 1, right - xr2, bottom - 1, "border_highlight"),
            ]
        else:
            commands.append(Line(0, bottom, right, bottom, "open"))

        if b.left_border:
            commands += [
                self._pixel(0, 0),
                self._pixel(0, bottom),
                Line(0, yt1, 0, bottom - yb1, "border"),
                Line(1, yt2, 1, bottom - yb2, "border_highlight"),
            ]
        else:
            commands.append(Line(0, 0, 0, bottom, "open"))

        if b.right_border:
            commands += [
                self._pixel(right, 0),
                self._pixel(right, bottom),
                Line(right, yt1, right, bottom - yb1, "border"),
                Line(right - 1, yt2, right - 1, bottom - yb2, "border_highlight"),
            ]
        else:
            commands.append(Line(right, 0, right, bottom, "open"))

        return commands

    @staticmethod
    def _pixel(x: int, y: int) -> Rectangle:
        return Rectangle(x, y, x, y, fill="white")
