"""Backend-agnostic image description.

The diagram renderer produces an ImageDescription: the image size plus an
ordered tuple of draw commands using named palette colors. Raster and vector
encoders fold over the commands in order; later commands paint over earlier
ones. Coordinates are pixels with the origin at the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

PaletteColor = Literal[
    "goban",
    "black",
    "white",
    "red",
    "link",
    "border",
    "border_highlight",
    "open",
]

PALETTE: dict[str, tuple[int, int, int]] = {
    "goban": (242, 176, 109),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 55, 55),
    "link": (202, 106, 69),
    "border": (150, 110, 65),
    "border_highlight": (210, 145, 80),
    "open": (255, 210, 140),
}


def rgb(color: PaletteColor) -> tuple[int, int, int]:
    """Look up the RGB triple of a palette color."""
    return PALETTE[color]


@dataclass(frozen=True)
class Fill:
    """Flood the whole image with a color."""

    color: PaletteColor


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle with inclusive corners (x0, y0) and (x1, y1)."""

    x0: float
    y0: float
    x1: float
    y1: float
    fill: PaletteColor | None = None
    outline: PaletteColor | None = None


@dataclass(frozen=True)
class Line:
    x0: float
    y0: float
    x1: float
    y1: float
    color: PaletteColor


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    outline: PaletteColor | None = None
    fill: PaletteColor | None = None


@dataclass(frozen=True)
class Text:
    """Text label; (x, y) is the top-left corner of the first glyph box."""

    x: float
    y: float
    text: str
    color: PaletteColor
    size: int


DrawCommand = Union[Fill, Rectangle, Line, Circle, Text]


@dataclass(frozen=True)
class ImageDescription:
    """Size and draw commands of one rendered diagram.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        commands: Draw commands in painting order
        title: Diagram title (used by encoders that can embed one)
    """

    width: int
    height: int
    commands: tuple[DrawCommand, ...]
    title: str = ""

    def __repr__(self):
        return f"ImageDescription({self.width}x{self.height}, commands={len(self.commands)})"

    def of_type(self, command_type) -> list:
        """Return all commands of a given type, in order."""
        return [cmd for cmd in self.commands if isinstance(cmd, command_type)]
