"""Raster backend: paints an ImageDescription with Pillow."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from shared.render_data import (
    Circle,
    Fill,
    ImageDescription,
    Line,
    Rectangle,
    Text,
    rgb,
)

logger = logging.getLogger(__name__)


class PngRenderer:
    """Encodes diagrams as PNG images."""

    format_name = "png"

    def __init__(self):
        self._fonts: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def to_image(self, description: ImageDescription) -> Image.Image:
        """Paint all draw commands onto a new RGB image."""
        img = Image.new("RGB", (description.width, description.height), rgb("goban"))
        draw = ImageDraw.Draw(img)

        for cmd in description.commands:
            if isinstance(cmd, Fill):
                draw.rectangle([0, 0, description.width - 1, description.height - 1], fill=rgb(cmd.color))
            elif isinstance(cmd, Rectangle):
                box = self._box(cmd.x0, cmd.y0, cmd.x1, cmd.y1)
                draw.rectangle(
                    box,
                    fill=rgb(cmd.fill) if cmd.fill else None,
                    outline=rgb(cmd.outline) if cmd.outline else None,
                )
            elif isinstance(cmd, Line):
                draw.line([(cmd.x0, cmd.y0), (cmd.x1, cmd.y1)], fill=rgb(cmd.color), width=1)
            elif isinstance(cmd, Circle):
                if cmd.r <= 0:
                    continue
                draw.ellipse(
                    [cmd.cx - cmd.r, cmd.cy - cmd.r, cmd.cx + cmd.r, cmd.cy + cmd.r],
                    fill=rgb(cmd.fill) if cmd.fill else None,
                    outline=rgb(cmd.outline) if cmd.outline else None,
                )
            elif isinstance(cmd, Text):
                draw.text((cmd.x, cmd.y), cmd.text, fill=rgb(cmd.color), font=self._font(cmd.size))
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")

        return img

    def encode(self, description: ImageDescription) -> bytes:
        buffer = io.BytesIO()
        self.to_image(description).save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, description: ImageDescription, output_path: str | Path) -> None:
        output_path = Path(output_path)
        self.to_image(description).save(output_path, format="PNG")
        logger.info(f"Saved PNG diagram to {output_path}")

    def _font(self, size: int):
        # Pillow's bundled font scales when FreeType is available
        if size not in self._fonts:
            try:
                self._fonts[size] = ImageFont.load_default(size=size)
            except ImportError:
                self._fonts[size] = ImageFont.load_default()
        return self._fonts[size]

    @staticmethod
    def _box(x0: float, y0: float, x1: float, y1: float) -> list[float]:
        return [min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)]
