"""Vector backend: writes an ImageDescription as an SVG document."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from shared.render_data import (
    Circle,
    Fill,
    ImageDescription,
    Line,
    PaletteColor,
    Rectangle,
    Text,
    rgb,
)

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgRenderer:
    """Encodes diagrams as SVG documents."""

    format_name = "svg"
    font_family = "monospace"

    def to_element(self, description: ImageDescription) -> ET.Element:
        """Build the <svg> element tree for a description."""
        width = description.width
        height = description.height
        root = ET.Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": str(width),
            "height": str(height),
            "viewBox": f"0 0 {width} {height}",
            "shape-rendering": "crispEdges",
        })
        if description.title:
            ET.SubElement(root, "title").text = description.title

        for cmd in description.commands:
            if isinstance(cmd, Fill):
                ET.SubElement(root, "rect", {
                    "x": "0",
                    "y": "0",
                    "width": str(width),
                    "height": str(height),
                    "fill": self._color(cmd.color),
                })
            elif isinstance(cmd, Rectangle):
                x0, x1 = sorted((cmd.x0, cmd.x1))
                y0, y1 = sorted((cmd.y0, cmd.y1))
                # corners are inclusive pixels
                ET.SubElement(root, "rect", {
                    "x": _num(x0),
                    "y": _num(y0),
                    "width": _num(x1 - x0 + 1),
                    "height": _num(y1 - y0 + 1),
                    "fill": self._color(cmd.fill),
                    "stroke": self._color(cmd.outline),
                })
            elif isinstance(cmd, Line):
                ET.SubElement(root, "line", {
                    "x1": _num(cmd.x0),
                    "y1": _num(cmd.y0),
                    "x2": _num(cmd.x1),
                    "y2": _num(cmd.y1),
                    "stroke": self._color(cmd.color),
                    "stroke-width": "1",
                })
            elif isinstance(cmd, Circle):
                if cmd.r <= 0:
                    continue
                ET.SubElement(root, "circle", {
                    "cx": _num(cmd.cx),
                    "cy": _num(cmd.cy),
                    "r": _num(cmd.r),
                    "fill": self._color(cmd.fill),
                    "stroke": self._color(cmd.outline),
                })
            elif isinstance(cmd, Text):
                label = ET.SubElement(root, "text", {
                    "x": _num(cmd.x),
                    "y": _num(cmd.y),
                    "fill": self._color(cmd.color),
                    "font-family": self.font_family,
                    "font-size": str(cmd.size),
                    "dominant-baseline": "hanging",
                })
                label.text = cmd.text
            else:
                raise TypeError(f"Unknown draw command: {cmd!r}")

        return root

    def to_string(self, description: ImageDescription) -> str:
        return ET.tostring(self.to_element(description), encoding="unicode")

    def encode(self, description: ImageDescription) -> bytes:
        return ET.tostring(self.to_element(description), encoding="utf-8", xml_declaration=True)

    def save(self, description: ImageDescription, output_path: str | Path) -> None:
        output_path = Path(output_path)
        tree = ET.ElementTree(self.to_element(description))
        tree.write(output_path, encoding="utf-8", xml_declaration=True)
        logger.info(f"Saved SVG diagram to {output_path}")

    @staticmethod
    def _color(color: PaletteColor | None) -> str:
        if color is None:
            return "none"
        r, g, b = rgb(color)
        return f"rgb({r}, {g}, {b})"


def _num(value: float) -> str:
    """Format a coordinate without a trailing ".0"."""
    return f"{value:g}"
