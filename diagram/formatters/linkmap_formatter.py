"""Client-side HTML image map for linked diagram cells."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from diagram.go_diagram import Diagram


class LinkMapFormatter:
    """Builds an HTML ``<map>`` with one clickable area per linked cell."""

    @staticmethod
    def areas(diagram: Diagram) -> list[tuple[tuple[int, int, int, int], str]]:
        """Return (rectangle, destination) for every linked playable cell, row by row."""
        return [
            (diagram.link_area(row, col), diagram.link_map[char])
            for row, col, char in diagram.playable_cells()
            if diagram.is_anchor(char)
        ]

    @staticmethod
    def diagram_to_html(diagram: Diagram, map_name: str) -> str | None:
        """Render the image map markup.

        Args:
            diagram: Diagram whose link map is exported
            map_name: Value of the map's name attribute (referenced by
                ``<img usemap="#name">``)

        Returns:
            HTML string, or None if the diagram defines no links
        """
        if not diagram.link_map:
            return None

        html_map = ET.Element("map", {"name": map_name})
        html_map.text = "\n"
        for (x, y, x2, y2), destination in LinkMapFormatter.areas(diagram):
            area = ET.SubElement(html_map, "area", {
                "shape": "rect",
                "coords": f"{x},{y},{x2},{y2}",
                "href": destination,
                "title": destination,
            })
            area.tail = "\n"
        html_map.tail = "\n"

        return ET.tostring(html_map, encoding="unicode", method="html")
