"""Tests for the SVG backend."""

import xml.etree.ElementTree as ET

from diagram import parse_diagram_string
from renderer.diagram_renderer import DiagramRenderer
from renderer.svg_renderer import SVG_NAMESPACE, SvgRenderer
from shared.interfaces import IImageEncoder
from shared.render_data import Circle, Fill, ImageDescription, Rectangle, Text

NS = {"svg": SVG_NAMESPACE}


def describe(text):
    return DiagramRenderer().render(parse_diagram_string(text))


class TestSvgRenderer:
    def test_implements_encoder_protocol(self):
        assert isinstance(SvgRenderer(), IImageEncoder)
        assert SvgRenderer.format_name == "svg"

    def test_size_attributes_match_geometry(self):
        data = SvgRenderer().encode(describe("$$\n$$+--+\n$$|. .|\n$$+--+"))
        root = ET.fromstring(data)

        assert data.startswith(b"<?xml")
        assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert root.get("width") == "38"
        assert root.get("height") == "21"
        assert root.get("viewBox") == "0 0 38 21"

    def test_stones_become_circles(self):
        root = ET.fromstring(SvgRenderer().to_string(describe("$$\n$$ X O")))
        circles = root.findall("svg:circle", NS)

        assert len(circles) == 2
        assert circles[0].get("fill") == "rgb(0, 0, 0)"
        assert circles[1].get("fill") == "rgb(255, 255, 255)"
        assert circles[0].get("cx") == "10.5"
        assert circles[0].get("r") == "8.5"

    def test_title_element(self):
        root = ET.fromstring(SvgRenderer().to_string(describe("$$B Tesuji\n$$ . X")))
        assert root.find("svg:title", NS).text == "Tesuji"

    def test_rectangle_corners_are_inclusive(self):
        description = ImageDescription(
            width=20,
            height=20,
            commands=(Fill("goban"), Rectangle(2, 2, 18, 18, fill="link")),
        )
        root = ET.fromstring(SvgRenderer().to_string(description))
        background, rect = root.findall("svg:rect", NS)

        assert background.get("fill") == "rgb(242, 176, 109)"
        assert (rect.get("x"), rect.get("width")) == ("2", "17")
        assert rect.get("fill") == "rgb(202, 106, 69)"
        assert rect.get("stroke") == "none"

    def test_outline_only_circle(self):
        description = ImageDescription(
            width=20,
            height=20,
            commands=(Circle(10, 10, 4, outline="red"),),
        )
        circle = ET.fromstring(SvgRenderer().to_string(description)).find("svg:circle", NS)
        assert circle.get("fill") == "none"
        assert circle.get("stroke") == "rgb(255, 55, 55)"

    def test_text_labels(self):
        description = ImageDescription(
            width=40,
            height=40,
            commands=(Text(6.5, 2.5, "10", "white", 16),),
        )
        label = ET.fromstring(SvgRenderer().to_string(description)).find("svg:text", NS)

        assert label.text == "10"
        assert label.get("x") == "6.5"
        assert label.get("font-size") == "16"
        assert label.get("dominant-baseline") == "hanging"

    def test_links_and_coordinates(self):
        text = "$$c\n$$ +-----\n$$ | a 1\n$$ [a|http://example.com]"
        root = ET.fromstring(SvgRenderer().to_string(describe(text)))
        labels = [t.text for t in root.findall("svg:text", NS)]

        assert labels == ["19", "A", "B", "a", "1"]

    def test_save(self, tmp_path):
        output = tmp_path / "board.svg"
        SvgRenderer().save(describe("$$\n$$ X O"), output)

        root = ET.parse(output).getroot()
        assert root.get("width") == "38"
