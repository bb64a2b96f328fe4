"""Diagram rendering: draw-command generation and output backends."""

from .diagram_renderer import DiagramRenderer
from .png_renderer import PngRenderer
from .svg_renderer import SvgRenderer

__all__ = [
    "DiagramRenderer",
    "PngRenderer",
    "SvgRenderer",
]
