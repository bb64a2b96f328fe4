"""Sensei's Library diagram model: parsing, layout and cell classification."""

from .constants import APP_VERSION
from .errors import DiagramError, ExportUnsupported, InvalidDiagram, ParseError
from .go_diagram import Diagram
from .layout import BoundingBox, Geometry
from .loaders import DiagramLoader, parse_diagram_string

__all__ = [
    "BoundingBox",
    "Diagram",
    "DiagramError",
    "DiagramLoader",
    "ExportUnsupported",
    "Geometry",
    "InvalidDiagram",
    "ParseError",
    "parse_diagram_string",
]

__version__ = APP_VERSION
