"""Diagram notation loaders."""

from .diagram_loader import DiagramLoader, parse_diagram_string

__all__ = ["DiagramLoader", "parse_diagram_string"]
