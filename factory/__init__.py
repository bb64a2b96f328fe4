"""Factory module for assembling the diagram conversion pipeline."""

from factory.diagram_factory import DiagramFactory

__all__ = ["DiagramFactory"]
