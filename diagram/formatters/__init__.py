"""Exporters that turn a Diagram into other formats."""

from .linkmap_formatter import LinkMapFormatter
from .sgf_formatter import SGFFormatter

__all__ = ["LinkMapFormatter", "SGFFormatter"]
