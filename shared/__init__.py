"""Shared utility package for cross-layer value objects and interfaces."""

from .interfaces import IImageEncoder  # noqa: F401
from .render_config import GlyphSize, RenderConfig, parse_glyph_spec  # noqa: F401
from .render_data import ImageDescription  # noqa: F401
