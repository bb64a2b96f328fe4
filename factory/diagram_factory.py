"""Factory helpers for assembling the diagram conversion pipeline."""

from __future__ import annotations

from diagram.formatters import LinkMapFormatter, SGFFormatter
from diagram.go_diagram import Diagram
from renderer.diagram_renderer import DiagramRenderer
from renderer.png_renderer import PngRenderer
from renderer.svg_renderer import SvgRenderer
from shared.interfaces import IImageEncoder
from shared.render_config import RenderConfig
from shared.render_data import ImageDescription


class DiagramFactory:
    """Centralised factory for renderers and encoders."""

    _ENCODERS = {
        "png": PngRenderer,
        "svg": SvgRenderer,
    }

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()
        self._renderer = DiagramRenderer()

    def create_encoder(self, output_format: str | None = None) -> IImageEncoder:
        """Create the image encoder for a format name ("png" or "svg").

        Raises:
            ValueError: If the format is not supported
        """
        fmt = (output_format or self.config.resolved_format()).lower()
        try:
            return self._ENCODERS[fmt]()
        except KeyError:
            raise ValueError(
                f"Unsupported output format '{fmt}'; expected one of {sorted(self._ENCODERS)}"
            ) from None

    def render(self, diagram: Diagram) -> ImageDescription:
        return self._renderer.render(diagram)

    def encode(self, diagram: Diagram, output_format: str | None = None) -> bytes:
        """Render and encode a diagram in one step."""
        return self.create_encoder(output_format).encode(self.render(diagram))

    @staticmethod
    def to_sgf(diagram: Diagram) -> str:
        return SGFFormatter.diagram_to_sgf(diagram)

    @staticmethod
    def to_image_map(diagram: Diagram, map_name: str) -> str | None:
        return LinkMapFormatter.diagram_to_html(diagram, map_name)
