"""On-screen preview of rendered diagrams with matplotlib."""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from renderer.png_renderer import PngRenderer
from shared.render_data import ImageDescription


class DiagramPreview:
    """Shows rasterised diagrams in a matplotlib window."""

    def __init__(self, scale: int = 3, dpi: int = 100):
        """
        Args:
            scale: Display magnification (diagram images are small)
            dpi: Figure resolution used to turn pixels into inches
        """
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")
        self.scale = scale
        self.dpi = dpi
        self._raster = PngRenderer()

    def render_figure(self, description: ImageDescription, title: Optional[str] = None) -> plt.Figure:
        """Build a figure showing the diagram pixel-for-pixel."""
        pixels = np.asarray(self._raster.to_image(description))
        figsize = (
            description.width * self.scale / self.dpi,
            description.height * self.scale / self.dpi,
        )
        fig, ax = plt.subplots(figsize=figsize, dpi=self.dpi)
        ax.imshow(pixels, interpolation="nearest")
        ax.set_axis_off()
        if title or description.title:
            ax.set_title(title or description.title)
        fig.tight_layout()
        return fig

    def show(self, description: ImageDescription, title: Optional[str] = None) -> None:
        """Display the diagram and block until the window is closed."""
        self.render_figure(description, title=title)
        plt.show()
