"""Rendering configuration for diagram conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

OutputFormat = Literal["png", "svg"]

SUPPORTED_FORMATS: tuple[OutputFormat, ...] = ("png", "svg")


@dataclass(frozen=True)
class GlyphSize:
    """Nominal text glyph box in pixels.

    All diagram geometry is derived from this box: the cell diameter is the
    length of its diagonal, and coordinate margins are sized to fit labels.
    The defaults match an HTML font size 4.
    """

    height: int = 16
    width: int = 8

    def __post_init__(self):
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"Glyph size must be positive, got {self.height}x{self.width}")


@dataclass
class RenderConfig:
    """Options for a single diagram conversion.

    Attributes:
        glyph: Glyph box used for geometry and label placement
        output_path: Image file to write (format picked from the suffix)
        output_format: Explicit format, overrides the suffix
        sgf_path: SGF file to write (None = no export)
        link_map_name: Name of the HTML image map to print (None = no map)
        show: Display the rendered diagram on screen
    """

    glyph: GlyphSize = field(default_factory=GlyphSize)
    output_path: Path | None = None
    output_format: OutputFormat | None = None
    sgf_path: Path | None = None
    link_map_name: str | None = None
    show: bool = False

    def resolved_format(self) -> OutputFormat:
        """Return the image format to produce.

        Raises:
            ValueError: If neither the explicit format nor the suffix is supported
        """
        if self.output_format is not None:
            return self.output_format
        if self.output_path is None:
            return "png"
        suffix = self.output_path.suffix.lower().lstrip(".")
        if suffix not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported output format '{self.output_path.suffix}'. "
                f"Use one of: {', '.join('.' + fmt for fmt in SUPPORTED_FORMATS)}"
            )
        return suffix  # type: ignore[return-value]


def parse_glyph_spec(spec: str) -> GlyphSize:
    """Parse a glyph size specification string into a GlyphSize.

    Format:
        HEIGHTxWIDTH or h=HEIGHT,w=WIDTH

    Examples:
        "16x8" -> GlyphSize(height=16, width=8)
        "h=20,w=10" -> GlyphSize(height=20, width=10)
        "h=20" -> GlyphSize(height=20, width=8)
    """
    spec = spec.strip().lower()
    if not spec:
        raise ValueError("Empty glyph specification")

    if "=" not in spec:
        parts = spec.split("x")
        if len(parts) != 2:
            raise ValueError(f"Invalid glyph format: {spec}. Expected HEIGHTxWIDTH")
        try:
            return GlyphSize(height=int(parts[0]), width=int(parts[1]))
        except ValueError as e:
            raise ValueError(f"Invalid glyph format: {spec}. {e}") from e

    params = {}
    for param_pair in spec.split(","):
        param_pair = param_pair.strip()
        if not param_pair:
            continue
        if "=" not in param_pair:
            raise ValueError(f"Invalid parameter format: {param_pair}. Expected PARAM=VALUE")
        key, value = param_pair.split("=", 1)
        key = key.strip()
        if key in ["h", "height"]:
            params["height"] = int(value)
        elif key in ["w", "width"]:
            params["width"] = int(value)
        else:
            raise ValueError(f"Unknown parameter: {key}")

    return GlyphSize(**params)
