"""Shared protocol definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from shared.render_data import ImageDescription


@runtime_checkable
class IImageEncoder(Protocol):
    """Protocol describing an output backend for rendered diagrams."""

    format_name: str

    def encode(self, description: ImageDescription) -> bytes: ...

    def save(self, description: ImageDescription, output_path: str | Path) -> None: ...
