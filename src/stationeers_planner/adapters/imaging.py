"""Decoded raster buffers and the image decoder boundary.

Buffers use texture orientation: pixel ``(0, 0)`` is the bottom-left corner, so
row index grows northwards like world Y.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from PIL import Image, UnidentifiedImageError

from stationeers_planner.models import Color


class ImageDecodeError(ValueError):
    """Raised when encoded bytes cannot be turned into a raster buffer."""


@dataclass(frozen=True, slots=True)
class RasterBuffer:
    """Read-only RGB pixel grid, packed three bytes per pixel, rows bottom-up."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"raster dimensions must be positive, got {self.width}x{self.height}")
        if len(self.data) != self.width * self.height * 3:
            raise ValueError(
                f"expected {self.width * self.height * 3} bytes for {self.width}x{self.height} RGB, got {len(self.data)}"
            )

    def pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} raster")
        offset = (y * self.width + x) * 3
        r, g, b = self.data[offset : offset + 3]
        return Color(r, g, b)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[tuple[int, int, int]]]) -> RasterBuffer:
        """Build a buffer from pixel rows, ``rows[0]`` being the bottom row."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        packed = bytearray()
        for row in rows:
            if len(row) != width:
                raise ValueError("all rows must have the same width")
            for r, g, b in row:
                packed.extend((r, g, b))
        return cls(width=width, height=height, data=bytes(packed))

    @classmethod
    def filled(cls, width: int, height: int, color: Iterable[int]) -> RasterBuffer:
        return cls(width=width, height=height, data=bytes(color) * (width * height))


class ImageDecoder(Protocol):
    """Turns encoded image bytes into an RGB raster."""

    def decode(self, data: bytes) -> RasterBuffer:
        """Decode an image; raise ``ImageDecodeError`` on unreadable input."""


class PillowImageDecoder:
    """Decodes PNG/JPEG/etc. with Pillow without any resampling."""

    def decode(self, data: bytes) -> RasterBuffer:
        try:
            with Image.open(io.BytesIO(data)) as img:
                rgb = img.convert("RGB").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise ImageDecodeError(f"unable to decode image: {exc}") from exc
        return RasterBuffer(width=rgb.width, height=rgb.height, data=rgb.tobytes())
