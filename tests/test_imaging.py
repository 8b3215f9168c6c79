from __future__ import annotations

import io

import pytest
from PIL import Image

from stationeers_planner.adapters import ImageDecodeError, PillowImageDecoder, RasterBuffer
from stationeers_planner.models import Color


def _png_bytes(img: Image.Image) -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def test_decoder_flips_rows_to_bottom_up() -> None:
    img = Image.new("RGB", (3, 2), (0, 0, 0))
    img.putpixel((0, 0), (10, 20, 30))
    img.putpixel((2, 1), (40, 50, 60))

    raster = PillowImageDecoder().decode(_png_bytes(img))

    assert (raster.width, raster.height) == (3, 2)
    assert raster.pixel(0, 1) == Color(10, 20, 30)
    assert raster.pixel(2, 0) == Color(40, 50, 60)


def test_decoder_drops_alpha() -> None:
    rgba = Image.new("RGBA", (2, 2), (200, 50, 10, 128))
    raster = PillowImageDecoder().decode(_png_bytes(rgba))
    assert raster.pixel(1, 1) == Color(200, 50, 10)


def test_decoder_rejects_garbage() -> None:
    with pytest.raises(ImageDecodeError):
        PillowImageDecoder().decode(b"not an image")


def test_decoder_rejects_oversized_image(oversized_png: bytes) -> None:
    with pytest.raises(ImageDecodeError):
        PillowImageDecoder().decode(oversized_png)


def test_raster_buffer_validation() -> None:
    with pytest.raises(ValueError):
        RasterBuffer(width=2, height=2, data=b"\x00" * 11)
    with pytest.raises(ValueError):
        RasterBuffer.from_rows([])
    with pytest.raises(IndexError):
        RasterBuffer.filled(2, 2, (1, 2, 3)).pixel(2, 0)
