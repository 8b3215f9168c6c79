"""External collaborators: file access, image decoding and localization."""

from .filesystem import FileReader, LocalFileReader
from .imaging import ImageDecodeError, ImageDecoder, PillowImageDecoder, RasterBuffer
from .localization import Localizer, MappingLocalizer

__all__ = [
    "FileReader",
    "ImageDecodeError",
    "ImageDecoder",
    "Localizer",
    "LocalFileReader",
    "MappingLocalizer",
    "PillowImageDecoder",
    "RasterBuffer",
]
