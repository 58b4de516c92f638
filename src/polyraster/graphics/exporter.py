"""PNG export for pixel buffers."""

import logging
from pathlib import Path
from typing import Tuple, Union

from polyraster.core.errors import ImageEncodingError, ImageWriteError
from polyraster.graphics.framebuffer import PixelBuffer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ImageExporter:
    """
    Writes pixel data to 8-bit RGB PNG files using Pillow.

    Exporting never modifies the source buffer and can be repeated
    any number of times.

    Usage:
        exporter = ImageExporter()
        exporter.export(buffer, "polygons.png")
    """

    def __init__(self, image_format: str = "PNG") -> None:
        self.image_format = image_format

    def export(self, buffer: PixelBuffer, path: PathLike) -> Path:
        """Write a pixel buffer to an image file.

        Returns:
            Path of the written file

        Raises:
            ImageEncodingError: If the buffer cannot be encoded
            ImageWriteError: If the file cannot be written
        """
        return self.export_bytes(buffer.to_rgb_bytes(), buffer.width, buffer.height, path)

    def export_bytes(self, data: bytes, width: int, height: int, path: PathLike) -> Path:
        """Write raw row-major RGB bytes to an image file.

        Args:
            data: RGB bytes, 3 per pixel
            width: Image width in pixels
            height: Image height in pixels
            path: Destination file

        Returns:
            Path of the written file
        """
        from PIL import Image

        if width <= 0 or height <= 0:
            raise ImageEncodingError(f"Invalid image size {width}x{height}")

        expected = width * height * 3
        if len(data) != expected:
            raise ImageEncodingError(
                f"Expected {expected} bytes for {width}x{height} RGB, got {len(data)}"
            )

        path = Path(path)
        img = Image.frombytes("RGB", (width, height), bytes(data))

        try:
            img.save(path, format=self.image_format)
        except OSError as e:
            raise ImageWriteError(f"Failed to write {path}: {e}") from e

        logger.info(f"Image saved as {path}")
        return path


def load_rgb_bytes(path: PathLike) -> Tuple[int, int, bytes]:
    """Read an image file back as (width, height, rgb_bytes)."""
    from PIL import Image

    with Image.open(path) as img:
        rgb = img.convert("RGB")
        width, height = rgb.size
        return width, height, rgb.tobytes()
