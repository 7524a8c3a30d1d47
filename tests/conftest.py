"""Test configuration and fixtures for cl_image_tools.

This module provides:
- Synthetic image factories (JPEG/PNG bytes built with Pillow, no media files)
- Blob and file fixtures for the validation/decode/resize/thumbnail tests
- Settings isolation (cached settings are cleared around each test)
"""

import struct
import zlib
from collections.abc import Callable, Iterator
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from cl_image_tools import ImageBlob, get_settings

ImageFactory = Callable[..., bytes]

# ============================================================================
# Image Factories
# ============================================================================


def make_image_bytes(
    width: int,
    height: int,
    color: tuple[int, int, int] = (200, 60, 40),
    format: str = "JPEG",
) -> bytes:
    """Encode a solid-color image of the given size."""
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=format)
    return buffer.getvalue()


def make_banded_image_bytes(width: int, height: int, band: int) -> bytes:
    """Encode a green image with red bands of ``band`` pixels on the long-axis ends.

    Used to check that a cover-crop removes the ends of the longer axis.
    """
    img = Image.new("RGB", (width, height), (0, 255, 0))
    red = Image.new("RGB", (band, height) if width >= height else (width, band), (255, 0, 0))
    if width >= height:
        img.paste(red, (0, 0))
        img.paste(red, (width - band, 0))
    else:
        img.paste(red, (0, 0))
        img.paste(red, (0, height - band))

    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def make_oversized_png_bytes(width: int, height: int) -> bytes:
    """Encode a tiny PNG whose IHDR declares ``width x height``.

    The header is rewritten after encoding (with a matching CRC), so the
    file is small but Pillow sees the declared size on open.
    """
    buffer = BytesIO()
    Image.new("RGB", (8, 8), (0, 0, 255)).save(buffer, format="PNG")
    data = bytearray(buffer.getvalue())

    # signature (8) + length (4), then "IHDR" + 13 data bytes + CRC
    data[16:24] = struct.pack(">II", width, height)
    data[29:33] = struct.pack(">I", zlib.crc32(bytes(data[12:29])))
    return bytes(data)


@pytest.fixture
def image_factory() -> ImageFactory:
    """Factory fixture building encoded image bytes."""
    return make_image_bytes


@pytest.fixture
def banded_image_factory() -> ImageFactory:
    """Factory fixture building green images with red long-axis ends."""
    return make_banded_image_bytes


@pytest.fixture
def oversized_png_factory() -> Callable[[int, int], bytes]:
    """Factory fixture building tiny PNGs that declare a huge size."""
    return make_oversized_png_bytes


# ============================================================================
# Blob / File Fixtures
# ============================================================================


@pytest.fixture
def jpeg_blob() -> ImageBlob:
    """400x200 JPEG blob (valid 2:1 panorama)."""
    return ImageBlob(data=make_image_bytes(400, 200), mime_type="image/jpeg")


@pytest.fixture
def png_blob() -> ImageBlob:
    """120x80 PNG blob."""
    return ImageBlob(data=make_image_bytes(120, 80, format="PNG"), mime_type="image/png")


@pytest.fixture
def corrupt_blob() -> ImageBlob:
    """Blob declared as JPEG whose bytes are not an image."""
    return ImageBlob(data=b"definitely not a jpeg", mime_type="image/jpeg")


@pytest.fixture
def sample_image_path(tmp_path: Path) -> Path:
    """300x150 JPEG written to a temporary file."""
    path = tmp_path / "sample.jpg"
    _ = path.write_bytes(make_image_bytes(300, 150))
    return path


# ============================================================================
# Settings Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make environment changes in a test visible to ``get_settings``."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
