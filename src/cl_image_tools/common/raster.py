"""
Raster primitives used by the pipeline.

- ``DecodedRaster``: a loaded, dimensioned Pillow image
- ``decode_raster``: asynchronous decode of any supported image source
- ``Surface``: an RGBA drawing surface with canvas ``drawImage`` clipping rules
- ``render_data_url``: draw then JPEG-encode a surface in a worker thread
"""

from __future__ import annotations

import asyncio
from io import BytesIO
from os import PathLike
from pathlib import Path

import numpy as np
from loguru import logger
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from ..config import DEFAULT_JPEG_QUALITY, SUPPORTED_MIME_TYPE
from ..utils.data_url import decode_data_url, encode_data_url
from .blob import ImageBlob
from .errors import ImageDecodeError, ImageEncodeError

ImageSource = ImageBlob | bytes | str | PathLike[str]
Rect = tuple[float, float, float, float]


class DecodedRaster:
    """A decoded image with its natural dimensions."""

    def __init__(self, image: Image.Image):
        self._image: Image.Image = image

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def pixels(self) -> NDArray[np.uint8]:
        """Pixel data as an (height, width, channels) uint8 array."""
        return np.asarray(self._image.convert("RGBA"), dtype=np.uint8)

    def __repr__(self) -> str:
        return f"DecodedRaster(width={self.width}, height={self.height}, mode={self._image.mode!r})"


def _read_source(source: ImageSource) -> BytesIO | Path:
    if isinstance(source, ImageBlob):
        return BytesIO(source.data)
    if isinstance(source, bytes):
        return BytesIO(source)
    if isinstance(source, str) and source.startswith("data:"):
        try:
            return BytesIO(decode_data_url(source).data)
        except ValueError as exc:
            raise ImageDecodeError(f"Malformed data URI: {exc}") from exc

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path


def _decode(source: ImageSource) -> DecodedRaster:
    fp = _read_source(source)
    try:
        with Image.open(fp) as img:
            img.load()
            image_format = img.format
            image = img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"Failed to decode image: {exc}") from exc

    logger.debug(f"Decoded {image_format} {image.width}x{image.height} ({image.mode})")
    return DecodedRaster(image)


async def decode_raster(source: ImageSource) -> DecodedRaster:
    """
    Decode an image source into a raster without blocking the event loop.

    Args:
        source: ImageBlob, raw bytes, data URI string or file path

    Returns:
        DecodedRaster holding the first frame

    Raises:
        FileNotFoundError: If a path source does not exist
        ImageDecodeError: If the content cannot be decoded
    """
    return await asyncio.to_thread(_decode, source)


async def verify_encoded(data_url: str) -> DecodedRaster:
    """Decode freshly encoded output back into a raster.

    Raises:
        ImageEncodeError: If the encoded data URI does not decode
    """
    try:
        return await decode_raster(data_url)
    except ImageDecodeError as exc:
        raise ImageEncodeError(f"Encoded output failed to decode back: {exc}") from exc


class Surface:
    """RGBA drawing surface, initially transparent black."""

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError(f"Surface dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")

        self.width: int = width
        self.height: int = height
        self._image: Image.Image = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    @property
    def image(self) -> Image.Image:
        return self._image

    def draw_image(
        self,
        raster: DecodedRaster,
        sx: float,
        sy: float,
        sw: float,
        sh: float,
        dx: float,
        dy: float,
        dw: float,
        dh: float,
    ) -> None:
        """
        Draw the source rect (sx, sy, sw, sh) of ``raster`` into the destination
        rect (dx, dy, dw, dh) of the surface.

        The source rect is clipped to the raster bounds, shrinking the
        destination rect in proportion, and the destination is clipped to the
        surface. Empty rects draw nothing.
        """
        if sw <= 0 or sh <= 0 or dw <= 0 or dh <= 0:
            return

        scale_x = dw / sw
        scale_y = dh / sh

        # Clip source to raster bounds
        src_x0 = max(sx, 0)
        src_y0 = max(sy, 0)
        src_x1 = min(sx + sw, raster.width)
        src_y1 = min(sy + sh, raster.height)
        if src_x1 <= src_x0 or src_y1 <= src_y0:
            return

        dst_x0 = dx + (src_x0 - sx) * scale_x
        dst_y0 = dy + (src_y0 - sy) * scale_y
        dst_x1 = dx + (src_x1 - sx) * scale_x
        dst_y1 = dy + (src_y1 - sy) * scale_y

        # Clip destination to surface bounds
        clip_x0 = max(dst_x0, 0)
        clip_y0 = max(dst_y0, 0)
        clip_x1 = min(dst_x1, self.width)
        clip_y1 = min(dst_y1, self.height)

        left, top = round(clip_x0), round(clip_y0)
        right, bottom = round(clip_x1), round(clip_y1)
        if right <= left or bottom <= top:
            return

        box = (
            src_x0 + (clip_x0 - dst_x0) / scale_x,
            src_y0 + (clip_y0 - dst_y0) / scale_y,
            src_x0 + (clip_x1 - dst_x0) / scale_x,
            src_y0 + (clip_y1 - dst_y0) / scale_y,
        )

        patch = raster.image.convert("RGBA").resize(
            (right - left, bottom - top),
            Image.Resampling.LANCZOS,
            box=box,
        )
        self._image.alpha_composite(patch, dest=(left, top))

    def to_data_url(self, quality: int = DEFAULT_JPEG_QUALITY) -> str:
        """
        Encode the surface as a JPEG data URI.

        Transparent pixels are flattened onto black, matching canvas JPEG export.

        Raises:
            ImageEncodeError: If Pillow fails to save the surface
        """
        flattened = Image.new("RGB", self._image.size, (0, 0, 0))
        flattened.paste(self._image, mask=self._image.getchannel("A"))

        buffer = BytesIO()
        try:
            flattened.save(buffer, format="JPEG", quality=quality)
        except (OSError, ValueError) as exc:
            raise ImageEncodeError(f"Failed to encode surface: {exc}") from exc

        logger.debug(f"Encoded {self.width}x{self.height} surface as JPEG ({buffer.tell()} bytes)")
        return encode_data_url(buffer.getvalue(), SUPPORTED_MIME_TYPE)


def _draw_and_encode(surface: Surface, raster: DecodedRaster, source: Rect, dest: Rect, quality: int) -> str:
    surface.draw_image(raster, *source, *dest)
    return surface.to_data_url(quality=quality)


async def render_data_url(
    surface: Surface,
    raster: DecodedRaster,
    source: Rect,
    dest: Rect,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> str:
    """
    Draw ``raster`` onto ``surface`` and encode the result without blocking the event loop.

    Args:
        surface: Target surface
        raster: Decoded source image
        source: Source rect (sx, sy, sw, sh)
        dest: Destination rect (dx, dy, dw, dh)
        quality: JPEG quality

    Returns:
        JPEG data URI of the surface

    Raises:
        ImageEncodeError: If Pillow fails to save the surface
    """
    return await asyncio.to_thread(_draw_and_encode, surface, raster, source, dest, quality)
