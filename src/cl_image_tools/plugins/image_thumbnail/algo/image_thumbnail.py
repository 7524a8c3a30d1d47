"""Pure square thumbnail computation logic (single file)."""

import math

from loguru import logger

from ....common.raster import ImageSource, Surface, decode_raster, render_data_url, verify_encoded
from ....config import DEFAULT_THUMBNAIL_SIZE, ImageToolsSettings, get_settings
from ....utils.profiling import timed
from ..schema import CropRegion


def compute_crop_region(width: int, height: int, crop_size: int = DEFAULT_THUMBNAIL_SIZE) -> CropRegion:
    """
    Compute the centered cover-crop for a ``crop_size`` square.

    The longer side is offset by half the size difference and the draw size
    is scaled by the aspect ratio so the shorter side exactly fills the square.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        crop_size: Side of the square output

    Returns:
        CropRegion to pass to ``Surface.draw_image``
    """
    sx = sy = 0
    dw = dh = float(crop_size)
    ratio = width / height
    diff = math.floor(abs(width - height) / 2)

    if width > height:
        sx = diff
        dw = dh * ratio
    elif height > width:
        sy = diff
        dh = dw / ratio

    return CropRegion(sx=sx, sy=sy, sw=width, sh=height, dw=dw, dh=dh)


@timed
async def get_thumbnail(
    source: ImageSource,
    crop_size: int = DEFAULT_THUMBNAIL_SIZE,
    *,
    settings: ImageToolsSettings | None = None,
) -> str:
    """
    Create a ``crop_size x crop_size`` center-cropped thumbnail.

    Args:
        source: ImageBlob, raw bytes, data URI or file path
        crop_size: Side of the square thumbnail (default 256)
        settings: Encoder settings (defaults to ``get_settings()``)

    Returns:
        JPEG data URI of the thumbnail

    Raises:
        FileNotFoundError: If a path source does not exist
        ImageDecodeError: If the source cannot be decoded
        ValueError: If crop_size is not a positive integer
        ImageEncodeError: If the output cannot be encoded or decoded back
    """
    if settings is None:
        settings = get_settings()

    raster = await decode_raster(source)

    surface = Surface(crop_size, crop_size)
    region = compute_crop_region(raster.width, raster.height, crop_size)
    image_base64 = await render_data_url(
        surface,
        raster,
        (region.sx, region.sy, region.sw, region.sh),
        (0, 0, region.dw, region.dh),
        settings.jpeg_quality,
    )
    _ = await verify_encoded(image_base64)

    left, top, right, bottom = region.visible_source_box(crop_size)
    logger.debug(
        f"Thumbnail {raster.width}x{raster.height} -> {crop_size}x{crop_size} "
        + f"from source box ({left}, {top}, {right:.1f}, {bottom:.1f})"
    )
    return image_base64
