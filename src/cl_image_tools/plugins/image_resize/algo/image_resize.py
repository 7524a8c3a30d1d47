"""Pure stretch-resize computation logic (single file)."""

from loguru import logger

from ....common.raster import ImageSource, Surface, decode_raster, render_data_url, verify_encoded
from ....config import ImageToolsSettings, get_settings
from ....utils.profiling import timed


@timed
async def resize_image(
    source: ImageSource,
    out_width: int,
    out_height: int,
    *,
    settings: ImageToolsSettings | None = None,
) -> str:
    """
    Stretch the whole source image to exactly ``out_width x out_height``.

    The aspect ratio is not preserved and nothing is cropped.

    Args:
        source: ImageBlob, raw bytes, data URI or file path
        out_width: Output width in pixels
        out_height: Output height in pixels
        settings: Encoder settings (defaults to ``get_settings()``)

    Returns:
        JPEG data URI of the resized image

    Raises:
        FileNotFoundError: If a path source does not exist
        ImageDecodeError: If the source cannot be decoded
        ValueError: If the output size is not a positive integer pair
        ImageEncodeError: If the output cannot be encoded or decoded back
    """
    if settings is None:
        settings = get_settings()

    raster = await decode_raster(source)

    surface = Surface(out_width, out_height)
    image_base64 = await render_data_url(
        surface,
        raster,
        (0, 0, raster.width, raster.height),
        (0, 0, out_width, out_height),
        settings.jpeg_quality,
    )
    _ = await verify_encoded(image_base64)

    logger.debug(f"Resized {raster.width}x{raster.height} -> {out_width}x{out_height}")
    return image_base64
