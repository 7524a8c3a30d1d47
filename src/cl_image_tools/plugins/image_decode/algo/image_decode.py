"""Image decode logic: natural dimensions and size-capped re-encoding."""

from loguru import logger

from ....common.blob import ImageBlob
from ....common.errors import ImageDecodeError, NotABlobError
from ....common.raster import Surface, decode_raster, render_data_url, verify_encoded
from ....config import ImageToolsSettings, get_settings
from ....utils.profiling import timed
from ..schema import DimensionDict, ImageDimension, LoadedImage


@timed
async def get_image_dimension(unit: object) -> DimensionDict:
    """
    Read the natural width and height of a blob.

    Never raises: non-blob input and undecodable content both give ``{}``.

    Args:
        unit: Candidate ImageBlob

    Returns:
        ``{"width": w, "height": h}`` on success, otherwise an empty dict
    """
    if not isinstance(unit, ImageBlob):
        return {}

    try:
        raster = await decode_raster(unit)
    except ImageDecodeError as exc:
        logger.warning(f"Could not read image dimensions: {exc}")
        return {}

    return ImageDimension(width=raster.width, height=raster.height).as_dict()


@timed
async def load_base64(
    unit: object,
    *,
    settings: ImageToolsSettings | None = None,
) -> LoadedImage:
    """
    Decode a blob, cap its size and re-encode it as a JPEG data URI.

    If either natural dimension exceeds the configured cap, BOTH dimensions
    are replaced by the cap values; the aspect ratio is not preserved.

    Args:
        unit: ImageBlob to load
        settings: Size caps and encoder quality (defaults to ``get_settings()``)

    Returns:
        LoadedImage with the verified raster, data URI and final size

    Raises:
        NotABlobError: If unit is not an ImageBlob
        ImageDecodeError: If the blob cannot be decoded
        ImageEncodeError: If the re-encoded image cannot be decoded back
    """
    if not isinstance(unit, ImageBlob):
        raise NotABlobError(unit)

    if settings is None:
        settings = get_settings()

    raster = await decode_raster(unit.to_data_url())

    image_width, image_height = raster.width, raster.height
    if image_width > settings.max_width or image_height > settings.max_height:
        logger.warning(
            f"Image {image_width}x{image_height} exceeds cap, "
            + f"clamping to {settings.max_width}x{settings.max_height}"
        )
        image_width = settings.max_width
        image_height = settings.max_height

    surface = Surface(image_width, image_height)
    image_base64 = await render_data_url(
        surface,
        raster,
        (0, 0, raster.width, raster.height),
        (0, 0, image_width, image_height),
        settings.jpeg_quality,
    )
    image = await verify_encoded(image_base64)

    return LoadedImage(
        image=image,
        image_base64=image_base64,
        width=image_width,
        height=image_height,
    )
