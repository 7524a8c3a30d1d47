"""Upload validation: declared MIME type and 2:1 even dimensions."""

from ....common.blob import ImageBlob
from ....config import SUPPORTED_MIME_TYPE


def valid_image_type(unit: object) -> bool:
    """True only for an ImageBlob declared as ``image/jpeg``."""
    return isinstance(unit, ImageBlob) and unit.mime_type == SUPPORTED_MIME_TYPE


def valid_image_dimension(width: object, height: object) -> bool:
    """
    Check the panorama size contract: both sides even and width exactly twice height.

    Args:
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        True if ``width % 2 == 0``, ``height % 2 == 0`` and ``width / height == 2``
    """
    if isinstance(width, bool) or isinstance(height, bool):
        return False
    if not isinstance(width, int | float) or not isinstance(height, int | float):
        return False
    if height == 0:
        return False

    return width % 2 == 0 and height % 2 == 0 and width / height == 2
