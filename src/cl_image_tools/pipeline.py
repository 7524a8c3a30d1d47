"""ImagePipeline - the raster operations bound to one settings instance."""

from .common.raster import ImageSource
from .config import DEFAULT_THUMBNAIL_SIZE, ImageToolsSettings, get_settings
from .plugins.image_decode.algo.image_decode import get_image_dimension, load_base64
from .plugins.image_decode.schema import DimensionDict, LoadedImage
from .plugins.image_resize.algo.image_resize import resize_image
from .plugins.image_thumbnail.algo.image_thumbnail import get_thumbnail
from .plugins.image_validation.algo.image_validation import (
    valid_image_dimension,
    valid_image_type,
)


class ImagePipeline:
    """
    Stateless facade over the validation, decode, resize and thumbnail algorithms.

    Settings are fixed at construction; every call allocates its own rasters
    and surfaces, so one pipeline can serve concurrent calls.
    """

    def __init__(self, settings: ImageToolsSettings | None = None):
        self._settings: ImageToolsSettings = settings if settings is not None else get_settings()

    @property
    def settings(self) -> ImageToolsSettings:
        return self._settings

    def valid_image_type(self, unit: object) -> bool:
        return valid_image_type(unit)

    def valid_image_dimension(self, width: object, height: object) -> bool:
        return valid_image_dimension(width, height)

    async def get_image_dimension(self, unit: object) -> DimensionDict:
        return await get_image_dimension(unit)

    async def load_base64(self, unit: object) -> LoadedImage:
        return await load_base64(unit, settings=self._settings)

    async def resize_image(self, source: ImageSource, out_width: int, out_height: int) -> str:
        return await resize_image(source, out_width, out_height, settings=self._settings)

    async def get_thumbnail(self, source: ImageSource, crop_size: int = DEFAULT_THUMBNAIL_SIZE) -> str:
        return await get_thumbnail(source, crop_size, settings=self._settings)
