"""Configuration for cl_image_tools using pydantic-settings.

Size caps and encoder quality are read once from the environment
(prefix ``CL_IMAGE_TOOLS_``) or a ``.env`` file and frozen afterwards.
Algorithms receive them as an injected ``ImageToolsSettings`` instance.
"""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_WIDTH = 1024 * 8
MAX_HEIGHT = 1024 * 4

SUPPORTED_MIME_TYPE = "image/jpeg"

DEFAULT_THUMBNAIL_SIZE = 256
DEFAULT_SLICE_SIZE = 512

# Matches the browser default of 0.92 for canvas.toDataURL("image/jpeg")
DEFAULT_JPEG_QUALITY = 92


class ImageToolsSettings(BaseSettings):
    """Immutable settings shared by the raster pipeline.

    Attributes:
        max_width: Width cap applied by ``load_base64`` to oversized originals
        max_height: Height cap applied by ``load_base64`` to oversized originals
        jpeg_quality: Pillow JPEG quality used when encoding surfaces
    """

    max_width: int = Field(default=MAX_WIDTH, gt=0)
    max_height: int = Field(default=MAX_HEIGHT, gt=0)
    jpeg_quality: int = Field(default=DEFAULT_JPEG_QUALITY, ge=1, le=100)

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="CL_IMAGE_TOOLS_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> ImageToolsSettings:
    """Get the cached process-wide settings instance."""
    return ImageToolsSettings()
