"""Image decode result schemas."""

from typing import ClassVar, TypedDict

from pydantic import BaseModel, ConfigDict, Field

from ...common.raster import DecodedRaster


class DimensionDict(TypedDict, total=False):
    """Natural image size; empty when the image could not be read."""

    width: int
    height: int


class ImageDimension(BaseModel):
    """Natural pixel size of an image."""

    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def as_dict(self) -> DimensionDict:
        return {"width": self.width, "height": self.height}


class LoadedImage(BaseModel):
    """Result of ``load_base64``.

    Attributes:
        image: Raster decoded back from ``image_base64``
        image_base64: JPEG data URI of the (possibly clamped) image
        width: Final width in pixels
        height: Final height in pixels
    """

    image: DecodedRaster
    image_base64: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(arbitrary_types_allowed=True, frozen=True)
