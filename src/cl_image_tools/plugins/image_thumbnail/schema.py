"""Thumbnail crop geometry schema."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class CropRegion(BaseModel):
    """Arguments for the thumbnail ``draw_image`` call.

    The source rect starts at (sx, sy) and spans the full source size; the
    destination rect starts at (0, 0) and spans (dw, dh). Whatever falls
    outside the source or the square canvas is clipped away.
    """

    sx: int = Field(..., ge=0, description="Source x offset")
    sy: int = Field(..., ge=0, description="Source y offset")
    sw: int = Field(..., gt=0, description="Source rect width")
    sh: int = Field(..., gt=0, description="Source rect height")
    dw: float = Field(..., gt=0, description="Destination draw width")
    dh: float = Field(..., gt=0, description="Destination draw height")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def visible_source_box(self, crop_size: int) -> tuple[float, float, float, float]:
        """Source pixels that land on a ``crop_size`` square canvas, as (left, top, right, bottom)."""
        right = min(self.sx + crop_size * self.sw / self.dw, self.sw)
        bottom = min(self.sy + crop_size * self.sh / self.dh, self.sh)
        return (self.sx, self.sy, right, bottom)
