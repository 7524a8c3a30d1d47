"""Image thumbnail plugin."""

from .algo.image_thumbnail import compute_crop_region, get_thumbnail
from .schema import CropRegion

__all__ = ["get_thumbnail", "compute_crop_region", "CropRegion"]
