"""Image decode plugin."""

from .algo.image_decode import get_image_dimension, load_base64
from .schema import DimensionDict, ImageDimension, LoadedImage

__all__ = ["get_image_dimension", "load_base64", "DimensionDict", "ImageDimension", "LoadedImage"]
