"""Image validation plugin."""

from .algo.image_validation import valid_image_dimension, valid_image_type

__all__ = ["valid_image_type", "valid_image_dimension"]
