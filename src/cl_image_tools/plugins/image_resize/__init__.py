"""Image resize plugin."""

from .algo.image_resize import resize_image

__all__ = ["resize_image"]
