"""Exceptions raised by the raster pipeline."""


class ImageToolsError(Exception):
    """Base class for cl_image_tools errors."""


class ImageDecodeError(ImageToolsError):
    """Source could not be decoded into a raster."""


class ImageEncodeError(ImageToolsError):
    """Surface could not be encoded, or the encoded output failed to decode back."""


class NotABlobError(ImageToolsError, TypeError):
    def __init__(self, value: object):
        self.value: object = value
        super().__init__("Not a Blob")
