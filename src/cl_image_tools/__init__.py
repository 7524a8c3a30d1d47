"""cl_image_tools - Image validation, decoding, resizing and thumbnailing to JPEG data URIs."""

from .algorithms import (
    CropRegion,
    DecodedRaster,
    DimensionDict,
    ImageBlob,
    ImageDimension,
    ImageSource,
    LoadedImage,
    Surface,
    base64_to_binary,
    compute_crop_region,
    decode_data_url,
    decode_raster,
    encode_data_url,
    get_image_dimension,
    get_thumbnail,
    load_base64,
    render_data_url,
    resize_image,
    strip_data_url_prefix,
    valid_image_dimension,
    valid_image_type,
)
from .common.errors import ImageDecodeError, ImageEncodeError, ImageToolsError, NotABlobError
from .config import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_SLICE_SIZE,
    DEFAULT_THUMBNAIL_SIZE,
    MAX_HEIGHT,
    MAX_WIDTH,
    SUPPORTED_MIME_TYPE,
    ImageToolsSettings,
    get_settings,
)
from .pipeline import ImagePipeline

__version__ = "0.1.0"

__all__ = [
    "valid_image_type",
    "valid_image_dimension",
    "get_image_dimension",
    "load_base64",
    "resize_image",
    "get_thumbnail",
    "compute_crop_region",
    "strip_data_url_prefix",
    "base64_to_binary",
    "encode_data_url",
    "decode_data_url",
    "decode_raster",
    "render_data_url",
    "ImageBlob",
    "ImageSource",
    "DecodedRaster",
    "Surface",
    "CropRegion",
    "DimensionDict",
    "ImageDimension",
    "LoadedImage",
    "ImagePipeline",
    "ImageToolsSettings",
    "get_settings",
    "ImageToolsError",
    "ImageDecodeError",
    "ImageEncodeError",
    "NotABlobError",
    "MAX_WIDTH",
    "MAX_HEIGHT",
    "SUPPORTED_MIME_TYPE",
    "DEFAULT_THUMBNAIL_SIZE",
    "DEFAULT_SLICE_SIZE",
    "DEFAULT_JPEG_QUALITY",
    "__version__",
]
