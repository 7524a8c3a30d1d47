"""Public algorithm API for cl_image_tools.

Example:
    Validate an upload and derive the full image and thumbnail::

        import asyncio

        from cl_image_tools.algorithms import (
            ImageBlob,
            get_image_dimension,
            get_thumbnail,
            load_base64,
            valid_image_dimension,
            valid_image_type,
        )

        blob = ImageBlob.from_path("panorama.jpg")
        if valid_image_type(blob):
            dims = asyncio.run(get_image_dimension(blob))
            if dims and valid_image_dimension(dims["width"], dims["height"]):
                loaded = asyncio.run(load_base64(blob))
                thumb = asyncio.run(get_thumbnail(loaded.image_base64))

    Round-trip a data URI back to bytes::

        from cl_image_tools.algorithms import base64_to_binary

        blob = base64_to_binary(thumb)
        with open("thumb.jpg", "wb") as f:
            f.write(blob.data)
"""

# Blobs and rasters
from .common.blob import ImageBlob
from .common.raster import DecodedRaster, ImageSource, Surface, decode_raster, render_data_url

# Decode
from .plugins.image_decode.algo.image_decode import (
    get_image_dimension,
    load_base64,
)
from .plugins.image_decode.schema import (
    DimensionDict,
    ImageDimension,
    LoadedImage,
)

# Resize
from .plugins.image_resize.algo.image_resize import (
    resize_image,
)

# Thumbnail
from .plugins.image_thumbnail.algo.image_thumbnail import (
    compute_crop_region,
    get_thumbnail,
)
from .plugins.image_thumbnail.schema import (
    CropRegion,
)

# Validation
from .plugins.image_validation.algo.image_validation import (
    valid_image_dimension,
    valid_image_type,
)

# Data URI helpers
from .utils.data_url import (
    base64_to_binary,
    decode_data_url,
    encode_data_url,
    strip_data_url_prefix,
)

__all__ = [
    # Validation
    "valid_image_type",
    "valid_image_dimension",
    # Decode
    "get_image_dimension",
    "load_base64",
    "DimensionDict",
    "ImageDimension",
    "LoadedImage",
    # Resize / Thumbnail
    "resize_image",
    "get_thumbnail",
    "compute_crop_region",
    "CropRegion",
    # Blobs and rasters
    "ImageBlob",
    "ImageSource",
    "DecodedRaster",
    "Surface",
    "decode_raster",
    "render_data_url",
    # Data URI helpers
    "strip_data_url_prefix",
    "base64_to_binary",
    "encode_data_url",
    "decode_data_url",
]
