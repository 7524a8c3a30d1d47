"""Base64 / data URI helpers shared by the raster pipeline."""

from __future__ import annotations

import base64
import binascii
import re
from typing import TYPE_CHECKING

from ..config import DEFAULT_SLICE_SIZE, SUPPORTED_MIME_TYPE

if TYPE_CHECKING:
    from ..common.blob import ImageBlob

_IMAGE_PREFIX_PATTERN = re.compile(r"^data:image/(png|jpeg|jpg);base64,")

_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[^;,]*)(?P<params>(;[^;,]*)*),(?P<payload>.*)$", re.DOTALL)

_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


def strip_data_url_prefix(data_url: str) -> str:
    """Remove a leading ``data:image/(png|jpeg|jpg);base64,`` prefix.

    Strings without that prefix are returned unchanged.
    """
    return _IMAGE_PREFIX_PATTERN.sub("", data_url, count=1)


def _b64decode(payload: str) -> bytes:
    """Decode base64 the way a browser's ``atob`` does.

    ASCII whitespace is ignored and missing ``=`` padding is tolerated.
    """
    payload = _ASCII_WHITESPACE.sub("", payload)
    if len(payload) % 4 == 1:
        raise ValueError("Invalid base64 payload: truncated input")

    try:
        return base64.b64decode(payload + "=" * (-len(payload) % 4), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def encode_data_url(data: bytes, mime_type: str) -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def base64_to_binary(data_url: str, slice_size: int = DEFAULT_SLICE_SIZE) -> ImageBlob:
    """
    Decode a JPEG/PNG data URI (or bare base64 payload) into a jpeg-tagged blob.

    The decoded bytes are assembled ``slice_size`` bytes at a time. The
    chunking has no effect on the output bytes.

    Args:
        data_url: Data URI or bare base64 string
        slice_size: Chunk size in bytes used while assembling the output

    Returns:
        ImageBlob tagged ``image/jpeg``

    Raises:
        ValueError: If slice_size is not positive or the payload is not valid base64
    """
    from ..common.blob import ImageBlob

    if slice_size <= 0:
        raise ValueError(f"slice_size must be positive, got {slice_size}")

    byte_characters = _b64decode(strip_data_url_prefix(data_url))

    byte_arrays: list[bytes] = []
    for offset in range(0, len(byte_characters), slice_size):
        byte_arrays.append(bytes(byte_characters[offset : offset + slice_size]))

    return ImageBlob(data=b"".join(byte_arrays), mime_type=SUPPORTED_MIME_TYPE)


def decode_data_url(data_url: str) -> ImageBlob:
    """Parse ``data:<mime>[;...];base64,<payload>`` into a blob carrying that MIME type.

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    from ..common.blob import ImageBlob

    match = _DATA_URL_PATTERN.match(data_url)
    if match is None:
        raise ValueError("Not a data URI")

    params = [p for p in match.group("params").split(";") if p]
    if "base64" not in params:
        raise ValueError("Only base64 data URIs are supported")

    data = _b64decode(match.group("payload"))

    return ImageBlob(data=data, mime_type=match.group("mime"))
