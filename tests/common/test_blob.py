"""Unit tests for ImageBlob.

Uses synthetic data (Pillow-encoded bytes) written to temporary files where needed.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from cl_image_tools import ImageBlob, decode_data_url


def test_image_blob_defaults():
    """Test a blob without declared type has an empty MIME type."""
    blob = ImageBlob(data=b"abc")

    assert blob.mime_type == ""
    assert blob.size == 3


def test_image_blob_is_frozen():
    """Test blobs are immutable."""
    blob = ImageBlob(data=b"abc", mime_type="image/jpeg")

    with pytest.raises(ValidationError):
        blob.mime_type = "image/png"  # type: ignore[misc]


def test_to_data_url_uses_declared_type(png_blob: ImageBlob):
    """Test the data URI carries the declared type and round-trips the bytes."""
    data_url = png_blob.to_data_url()

    assert data_url.startswith("data:image/png;base64,")
    assert decode_data_url(data_url) == png_blob


def test_to_data_url_untyped_blob():
    """Test an untyped blob is exported as application/octet-stream."""
    assert ImageBlob(data=b"\x00\x01").to_data_url() == "data:application/octet-stream;base64,AAE="


def test_from_path_detects_jpeg(sample_image_path: Path):
    """Test the MIME type is detected from JPEG content."""
    blob = ImageBlob.from_path(sample_image_path)

    assert blob.mime_type == "image/jpeg"
    assert blob.data == sample_image_path.read_bytes()


def test_from_path_detects_png(tmp_path: Path, image_factory: Callable[..., bytes]):
    """Test detection follows content, not the file extension."""
    path = tmp_path / "actually_png.jpg"
    _ = path.write_bytes(image_factory(10, 10, format="PNG"))

    assert ImageBlob.from_path(path).mime_type == "image/png"


def test_from_path_unknown_content(tmp_path: Path):
    """Test unidentifiable content gets an empty type."""
    path = tmp_path / "notes.txt"
    _ = path.write_text("hello")

    assert ImageBlob.from_path(path).mime_type == ""


def test_from_path_explicit_type(sample_image_path: Path):
    """Test an explicit type overrides detection."""
    assert ImageBlob.from_path(sample_image_path, mime_type="image/png").mime_type == "image/png"


def test_from_path_missing(tmp_path: Path):
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        _ = ImageBlob.from_path(tmp_path / "missing.jpg")
