"""ImageBlob - binary payload with a declared MIME type."""

from __future__ import annotations

from io import BytesIO
from os import PathLike
from pathlib import Path
from typing import ClassVar

from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, ConfigDict, Field

from ..utils.data_url import encode_data_url


class ImageBlob(BaseModel):
    """Opaque image bytes plus the MIME type the uploader declared.

    The declared type is trusted as-is; nothing here sniffs the content
    unless the blob is built with ``from_path`` and no type is given.
    """

    data: bytes = Field(..., description="Raw file bytes")
    mime_type: str = Field(default="", description="Declared MIME type (may be empty)")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        """Equivalent of ``FileReader.readAsDataURL``."""
        return encode_data_url(self.data, self.mime_type or "application/octet-stream")

    @classmethod
    def from_path(cls, path: str | PathLike[str], mime_type: str | None = None) -> ImageBlob:
        """
        Read a file into a blob.

        Args:
            path: File to read
            mime_type: Declared type. When None, the type Pillow reports for the
                file content is used, or "" if Pillow cannot identify it.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        data = path.read_bytes()
        if mime_type is None:
            mime_type = _detect_mime(data)
        return cls(data=data, mime_type=mime_type)


def _detect_mime(data: bytes) -> str:
    try:
        with Image.open(BytesIO(data)) as img:
            return Image.MIME.get(img.format or "", "")
    except (UnidentifiedImageError, OSError):
        return ""
