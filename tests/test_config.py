"""Unit tests for ImageToolsSettings and the cached settings accessor."""

import pytest
from pydantic import ValidationError

from cl_image_tools import (
    DEFAULT_JPEG_QUALITY,
    MAX_HEIGHT,
    MAX_WIDTH,
    SUPPORTED_MIME_TYPE,
    ImageToolsSettings,
    get_settings,
)


def test_constants():
    """Test the public size and type constants."""
    assert MAX_WIDTH == 8192
    assert MAX_HEIGHT == 4096
    assert SUPPORTED_MIME_TYPE == "image/jpeg"
    assert DEFAULT_JPEG_QUALITY == 92


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Test settings default to the public constants."""
    for name in ("MAX_WIDTH", "MAX_HEIGHT", "JPEG_QUALITY"):
        monkeypatch.delenv(f"CL_IMAGE_TOOLS_{name}", raising=False)

    settings = ImageToolsSettings()

    assert settings.max_width == MAX_WIDTH
    assert settings.max_height == MAX_HEIGHT
    assert settings.jpeg_quality == DEFAULT_JPEG_QUALITY


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test CL_IMAGE_TOOLS_* environment variables override defaults."""
    monkeypatch.setenv("CL_IMAGE_TOOLS_MAX_WIDTH", "2048")
    monkeypatch.setenv("CL_IMAGE_TOOLS_JPEG_QUALITY", "75")

    settings = get_settings()

    assert settings.max_width == 2048
    assert settings.jpeg_quality == 75


def test_settings_are_frozen():
    """Test settings cannot be mutated after construction."""
    settings = ImageToolsSettings()

    with pytest.raises(ValidationError):
        settings.max_width = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [{"max_width": 0}, {"max_height": -1}, {"jpeg_quality": 0}, {"jpeg_quality": 101}],
)
def test_settings_validation(kwargs: dict[str, int]):
    """Test out-of-range settings are rejected."""
    with pytest.raises(ValidationError):
        _ = ImageToolsSettings(**kwargs)


def test_get_settings_is_cached():
    """Test get_settings returns the same instance."""
    assert get_settings() is get_settings()
