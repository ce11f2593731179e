"""Tests for converter configuration.

Covers:
- Default values match the named constants
- Loading from environment variables
- Type coercion (comma-separated env vars → integer tuples)
- Fail-fast validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from kml_czml.core.config import ConfigValidationError, ConverterConfig
from kml_czml.core.constants import DEFAULT_IMAGE


class TestConverterConfigDefaults:
    """Verify default configuration values."""

    def test_default_begin(self) -> None:
        cfg = ConverterConfig()
        assert cfg.default_begin == "2000-01-01T00:00:00Z"

    def test_no_open_end_sentinel(self) -> None:
        cfg = ConverterConfig()
        assert cfg.open_end_sentinel is None

    def test_default_image_is_data_uri(self) -> None:
        cfg = ConverterConfig()
        assert cfg.default_image == DEFAULT_IMAGE
        assert cfg.default_image.startswith("data:image/png;base64,")

    def test_default_material(self) -> None:
        cfg = ConverterConfig()
        assert cfg.color_rgba == (255, 255, 255, 255)
        assert cfg.image_repeat == (1, 1)
        assert cfg.image_media_type == "image/png"

    def test_default_header(self) -> None:
        cfg = ConverterConfig()
        assert cfg.document_name == "KML to CZML Conversion with Image Overlay"
        assert cfg.document_version == "1.0"


class TestConverterConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "CZML_DEFAULT_BEGIN": "1970-01-01T00:00:00Z",
            "CZML_OPEN_END_SENTINEL": "2100-01-01T00:00:00Z",
            "CZML_DEFAULT_IMAGE": "data:image/gif;base64,R0lGODlh",
            "CZML_IMAGE_MEDIA_TYPE": "image/jpeg",
            "CZML_IMAGE_COLOR": "255,255,255,128",
            "CZML_IMAGE_REPEAT": "2,1",
            "CZML_DOCUMENT_NAME": "Radar",
            "CZML_DOCUMENT_VERSION": "1.1",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.default_begin == "1970-01-01T00:00:00Z"
        assert cfg.open_end_sentinel == "2100-01-01T00:00:00Z"
        assert cfg.default_image == "data:image/gif;base64,R0lGODlh"
        assert cfg.image_media_type == "image/jpeg"
        assert cfg.color_rgba == (255, 255, 255, 128)
        assert cfg.image_repeat == (2, 1)
        assert cfg.document_name == "Radar"
        assert cfg.document_version == "1.1"

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = ConverterConfig.from_env()
        assert cfg == ConverterConfig()

    def test_empty_sentinel_means_none(self) -> None:
        with patch.dict(os.environ, {"CZML_OPEN_END_SENTINEL": ""}, clear=True):
            cfg = ConverterConfig.from_env()
        assert cfg.open_end_sentinel is None


class TestConfigValidation:
    """Fail-fast validation of malformed values."""

    def _load(self, **env: str) -> ConverterConfig:
        with patch.dict(os.environ, env, clear=True):
            return ConverterConfig.from_env()

    def test_non_integer_colour(self) -> None:
        with pytest.raises(ConfigValidationError, match="comma-separated integers") as exc:
            self._load(CZML_IMAGE_COLOR="white")
        assert exc.value.key == "CZML_IMAGE_COLOR"

    def test_colour_wrong_length(self) -> None:
        with pytest.raises(ConfigValidationError, match="exactly 4"):
            self._load(CZML_IMAGE_COLOR="255,255,255")

    def test_colour_out_of_range(self) -> None:
        with pytest.raises(ConfigValidationError, match="between 0 and 255"):
            self._load(CZML_IMAGE_COLOR="256,0,0,255")

    def test_repeat_must_be_positive(self) -> None:
        with pytest.raises(ConfigValidationError, match="> 0"):
            self._load(CZML_IMAGE_REPEAT="0,1")

    def test_default_image_must_be_data_uri(self) -> None:
        with pytest.raises(ConfigValidationError, match="data: URI"):
            self._load(CZML_DEFAULT_IMAGE="default_image.png")

    def test_media_type_must_be_image(self) -> None:
        with pytest.raises(ConfigValidationError, match="image/\\*"):
            self._load(CZML_IMAGE_MEDIA_TYPE="text/plain")

    def test_blank_default_begin(self) -> None:
        with pytest.raises(ConfigValidationError, match="CZML_DEFAULT_BEGIN"):
            self._load(CZML_DEFAULT_BEGIN="  ")

    def test_empty_document_name(self) -> None:
        with pytest.raises(ConfigValidationError, match="CZML_DOCUMENT_NAME"):
            self._load(CZML_DOCUMENT_NAME="")

    def test_error_carries_stage_and_code(self) -> None:
        with pytest.raises(ConfigValidationError) as exc:
            self._load(CZML_DOCUMENT_VERSION="")
        assert exc.value.stage == "config"
        assert exc.value.code == "CONFIG_VALIDATION_FAILED"
