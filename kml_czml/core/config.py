"""Converter configuration loaded from environment variables.

All configuration values default to the constants in
``kml_czml.core.constants``.  Azure Functions app settings (or
``local.settings.json`` for local dev) are the source of truth.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is
    malformed, so bad configuration is caught at startup rather than
    leaking into emitted CZML.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_czml.core.constants import (
    DEFAULT_BEGIN,
    DEFAULT_COLOR_RGBA,
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_DOCUMENT_VERSION,
    DEFAULT_IMAGE,
    DEFAULT_IMAGE_MEDIA_TYPE,
    DEFAULT_IMAGE_REPEAT,
)
from kml_czml.core.exceptions import ConverterError


class ConfigValidationError(ConverterError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Loaded once per function host and passed into the temporal resolver
    and the overlay materializer, so tests can override any default.

    Attributes:
        default_begin: Begin instant for overlays with no time information.
        open_end_sentinel: End instant for a final overlay with no explicit
            end.  ``None`` leaves the interval degenerate (``begin/begin``);
            ``"2100-01-01T00:00:00Z"`` restores the older far-future padding.
        default_image: Data URI used when an overlay's image is unresolved.
        image_media_type: Media type for inlined images whose file
            extension does not identify one.
        color_rgba: Image material colour as ``(r, g, b, a)``, 0-255.
        image_repeat: Image material repeat factor as ``(x, y)``.
        document_name: ``name`` of the CZML document header packet.
        document_version: ``version`` of the CZML document header packet.
    """

    default_begin: str = DEFAULT_BEGIN
    open_end_sentinel: str | None = None
    default_image: str = DEFAULT_IMAGE
    image_media_type: str = DEFAULT_IMAGE_MEDIA_TYPE
    color_rgba: tuple[int, int, int, int] = DEFAULT_COLOR_RGBA
    image_repeat: tuple[int, int] = DEFAULT_IMAGE_REPEAT
    document_name: str = DEFAULT_DOCUMENT_NAME
    document_version: str = DEFAULT_DOCUMENT_VERSION

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is malformed or out of range.
        """
        config = cls(
            default_begin=os.getenv("CZML_DEFAULT_BEGIN", DEFAULT_BEGIN),
            open_end_sentinel=os.getenv("CZML_OPEN_END_SENTINEL", "") or None,
            default_image=os.getenv("CZML_DEFAULT_IMAGE", DEFAULT_IMAGE),
            image_media_type=os.getenv("CZML_IMAGE_MEDIA_TYPE", DEFAULT_IMAGE_MEDIA_TYPE),
            color_rgba=_int_tuple(  # type: ignore[arg-type]
                "CZML_IMAGE_COLOR", os.getenv("CZML_IMAGE_COLOR", "255,255,255,255"), 4
            ),
            image_repeat=_int_tuple(  # type: ignore[arg-type]
                "CZML_IMAGE_REPEAT", os.getenv("CZML_IMAGE_REPEAT", "1,1"), 2
            ),
            document_name=os.getenv("CZML_DOCUMENT_NAME", DEFAULT_DOCUMENT_NAME),
            document_version=os.getenv("CZML_DOCUMENT_VERSION", DEFAULT_DOCUMENT_VERSION),
        )
        _validate(config)
        return config


def _int_tuple(key: str, raw: str, length: int) -> tuple[int, ...]:
    """Parse a comma-separated integer list of a fixed length."""
    try:
        values = tuple(int(part) for part in raw.split(","))
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be comma-separated integers") from exc
    if len(values) != length:
        raise ConfigValidationError(key, raw, f"must contain exactly {length} integers")
    return values


def _validate(config: ConverterConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.default_begin.strip():
        raise ConfigValidationError(
            "CZML_DEFAULT_BEGIN",
            config.default_begin,
            "must not be empty",
        )

    if not config.default_image.startswith("data:"):
        raise ConfigValidationError(
            "CZML_DEFAULT_IMAGE",
            config.default_image,
            "must be a data: URI",
        )

    if not config.image_media_type.startswith("image/"):
        raise ConfigValidationError(
            "CZML_IMAGE_MEDIA_TYPE",
            config.image_media_type,
            "must be an image/* media type",
        )

    if len(config.color_rgba) != 4 or not all(0 <= c <= 255 for c in config.color_rgba):
        raise ConfigValidationError(
            "CZML_IMAGE_COLOR",
            config.color_rgba,
            "must be four integers between 0 and 255 (r, g, b, a)",
        )

    if len(config.image_repeat) != 2 or not all(r > 0 for r in config.image_repeat):
        raise ConfigValidationError(
            "CZML_IMAGE_REPEAT",
            config.image_repeat,
            "must be two integers > 0 (x, y)",
        )

    if not config.document_name:
        raise ConfigValidationError(
            "CZML_DOCUMENT_NAME",
            config.document_name,
            "must not be empty",
        )

    if not config.document_version:
        raise ConfigValidationError(
            "CZML_DOCUMENT_VERSION",
            config.document_version,
            "must not be empty",
        )
