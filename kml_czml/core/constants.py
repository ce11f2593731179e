"""Shared converter constants — single source of truth.

Centralises the CZML defaults and upload form field names used by the
configuration layer, the conversion stages, and the HTTP entry point.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Temporal defaults
# ---------------------------------------------------------------------------

DEFAULT_BEGIN: str = "2000-01-01T00:00:00Z"
"""Begin instant for overlays that declare neither TimeStamp nor TimeSpan/begin."""

# ---------------------------------------------------------------------------
# Image material defaults
# ---------------------------------------------------------------------------

DEFAULT_IMAGE_MEDIA_TYPE: str = "image/png"

DEFAULT_IMAGE: str = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
"""1x1 transparent PNG substituted when an overlay's image cannot be resolved."""

DEFAULT_COLOR_RGBA: tuple[int, int, int, int] = (255, 255, 255, 255)
DEFAULT_IMAGE_REPEAT: tuple[int, int] = (1, 1)

# ---------------------------------------------------------------------------
# CZML document header
# ---------------------------------------------------------------------------

DOCUMENT_PACKET_ID: str = "document"
DEFAULT_DOCUMENT_NAME: str = "KML to CZML Conversion with Image Overlay"
DEFAULT_DOCUMENT_VERSION: str = "1.0"

OVERLAY_ID_PREFIX: str = "overlay_"

# ---------------------------------------------------------------------------
# Upload form fields
# ---------------------------------------------------------------------------

KML_FORM_FIELD: str = "kml"
IMAGES_FORM_FIELD: str = "images"
