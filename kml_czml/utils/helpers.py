"""Shared helper functions for image inlining.

Used by the overlay materializer and kept separate so the data URI
format has a single definition.
"""

from __future__ import annotations

import base64
import mimetypes


def guess_image_media_type(filename: str, default: str) -> str:
    """Return the ``image/*`` media type implied by *filename*'s extension.

    Falls back to *default* when the extension is unknown or does not
    name an image type.
    """
    media_type, _ = mimetypes.guess_type(filename, strict=False)
    if media_type and media_type.startswith("image/"):
        return media_type
    return default


def encode_data_uri(payload: bytes, media_type: str) -> str:
    """Encode *payload* as a base64 ``data:`` URI."""
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{media_type};base64,{encoded}"
