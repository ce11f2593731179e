"""Thin ingress boundary helpers for the Azure Functions HTTP entrypoint.

Centralises the transport concerns so that ``function_app.py``
contains only route bindings and handoff:

- **build_conversion_request** — reads the multipart upload (one KML
  file plus any number of images) into a ``ConversionRequest``.
- **error_status** — maps a ``ConverterError`` to an HTTP status code.
- **error_body** — builds the JSON error descriptor returned to clients.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from kml_czml.core.constants import IMAGES_FORM_FIELD, KML_FORM_FIELD
from kml_czml.core.exceptions import ContractError, ConverterError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("kml_czml.core.ingress")


class UploadedFile(Protocol):
    """The subset of ``werkzeug.datastructures.FileStorage`` used here."""

    filename: str | None

    def read(self) -> bytes: ...


@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """One KML-to-CZML conversion request, fully read into memory.

    Attributes:
        kml_content: Raw KML bytes.
        images: Image payloads keyed by uploaded file name.
        kml_filename: Uploaded KML file name (for diagnostics).
    """

    kml_content: bytes
    images: dict[str, bytes] = field(default_factory=dict)
    kml_filename: str = ""


# ---------------------------------------------------------------------------
# Upload parsing
# ---------------------------------------------------------------------------


def build_conversion_request(files: Any) -> ConversionRequest:
    """Read a multipart upload into a ``ConversionRequest``.

    Args:
        files: ``req.files`` from an ``azure.functions.HttpRequest`` — a
            multi-dict supporting ``get`` and ``getlist``.

    Returns:
        The populated request.  Images without a file name are skipped;
        a repeated file name keeps the last upload.

    Raises:
        ContractError: If the ``kml`` file part is missing.
    """
    kml_file: UploadedFile | None = files.get(KML_FORM_FIELD)
    if kml_file is None:
        msg = f"Missing required form file field: {KML_FORM_FIELD}"
        raise ContractError(msg, stage="ingress", code="MISSING_KML_FILE")

    kml_content = kml_file.read()
    kml_filename = kml_file.filename or ""
    logger.info("KML file content loaded | kml=%s | bytes=%d", kml_filename, len(kml_content))

    images: dict[str, bytes] = {}
    for image_file in files.getlist(IMAGES_FORM_FIELD):
        if not image_file.filename:
            logger.warning("Skipping uploaded image with no file name")
            continue
        images[image_file.filename] = image_file.read()
        logger.debug("Loaded image: %s", image_file.filename)

    return ConversionRequest(kml_content=kml_content, images=images, kml_filename=kml_filename)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


def error_status(exc: ConverterError) -> int:
    """HTTP status for *exc*: 400 for request contract errors, else 500."""
    if isinstance(exc, ContractError):
        return 400
    return 500


def error_body(exc: ConverterError, *, correlation_id: str = "") -> Mapping[str, object]:
    """JSON error descriptor: ``error`` message plus the structured fields."""
    details = exc.to_error_dict()
    if correlation_id and not details["correlation_id"]:
        details["correlation_id"] = correlation_id
    return {"error": exc.message, **details}
