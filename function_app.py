"""Azure Functions entry point — KML to CZML Ground Overlay Converter.

This module registers the HTTP function using the Python v2 programming
model.

All business logic lives in the kml_czml package. This file is purely
the wiring layer between Azure Functions bindings and application code.

Configuration is read from app settings and validated once, at import.
A malformed ``CZML_*`` setting raises ``ConfigValidationError`` while the
host indexes functions, so the app fails to start rather than answering
requests with JSON errors.
"""

from __future__ import annotations

import json
import logging
import uuid

import azure.functions as func

from kml_czml.conversion import convert_kml_bytes
from kml_czml.core.config import ConverterConfig
from kml_czml.core.exceptions import ConverterError
from kml_czml.core.ingress import build_conversion_request, error_body, error_status

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("kml_czml.function_app")

_config = ConverterConfig.from_env()


# ---------------------------------------------------------------------------
# HTTP: KML → CZML conversion
# ---------------------------------------------------------------------------


@app.function_name("convert_kml")
@app.route(route="convertKml", methods=["POST"])
def convert_kml(req: func.HttpRequest) -> func.HttpResponse:
    """Convert an uploaded KML file and its overlay images to CZML.

    Request:
        ``multipart/form-data`` with one ``kml`` file part and zero or
        more ``images`` file parts.  ``Icon/href`` values are matched
        against the image file names.

    Returns:
        200 with the CZML packet array as JSON, or an error descriptor
        (``{"error": message, ...}``) with status 400 for a malformed
        upload and 500 when the document cannot be converted.
    """
    correlation_id = req.headers.get("x-correlation-id") or str(uuid.uuid4())
    logger.info("Received request for KML to CZML conversion | correlation_id=%s", correlation_id)

    try:
        request = build_conversion_request(req.files)
        czml = convert_kml_bytes(
            request.kml_content,
            request.images,
            config=_config,
            source_filename=request.kml_filename,
        )
    except ConverterError as exc:
        logger.warning(
            "KML to CZML conversion failed | code=%s | correlation_id=%s | error=%s",
            exc.code,
            correlation_id,
            exc.message,
        )
        return func.HttpResponse(
            json.dumps(error_body(exc, correlation_id=correlation_id)),
            status_code=error_status(exc),
            mimetype="application/json",
        )
    except Exception:
        logger.exception("Unexpected conversion failure | correlation_id=%s", correlation_id)
        raise

    logger.info(
        "Returning CZML data | packets=%d | correlation_id=%s",
        len(czml),
        correlation_id,
    )
    return func.HttpResponse(
        json.dumps(czml),
        status_code=200,
        mimetype="application/json",
    )
