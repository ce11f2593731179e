"""KML ground overlay → CZML conversion — composable pipeline.

Converts a KML document of time-sequenced GroundOverlay elements into a
CZML document: a header packet followed by one time-dynamic rectangle
entity per overlay, with the overlay image inlined as a data URI.

The conversion is split into focused stages:
- **_locator**: find GroundOverlay elements in one of three nesting shapes
- **_temporal**: derive chained availability intervals
- **_materializer**: parse bounds, inline images, build CZML packets
- **_validation**: XML/KML check and strict bounds parsing (fatal paths)
- **_normalization**: namespace-agnostic lookup, text, instants, hrefs

Error policy:
- Fatal: no overlays found, unparseable bounds (whole request fails)
- Degraded: missing name, image, or time information (defaults applied)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_czml.conversion._constants import KML_NAMESPACE
from kml_czml.conversion._locator import (
    DOCUMENT_SHAPES,
    DocumentFolderOverlays,
    DocumentOverlays,
    DocumentShape,
    FolderOverlays,
    locate_overlays,
    match_shape,
    read_overlay,
)
from kml_czml.conversion._materializer import materialize_overlay, resolve_image
from kml_czml.conversion._normalization import (
    element_text,
    image_lookup_keys,
    normalize_iso8601,
)
from kml_czml.conversion._temporal import resolve_begin, resolve_intervals
from kml_czml.conversion._validation import (
    BoundsParseError,
    KmlParseError,
    NoOverlaysFoundError,
    parse_bounds,
    parse_kml_document,
)
from kml_czml.core.config import ConverterConfig
from kml_czml.models.czml import DocumentPacket

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lxml.etree import _Element

logger = logging.getLogger("kml_czml.conversion")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "DOCUMENT_SHAPES",
    "KML_NAMESPACE",
    "BoundsParseError",
    "DocumentFolderOverlays",
    "DocumentOverlays",
    "DocumentShape",
    "FolderOverlays",
    "KmlParseError",
    "NoOverlaysFoundError",
    "convert_kml_bytes",
    "convert_kml_to_czml",
    "element_text",
    "image_lookup_keys",
    "locate_overlays",
    "match_shape",
    "materialize_overlay",
    "normalize_iso8601",
    "parse_bounds",
    "parse_kml_document",
    "read_overlay",
    "resolve_begin",
    "resolve_image",
    "resolve_intervals",
]


def convert_kml_to_czml(
    root: _Element,
    images: Mapping[str, bytes],
    *,
    config: ConverterConfig | None = None,
    source_filename: str = "",
) -> list[dict[str, object]]:
    """Convert a parsed KML tree into a CZML packet list.

    Args:
        root: The ``<kml>`` root element.
        images: Uploaded image payloads keyed by file name.
        config: Converter defaults; ``ConverterConfig()`` when omitted.
        source_filename: Original KML file name, for diagnostics.

    Returns:
        JSON-ready CZML packets: the document header followed by one
        rectangle packet per overlay, in document order.

    Raises:
        NoOverlaysFoundError: If no recognised shape holds a GroundOverlay.
        BoundsParseError: If any overlay's LatLonBox cannot be parsed.
    """
    config = config or ConverterConfig()
    label = source_filename or "<upload>"
    logger.info("Starting KML to CZML conversion | kml=%s | images=%d", label, len(images))

    overlays = locate_overlays(root)
    if not overlays:
        msg = f"No GroundOverlay elements found in KML document {label}"
        raise NoOverlaysFoundError(msg)

    intervals = resolve_intervals(overlays, config=config)

    header = DocumentPacket(name=config.document_name, version=config.document_version)
    czml: list[dict[str, object]] = [header.to_dict()]
    for record, interval in zip(overlays, intervals, strict=True):
        packet = materialize_overlay(record, interval, images, config=config)
        czml.append(packet.to_dict())

    logger.info(
        "KML to CZML conversion completed | kml=%s | overlays=%d",
        label,
        len(overlays),
    )
    return czml


def convert_kml_bytes(
    content: bytes | str,
    images: Mapping[str, bytes],
    *,
    config: ConverterConfig | None = None,
    source_filename: str = "",
) -> list[dict[str, object]]:
    """Parse raw KML content and convert it to CZML.

    Raises:
        KmlParseError: If the content is not a KML document, or any of
            the conversion failures raised by ``convert_kml_to_czml``.
    """
    root = parse_kml_document(content, source_filename=source_filename)
    return convert_kml_to_czml(root, images, config=config, source_filename=source_filename)
