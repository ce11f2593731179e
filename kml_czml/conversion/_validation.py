"""Validation helpers for KML overlay conversion.

Responsibilities:
- XML structure and KML root validation
- Strict numeric parsing of overlay bounds

These are the fatal paths of a conversion.  Everything else (names,
images, time information) degrades to a default instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from kml_czml.conversion._constants import BOUND_EDGES, KML_ROOT_TAG
from kml_czml.conversion._normalization import local_name
from kml_czml.core.exceptions import ValidationError
from kml_czml.models.overlay import LatLonBox

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_czml.models.overlay import OverlayRecord

# Plain decimal or exponent notation; no digit separators, no inf/nan.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class KmlParseError(ValidationError):
    """Raised when a KML document cannot be parsed or converted."""

    default_stage = "parse_kml"
    default_code = "KML_PARSE_FAILED"


class NoOverlaysFoundError(KmlParseError):
    """Raised when no GroundOverlay elements exist in any recognised shape."""

    default_stage = "locate"
    default_code = "NO_GROUND_OVERLAYS"


class BoundsParseError(KmlParseError):
    """Raised when an overlay's LatLonBox edges are missing or not numeric."""

    default_stage = "materialize"
    default_code = "BOUNDS_PARSE_FAILED"


# ---------------------------------------------------------------------------
# XML / KML validation
# ---------------------------------------------------------------------------


def parse_kml_document(content: bytes | str, *, source_filename: str = "") -> _Element:
    """Parse raw KML into an lxml element tree rooted at ``<kml>``.

    Raises:
        KmlParseError: If the content is empty, not valid XML, or the
            root element is not ``<kml>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    label = source_filename or "<upload>"

    if not content.strip():
        msg = f"KML file {label} is empty"
        raise KmlParseError(msg)

    # Decoded text must not be re-read under its own encoding declaration.
    encoding = None
    if isinstance(content, str):
        content = content.encode("utf-8")
        encoding = "utf-8"

    parser = etree.XMLParser(
        encoding=encoding, resolve_entities=False, no_network=True, huge_tree=False
    )
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"KML file {label} is not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    if local_name(root) != KML_ROOT_TAG:
        msg = f"Not a KML file — root element of {label} is <{root.tag}>"
        raise KmlParseError(msg)

    return root


# ---------------------------------------------------------------------------
# Bounds parsing
# ---------------------------------------------------------------------------


def parse_bounds(record: OverlayRecord) -> LatLonBox:
    """Parse an overlay's LatLonBox edges as floating point degrees.

    Raises:
        BoundsParseError: If the LatLonBox or any edge is missing, or an
            edge is not a finite number.
    """
    if record.bounds is None:
        msg = f"GroundOverlay '{record.display_name}' has no <LatLonBox>"
        raise BoundsParseError(msg)

    edges: dict[str, float] = {}
    for edge in BOUND_EDGES:
        raw = getattr(record.bounds, edge)
        if raw is None:
            msg = f"GroundOverlay '{record.display_name}' is missing LatLonBox/{edge}"
            raise BoundsParseError(msg)
        if not _DECIMAL_PATTERN.fullmatch(raw.strip()):
            if raw.strip().lower().lstrip("+-") in {"inf", "infinity", "nan"}:
                msg = f"GroundOverlay '{record.display_name}' has a non-finite LatLonBox/{edge}: {raw!r}"
            else:
                msg = (
                    f"GroundOverlay '{record.display_name}' has a non-numeric "
                    f"LatLonBox/{edge}: {raw!r}"
                )
            raise BoundsParseError(msg)
        value = float(raw)
        if not math.isfinite(value):
            msg = f"GroundOverlay '{record.display_name}' has a non-finite LatLonBox/{edge}: {raw!r}"
            raise BoundsParseError(msg)
        edges[edge] = value

    return LatLonBox(**edges)
