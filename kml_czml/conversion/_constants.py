"""Shared constants for KML ground-overlay conversion."""

from __future__ import annotations

import re

# KML 2.2 namespace; matching is by local name so 2.0/2.1 and
# namespace-less documents are accepted too.
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

KML_ROOT_TAG = "kml"
DOCUMENT_TAG = "Document"
FOLDER_TAG = "Folder"
GROUND_OVERLAY_TAG = "GroundOverlay"

NAME_TAG = "name"
LAT_LON_BOX_TAG = "LatLonBox"
ICON_TAG = "Icon"
HREF_TAG = "href"
TIME_STAMP_TAG = "TimeStamp"
WHEN_TAG = "when"
TIME_SPAN_TAG = "TimeSpan"
BEGIN_TAG = "begin"
END_TAG = "end"

BOUND_EDGES = ("north", "south", "east", "west")

# Date immediately followed by a time, e.g. ``2020-01-0112:00:00``.
BARE_DATETIME_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})\s*(\d{2}:\d{2}:\d{2})")
