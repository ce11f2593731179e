"""Document locator — finds GroundOverlay elements in a KML tree.

KML exported by different tools nests overlays in one of three known
shapes.  Each shape is a ``DocumentShape``; ``locate_overlays`` tries
them in priority order and returns the overlays of the first shape
that yields any.  Shapes are never merged.

1. ``kml/Document/GroundOverlay``
2. ``kml/Folder/GroundOverlay``
3. ``kml/Document/Folder/GroundOverlay``
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, ClassVar

from kml_czml.conversion._constants import (
    BEGIN_TAG,
    DOCUMENT_TAG,
    END_TAG,
    FOLDER_TAG,
    GROUND_OVERLAY_TAG,
    HREF_TAG,
    ICON_TAG,
    LAT_LON_BOX_TAG,
    NAME_TAG,
    TIME_SPAN_TAG,
    TIME_STAMP_TAG,
    WHEN_TAG,
)
from kml_czml.conversion._normalization import child_text, find_child, find_children
from kml_czml.models.overlay import LatLonBoxText, OverlayRecord

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_czml.conversion")


# ---------------------------------------------------------------------------
# Document shapes
# ---------------------------------------------------------------------------


class DocumentShape(abc.ABC):
    """One known nesting of GroundOverlay elements under the ``<kml>`` root."""

    #: Path description used in diagnostics.
    path: ClassVar[str] = ""

    @abc.abstractmethod
    def containers(self, root: _Element) -> list[_Element]:
        """Elements whose direct GroundOverlay children belong to this shape."""

    def overlays(self, root: _Element) -> list[_Element]:
        """GroundOverlay elements of this shape, in document order."""
        return [
            overlay
            for container in self.containers(root)
            for overlay in find_children(container, GROUND_OVERLAY_TAG)
        ]


class DocumentOverlays(DocumentShape):
    path = "kml/Document/GroundOverlay"

    def containers(self, root: _Element) -> list[_Element]:
        document = find_child(root, DOCUMENT_TAG)
        return [document] if document is not None else []


class FolderOverlays(DocumentShape):
    path = "kml/Folder/GroundOverlay"

    def containers(self, root: _Element) -> list[_Element]:
        return find_children(root, FOLDER_TAG)


class DocumentFolderOverlays(DocumentShape):
    path = "kml/Document/Folder/GroundOverlay"

    def containers(self, root: _Element) -> list[_Element]:
        document = find_child(root, DOCUMENT_TAG)
        if document is None:
            return []
        return find_children(document, FOLDER_TAG)


#: Shapes in resolution priority order.
DOCUMENT_SHAPES: tuple[DocumentShape, ...] = (
    DocumentOverlays(),
    FolderOverlays(),
    DocumentFolderOverlays(),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def match_shape(
    root: _Element,
    shapes: tuple[DocumentShape, ...] = DOCUMENT_SHAPES,
) -> tuple[DocumentShape, list[_Element]] | None:
    """Return the first shape with overlays and its GroundOverlay elements."""
    for shape in shapes:
        elements = shape.overlays(root)
        if elements:
            return shape, elements
    return None


def locate_overlays(root: _Element) -> list[OverlayRecord]:
    """Locate every GroundOverlay of the first matching document shape.

    Returns an empty list (and logs a warning) when no shape matches;
    deciding whether that is an error is left to the caller.
    """
    matched = match_shape(root)
    if matched is None:
        logger.warning(
            "No GroundOverlay elements found | shapes=%s",
            ", ".join(shape.path for shape in DOCUMENT_SHAPES),
        )
        return []

    shape, elements = matched
    logger.info("Found %d GroundOverlay element(s) | shape=%s", len(elements), shape.path)
    return [read_overlay(elem, index) for index, elem in enumerate(elements, start=1)]


def read_overlay(elem: _Element, index: int) -> OverlayRecord:
    """Extract the raw fields of one ``<GroundOverlay>`` element."""
    box = find_child(elem, LAT_LON_BOX_TAG)
    bounds = None
    if box is not None:
        bounds = LatLonBoxText(
            north=child_text(box, "north"),
            south=child_text(box, "south"),
            east=child_text(box, "east"),
            west=child_text(box, "west"),
        )

    time_span = find_child(elem, TIME_SPAN_TAG)
    return OverlayRecord(
        index=index,
        name=child_text(elem, NAME_TAG),
        bounds=bounds,
        icon_href=child_text(find_child(elem, ICON_TAG), HREF_TAG),
        when=child_text(find_child(elem, TIME_STAMP_TAG), WHEN_TAG),
        span_begin=child_text(time_span, BEGIN_TAG),
        span_end=child_text(time_span, END_TAG),
    )
