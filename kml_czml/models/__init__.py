"""Data models and schemas.

Defines the data structures used throughout the converter:
- OverlayRecord: Raw GroundOverlay fields located in the KML document
- LatLonBox: Parsed overlay bounds
- TimeInterval: Resolved availability of one overlay
- DocumentPacket / OverlayPacket: Emitted CZML packets
"""

from kml_czml.models.czml import (
    Color,
    DocumentPacket,
    ImageMaterial,
    Material,
    OverlayPacket,
    Rectangle,
    RectangleCoordinates,
)
from kml_czml.models.overlay import LatLonBox, LatLonBoxText, OverlayRecord, TimeInterval

__all__ = [
    "Color",
    "DocumentPacket",
    "ImageMaterial",
    "LatLonBox",
    "LatLonBoxText",
    "Material",
    "OverlayPacket",
    "OverlayRecord",
    "Rectangle",
    "RectangleCoordinates",
    "TimeInterval",
]
