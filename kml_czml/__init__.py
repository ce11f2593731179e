"""KML to CZML Ground Overlay Converter.

Azure Functions service that accepts a KML document of time-sequenced
GroundOverlay elements plus the referenced images, and returns a CZML
document of time-dynamic rectangle entities with the imagery inlined.
"""

__version__ = "0.1.0"
