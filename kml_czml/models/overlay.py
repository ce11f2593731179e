"""Data models for parsed and resolved KML ground overlays.

An ``OverlayRecord`` is the raw, string-valued view of one
``<GroundOverlay>`` element as found by the document locator.  The
temporal resolver turns the sequence of records into ``TimeInterval``
values, and the materializer parses the raw ``LatLonBoxText`` into a
numeric ``LatLonBox``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LatLonBoxText:
    """Raw ``<LatLonBox>`` edge text, ``None`` where an edge is missing."""

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None


@dataclass(frozen=True, slots=True)
class LatLonBox:
    """Numeric geographic bounds of an overlay, in degrees."""

    north: float
    south: float
    east: float
    west: float

    @property
    def wsen_degrees(self) -> list[float]:
        """Bounds as ``[west, south, east, north]`` (CZML ``wsenDegrees`` order)."""
        return [self.west, self.south, self.east, self.north]


@dataclass(frozen=True, slots=True)
class OverlayRecord:
    """A single ``<GroundOverlay>`` extracted from a KML document.

    Attributes:
        index: 1-based position of the overlay in the located sequence.
        name: Overlay label, or ``None`` if absent or blank.
        bounds: Raw ``LatLonBox`` text, or ``None`` if the element is missing.
        icon_href: ``Icon/href`` reference (file name or path), if any.
        when: ``TimeStamp/when`` instant, if any.
        span_begin: ``TimeSpan/begin`` instant, if any.
        span_end: ``TimeSpan/end`` instant, if any.
    """

    index: int
    name: str | None = None
    bounds: LatLonBoxText | None = None
    icon_href: str | None = None
    when: str | None = None
    span_begin: str | None = None
    span_end: str | None = None

    @property
    def display_name(self) -> str:
        """Overlay name, or the synthesized ``"Overlay {index}"`` label."""
        return self.name or f"Overlay {self.index}"


@dataclass(frozen=True, slots=True)
class TimeInterval:
    """Resolved availability of one overlay.

    ``end`` is ``None`` when no end could be derived; the interval then
    renders as the zero-width ``begin/begin``.
    """

    begin: str
    end: str | None = None

    @property
    def availability(self) -> str:
        """CZML ``availability`` interval string."""
        return f"{self.begin}/{self.end if self.end is not None else self.begin}"
