"""Pydantic models for the emitted CZML packets.

A converted document is a JSON array: one ``DocumentPacket`` header
followed by one ``OverlayPacket`` per ground overlay.  Field names are
snake_case in Python and serialised with their CZML camelCase aliases.

References:
    https://github.com/AnalyticalGraphicsInc/czml-writer/wiki/Packet
    https://github.com/AnalyticalGraphicsInc/czml-writer/wiki/Rectangle
    https://github.com/AnalyticalGraphicsInc/czml-writer/wiki/ImageMaterial
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from kml_czml.core.constants import (
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_DOCUMENT_VERSION,
    DOCUMENT_PACKET_ID,
)


class Color(BaseModel):
    """CZML colour as ``[red, green, blue, alpha]`` integers, 0-255."""

    rgba: list[int] = Field(default_factory=lambda: [255, 255, 255, 255])


class ImageMaterial(BaseModel):
    """Image fill for a rectangle surface."""

    image: str
    repeat: list[int] = Field(default_factory=lambda: [1, 1])
    color: Color = Field(default_factory=Color)


class Material(BaseModel):
    image: ImageMaterial


class RectangleCoordinates(BaseModel):
    """Rectangle extent as ``[west, south, east, north]`` degrees."""

    wsen_degrees: list[float] = Field(alias="wsenDegrees")

    model_config = {"populate_by_name": True}


class Rectangle(BaseModel):
    coordinates: RectangleCoordinates
    material: Material


class DocumentPacket(BaseModel):
    """Header packet that must open every CZML document."""

    id: str = DOCUMENT_PACKET_ID
    name: str = DEFAULT_DOCUMENT_NAME
    version: str = DEFAULT_DOCUMENT_VERSION

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)  # type: ignore[return-value]


class OverlayPacket(BaseModel):
    """Time-dynamic rectangle entity draped with one overlay image.

    Attributes:
        id: Dense 1-based identifier, ``overlay_{n}``.
        name: Overlay label.
        availability: ISO 8601 ``begin/end`` interval.
        rectangle: Geographic extent and image material.
    """

    id: str
    name: str
    availability: str
    rectangle: Rectangle

    @property
    def image(self) -> str:
        """Image URI carried by this packet's material."""
        return self.rectangle.material.image.image

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict with CZML property names."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
