"""Overlay materializer — builds one CZML rectangle packet per overlay.

Bounds are strict: a missing or non-numeric edge aborts the whole
conversion.  Name and image are lenient: a missing name becomes
``"Overlay {index}"`` and a missing or unmatched image becomes the
configured placeholder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_czml.conversion._normalization import image_lookup_keys
from kml_czml.conversion._validation import parse_bounds
from kml_czml.core.config import ConverterConfig
from kml_czml.core.constants import OVERLAY_ID_PREFIX
from kml_czml.models.czml import (
    Color,
    ImageMaterial,
    Material,
    OverlayPacket,
    Rectangle,
    RectangleCoordinates,
)
from kml_czml.utils.helpers import encode_data_uri, guess_image_media_type

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kml_czml.models.overlay import OverlayRecord, TimeInterval

logger = logging.getLogger("kml_czml.conversion")


def resolve_image(
    href: str | None,
    images: Mapping[str, bytes],
    *,
    config: ConverterConfig,
) -> str:
    """Resolve an ``Icon/href`` to an inline data URI.

    The final path segment of *href* is looked up in *images*.  Returns
    ``config.default_image`` when there is no reference or no match.
    """
    if not href:
        logger.warning("GroundOverlay has no Icon/href, using default image")
        return config.default_image

    for key in image_lookup_keys(href):
        payload = images.get(key)
        if payload is not None:
            media_type = guess_image_media_type(key, config.image_media_type)
            logger.debug("Encoding image %s (%d bytes, %s)", key, len(payload), media_type)
            return encode_data_uri(payload, media_type)

    logger.warning("Image file %s not found in upload, using default image", href)
    return config.default_image


def materialize_overlay(
    record: OverlayRecord,
    interval: TimeInterval,
    images: Mapping[str, bytes],
    *,
    config: ConverterConfig | None = None,
) -> OverlayPacket:
    """Build the CZML rectangle packet for one overlay.

    Args:
        record: Located overlay; ``record.index`` gives the packet id.
        interval: Availability resolved for this overlay.
        images: Uploaded image payloads keyed by file name.
        config: Supplies the placeholder image, colour and repeat.

    Returns:
        An ``OverlayPacket`` ready for serialisation.

    Raises:
        BoundsParseError: If the overlay's LatLonBox cannot be parsed.
    """
    config = config or ConverterConfig()
    bounds = parse_bounds(record)
    name = record.display_name
    logger.info("Processing GroundOverlay: %s", name)

    return OverlayPacket(
        id=f"{OVERLAY_ID_PREFIX}{record.index}",
        name=name,
        availability=interval.availability,
        rectangle=Rectangle(
            coordinates=RectangleCoordinates(wsen_degrees=bounds.wsen_degrees),
            material=Material(
                image=ImageMaterial(
                    image=resolve_image(record.icon_href, images, config=config),
                    repeat=list(config.image_repeat),
                    color=Color(rgba=list(config.color_rgba)),
                ),
            ),
        ),
    )
