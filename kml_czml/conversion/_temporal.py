"""Temporal resolver — derives each overlay's availability interval.

Overlays are chained: unless an overlay declares its own
``TimeSpan/end``, it stays visible until the next overlay begins.  The
final overlay without an explicit end gets the configured open-end
sentinel, or no end at all (rendered as a zero-width interval).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_czml.conversion._normalization import normalize_iso8601
from kml_czml.core.config import ConverterConfig
from kml_czml.models.overlay import TimeInterval

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kml_czml.models.overlay import OverlayRecord

logger = logging.getLogger("kml_czml.conversion")


def resolve_begin(record: OverlayRecord, default_begin: str) -> str:
    """Begin instant: TimeStamp, else TimeSpan/begin, else *default_begin*."""
    explicit = record.when or record.span_begin
    if explicit is None:
        logger.debug(
            "No time information for overlay %d, using default begin %s",
            record.index,
            default_begin,
        )
        return normalize_iso8601(default_begin)
    return normalize_iso8601(explicit)


def resolve_intervals(
    overlays: Sequence[OverlayRecord],
    *,
    config: ConverterConfig | None = None,
) -> list[TimeInterval]:
    """Compute availability intervals for *overlays*, same length and order.

    Args:
        overlays: Located overlays in document order.
        config: Supplies the default begin and the open-end sentinel.

    Returns:
        One ``TimeInterval`` per overlay.
    """
    config = config or ConverterConfig()
    begins = [resolve_begin(record, config.default_begin) for record in overlays]
    last = len(overlays) - 1

    intervals: list[TimeInterval] = []
    for i, record in enumerate(overlays):
        end: str | None
        if record.span_end is not None:
            end = normalize_iso8601(record.span_end)
        elif i < last:
            end = begins[i + 1]
            logger.debug(
                "Overlay %d ends where overlay %d begins: %s",
                record.index,
                overlays[i + 1].index,
                end,
            )
        elif config.open_end_sentinel:
            end = normalize_iso8601(config.open_end_sentinel)
        else:
            end = None
            logger.info(
                "Final overlay %d has no end time, availability is %s/%s",
                record.index,
                begins[i],
                begins[i],
            )
        intervals.append(TimeInterval(begin=begins[i], end=end))

    return intervals
