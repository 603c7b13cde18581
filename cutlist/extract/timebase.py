"""
cutlist.extract.timebase - Host tick math.

The host measures time in ticks: a fixed number per second, and a
per-sequence number per frame (the timebase).
"""

from __future__ import annotations

import math
from typing import Any

from cutlist.logging import logger

TICKS_PER_SECOND = 254016000000


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Args:
        value: Number to round

    Returns:
        Rounded integer (2.5 -> 3, -2.5 -> -2)
    """
    return math.floor(value + 0.5)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def resolve_ticks_per_frame(timebase: Any, default_fps: float = 24.0) -> float:
    """Return ticks per frame for a sequence timebase.

    Args:
        timebase: Raw timebase reported by the host (number or numeric string)
        default_fps: Frame rate to assume when the timebase is unusable

    Returns:
        Ticks per frame; falls back to round(TICKS_PER_SECOND / default_fps)
        when the timebase is missing, non-numeric, zero or negative
    """
    ticks_per_frame = _as_number(timebase)
    if ticks_per_frame is None or ticks_per_frame <= 0:
        fallback = round_half_up(TICKS_PER_SECOND / default_fps)
        logger.warning(
            "Unusable sequence timebase %r, assuming %s fps (%d ticks/frame)",
            timebase,
            default_fps,
            fallback,
        )
        return float(fallback)
    return ticks_per_frame


def frame_rate_for(ticks_per_frame: float) -> float:
    return TICKS_PER_SECOND / ticks_per_frame


def ticks_to_frames(ticks: Any, ticks_per_frame: float) -> int:
    """Convert a tick count to whole frames; non-numeric input gives 0."""
    number = _as_number(ticks)
    if number is None:
        logger.warning("Non-numeric tick value %r, treating as 0 frames", ticks)
        return 0
    return round_half_up(number / ticks_per_frame)


def seconds_to_frames(seconds: float, frame_rate: float) -> int:
    return round_half_up(seconds * frame_rate)
