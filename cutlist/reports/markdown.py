"""
cutlist.reports.markdown - Markdown formatting helpers.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_MARKDOWN_SPECIAL = re.compile(r"([*_`~])")
_EXPONENT_THRESHOLD = 1e21


def escape_markdown(text: str | None) -> str:
    """Backslash-escape *, _, ` and ~; leave everything else untouched."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text or "")


def to_fixed(value: float, digits: int) -> str:
    """Format a number with a fixed number of decimals.

    Ties round away from zero on the exact binary value, so 1.125 gives
    "1.13" at two digits where format() would give "1.12". Magnitudes of
    1e21 and above keep their exponent form, e.g. "4.166666666666666e+26".
    """
    if not math.isfinite(value) or abs(value) >= _EXPONENT_THRESHOLD:
        return str(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def frames_to_seconds(frames: int, frame_rate: float | None) -> str:
    """Format a frame count as seconds, e.g. "1.67 s".

    A zero or missing frame rate renders "0.00 s".
    """
    if not frame_rate:
        return "0.00 s"
    return f"{to_fixed(frames / frame_rate, 2)} s"


def format_frame_rate(frame_rate: float | None) -> str:
    return to_fixed(frame_rate or 0.0, 3)
