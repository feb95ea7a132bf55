"""Centralized timestamp utilities for the caption pipeline.

Every stage goes through these helpers when it reads or writes a time value
so coercion, clamping and millisecond rounding behave identically everywhere.
"""

from __future__ import annotations

import math
from typing import Any


def coerce_seconds(value: Any) -> float:
    """Convert an arbitrary value into a finite float.

    Args:
        value: Raw value from an upstream record (number, numeric string,
            ``None``, ...).

    Returns:
        The value as a float, or ``0.0`` when it is missing, unparsable,
        NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def clamp_number(
    value: float, minimum: float = 0.0, maximum: float = math.inf
) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return min(max(value, minimum), maximum)


def round_to_millis(value: float) -> float:
    """Round seconds to millisecond precision, halves rounding up.

    Args:
        value: Time in seconds.

    Returns:
        ``value`` rounded to three decimals.
    """
    return math.floor(value * 1000 + 0.5) / 1000


def is_positive_finite(value: Any) -> bool:
    """Return True when ``value`` is a real number that is finite and > 0."""
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0
