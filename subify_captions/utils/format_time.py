"""Timestamp formatting for subtitle cues.

Both helpers decompose the value into whole milliseconds first, so values
that are already millisecond-rounded never lose a digit to float truncation.
"""

from __future__ import annotations

import math


def _split_millis(seconds: float | None) -> tuple[int, int, int, int]:
    """Break ``seconds`` into hours, minutes, seconds and milliseconds.

    Args:
        seconds: Time in seconds. ``None``, negative and non-finite values are
            treated as zero.

    Returns:
        A ``(hours, minutes, seconds, milliseconds)`` tuple.
    """
    if seconds is None or not math.isfinite(seconds) or seconds < 0:
        seconds = 0.0
    total_ms = math.floor(seconds * 1000 + 0.5)
    whole_seconds, milliseconds = divmod(total_ms, 1000)
    hours, remainder = divmod(whole_seconds, 3600)
    minutes, seconds_val = divmod(remainder, 60)
    return hours, minutes, seconds_val, milliseconds


def format_timestamp(seconds: float | None, separator: str = ",") -> str:
    """Format seconds as ``HH:MM:SS<sep>mmm``.

    Args:
        seconds: Time in seconds (can be None).
        separator: Character placed between seconds and milliseconds.

    Returns:
        A zero-padded timestamp string.
    """
    hours, minutes, seconds_val, milliseconds = _split_millis(seconds)
    return f"{hours:02d}:{minutes:02d}:{seconds_val:02d}{separator}{milliseconds:03d}"


def format_srt_time(seconds: float | None) -> str:
    """Format seconds as SRT timestamp ``HH:MM:SS,mmm``.

    Args:
        seconds: Time in seconds (can be None).

    Returns:
        Comma-separated timestamp suitable for SRT.
    """
    return format_timestamp(seconds, ",")


def format_vtt_time(seconds: float | None) -> str:
    """Format seconds as WebVTT timestamp ``HH:MM:SS.mmm``.

    Args:
        seconds: Time in seconds (can be None).

    Returns:
        Dot-separated timestamp suitable for VTT.
    """
    return format_timestamp(seconds, ".")
