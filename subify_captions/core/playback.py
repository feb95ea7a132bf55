"""Time lookups used when overlaying captions on video frames."""

from __future__ import annotations

from collections.abc import Sequence

from subify_captions.core.models import CaptionSegment, WordTiming
from subify_captions.utils import constants
from subify_captions.utils.timestamp_utils import clamp_number


def frame_to_seconds(frame: int, fps: float) -> float:
    """Convert a frame index to seconds; a non-positive fps yields 0."""
    if fps <= 0:
        return 0.0
    return frame / fps


def find_active_caption(
    captions: Sequence[CaptionSegment],
    time: float,
    grace: float | None = None,
) -> CaptionSegment | None:
    """Return the caption on screen at ``time``.

    A caption stays visible for ``grace`` seconds past its end so short gaps
    between cues do not flicker.

    Args:
        captions: Sanitized captions, sorted by start.
        time: Playback position in seconds.
        grace: Extra display time; defaults to ``ACTIVE_CAPTION_GRACE_SEC``.

    Returns:
        The first matching caption, or None.
    """
    if grace is None:
        grace = constants.ACTIVE_CAPTION_GRACE_SEC
    for segment in captions:
        if segment.start <= time <= segment.end + grace:
            return segment
    return None


def word_progress(word: WordTiming, time: float) -> float:
    """Fraction of ``word`` already spoken at ``time``, in ``[0, 1]``.

    Zero-length words switch from 0 to 1 within a millisecond.
    """
    span = (word.end - word.start) or 0.001
    return clamp_number((time - word.start) / span, 0.0, 1.0)
