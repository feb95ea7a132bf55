"""Linear retiming of a caption track to a known video duration.

Transcription engines sometimes misreport trailing silence or truncate audio.
Rather than guess at speech rate, the whole track is scaled uniformly so that
its last cue ends where the video does; gaps and spoken spans stretch alike.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import math
from collections.abc import Sequence

from subify_captions.core.config import SegmentationConfig, resolve_config
from subify_captions.core.models import CaptionSegment, WordTiming
from subify_captions.utils.timestamp_utils import is_positive_finite, round_to_millis

logger = logging.getLogger(__name__)


class RetargetStatus(enum.Enum):
    """Outcome of a retarget attempt."""

    UNCHANGED = "unchanged"
    RESCALED = "rescaled"


@dataclasses.dataclass(frozen=True)
class RetargetResult:
    """Tagged result of ``apply_retarget``.

    Attributes:
        status: Whether timestamps were rescaled.
        segments: The resulting segments (a fresh list either way).
        scale: Multiplier applied to every timestamp (1.0 when unchanged).
        reason: Short explanation of the decision, for logs.
    """

    status: RetargetStatus
    segments: list[CaptionSegment]
    scale: float = 1.0
    reason: str = ""

    @property
    def rescaled(self) -> bool:
        """True when the timestamps were multiplied by ``scale``."""
        return self.status is RetargetStatus.RESCALED


def calculate_duration_from_captions(
    segments: Sequence[CaptionSegment], fallback: float = 10.0
) -> float:
    """Return the end time of the last-ending segment.

    Args:
        segments: Caption segments.
        fallback: Value returned for an empty sequence.

    Returns:
        The maximum ``end`` rounded to milliseconds, or ``fallback``.
    """
    if not segments:
        return fallback
    return round_to_millis(max(segment.end for segment in segments))


def _scale_words(words: Sequence[WordTiming], scale: float) -> tuple[WordTiming, ...]:
    return tuple(
        dataclasses.replace(
            word,
            start=round_to_millis(word.start * scale),
            end=round_to_millis(word.end * scale),
        )
        for word in words
    )


def _unchanged(segments: Sequence[CaptionSegment], reason: str) -> RetargetResult:
    return RetargetResult(
        status=RetargetStatus.UNCHANGED, segments=list(segments), reason=reason
    )


def apply_retarget(
    segments: Sequence[CaptionSegment],
    target_duration: float | None,
    config: SegmentationConfig | None = None,
) -> RetargetResult:
    """Decide whether to rescale ``segments`` and do so when needed.

    Args:
        segments: Chunked caption segments.
        target_duration: Desired track length in seconds, usually the real
            playable length of the video.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        A ``RetargetResult``. Invalid targets, invalid measured durations,
        matches within tolerance and unusable scale factors all yield
        ``RetargetStatus.UNCHANGED``.
    """
    if not is_positive_finite(target_duration):
        return _unchanged(segments, "no usable target duration")
    target = float(target_duration)

    cfg = resolve_config(config)
    actual = calculate_duration_from_captions(segments, cfg.fallback_duration_seconds)
    if not math.isfinite(actual) or actual <= 0:
        return _unchanged(segments, "caption track has no measurable duration")

    tolerance = max(
        target * cfg.duration_tolerance_ratio, cfg.duration_tolerance_min_seconds
    )
    if abs(actual - target) <= tolerance:
        return _unchanged(
            segments,
            f"actual {actual:.3f}s within {tolerance:.3f}s of target {target:.3f}s",
        )

    scale = target / actual
    if not math.isfinite(scale) or scale <= 0:
        return _unchanged(segments, f"invalid scale factor {scale!r}")

    rescaled = [
        dataclasses.replace(
            segment,
            start=round_to_millis(segment.start * scale),
            end=round_to_millis(segment.end * scale),
            words=_scale_words(segment.words, scale),
        )
        for segment in segments
    ]
    return RetargetResult(
        status=RetargetStatus.RESCALED,
        segments=rescaled,
        scale=scale,
        reason=f"actual {actual:.3f}s rescaled to target {target:.3f}s",
    )


def retarget_segments(
    segments: Sequence[CaptionSegment],
    target_duration: float | None = None,
    config: SegmentationConfig | None = None,
) -> list[CaptionSegment]:
    """Rescale all timestamps so the track length matches ``target_duration``.

    Args:
        segments: Chunked caption segments.
        target_duration: Desired track length in seconds, or None.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        A new list of segments, rescaled or not.
    """
    result = apply_retarget(segments, target_duration, config)
    if result.rescaled:
        logger.info(
            "Retargeted %d segments by x%.4f (%s)",
            len(result.segments),
            result.scale,
            result.reason,
        )
    else:
        logger.debug("Retarget skipped: %s", result.reason)
    return result.segments
