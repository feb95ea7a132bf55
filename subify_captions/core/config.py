"""Explicit configuration passed through the caption pipeline."""

from __future__ import annotations

import dataclasses

from subify_captions.utils import constants


@dataclasses.dataclass(frozen=True)
class SegmentationConfig:
    """Tunable limits for splitting and retargeting caption segments.

    Attributes:
        max_segment_duration_seconds: Longest span one caption may cover.
        max_segment_chars: Longest caption text, spaces included.
        max_segment_words: Most words in one caption.
        duration_tolerance_ratio: Fraction of the target duration within which
            a caption track is left untouched.
        duration_tolerance_min_seconds: Absolute floor of that tolerance.
        fallback_duration_seconds: Duration reported for an empty track.
        min_synth_duration_seconds: Floor applied to a segment's duration
            before it is divided across synthesized word timings.
    """

    max_segment_duration_seconds: float = 4.5
    max_segment_chars: int = 84
    max_segment_words: int = 14
    duration_tolerance_ratio: float = 0.05
    duration_tolerance_min_seconds: float = 0.5
    fallback_duration_seconds: float = 10.0
    min_synth_duration_seconds: float = 0.01

    @classmethod
    def from_constants(cls) -> SegmentationConfig:
        """Build a config from the environment-driven module constants."""
        return cls(
            max_segment_duration_seconds=constants.MAX_SEGMENT_DURATION_SEC,
            max_segment_chars=constants.MAX_SEGMENT_CHARS,
            max_segment_words=constants.MAX_SEGMENT_WORDS,
            duration_tolerance_ratio=constants.DURATION_TOLERANCE_RATIO,
            duration_tolerance_min_seconds=constants.DURATION_TOLERANCE_MIN_SEC,
            fallback_duration_seconds=constants.FALLBACK_DURATION_SEC,
            min_synth_duration_seconds=constants.MIN_SYNTH_DURATION_SEC,
        )

    def with_overrides(self, **overrides: float | int | None) -> SegmentationConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


def resolve_config(config: SegmentationConfig | None) -> SegmentationConfig:
    """Return ``config`` or the environment-driven default."""
    return config if config is not None else SegmentationConfig.from_constants()
