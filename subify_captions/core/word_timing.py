"""Word-timing synthesis for segments that lack word-level timestamps."""

from __future__ import annotations

import dataclasses
import logging

from subify_captions.core.config import SegmentationConfig, resolve_config
from subify_captions.core.models import CaptionSegment, WordTiming
from subify_captions.utils.timestamp_utils import clamp_number, round_to_millis

logger = logging.getLogger(__name__)


def _clamp_words(segment: CaptionSegment) -> tuple[WordTiming, ...]:
    """Clamp existing words into the segment span and renumber them."""
    clamped: list[WordTiming] = []
    for index, word in enumerate(segment.words):
        start = clamp_number(word.start, segment.start, segment.end)
        end = clamp_number(word.end, start, segment.end)
        clamped.append(WordTiming(id=index, start=start, end=end, text=word.text))
    return tuple(clamped)


def _synthesize_words(
    segment: CaptionSegment, min_duration: float
) -> tuple[WordTiming, ...]:
    """Spread the segment's duration evenly across its whitespace tokens.

    Args:
        segment: A normalized segment without word timings.
        min_duration: Floor for the segment duration so zero-length segments
            still divide cleanly.

    Returns:
        One evenly spaced ``WordTiming`` per token, clamped to the segment.
    """
    tokens = [token for token in segment.text.split() if token]
    if not tokens:
        return ()

    duration = max(segment.end - segment.start, min_duration)
    per_word = duration / len(tokens)

    def boundary(position: int) -> float:
        value = round_to_millis(segment.start + per_word * position)
        return clamp_number(value, segment.start, segment.end)

    return tuple(
        WordTiming(id=index, start=boundary(index), end=boundary(index + 1), text=token)
        for index, token in enumerate(tokens)
    )


def ensure_word_timings(
    segment: CaptionSegment, config: SegmentationConfig | None = None
) -> CaptionSegment:
    """Guarantee that ``segment`` carries word-level timing.

    Existing words are clamped into ``[segment.start, segment.end]`` and given
    positional ids. Segments without words get evenly spaced synthetic
    timings derived from their text.

    Args:
        segment: A normalized segment.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        A new segment whose ``words`` are populated (empty only when the text
        has no tokens).
    """
    if segment.words:
        return dataclasses.replace(segment, words=_clamp_words(segment))

    cfg = resolve_config(config)
    words = _synthesize_words(segment, cfg.min_synth_duration_seconds)
    logger.debug(
        "ensure_word_timings: synthesized %d words for segment %d",
        len(words),
        segment.id,
    )
    return dataclasses.replace(segment, words=words)
