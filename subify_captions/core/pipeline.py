"""Caption sanitization pipeline.

``sanitize_segments`` runs the five stages in order:

1. ``normalize_segments``   drop empty text, clamp/round times, stable sort
2. ``ensure_word_timings``  every segment gets word-level timing
3. ``split_segments``       enforce duration/character/word limits
4. ``retarget_segments``    scale the track to a target duration, then
                            re-split anything stretched past the limits
5. ``reindex_segments``     contiguous ids in final order

Re-splitting after a rescale keeps every output within the limits, so a
sanitized track passes through the pipeline again unchanged, with or without
the same target. Formatters rely on that when they re-sanitize.

Each stage builds new objects, so callers may pass the same input repeatedly
(for example once per user edit) without aliasing surprises.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from subify_captions.core.config import SegmentationConfig, resolve_config
from subify_captions.core.models import CaptionSegment
from subify_captions.core.normalizer import normalize_segments
from subify_captions.core.retarget import retarget_segments
from subify_captions.core.splitter import split_segments
from subify_captions.core.word_timing import ensure_word_timings
from subify_captions.utils.timestamp_utils import round_to_millis

logger = logging.getLogger(__name__)


def reindex_segments(segments: Sequence[CaptionSegment]) -> list[CaptionSegment]:
    """Assign positional ids and re-round times after retargeting.

    Args:
        segments: Segments in their final order.

    Returns:
        A new list with ``id`` equal to each segment's index.
    """
    return [
        dataclasses.replace(
            segment,
            id=index,
            start=round_to_millis(segment.start),
            end=round_to_millis(segment.end),
            text=segment.text.strip(),
        )
        for index, segment in enumerate(segments)
    ]


def sanitize_segments(
    segments: Iterable[Any] | None,
    target_duration: float | None = None,
    config: SegmentationConfig | None = None,
) -> list[CaptionSegment]:
    """Turn raw caption records into render- and export-safe segments.

    Args:
        segments: Raw records (dicts, objects or ``CaptionSegment``) with
            ``start``, ``end``, ``text`` and optionally ``id`` and ``words``.
        target_duration: Optional real duration of the video. When given and
            the captions disagree beyond tolerance, every timestamp is scaled
            linearly to match it.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        Sorted, re-indexed segments with word timings, within the configured
        limits (except irreducible single words). Empty when no record has
        text.
    """
    cfg = resolve_config(config)

    normalized = normalize_segments(segments)
    timed = [ensure_word_timings(segment, cfg) for segment in normalized]
    exploded = split_segments(timed, cfg)
    retimed = retarget_segments(exploded, target_duration, cfg)
    final = reindex_segments(split_segments(retimed, cfg))

    logger.debug(
        "sanitize_segments: %d normalized -> %d split -> %d final (target=%s)",
        len(normalized),
        len(exploded),
        len(final),
        target_duration,
    )
    return final
