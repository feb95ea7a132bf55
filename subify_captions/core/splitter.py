"""Greedy splitting of over-long caption segments on word boundaries."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

from subify_captions.core.config import SegmentationConfig, resolve_config
from subify_captions.core.models import CaptionSegment, WordTiming
from subify_captions.utils.timestamp_utils import round_to_millis

logger = logging.getLogger(__name__)


def _join_words(words: Sequence[WordTiming]) -> str:
    return " ".join(word.text for word in words)


def _exceeds_limits(candidate: Sequence[WordTiming], cfg: SegmentationConfig) -> bool:
    """Check a run of words against the duration, character and word limits.

    Args:
        candidate: Consecutive words that would form one caption.
        cfg: Limits to check against.

    Returns:
        True if any limit is violated.
    """
    if not candidate:
        return False
    duration = candidate[-1].end - candidate[0].start
    return (
        duration > cfg.max_segment_duration_seconds
        or len(_join_words(candidate)) > cfg.max_segment_chars
        or len(candidate) > cfg.max_segment_words
    )


def should_split_segment(
    segment: CaptionSegment, config: SegmentationConfig | None = None
) -> bool:
    """Return True when a multi-word segment breaks any readability limit.

    Single-word segments are never split since no finer unit exists.
    """
    if len(segment.words) <= 1:
        return False
    cfg = resolve_config(config)
    return (
        len(segment.text) > cfg.max_segment_chars
        or segment.end - segment.start > cfg.max_segment_duration_seconds
        or len(segment.words) > cfg.max_segment_words
    )


def _build_chunk(parent: CaptionSegment, buffer: list[WordTiming]) -> CaptionSegment:
    words = tuple(dataclasses.replace(word, id=index) for index, word in enumerate(buffer))
    return dataclasses.replace(
        parent,
        start=round_to_millis(buffer[0].start),
        end=round_to_millis(buffer[-1].end),
        text=_join_words(buffer).strip(),
        words=words,
    )


def chunk_segment_by_words(
    segment: CaptionSegment, config: SegmentationConfig | None = None
) -> list[CaptionSegment]:
    """Split ``segment`` into consecutive chunks that respect the limits.

    Words are accumulated greedily; when adding the next word to a non-empty
    buffer would break a limit, the buffer is emitted first. A word that alone
    exceeds a limit therefore becomes its own chunk.

    Args:
        segment: A segment with word timings.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        Chunks in word order. Segments with at most one word are returned as a
        single-element list.
    """
    if len(segment.words) <= 1:
        return [segment]

    cfg = resolve_config(config)
    chunks: list[CaptionSegment] = []
    buffer: list[WordTiming] = []
    for word in segment.words:
        if buffer and _exceeds_limits([*buffer, word], cfg):
            chunks.append(_build_chunk(segment, buffer))
            buffer = []
        buffer.append(word)

    if buffer:
        chunks.append(_build_chunk(segment, buffer))
    return chunks


def split_segments(
    segments: Sequence[CaptionSegment], config: SegmentationConfig | None = None
) -> list[CaptionSegment]:
    """Apply the split policy to every segment, preserving order.

    Args:
        segments: Normalized, word-timed segments.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        A new list where each over-long segment is replaced by its chunks,
        stable-sorted by start.
    """
    cfg = resolve_config(config)
    exploded: list[CaptionSegment] = []
    for segment in segments:
        if should_split_segment(segment, cfg):
            chunks = chunk_segment_by_words(segment, cfg)
            logger.debug(
                "split_segments: segment %d (%.3fs, %d chars, %d words) -> %d chunks",
                segment.id,
                segment.end - segment.start,
                len(segment.text),
                len(segment.words),
                len(chunks),
            )
            exploded.extend(chunks)
        else:
            exploded.append(segment)
    # Chunks of a long segment may start after a shorter overlapping one.
    exploded.sort(key=lambda segment: segment.start)
    return exploded
