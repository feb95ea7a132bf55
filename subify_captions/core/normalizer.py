"""Segment normalization: the first stage of the caption pipeline.

Raw records come from transcription payloads, saved sessions or user edits
and may be dicts or objects with missing, negative or non-numeric fields.
This stage turns them into clean ``CaptionSegment`` values without raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from subify_captions.core.models import CaptionSegment, WordTiming
from subify_captions.utils.timestamp_utils import (
    clamp_number,
    coerce_seconds,
    round_to_millis,
)

logger = logging.getLogger(__name__)


def _read_field(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping key or an object attribute."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_id(value: Any, fallback: int) -> int:
    """Return ``value`` as an int when it is a finite number, else ``fallback``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if not math.isfinite(value):
        return fallback
    return int(value)


def _normalize_time(value: Any) -> float:
    return round_to_millis(clamp_number(coerce_seconds(value)))


def _normalize_words(raw_words: Any) -> tuple[WordTiming, ...]:
    """Coerce nested word records, dropping empty tokens and sorting by start.

    A record whose text holds several whitespace-separated tokens is split,
    its span shared evenly between them.

    Args:
        raw_words: The ``words`` field of a raw record; anything that is not
            an iterable of records yields no words.

    Returns:
        Word timings with trimmed text and non-negative millisecond times.
    """
    if raw_words is None or isinstance(raw_words, (str, bytes, Mapping)):
        return ()
    if not isinstance(raw_words, Iterable):
        return ()

    words: list[WordTiming] = []
    for index, raw in enumerate(raw_words):
        text = _coerce_text(_read_field(raw, "text"))
        if not text:
            continue
        start = _normalize_time(_read_field(raw, "start"))
        end = max(_normalize_time(_read_field(raw, "end")), start)
        word_id = _coerce_id(_read_field(raw, "id"), index)
        tokens = text.split()
        step = (end - start) / len(tokens)
        for position, token in enumerate(tokens):
            token_start = min(round_to_millis(start + step * position), end)
            token_end = (
                end
                if position == len(tokens) - 1
                else min(round_to_millis(start + step * (position + 1)), end)
            )
            words.append(
                WordTiming(id=word_id, start=token_start, end=token_end, text=token)
            )
    words.sort(key=lambda word: word.start)
    return tuple(words)


def normalize_segment(record: Any, index: int) -> CaptionSegment | None:
    """Normalize one raw record.

    Args:
        record: A mapping or object exposing ``start``, ``end`` and ``text``
            and optionally ``id`` and ``words``.
        index: Position of the record in its input, used when ``id`` is absent.

    Returns:
        The cleaned segment, or ``None`` when its trimmed text is empty.
    """
    text = _coerce_text(_read_field(record, "text"))
    if not text:
        return None

    start = _normalize_time(_read_field(record, "start"))
    end = max(_normalize_time(_read_field(record, "end")), start)
    return CaptionSegment(
        id=_coerce_id(_read_field(record, "id"), index),
        start=start,
        end=end,
        text=text,
        words=_normalize_words(_read_field(record, "words")),
    )


def normalize_segments(records: Iterable[Any] | None) -> list[CaptionSegment]:
    """Clean raw segment records and sort them by start time.

    Records with empty text are discarded; timestamps are coerced, clamped to
    be non-negative and rounded to milliseconds. The sort is stable, so
    segments sharing a start keep their input order.

    Args:
        records: Raw segment-like records.

    Returns:
        A new list of normalized segments.
    """
    if records is None:
        return []

    normalized: list[CaptionSegment] = []
    dropped = 0
    for index, record in enumerate(records):
        segment = normalize_segment(record, index)
        if segment is None:
            dropped += 1
            continue
        normalized.append(segment)

    normalized.sort(key=lambda segment: segment.start)
    logger.debug(
        "normalize_segments: kept %d segments, dropped %d empty",
        len(normalized),
        dropped,
    )
    return normalized
