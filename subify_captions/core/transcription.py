"""Adapter from Whisper-style transcription payloads to caption records.

Transcription providers return ``verbose_json`` documents whose segments carry
times either directly (``start``/``end``) or under ``timing``, and whose words
use ``word`` or ``text`` for the token. This module validates that shape with
Pydantic and maps it onto the raw records accepted by ``sanitize_segments``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from subify_captions.core.config import SegmentationConfig, resolve_config
from subify_captions.core.errors import CaptionInputError
from subify_captions.core.models import CaptionTrack
from subify_captions.core.normalizer import normalize_segments
from subify_captions.core.pipeline import sanitize_segments
from subify_captions.core.retarget import calculate_duration_from_captions
from subify_captions.utils import constants
from subify_captions.utils.timestamp_utils import is_positive_finite

logger = logging.getLogger(__name__)


class TranscriptionTiming(BaseModel):
    """Nested ``timing`` block used by some providers instead of start/end."""

    model_config = ConfigDict(extra="ignore")

    start: Any = None
    end: Any = None


class TranscriptionWord(BaseModel):
    """A single word with timestamps."""

    model_config = ConfigDict(extra="ignore")

    id: Any = None
    start: Any = None
    end: Any = None
    word: Any = Field(None, description="Token text (Whisper naming)")
    text: Any = Field(None, description="Token text (alternate naming)")


class TranscriptionSegment(BaseModel):
    """A transcribed span of speech.

    Only the nesting is validated here. Scalar fields are left as sent and
    coerced by the normalizer, so a malformed time degrades to zero instead of
    rejecting the whole payload.
    """

    model_config = ConfigDict(extra="ignore")

    id: Any = None
    start: Any = None
    end: Any = None
    text: Any = None
    timing: TranscriptionTiming | None = None
    words: list[TranscriptionWord] | None = None


class TranscriptionPayload(BaseModel):
    """Top-level transcription response (``verbose_json`` or plain ``json``)."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = Field(None, description="The complete transcribed text")
    language: str | None = Field(None, description="Detected language")
    duration: Any = Field(None, description="Audio duration in seconds")
    segments: list[TranscriptionSegment] | None = None


def parse_transcription(
    payload: Mapping[str, Any] | TranscriptionPayload,
) -> TranscriptionPayload:
    """Validate a raw transcription payload.

    Args:
        payload: Decoded JSON response or an already parsed model.

    Returns:
        The validated payload.

    Raises:
        CaptionInputError: If the payload does not have the expected shape.
    """
    if isinstance(payload, TranscriptionPayload):
        return payload
    try:
        return TranscriptionPayload.model_validate(payload)
    except ValidationError as exc:
        raise CaptionInputError(f"Invalid transcription payload: {exc}") from exc


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def segments_from_transcription(
    payload: Mapping[str, Any] | TranscriptionPayload,
    config: SegmentationConfig | None = None,
) -> list[dict[str, Any]]:
    """Map a transcription payload onto raw caption records.

    When the payload has no segments but does have text, a single segment
    spanning ``[0, duration]`` is produced (``duration`` falling back to the
    configured fallback duration).

    Args:
        payload: Decoded transcription response.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        Raw segment dicts suitable for ``sanitize_segments``.

    Raises:
        CaptionInputError: If the payload does not have the expected shape.
    """
    parsed = parse_transcription(payload)
    cfg = resolve_config(config)

    if parsed.segments:
        source = parsed.segments
    elif parsed.text:
        source = [
            TranscriptionSegment(
                id=0,
                start=0,
                end=(
                    float(parsed.duration)
                    if is_positive_finite(parsed.duration)
                    else cfg.fallback_duration_seconds
                ),
                text=parsed.text,
            )
        ]
    else:
        source = []

    records: list[dict[str, Any]] = []
    for index, segment in enumerate(source):
        timing = segment.timing or TranscriptionTiming()
        records.append({
            "id": _first_present(segment.id, index),
            "start": _first_present(segment.start, timing.start, 0),
            "end": _first_present(segment.end, timing.end, 0),
            "text": segment.text or "",
            "words": [
                {
                    "id": _first_present(word.id, word_index),
                    "text": _first_present(word.word, word.text, ""),
                    "start": _first_present(word.start, 0),
                    "end": _first_present(word.end, 0),
                }
                for word_index, word in enumerate(segment.words or [])
            ],
        })
    logger.debug("segments_from_transcription: mapped %d segments", len(records))
    return records


def resolve_duration(
    payload: Mapping[str, Any] | TranscriptionPayload,
    records: list[dict[str, Any]] | None = None,
    config: SegmentationConfig | None = None,
) -> float:
    """Return the reported duration, or one derived from the captions.

    Args:
        payload: Decoded transcription response.
        records: Raw records already mapped from ``payload``, if available.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        The payload ``duration`` when finite and positive, otherwise the
        latest caption end time (or the fallback duration when empty).
    """
    parsed = parse_transcription(payload)
    if is_positive_finite(parsed.duration):
        return float(parsed.duration)

    cfg = resolve_config(config)
    if records is None:
        records = segments_from_transcription(parsed, cfg)
    return calculate_duration_from_captions(
        normalize_segments(records), cfg.fallback_duration_seconds
    )


def transcription_to_captions(
    payload: Mapping[str, Any] | TranscriptionPayload,
    config: SegmentationConfig | None = None,
) -> CaptionTrack:
    """Build a sanitized caption track from a transcription response.

    The captions are retargeted to the resolved duration so they line up with
    the media even when the provider's segment times drift.

    Args:
        payload: Decoded transcription response.
        config: Pipeline configuration; defaults to the environment values.

    Returns:
        The caption track with segments, language and duration.

    Raises:
        CaptionInputError: If the payload does not have the expected shape.
    """
    parsed = parse_transcription(payload)
    cfg = resolve_config(config)
    records = segments_from_transcription(parsed, cfg)
    duration = resolve_duration(parsed, records, cfg)
    segments = sanitize_segments(records, target_duration=duration, config=cfg)
    logger.info(
        "Built caption track: %d segments, duration=%.3fs, language=%s",
        len(segments),
        duration,
        parsed.language or constants.DEFAULT_LANGUAGE,
    )
    return CaptionTrack(
        segments=segments,
        duration=duration,
        language=parsed.language or constants.DEFAULT_LANGUAGE,
    )
