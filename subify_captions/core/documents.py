"""Loading caption documents from JSON files.

Three shapes are accepted:

- a bare list of segment records;
- a caption track ``{"segments": [...], "duration": ..., "language": ...}``
  (for example a saved session or the output of ``JsonFormatter``);
- a Whisper-style transcription payload.

The last two share a schema, so both go through the transcription adapter.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.errors import CaptionInputError
from subify_captions.core.transcription import (
    parse_transcription,
    segments_from_transcription,
)
from subify_captions.utils.timestamp_utils import is_positive_finite

logger = logging.getLogger(__name__)


class CaptionDocument(BaseModel):
    """Raw caption records read from disk, not yet sanitized."""

    segments: list[dict[str, Any]] = Field(
        default_factory=list, description="Raw segment records"
    )
    duration: float | None = Field(
        None, description="Known media duration in seconds, if recorded"
    )
    language: str | None = Field(None, description="Caption language, if recorded")

    @property
    def target_duration(self) -> float | None:
        """The recorded duration when it is usable as a retarget target."""
        return self.duration if is_positive_finite(self.duration) else None


def parse_caption_document(
    data: Any, config: SegmentationConfig | None = None, source: str | None = None
) -> CaptionDocument:
    """Interpret decoded JSON as a caption document.

    Args:
        data: Decoded JSON value.
        config: Pipeline configuration used by the transcription adapter.
        source: Label of the input, used in error messages.

    Returns:
        The caption document.

    Raises:
        CaptionInputError: If ``data`` is neither a list of segment objects
            nor a segments/transcription object.
    """
    if isinstance(data, list):
        if not all(isinstance(item, dict) for item in data):
            raise CaptionInputError(
                "Segment list must contain only JSON objects", source=source
            )
        return CaptionDocument(segments=data)

    if isinstance(data, dict):
        payload = parse_transcription(data)
        return CaptionDocument(
            segments=segments_from_transcription(payload, config),
            duration=(
                float(payload.duration)
                if is_positive_finite(payload.duration)
                else None
            ),
            language=payload.language,
        )

    raise CaptionInputError(
        f"Expected a JSON list or object, got {type(data).__name__}", source=source
    )


def load_caption_document(
    path: str | Path, config: SegmentationConfig | None = None
) -> CaptionDocument:
    """Read and parse a caption document from ``path``.

    Args:
        path: JSON file to read.
        config: Pipeline configuration used by the transcription adapter.

    Returns:
        The caption document.

    Raises:
        CaptionInputError: If the file cannot be read, is not valid JSON, or
            has an unexpected structure.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CaptionInputError(f"Cannot read {path}: {exc}", source=str(path)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CaptionInputError(
            f"{path} is not valid JSON: {exc}", source=str(path)
        ) from exc

    document = parse_caption_document(data, config, source=str(path))
    logger.debug(
        "Loaded %d raw segments from %s (duration=%s)",
        len(document.segments),
        path,
        document.duration,
    )
    return document
