"""Caption data structures shared by every pipeline stage."""

from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class WordTiming:
    """One token of a caption with its own time span.

    ``id`` is the position within the owning segment, not a global identifier.
    """

    id: int
    start: float
    end: float
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {"id": self.id, "start": self.start, "end": self.end, "text": self.text}


@dataclasses.dataclass(frozen=True)
class CaptionSegment:
    """A contiguous span of speech displayed as one caption unit."""

    id: int
    start: float
    end: float
    text: str
    words: tuple[WordTiming, ...] = ()

    @property
    def duration(self) -> float:
        """Span covered by the segment in seconds."""
        return self.end - self.start

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation, words included."""
        return {
            "id": self.id,
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "words": [word.to_dict() for word in self.words],
        }


@dataclasses.dataclass(frozen=True)
class CaptionTrack:
    """Sanitized captions for one video together with their context."""

    segments: list[CaptionSegment]
    duration: float
    language: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "language": self.language,
            "duration": self.duration,
        }
