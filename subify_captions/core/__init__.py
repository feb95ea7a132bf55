"""Core subpackage public exports.

This subpackage contains the caption pipeline stages, the data model and the
serializers built on top of them, plus the transcription adapter and the
playback helpers a video renderer uses to pick the caption under the playhead.
"""

from __future__ import annotations

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.documents import CaptionDocument, load_caption_document
from subify_captions.core.errors import (
    CaptionError,
    CaptionInputError,
    UnsupportedFormatError,
)
from subify_captions.core.formatters import (
    FORMATTERS,
    SrtFormatter,
    VttFormatter,
    captions_to_srt,
    captions_to_vtt,
    get_formatter,
)
from subify_captions.core.models import CaptionSegment, CaptionTrack, WordTiming
from subify_captions.core.pipeline import reindex_segments, sanitize_segments
from subify_captions.core.playback import (
    find_active_caption,
    frame_to_seconds,
    word_progress,
)
from subify_captions.core.retarget import (
    RetargetResult,
    RetargetStatus,
    calculate_duration_from_captions,
)
from subify_captions.core.samples import SAMPLE_CAPTIONS
from subify_captions.core.transcription import (
    resolve_duration,
    transcription_to_captions,
)

__all__ = [
    "FORMATTERS",
    "SAMPLE_CAPTIONS",
    "CaptionDocument",
    "CaptionError",
    "CaptionInputError",
    "CaptionSegment",
    "CaptionTrack",
    "RetargetResult",
    "RetargetStatus",
    "SegmentationConfig",
    "SrtFormatter",
    "UnsupportedFormatError",
    "VttFormatter",
    "WordTiming",
    "calculate_duration_from_captions",
    "captions_to_srt",
    "captions_to_vtt",
    "find_active_caption",
    "frame_to_seconds",
    "get_formatter",
    "load_caption_document",
    "reindex_segments",
    "resolve_duration",
    "sanitize_segments",
    "transcription_to_captions",
    "word_progress",
]
