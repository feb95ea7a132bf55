"""Public surface for the subify-captions package.

Caption normalization, splitting and retiming for speech-to-text output, plus
SRT/WebVTT export.
"""

from __future__ import annotations

from importlib import metadata

from subify_captions.core import (
    CaptionSegment,
    SegmentationConfig,
    WordTiming,
    captions_to_srt,
    captions_to_vtt,
    sanitize_segments,
)


def _resolve_package_version() -> str:
    """Return the package version string for the distribution.

    Returns:
        str: Semantic version read from installed metadata, or a dev marker.
    """
    try:
        return metadata.version("subify-captions")
    except metadata.PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _resolve_package_version()

__all__ = [
    "CaptionSegment",
    "SegmentationConfig",
    "WordTiming",
    "__version__",
    "captions_to_srt",
    "captions_to_vtt",
    "sanitize_segments",
]
