"""Formatter classes for subify-captions.

This module contains classes for serializing caption segments into subtitle
and data formats (SRT, WebVTT, JSON, plain text). Every formatter re-runs the
sanitization pipeline first, so it never emits an invalid cue even when handed
raw records.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.errors import UnsupportedFormatError
from subify_captions.core.models import CaptionSegment
from subify_captions.core.pipeline import sanitize_segments
from subify_captions.utils.format_time import format_srt_time, format_vtt_time

logger = logging.getLogger(__name__)

_LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def _build_lines(segment: CaptionSegment) -> str:
    """Return the cue text with ``\\r\\n`` line breaks normalized to ``\\n``."""
    return "\n".join(_LINE_BREAK_PATTERN.split(segment.text))


class BaseFormatter:
    """Base class for all formatters."""

    @classmethod
    def format(
        cls,
        segments: Iterable[Any] | None,
        config: SegmentationConfig | None = None,
    ) -> str:
        """Format the caption segments.

        Args:
            segments: Caption segments or raw segment records.
            config: Pipeline configuration used for the defensive re-sanitize.

        Returns:
            Formatted string
        """
        raise NotImplementedError("Subclasses must implement this method")

    @classmethod
    def get_file_extension(cls) -> str:
        """Get the file extension for this format."""
        raise NotImplementedError("Subclasses must implement this method")


class SrtFormatter(BaseFormatter):
    """Formatter for SRT (SubRip) subtitles."""

    @classmethod
    def format(
        cls,
        segments: Iterable[Any] | None,
        config: SegmentationConfig | None = None,
    ) -> str:
        """Format as numbered SRT cues.

        Args:
            segments: Caption segments or raw segment records.
            config: Pipeline configuration used for the defensive re-sanitize.

        Returns:
            The SRT document; cues are separated by a blank line.
        """
        normalized = sanitize_segments(segments, config=config)
        srt_content = []
        for index, segment in enumerate(normalized, 1):
            start = format_srt_time(segment.start)
            end = format_srt_time(segment.end)
            srt_content.append(f"{index}\n{start} --> {end}\n{_build_lines(segment)}\n")
        logger.debug("[SrtFormatter] Returning %d SRT cues.", len(srt_content))
        return "\n".join(srt_content)

    @classmethod
    def get_file_extension(cls) -> str:
        """Get the file extension for this format.

        Returns:
            str: The file extension for this format ("srt").

        """
        return "srt"


class VttFormatter(BaseFormatter):
    """Formatter for WebVTT subtitles."""

    @classmethod
    def format(
        cls,
        segments: Iterable[Any] | None,
        config: SegmentationConfig | None = None,
    ) -> str:
        """Format as WebVTT cues under a ``WEBVTT`` header.

        Args:
            segments: Caption segments or raw segment records.
            config: Pipeline configuration used for the defensive re-sanitize.

        Returns:
            The WebVTT document.
        """
        normalized = sanitize_segments(segments, config=config)
        vtt_content = ["WEBVTT\n"]
        for segment in normalized:
            start = format_vtt_time(segment.start)
            end = format_vtt_time(segment.end)
            vtt_content.append(f"{start} --> {end}\n{_build_lines(segment)}\n")
        logger.debug("[VttFormatter] Returning %d VTT cues.", len(vtt_content) - 1)
        return "\n".join(vtt_content)

    @classmethod
    def get_file_extension(cls) -> str:
        """Get the file extension for this format.

        Returns:
            str: The file extension for this format ("vtt")

        """
        return "vtt"


class JsonFormatter(BaseFormatter):
    """Formatter for JSON output."""

    @classmethod
    def format(
        cls,
        segments: Iterable[Any] | None,
        config: SegmentationConfig | None = None,
    ) -> str:
        """Format as pretty-printed JSON of the form ``{"segments": [...]}``.

        Args:
            segments: Caption segments or raw segment records.
            config: Pipeline configuration used for the defensive re-sanitize.

        Returns:
            str: The formatted JSON string.

        """
        normalized = sanitize_segments(segments, config=config)
        payload = {"segments": [segment.to_dict() for segment in normalized]}
        return json.dumps(payload, ensure_ascii=False, indent=2)

    @classmethod
    def get_file_extension(cls) -> str:
        """Get the file extension for this formatter.

        Returns:
            str: The file extension for this formatter ("json")

        """
        return "json"


class TxtFormatter(BaseFormatter):
    """Formatter for plain text output, one caption per line."""

    @classmethod
    def format(
        cls,
        segments: Iterable[Any] | None,
        config: SegmentationConfig | None = None,
    ) -> str:
        """Format as plain text."""
        normalized = sanitize_segments(segments, config=config)
        return "\n".join(segment.text for segment in normalized)

    @classmethod
    def get_file_extension(cls) -> str:
        """Get the file extension for this format.

        Returns:
            str: The file extension for this format ("txt").

        """
        return "txt"


# Available formatters
FORMATTERS: dict[str, type[BaseFormatter]] = {
    "srt": SrtFormatter,
    "vtt": VttFormatter,
    "json": JsonFormatter,
    "txt": TxtFormatter,
}


def get_formatter(name: str) -> type[BaseFormatter]:
    """Look up a formatter class by format name.

    Args:
        name: Format name, case-insensitive (``srt``, ``vtt``, ``json``, ``txt``).

    Returns:
        The formatter class.

    Raises:
        UnsupportedFormatError: If no formatter is registered under ``name``.
    """
    try:
        return FORMATTERS[name.lower()]
    except KeyError as exc:
        raise UnsupportedFormatError(
            f"Unsupported export format '{name}'. "
            f"Available: {', '.join(sorted(FORMATTERS))}"
        ) from exc


def captions_to_srt(
    segments: Iterable[Any] | None, config: SegmentationConfig | None = None
) -> str:
    """Shortcut for ``SrtFormatter.format``."""
    return SrtFormatter.format(segments, config)


def captions_to_vtt(
    segments: Iterable[Any] | None, config: SegmentationConfig | None = None
) -> str:
    """Shortcut for ``VttFormatter.format``."""
    return VttFormatter.format(segments, config)
