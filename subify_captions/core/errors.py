"""Custom exception classes for subify-captions.

The normalization pipeline itself never raises; these errors belong to the
input boundary (documents, transcription payloads) and the formatter registry.
"""

from __future__ import annotations


class CaptionError(Exception):
    """Base exception for caption processing failures."""


class CaptionInputError(CaptionError):
    """Raised when an input document or payload cannot be read or validated."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize the CaptionInputError.

        Args:
            message: Error message.
            source: Optional path or label of the offending input.
        """
        super().__init__(message)
        self.source = source


class UnsupportedFormatError(CaptionError):
    """Raised when an export format name is not registered."""
