"""Tests for the subtitle and data formatters."""

from __future__ import annotations

import json

import pytest

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.errors import UnsupportedFormatError
from subify_captions.core.formatters import (
    FORMATTERS,
    JsonFormatter,
    SrtFormatter,
    TxtFormatter,
    VttFormatter,
    captions_to_srt,
    captions_to_vtt,
    get_formatter,
)

NAMASTE = {
    "start": 0,
    "end": 2.6,
    "text": "Namaste dosto, welcome back to the channel!",
}
DEMO = {"start": 2.6, "end": 5.2, "text": "Aaj hum ek quick demo dekh rahe hain."}


class TestSrtFormatter:
    """SRT serialization."""

    def test_single_cue(self, config: SegmentationConfig) -> None:
        """One caption renders as a numbered cue with comma milliseconds."""
        assert SrtFormatter.format([NAMASTE], config) == (
            "1\n00:00:00,000 --> 00:00:02,600\n"
            "Namaste dosto, welcome back to the channel!\n"
        )

    def test_cues_are_separated_by_blank_line(
        self, config: SegmentationConfig
    ) -> None:
        """Cues are numbered from one and separated by an empty line."""
        assert captions_to_srt([DEMO, NAMASTE], config) == (
            "1\n00:00:00,000 --> 00:00:02,600\n"
            "Namaste dosto, welcome back to the channel!\n"
            "\n"
            "2\n00:00:02,600 --> 00:00:05,200\n"
            "Aaj hum ek quick demo dekh rahe hain.\n"
        )

    def test_raw_records_are_sanitized(self, config: SegmentationConfig) -> None:
        """Empty captions vanish and negative times are clamped."""
        records = [
            {"start": -3, "end": 1.5, "text": "first"},
            {"start": 2, "end": 3, "text": "   "},
        ]
        assert SrtFormatter.format(records, config) == (
            "1\n00:00:00,000 --> 00:00:01,500\nfirst\n"
        )

    def test_hours_in_timestamps(self, config: SegmentationConfig) -> None:
        """Long media produce hour fields."""
        record = {"start": 3661.007, "end": 3662.5, "text": "late"}
        assert "01:01:01,007 --> 01:01:02,500" in SrtFormatter.format([record], config)

    def test_crlf_line_breaks_are_normalized(
        self, config: SegmentationConfig
    ) -> None:
        """Windows line endings inside a caption become plain newlines."""
        record = {"start": 0, "end": 2, "text": "line one\r\nline two"}
        output = SrtFormatter.format([record], config)
        assert "\r" not in output
        assert output.endswith("line one\nline two\n")

    def test_empty_track(self, config: SegmentationConfig) -> None:
        """No captions produce an empty document."""
        assert SrtFormatter.format([], config) == ""
        assert SrtFormatter.get_file_extension() == "srt"


class TestVttFormatter:
    """WebVTT serialization."""

    def test_header_and_dot_separator(self, config: SegmentationConfig) -> None:
        """VTT starts with its header and uses dot milliseconds."""
        assert captions_to_vtt([NAMASTE], config) == (
            "WEBVTT\n\n"
            "00:00:00.000 --> 00:00:02.600\n"
            "Namaste dosto, welcome back to the channel!\n"
        )

    def test_empty_track_keeps_header(self, config: SegmentationConfig) -> None:
        """An empty track is still a valid VTT file."""
        assert VttFormatter.format(None, config) == "WEBVTT\n"
        assert VttFormatter.get_file_extension() == "vtt"


class TestJsonAndTxtFormatters:
    """Data exports."""

    def test_json_contains_segments_with_words(
        self, config: SegmentationConfig
    ) -> None:
        """JSON exposes sanitized segments including word timings."""
        payload = json.loads(JsonFormatter.format([DEMO, NAMASTE], config))
        segments = payload["segments"]
        assert [s["id"] for s in segments] == [0, 1]
        assert segments[0]["text"] == NAMASTE["text"]
        assert len(segments[0]["words"]) == 7
        assert segments[1]["words"][-1]["end"] == 5.2

    def test_json_keeps_non_ascii_text(self, config: SegmentationConfig) -> None:
        """Devanagari and emoji survive unescaped."""
        record = {"start": 0, "end": 1, "text": "नमस्ते 🙏"}
        output = JsonFormatter.format([record], config)
        assert "नमस्ते 🙏" in output

    def test_txt_is_one_caption_per_line(self, config: SegmentationConfig) -> None:
        """Plain text drops all timing."""
        assert TxtFormatter.format([DEMO, NAMASTE], config) == (
            "Namaste dosto, welcome back to the channel!\n"
            "Aaj hum ek quick demo dekh rahe hain."
        )


class TestGetFormatter:
    """Registry lookups."""

    @pytest.mark.parametrize("name", ["srt", "SRT", "Vtt", "json", "txt"])
    def test_lookup_is_case_insensitive(self, name: str) -> None:
        """Known names resolve regardless of case."""
        assert get_formatter(name) is FORMATTERS[name.lower()]

    def test_unknown_format_raises(self) -> None:
        """Unknown names list the available formats."""
        expected = "Available: json, srt, txt, vtt"
        with pytest.raises(UnsupportedFormatError, match=expected):
            get_formatter("docx")

    def test_extensions_match_registry_keys(self) -> None:
        """Each formatter reports the extension it is registered under."""
        for name, formatter in FORMATTERS.items():
            assert formatter.get_file_extension() == name
