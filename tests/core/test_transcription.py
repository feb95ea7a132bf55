"""Tests for the transcription payload adapter."""

from __future__ import annotations

import pytest

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.errors import CaptionInputError
from subify_captions.core.models import CaptionTrack
from subify_captions.core.transcription import (
    TranscriptionPayload,
    parse_transcription,
    resolve_duration,
    segments_from_transcription,
    transcription_to_captions,
)

VERBOSE_PAYLOAD = {
    "text": "Namaste dosto. Aaj demo hai.",
    "language": "hi",
    "duration": 6.0,
    "task": "transcribe",
    "segments": [
        {
            "id": 0,
            "start": 0.0,
            "end": 2.5,
            "text": " Namaste dosto.",
            "words": [
                {"word": " Namaste", "start": 0.0, "end": 1.1},
                {"word": " dosto.", "start": 1.2, "end": 2.4},
            ],
        },
        {
            "id": 1,
            "timing": {"start": 3.0, "end": 6.0},
            "text": "Aaj demo hai.",
        },
    ],
}


class TestSegmentsFromTranscription:
    """Mapping provider segments onto raw records."""

    def test_maps_words_and_nested_timing(self, config: SegmentationConfig) -> None:
        """``word`` tokens and ``timing`` blocks are both understood."""
        records = segments_from_transcription(VERBOSE_PAYLOAD, config)
        assert len(records) == 2
        assert [w["text"] for w in records[0]["words"]] == [" Namaste", " dosto."]
        assert (records[1]["start"], records[1]["end"]) == (3.0, 6.0)
        assert records[1]["words"] == []

    def test_text_only_payload_becomes_one_segment(
        self, config: SegmentationConfig
    ) -> None:
        """Plain ``json`` responses span the reported duration."""
        records = segments_from_transcription(
            {"text": "whole transcript here", "duration": 12.5}, config
        )
        assert len(records) == 1
        assert (records[0]["start"], records[0]["end"]) == (0, 12.5)

    def test_text_only_payload_without_duration_uses_fallback(
        self, config: SegmentationConfig
    ) -> None:
        """Without a duration the fallback length is used."""
        [record] = segments_from_transcription({"text": "hi"}, config)
        assert record["end"] == 10.0

    def test_empty_payload_has_no_records(self, config: SegmentationConfig) -> None:
        """Nothing transcribed means nothing to caption."""
        assert segments_from_transcription({}, config) == []


class TestParseTranscription:
    """Payload validation."""

    def test_invalid_shape_raises_input_error(self) -> None:
        """Type mismatches surface as ``CaptionInputError``."""
        with pytest.raises(CaptionInputError, match="Invalid transcription payload"):
            parse_transcription({"segments": "nope"})

    def test_parsed_model_passes_through(self) -> None:
        """An already validated payload is returned as is."""
        payload = TranscriptionPayload(text="x")
        assert parse_transcription(payload) is payload


class TestResolveDuration:
    """Choosing the media duration."""

    def test_prefers_reported_duration(self, config: SegmentationConfig) -> None:
        """A positive duration from the provider wins."""
        assert resolve_duration(VERBOSE_PAYLOAD, config=config) == 6.0

    def test_derives_duration_from_segments(self, config: SegmentationConfig) -> None:
        """Without a usable duration the last caption end is used."""
        payload = {
            "duration": 0,
            "segments": [{"start": 1, "end": 7.25, "text": "a"}],
        }
        assert resolve_duration(payload, config=config) == 7.25

    def test_empty_payload_uses_fallback(self, config: SegmentationConfig) -> None:
        """An empty payload falls back to the configured duration."""
        assert resolve_duration({}, config=config) == 10.0


class TestTranscriptionToCaptions:
    """End-to-end adapter behaviour."""

    def test_builds_sanitized_track(self, config: SegmentationConfig) -> None:
        """Segments are sanitized and the provider language is kept."""
        track = transcription_to_captions(VERBOSE_PAYLOAD, config)
        assert isinstance(track, CaptionTrack)
        assert track.language == "hi"
        assert track.duration == 6.0
        texts = [s.text for s in track.segments]
        assert texts == ["Namaste dosto.", "Aaj demo hai."]
        assert [w.text for w in track.segments[0].words] == ["Namaste", "dosto."]
        assert len(track.segments[1].words) == 3

    def test_text_only_payload_is_split(self, config: SegmentationConfig) -> None:
        """A long single segment is chunked by the split policy."""
        track = transcription_to_captions(
            {"text": "This is the whole transcript", "duration": 12.5}, config
        )
        assert len(track.segments) == 5
        assert track.segments[-1].end == 12.5
        assert track.duration == 12.5

    def test_segments_are_retargeted_to_duration(
        self, config: SegmentationConfig
    ) -> None:
        """Captions ending early are stretched to the reported duration."""
        payload = {
            "duration": 20.0,
            "segments": [
                {"start": 0, "end": 2, "text": "first"},
                {"start": 8, "end": 10, "text": "second"},
            ],
        }
        track = transcription_to_captions(payload, config)
        assert [(s.start, s.end) for s in track.segments] == [
            (0.0, 4.0),
            (16.0, 20.0),
        ]

    def test_language_defaults_to_hinglish(self, config: SegmentationConfig) -> None:
        """A missing language is reported as the default caption language."""
        track = transcription_to_captions({"text": "hello"}, config)
        assert track.language == "hi-en"
        assert track.to_dict()["segments"][0]["text"] == "hello"
