"""Tests for the caption split policy."""

from __future__ import annotations

import string

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.models import CaptionSegment
from subify_captions.core.splitter import (
    chunk_segment_by_words,
    should_split_segment,
    split_segments,
)
from subify_captions.core.word_timing import ensure_word_timings


def _timed(
    start: float, end: float, text: str, config: SegmentationConfig
) -> CaptionSegment:
    segment = CaptionSegment(id=0, start=start, end=end, text=text)
    return ensure_word_timings(segment, config)


class TestShouldSplitSegment:
    """Limit checks on whole segments."""

    def test_short_segment_is_kept(self, config: SegmentationConfig) -> None:
        """A segment within every limit is left alone."""
        assert not should_split_segment(_timed(0, 2, "short line", config), config)

    def test_each_limit_triggers_a_split(self, config: SegmentationConfig) -> None:
        """Duration, characters and word count are checked independently."""
        assert should_split_segment(_timed(0, 5, "too long", config), config)
        assert should_split_segment(_timed(0, 2, "word " * 20, config), config)
        long_words = " ".join(["abcdefghij"] * 8)
        assert should_split_segment(_timed(0, 2, long_words, config), config)

    def test_single_word_is_never_split(self, config: SegmentationConfig) -> None:
        """No finer unit than a word exists."""
        word = "Pneumonoultramicroscopicsilicovolcanoconiosis" * 3
        segment = _timed(0, 30, word, config)
        assert not should_split_segment(segment, config)
        assert chunk_segment_by_words(segment, config) == [segment]


class TestChunkSegmentByWords:
    """Greedy chunking on word boundaries."""

    def test_twenty_words_over_six_seconds(self, config: SegmentationConfig) -> None:
        """The word limit closes the first chunk, the rest forms the second."""
        letters = " ".join(string.ascii_lowercase[:20])
        segment = _timed(0, 6, letters, config)

        chunks = split_segments([segment], config)

        assert len(chunks) == 2
        first, second = chunks
        assert first.text == "a b c d e f g h i j k l m n"
        assert second.text == "o p q r s t"
        assert (first.start, first.end) == (0.0, 4.2)
        assert (second.start, second.end) == (4.2, 6.0)
        assert [w.id for w in second.words] == list(range(6))

    def test_character_limit(self) -> None:
        """Chunks close before the joined text passes the character limit."""
        config = SegmentationConfig(max_segment_chars=10)
        segment = _timed(0, 4, "alpha beta gamma delta", config)
        chunks = chunk_segment_by_words(segment, config)
        assert [c.text for c in chunks] == ["alpha beta", "gamma", "delta"]
        spans = [(c.start, c.end) for c in chunks]
        assert spans == [(0.0, 2.0), (2.0, 3.0), (3.0, 4.0)]

    def test_oversized_word_becomes_its_own_chunk(self) -> None:
        """A word that alone breaks a limit is emitted unchanged."""
        config = SegmentationConfig(max_segment_chars=10)
        segment = _timed(0, 2, "supercalifragilistic short", config)
        chunks = chunk_segment_by_words(segment, config)
        assert [c.text for c in chunks] == ["supercalifragilistic", "short"]

    def test_chunks_cover_the_parent_in_order(
        self, config: SegmentationConfig
    ) -> None:
        """Chunks are contiguous and never overlap."""
        segment = _timed(10, 25, " ".join(["word"] * 40), config)
        chunks = chunk_segment_by_words(segment, config)
        assert chunks[0].start == 10.0
        assert chunks[-1].end == 25.0
        for previous, current in zip(chunks, chunks[1:]):
            assert previous.end <= current.start
        for chunk in chunks:
            assert chunk.end - chunk.start <= config.max_segment_duration_seconds
            assert len(chunk.words) <= config.max_segment_words


def test_split_segments_preserves_unsplit_segments(
    config: SegmentationConfig,
) -> None:
    """Segments within limits pass through as the same objects."""
    keep = _timed(0, 1, "fine", config)
    assert split_segments([keep], config) == [keep]
