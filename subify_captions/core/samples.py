"""Demo captions shown before a video has been transcribed."""

from __future__ import annotations

from subify_captions.core.config import SegmentationConfig
from subify_captions.core.pipeline import sanitize_segments

SAMPLE_CAPTION_RECORDS = [
    {
        "id": 0,
        "start": 0,
        "end": 2.6,
        "text": "Namaste dosto, welcome back to the channel!",
    },
    {
        "id": 1,
        "start": 2.6,
        "end": 5.2,
        "text": "Aaj hum ek quick Hinglish caption demo dekh rahe hain.",
    },
    {
        "id": 2,
        "start": 5.2,
        "end": 8.1,
        "text": "Video pe subtitles overlay karna super easy hai.",
    },
    {
        "id": 3,
        "start": 8.1,
        "end": 11.5,
        "text": "Chaliye, captions ko teen styles mein preview karte hain.",
    },
]

SAMPLE_CAPTIONS = sanitize_segments(SAMPLE_CAPTION_RECORDS, config=SegmentationConfig())
