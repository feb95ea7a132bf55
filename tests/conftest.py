"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from subify_captions.core.config import SegmentationConfig


@pytest.fixture
def config() -> SegmentationConfig:
    """Default pipeline limits, independent of any local .env overrides."""
    return SegmentationConfig()


@pytest.fixture
def sample_records() -> list[dict]:
    """A small, slightly messy caption track as an ASR provider might send it."""
    return [
        {
            "id": 7,
            "start": 2.6,
            "end": 5.2,
            "text": "  Aaj hum ek quick demo dekh rahe hain. ",
        },
        {"start": 0, "end": 2.6, "text": "Namaste dosto, welcome back to the channel!"},
        {"start": 5.2, "end": 5.9, "text": "   "},
        {"start": -1, "end": 0.4, "text": "Intro"},
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    """Return a helper that writes ``data`` as JSON into ``tmp_path``."""

    def _write(data: object, name: str = "captions.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
