"""Constants and configuration management for subify-captions.

This module is the **single source of truth** for the caption pipeline's
tunable defaults. Application modules import values from here instead of
reading environment variables directly:

    # Correct - Use centralized constants
    from subify_captions.utils.constants import MAX_SEGMENT_CHARS

    # Incorrect - Direct environment access bypasses centralized config
    limit = int(os.getenv("CAPTION_MAX_SEGMENT_CHARS", "84"))

Configuration File Locations:

1. Project root `.env` file: loaded by ``env_loader`` on first import.
2. ~/.config/subify-captions/.env: loaded here and takes precedence over the
   project file and the shell environment.

Type Conversion Patterns

Integer Variables:
    NUMERIC_SETTING = int(os.getenv("NUMERIC_SETTING", "10"))

Float Variables:
    DECIMAL_SETTING = float(os.getenv("DECIMAL_SETTING", "1.5"))

The pipeline functions never read these values implicitly; they receive a
``SegmentationConfig`` built from them (see ``core.config``).
"""

from __future__ import annotations

import logging
import os
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

from dotenv import load_dotenv

from subify_captions.utils.env_loader import (
    PROJECT_ROOT,
    USER_CONFIG_DIR,
    USER_ENV_EXISTS,
    USER_ENV_FILE,
    debug_print,
)

__all__ = [
    "PROJECT_ROOT",
    "USER_CONFIG_DIR",
]

logger = logging.getLogger(__name__)

# --- Load user-specific .env (overrides project .env) ---
if USER_ENV_EXISTS:
    debug_print(f"Loading user .env: {USER_ENV_FILE}")
    load_dotenv(USER_ENV_FILE, override=True)

# Application metadata
APP_TITLE = "Subify Captions"
try:
    APP_VERSION = pkg_version("subify-captions")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Segment splitting limits
MAX_SEGMENT_DURATION_SEC = float(
    os.getenv("CAPTION_MAX_SEGMENT_DURATION_SEC", "4.5")
)  # Longest span a single caption may cover
MAX_SEGMENT_CHARS = int(
    os.getenv("CAPTION_MAX_SEGMENT_CHARS", "84")
)  # Longest caption text, spaces included
MAX_SEGMENT_WORDS = int(
    os.getenv("CAPTION_MAX_SEGMENT_WORDS", "14")
)  # Most words shown in one caption

# Duration retargeting
DURATION_TOLERANCE_RATIO = float(
    os.getenv("CAPTION_DURATION_TOLERANCE_RATIO", "0.05")
)  # Fraction of the target duration treated as "close enough"
DURATION_TOLERANCE_MIN_SEC = float(
    os.getenv("CAPTION_DURATION_TOLERANCE_MIN_SEC", "0.5")
)  # Absolute floor for the tolerance window
FALLBACK_DURATION_SEC = float(
    os.getenv("CAPTION_FALLBACK_DURATION_SEC", "10")
)  # Duration assumed for an empty caption track

# Word timing synthesis
MIN_SYNTH_DURATION_SEC = float(
    os.getenv("CAPTION_MIN_SYNTH_DURATION_SEC", "0.01")
)  # Floor applied before spreading a segment over its words

# Playback lookup
ACTIVE_CAPTION_GRACE_SEC = float(
    os.getenv("CAPTION_ACTIVE_GRACE_SEC", "0.1")
)  # Caption stays on screen this long past its end

# Transcription payload defaults
DEFAULT_LANGUAGE = os.getenv("CAPTION_DEFAULT_LANGUAGE", "hi-en")

debug_print(
    f"Caption limits loaded: duration={MAX_SEGMENT_DURATION_SEC}s, "
    f"chars={MAX_SEGMENT_CHARS}, words={MAX_SEGMENT_WORDS}, "
    f"log_level={LOG_LEVEL}"
)
