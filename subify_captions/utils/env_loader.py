"""Handles initial environment setup, .env file loading, and debug flag detection.

This module is responsible for:
- Locating project root and user-specific .env files.
- Loading the project root .env so constants.py sees its values.
- Providing a conditional debug print used before logging is configured.
- Exposing paths and existence flags for .env files to be used by constants.py
  for the main .env loading sequence.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# Assumes this file is in subify_captions/utils/
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
PROJECT_ROOT_ENV_FILE = PROJECT_ROOT / ".env"

USER_CONFIG_DIR = Path.home() / ".config" / "subify-captions"
USER_ENV_FILE = USER_CONFIG_DIR / ".env"

_cli_debug_mode = "--debug" in sys.argv

PROJECT_ROOT_ENV_EXISTS = PROJECT_ROOT_ENV_FILE.exists()
USER_ENV_EXISTS = USER_ENV_FILE.exists()

if PROJECT_ROOT_ENV_EXISTS:
    load_dotenv(PROJECT_ROOT_ENV_FILE, override=True)

SHOW_DEBUG_PRINTS = _cli_debug_mode or os.getenv("LOG_LEVEL", "").upper() == "DEBUG"


def debug_print(message: str):
    """Prints a message if SHOW_DEBUG_PRINTS is True, formatted like a log entry."""
    if SHOW_DEBUG_PRINTS:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S,%f")[:-3]
        print(f"{timestamp} - ENV_LOADER_DEBUG - INFO - {message}", file=sys.stderr)


debug_print(f"env_loader.py: Checking for project .env at: {PROJECT_ROOT_ENV_FILE}")
if PROJECT_ROOT_ENV_EXISTS:
    debug_print("env_loader.py: Found project .env file.")
else:
    debug_print("env_loader.py: Project .env file NOT found.")
