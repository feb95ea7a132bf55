"""Logging configuration for the command-line interface.

The dictConfig lives in ``logging_config.yaml`` next to the package root. Its
console handler is a Rich handler bound to stderr so log lines never mix with
subtitle output written to stdout.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.logging import RichHandler

from subify_captions.utils import constants

LOGGING_CONFIG_PATH = Path(__file__).resolve().parent.parent / "logging_config.yaml"


def stderr_rich_handler(**kwargs: Any) -> RichHandler:
    """Build a ``RichHandler`` that writes to stderr.

    Args:
        **kwargs: Handler options forwarded from the YAML config.

    Returns:
        The configured handler.
    """
    return RichHandler(console=Console(stderr=True), markup=False, **kwargs)


def load_logging_config(debug: bool = False, log_level: str | None = None) -> dict:
    """Load the logging dictConfig from YAML.

    Args:
        debug: Whether to raise every configured logger to DEBUG.
        log_level: Level for the ``subify_captions`` logger when not in
            debug mode; defaults to ``constants.LOG_LEVEL``.

    Returns:
        dict: The configured logging dictionary.
    """
    with open(LOGGING_CONFIG_PATH, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    package_logger = config["loggers"]["subify_captions"]
    package_logger["level"] = (log_level or constants.LOG_LEVEL).upper()

    if debug:
        config["root"]["level"] = "DEBUG"
        for logger_config in config.get("loggers", {}).values():
            logger_config["level"] = "DEBUG"

    return config


def setup_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Apply the YAML logging configuration.

    Args:
        debug: Whether to enable DEBUG output everywhere.
        log_level: Level for the package logger outside debug mode.
    """
    logging.config.dictConfig(load_logging_config(debug=debug, log_level=log_level))
    logging.getLogger(__name__).debug(
        "Logging configured (debug=%s, config=%s)", debug, LOGGING_CONFIG_PATH
    )
