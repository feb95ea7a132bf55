"""Shared Click option decorator for caption commands.

``caption_options`` injects the input argument and the pipeline tuning
options used by both ``export`` and ``inspect``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from subify_captions.utils import constants


def caption_options(func: Callable[..., None]) -> Callable[..., None]:  # noqa: D401
    """Attach common caption-processing CLI options to ``func``.

    Returns:
        Callable[..., None]: The wrapped function, so the decorator can be
        stacked beneath ``@click.command``.
    """
    options: list[Callable[[Callable[..., None]], Callable[..., None]]] = [
        click.argument(
            "input_file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            metavar="INPUT_JSON",
        ),
        click.option(
            "--target-duration",
            "-t",
            type=float,
            default=None,
            help=(
                "Real media duration in seconds; captions are rescaled to match "
                "it. Defaults to the duration recorded in the input, if any."
            ),
        ),
        click.option(
            "--max-duration",
            type=click.FloatRange(min=0, min_open=True),
            default=constants.MAX_SEGMENT_DURATION_SEC,
            show_default=True,
            help="Maximum seconds covered by one caption",
        ),
        click.option(
            "--max-chars",
            type=click.IntRange(min=1),
            default=constants.MAX_SEGMENT_CHARS,
            show_default=True,
            help="Maximum characters in one caption",
        ),
        click.option(
            "--max-words",
            type=click.IntRange(min=1),
            default=constants.MAX_SEGMENT_WORDS,
            show_default=True,
            help="Maximum words in one caption",
        ),
        click.option(
            "--debug",
            is_flag=True,
            default=False,
            help="Enable debug logging",
        ),
    ]

    for option in reversed(options):
        func = option(func)
    return func
