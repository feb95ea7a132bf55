"""CLI command implementations.

Both commands load a caption document, run it through the sanitization
pipeline with the limits given on the command line, and then either export
it or print a summary. Shared options come from ``cli/common_options.py``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.table import Table

from subify_captions.cli.common_options import caption_options
from subify_captions.core.config import SegmentationConfig
from subify_captions.core.documents import CaptionDocument, load_caption_document
from subify_captions.core.errors import CaptionError
from subify_captions.core.formatters import FORMATTERS, get_formatter
from subify_captions.core.models import CaptionSegment
from subify_captions.core.pipeline import sanitize_segments
from subify_captions.core.retarget import calculate_duration_from_captions
from subify_captions.utils.format_time import format_vtt_time
from subify_captions.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _build_config(
    max_duration: float, max_chars: int, max_words: int
) -> SegmentationConfig:
    return SegmentationConfig.from_constants().with_overrides(
        max_segment_duration_seconds=max_duration,
        max_segment_chars=max_chars,
        max_segment_words=max_words,
    )


def _load_and_sanitize(
    input_file: Path,
    target_duration: float | None,
    config: SegmentationConfig,
) -> tuple[CaptionDocument, list[CaptionSegment]]:
    """Load ``input_file`` and run the pipeline over its segments.

    Args:
        input_file: JSON caption document.
        target_duration: Explicit target; falls back to the document's own
            recorded duration.
        config: Pipeline configuration.

    Returns:
        The raw document and its sanitized segments.
    """
    document = load_caption_document(input_file, config)
    target = (
        target_duration if target_duration is not None else document.target_duration
    )
    segments = sanitize_segments(
        document.segments, target_duration=target, config=config
    )
    logger.info(
        "Sanitized %d raw segments into %d captions (target=%s)",
        len(document.segments),
        len(segments),
        target,
    )
    return document, segments


def _fail(exc: Exception, debug: bool) -> NoReturn:
    click.secho(f"\n❌ Caption error: {exc}", fg="red", err=True)
    if debug:
        logger.exception("Caption error details")
    else:
        click.secho("💡 Re-run with --debug for more details", fg="yellow", err=True)
    sys.exit(1)


@click.command(short_help="Export captions as SRT, VTT, JSON or text")
@caption_options
@click.option(
    "--format",
    "-f",
    "export_format",
    type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    default="srt",
    show_default=True,
    help="Output format",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout",
)
def export(
    input_file: Path,
    export_format: str,
    output: Path | None,
    target_duration: float | None,
    max_duration: float,
    max_chars: int,
    max_words: int,
    debug: bool,
) -> None:
    """Normalize the captions in INPUT_JSON and export them."""
    setup_logging(debug=debug)
    config = _build_config(max_duration, max_chars, max_words)

    try:
        _, segments = _load_and_sanitize(input_file, target_duration, config)
        content = get_formatter(export_format).format(segments, config)
    except CaptionError as exc:
        _fail(exc, debug)

    if output is None:
        click.echo(content, nl=not content.endswith("\n"))
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
    except OSError as exc:
        click.secho(
            f"❌ Failed to save {export_format.upper()}: {exc}", fg="red", err=True
        )
        sys.exit(1)
    click.secho(f"💾 Saved {export_format.upper()} to: {output}", fg="green", err=True)


@click.command(short_help="Show a summary table of the normalized captions")
@caption_options
def inspect(
    input_file: Path,
    target_duration: float | None,
    max_duration: float,
    max_chars: int,
    max_words: int,
    debug: bool,
) -> None:
    """Print the captions in INPUT_JSON after normalization."""
    setup_logging(debug=debug)
    config = _build_config(max_duration, max_chars, max_words)

    try:
        document, segments = _load_and_sanitize(input_file, target_duration, config)
    except CaptionError as exc:
        _fail(exc, debug)

    table = Table(title=input_file.name)
    table.add_column("#", justify="right")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Words", justify="right")
    table.add_column("Text", overflow="fold")
    for segment in segments:
        table.add_row(
            str(segment.id),
            format_vtt_time(segment.start),
            format_vtt_time(segment.end),
            str(len(segment.words)),
            segment.text,
        )
    Console().print(table)

    duration = calculate_duration_from_captions(
        segments, config.fallback_duration_seconds
    )
    click.echo(
        f"{len(segments)} captions from {len(document.segments)} raw segments, "
        f"ending at {duration:.3f}s"
    )
