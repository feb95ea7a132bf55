"""Main CLI entry point for subify-captions.

This module provides the main CLI group and coordinates all CLI functionality.
"""

import click

from subify_captions.cli.commands import export, inspect
from subify_captions.utils import constants


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(version=constants.APP_VERSION, prog_name=constants.APP_TITLE)
def cli():
    """Subify Captions - normalize, split and retime speech-to-text captions.

    For a full list of options for each command, add `--help` after the command name.
    """


cli.add_command(export)
cli.add_command(inspect)


def main():
    """Main entry point for the CLI application."""
    cli()
