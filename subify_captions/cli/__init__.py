"""Command-line interface for subify-captions."""
