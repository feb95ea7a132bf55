"""Entry point for running the package as a module.

This module allows running the CLI using:
python -m subify_captions
"""

from subify_captions.cli.cli import main

if __name__ == "__main__":
    main()
