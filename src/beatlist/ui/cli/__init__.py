"""Command line interface package; ``main`` backs the console script."""

from beatlist.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
