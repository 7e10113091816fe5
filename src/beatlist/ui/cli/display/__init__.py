"""Display management for CLI interface."""

from beatlist.ui.cli.display.progress import ProgressDisplay
from beatlist.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
