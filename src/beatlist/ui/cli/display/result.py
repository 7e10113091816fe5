"""src/beatlist/ui/cli/display/result.py
What: Render user-facing summaries for convert/validate CLI flows.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from beatlist.features.conversion import ConversionResult, ValidationResult
from beatlist.features.playlist.domain.errors import format_location

from .summary import render_conversion_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_conversion_results(
        self,
        results: list[ConversionResult],
        elapsed_seconds: float,
        quiet: bool = False,
    ) -> None:
        """Display conversion results.

        Args:
            results: List of conversion results.
            elapsed_seconds: Duration of the whole batch.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        render_conversion_summary(self.console, results, elapsed_seconds)

    def show_validation_results(self, results: list[ValidationResult], quiet: bool = False) -> None:
        """Display one row per checked container."""

        if quiet:
            return

        table = Table(title="Playlist validation")
        table.add_column("File")
        table.add_column("Status")
        table.add_column("Details")

        for result in results:
            if result.valid:
                details = f"{result.title} ({result.track_count} tracks"
                details += ", cover)" if result.has_cover else ")"
                table.add_row(escape(str(result.path)), "[green]valid[/green]", escape(details))
            else:
                message = result.error_message or "<no message provided>"
                if result.location:
                    message = f"{format_location(result.location)}: {message}"
                table.add_row(escape(str(result.path)), "[red]invalid[/red]", escape(message))

        self.console.print(table)
