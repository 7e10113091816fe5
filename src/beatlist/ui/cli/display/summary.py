"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from beatlist.features.conversion import ConversionResult


def format_elapsed(elapsed_seconds: float) -> str:
    """Render a duration as milliseconds, or seconds above one second."""

    elapsed_ms = int(elapsed_seconds * 1000)
    if elapsed_ms > 1000:
        return f"{elapsed_ms / 1000:.3f} s"
    return f"{elapsed_ms} ms"


def render_conversion_summary(
    console: Console,
    results: Sequence[ConversionResult],
    elapsed_seconds: float,
) -> None:
    """Render the success count, elapsed time and each failure.

    Args:
        console: Rich console instance used to render output.
        results: Conversion outcomes to summarize.
        elapsed_seconds: Wall-clock duration of the batch.
    """
    success_count = sum(1 for result in results if result.success)
    failure_results = [result for result in results if not result.success]

    console.print(
        f"[green]Successfully converted {success_count} playlists in "
        f"{format_elapsed(elapsed_seconds)}[/green]"
    )

    if not failure_results:
        return

    console.print(f"[red]Failed: {len(failure_results)}[/red]")
    for failed_result in failure_results:
        console.print(
            f"[red]  • {escape(str(failed_result.source_path))}: "
            f"{escape(failed_result.error_message or '')}[/red]",
            markup=True,
            highlight=False,
        )
