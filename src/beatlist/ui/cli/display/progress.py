"""Transient progress bar for batch conversions."""

from pathlib import Path
from typing import Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from beatlist.features.conversion import ConversionRequest, ConversionResult
from beatlist.features.conversion.usecases.batch_converter import ProgressCallback
from beatlist.platform.logging import ConversionRichHandler, logger

TASK_LABEL = "[cyan]Converting playlists..."


@runtime_checkable
class BatchConverterLike(Protocol):
    """Anything that converts a batch and reports per-file progress."""

    def convert(
        self,
        request: ConversionRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ConversionResult]:
        ...


def _log_console() -> Console:
    # Sharing the log console keeps log lines above the bar instead of through it.
    return next(
        (h.console for h in logger.handlers if isinstance(h, ConversionRichHandler)),
        Console(stderr=True),
    )


@final
class ProgressDisplay:
    """Wraps a conversion run in a rich progress bar."""

    def run_with_converter(
        self,
        converter: BatchConverterLike,
        request: ConversionRequest,
    ) -> list[ConversionResult]:
        """Convert ``request`` with ``converter`` while the bar tracks finished files."""

        with Progress(
            console=_log_console(),
            transient=True,
            redirect_stdout=False,
            redirect_stderr=False,
        ) as progress:
            task: TaskID | None = None

            def advance(completed: int, total: int, current_file: Path) -> None:
                nonlocal task
                if task is None:
                    task = progress.add_task(TASK_LABEL, total=total)
                progress.update(
                    task,
                    completed=completed,
                    description=f"{TASK_LABEL} {completed}/{total} {current_file.name}",
                )

            return converter.convert(request, advance)
