"""src/beatlist/features/conversion/usecases/batch_converter.py
What: Discover legacy playlists by glob and convert them in parallel.
Why: Report every file independently while letting one failure stop further work on request.
"""

from __future__ import annotations

import glob
import logging
import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from beatlist.features.playlist.domain.errors import BeatlistError

from ..domain.models import (
    BatchLogContext,
    ConversionEvent,
    ConversionRequest,
    ConversionResult,
)
from .convert_file import convert_file, target_path_for

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Path], None]


class BatchConverter:
    """Convert every legacy playlist matching a glob pattern."""

    def discover(self, pattern: str) -> list[Path]:
        """Return the regular files matching ``pattern`` in a stable order."""

        matches = glob.glob(pattern, recursive=True)
        return sorted(path for path in map(Path, matches) if path.is_file())

    def convert_one(self, source: Path, request: ConversionRequest) -> ConversionResult:
        """Convert ``source`` and capture the outcome instead of raising."""

        started = time.perf_counter()
        logger.debug(
            "Converting `%s`",
            source,
            extra={"conversion_event": ConversionEvent.FILE_START.value, "source_path": str(source)},
        )
        try:
            target = convert_file(
                source,
                preserve_custom_data=request.preserve_custom_data,
                image_encoding=request.image_encoding,
                delete_converted=request.delete_converted,
            )
        except Exception as error:
            if not isinstance(error, (BeatlistError, OSError)):
                logger.exception("Unexpected failure while converting `%s`", source)
            return ConversionResult(
                source_path=source,
                target_path=target_path_for(source),
                success=False,
                error_message=str(error) or type(error).__name__,
                duration_ms=(time.perf_counter() - started) * 1000,
            )

        return ConversionResult(
            source_path=source,
            target_path=target,
            success=True,
            deleted_source=request.delete_converted,
            duration_ms=(time.perf_counter() - started) * 1000,
        )

    def convert(
        self,
        request: ConversionRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ConversionResult]:
        """Run the batch described by ``request``.

        Files are converted on a thread pool with no ordering guarantee. When
        ``request.exit_on_error`` is set, the first failure cancels every
        conversion that has not started yet; conversions already running
        still finish and are reported.

        Args:
            request: Batch parameters.
            progress_callback: Called with ``(completed, total, path)`` after
                each file.

        Returns:
            list[ConversionResult]: One entry per attempted file, in
            completion order.
        """
        sources = self.discover(request.pattern)
        context = BatchLogContext(pattern=request.pattern, total_files=len(sources))

        if not sources:
            logger.info(
                "No files match `%s`",
                request.pattern,
                extra={
                    "conversion_event": ConversionEvent.BATCH_NO_FILES.value,
                    "pattern": request.pattern,
                },
            )
            return []

        logger.info(
            "Converting %d files",
            len(sources),
            extra={
                "conversion_event": ConversionEvent.BATCH_START.value,
                "pattern": request.pattern,
                "total_files": len(sources),
            },
        )

        results: list[ConversionResult] = []
        with ThreadPoolExecutor(max_workers=request.workers) as executor:
            futures: dict[Future[ConversionResult], Path] = {
                executor.submit(self.convert_one, source, request): source for source in sources
            }
            stopping = False
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                result = future.result()
                if not result.success and request.exit_on_error and not stopping:
                    stopping = True
                    executor.shutdown(wait=False, cancel_futures=True)

                results.append(result)
                sequence = context.record(result)
                self._log_result(result, sequence, context.total_files)
                if progress_callback is not None:
                    progress_callback(sequence, context.total_files, result.source_path)

        logger.info(
            "Converted %d of %d files",
            context.succeeded,
            context.total_files,
            extra=context.summary_extra(),
        )
        return results

    @staticmethod
    def _log_result(result: ConversionResult, sequence: int, total: int) -> None:
        extra: dict[str, object] = {
            "source_path": str(result.source_path),
            "target_path": str(result.target_path) if result.target_path else None,
            "sequence": sequence,
            "total_files": total,
            "duration_ms": result.duration_ms,
        }
        if not result.success:
            logger.error(
                "Failed conversion for `%s`: %s",
                result.source_path,
                result.error_message,
                extra={
                    **extra,
                    "conversion_event": ConversionEvent.FILE_ERROR.value,
                    "error_message": result.error_message,
                },
            )
            return

        logger.info(
            "Converted `%s` to `%s`",
            result.source_path,
            result.target_path,
            extra={**extra, "conversion_event": ConversionEvent.FILE_SUCCESS.value},
        )
        if result.deleted_source:
            logger.debug(
                "Deleted `%s`",
                result.source_path,
                extra={**extra, "conversion_event": ConversionEvent.FILE_DELETE.value},
            )


__all__ = ["BatchConverter", "ProgressCallback"]
