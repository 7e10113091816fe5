"""src/beatlist/features/conversion/domain/models.py
Where: Conversion feature domain layer.
What: Requests, per-file results, log events and errors of batch conversion runs.
Why: Keep the batch runner lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from beatlist.features.legacy.domain.models import ImageEncoding
from beatlist.features.playlist.domain.errors import BeatlistError, Location


class ConversionEvent(StrEnum):
    """Structured event identifiers for conversion logs."""

    BATCH_START = "conversion.batch.start"
    BATCH_COMPLETE = "conversion.batch.complete"
    BATCH_NO_FILES = "conversion.batch.no_files"
    FILE_START = "conversion.file.start"
    FILE_SUCCESS = "conversion.file.success"
    FILE_ERROR = "conversion.file.error"
    FILE_DELETE = "conversion.file.delete"
    VALIDATION_SUCCESS = "validation.file.success"
    VALIDATION_ERROR = "validation.file.error"


class ConversionError(BeatlistError):
    """A single file could not be converted."""


class DestinationExistsError(ConversionError):
    """The converted file would overwrite an existing file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Destination path `{path}` already exists")
        self.path: Path = path


@dataclass(slots=True, frozen=True)
class ConversionRequest:
    """Inputs required to run a batch conversion."""

    pattern: str
    preserve_custom_data: bool = True
    image_encoding: ImageEncoding = ImageEncoding.AUTO
    exit_on_error: bool = False
    delete_converted: bool = False
    workers: int | None = None


@dataclass(slots=True)
class ConversionResult:
    """Outcome of converting one legacy playlist."""

    source_path: Path
    target_path: Path | None = None
    success: bool = False
    error_message: str | None = None
    deleted_source: bool = False
    duration_ms: float | None = None


@dataclass(slots=True)
class ValidationResult:
    """Outcome of reading one playlist container."""

    path: Path
    valid: bool
    title: str | None = None
    track_count: int = 0
    has_cover: bool = False
    error_message: str | None = None
    location: Location = ()


@dataclass(slots=True)
class BatchLogContext:
    """Mutable bookkeeping for a batch conversion run."""

    pattern: str
    total_files: int
    start_time: float = field(default_factory=time.perf_counter)
    succeeded: int = 0
    failed: int = 0
    completed: int = 0

    def record(self, result: ConversionResult) -> int:
        """Count ``result`` and return its completion sequence number."""

        self.completed += 1
        if result.success:
            self.succeeded += 1
        else:
            self.failed += 1
        return self.completed

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "conversion_event": ConversionEvent.BATCH_COMPLETE.value,
            "pattern": self.pattern,
            "total_files": self.total_files,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "BatchLogContext",
    "ConversionError",
    "ConversionEvent",
    "ConversionRequest",
    "ConversionResult",
    "DestinationExistsError",
    "ValidationResult",
]
