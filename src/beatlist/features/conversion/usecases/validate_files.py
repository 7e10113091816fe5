"""Check existing playlist containers and summarise the first problem of each."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from beatlist.features.playlist.domain.errors import BeatlistError, PlaylistValidationError
from beatlist.features.playlist.usecases.archive_codec import read_playlist

from ..domain.models import ConversionEvent, ValidationResult

logger = logging.getLogger(__name__)


def validate_container(path: Path) -> ValidationResult:
    """Read ``path`` through the archive codec and report the outcome."""

    try:
        playlist = read_playlist(path)
    except PlaylistValidationError as error:
        result = ValidationResult(
            path=path,
            valid=False,
            error_message=str(error),
            location=error.location,
        )
    except Exception as error:
        if not isinstance(error, (BeatlistError, OSError)):
            logger.exception("Unexpected failure while reading `%s`", path)
        message = str(error) or type(error).__name__
        result = ValidationResult(path=path, valid=False, error_message=message)
    else:
        result = ValidationResult(
            path=path,
            valid=True,
            title=playlist.title,
            track_count=len(playlist.maps),
            has_cover=playlist.cover is not None,
        )

    if result.valid:
        logger.info(
            "`%s` is valid",
            path,
            extra={
                "conversion_event": ConversionEvent.VALIDATION_SUCCESS.value,
                "source_path": str(path),
            },
        )
    else:
        logger.error(
            "`%s` is invalid: %s",
            path,
            result.error_message,
            extra={
                "conversion_event": ConversionEvent.VALIDATION_ERROR.value,
                "source_path": str(path),
                "error_message": result.error_message,
            },
        )
    return result


def validate_containers(paths: Iterable[Path]) -> list[ValidationResult]:
    return [validate_container(path) for path in paths]


__all__ = ["validate_container", "validate_containers"]
