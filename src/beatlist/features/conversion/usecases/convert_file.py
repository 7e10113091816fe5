"""
Summary: Convert one legacy playlist file into a sibling playlist container.
Why: Isolate the read, upgrade, write and delete steps so the batch runner only schedules work.
"""

from __future__ import annotations

import logging
from pathlib import Path

from beatlist.features.legacy.domain.models import ImageEncoding
from beatlist.features.legacy.usecases.upgrade import load_legacy_playlist, upgrade_legacy_playlist
from beatlist.features.playlist.usecases.archive_codec import PLAYLIST_EXTENSION, encode_playlist

from ..domain.models import DestinationExistsError

logger = logging.getLogger(__name__)


def target_path_for(source: Path) -> Path:
    """Return the sibling container path for ``source``."""

    return source.with_suffix(PLAYLIST_EXTENSION)


def convert_file(
    source: Path,
    *,
    preserve_custom_data: bool = True,
    image_encoding: ImageEncoding = ImageEncoding.AUTO,
    delete_converted: bool = False,
) -> Path:
    """Convert ``source`` and return the written container path.

    The destination is created in exclusive mode, so an existing file is
    never overwritten, even when it appears while the conversion runs.

    Raises:
        DestinationExistsError: The destination already exists.
        LegacyFormatError: The source is not a legacy playlist.
        PlaylistValidationError: The upgraded playlist is invalid.
        OSError: Reading, writing or deleting failed.
    """
    target = target_path_for(source)
    if target.exists():
        raise DestinationExistsError(target)

    logger.debug("Reading `%s`", source)
    legacy = load_legacy_playlist(source)
    playlist = upgrade_legacy_playlist(
        legacy,
        preserve_custom_data=preserve_custom_data,
        image_encoding=image_encoding,
    )
    data = encode_playlist(playlist)

    logger.debug("Writing `%s`", target)
    try:
        handle = open(target, "xb")
    except FileExistsError as error:
        raise DestinationExistsError(target) from error
    try:
        with handle:
            _ = handle.write(data)
    except OSError:
        target.unlink(missing_ok=True)
        raise

    if delete_converted:
        source.unlink()
    return target


__all__ = ["convert_file", "target_path_for"]
