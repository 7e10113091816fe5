"""src/beatlist/features/legacy/usecases/upgrade.py
What: Convert legacy playlist documents into the current playlist model.
Why: Give the batch converter one entry point from legacy bytes to a writable playlist.
"""

from __future__ import annotations

import logging
from pathlib import Path

from beatlist.features.playlist.domain.errors import LegacyFormatError
from beatlist.features.playlist.domain.models import Cover, Playlist, Track, TrackKind
from beatlist.shared.json_value import loads_json

from ..domain.models import ImageEncoding, LegacyPlaylist, LegacySong
from .cover_image import LegacyImageDecoder

logger = logging.getLogger(__name__)


def parse_legacy_playlist(data: bytes) -> LegacyPlaylist:
    """Decode legacy JSON bytes (UTF-8, BOM tolerated) into a parse target.

    Raises:
        LegacyFormatError: The bytes are not UTF-8 JSON or not a legacy playlist.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise LegacyFormatError(f"legacy playlist is not valid UTF-8: {error}") from error
    try:
        document = loads_json(text)
    except ValueError as error:
        raise LegacyFormatError(f"legacy playlist is not valid JSON: {error}") from error
    return LegacyPlaylist.from_document(document)


def load_legacy_playlist(path: Path) -> LegacyPlaylist:
    """Read and parse the legacy playlist stored at ``path``."""

    return parse_legacy_playlist(path.read_bytes())


def upgrade_legacy_song(song: LegacySong, *, preserve_custom_data: bool = True) -> Track:
    """Convert one legacy song into a track.

    The reference kind follows what the song provides: ``key`` first, then
    ``hash``. A song with neither becomes a level-ID track without a level
    ID, which fails validation until the caller fills it in.
    """
    if song.key is not None:
        kind = TrackKind.KEY
    elif song.hash is not None:
        kind = TrackKind.HASH
    else:
        kind = TrackKind.LEVEL_ID

    return Track(
        kind=kind,
        key=song.key,
        hash=song.hash,
        level_id=None,
        added_at=song.date_added,
        difficulties=[],
        custom_data=dict(song.custom_data) if preserve_custom_data else {},
    )


def upgrade_legacy_playlist(
    legacy: LegacyPlaylist,
    *,
    preserve_custom_data: bool = True,
    image_encoding: ImageEncoding = ImageEncoding.AUTO,
) -> Playlist:
    """Convert a legacy playlist into the current model.

    The result is not validated here; the archive codec validates it when
    it is written.

    Args:
        legacy: Parsed legacy document.
        preserve_custom_data: Carry unknown playlist and song keys over.
        image_encoding: Expected encoding of the legacy ``image`` field.

    Raises:
        LegacyFormatError: The cover payload cannot be decoded.
    """
    playlist = Playlist(
        title=legacy.title,
        author=legacy.author,
        description=legacy.description,
        maps=[
            upgrade_legacy_song(song, preserve_custom_data=preserve_custom_data)
            for song in legacy.songs
        ],
        custom_data=dict(legacy.custom_data) if preserve_custom_data else {},
    )

    decoded = LegacyImageDecoder(image_encoding).decode(legacy.image)
    if decoded is not None:
        playlist.cover = Cover(
            relative_path=decoded.kind.default_path,
            image_bytes=decoded.data,
            kind=decoded.kind,
        )

    logger.debug(
        "Upgraded legacy playlist %r (%d songs, cover=%s)",
        legacy.title,
        len(legacy.songs),
        decoded.kind.value if decoded is not None else None,
    )
    return playlist


__all__ = [
    "load_legacy_playlist",
    "parse_legacy_playlist",
    "upgrade_legacy_playlist",
    "upgrade_legacy_song",
]
