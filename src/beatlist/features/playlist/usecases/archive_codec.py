"""src/beatlist/features/playlist/usecases/archive_codec.py
What: Read and write playlist containers (zip with ``playlist.json`` plus an optional cover).
Why: Guarantee that only validated playlists are persisted and only valid archives are accepted.
"""

from __future__ import annotations

import io
import logging
import os
import zipfile
import zlib
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Final, TypeAlias

from ..domain.errors import (
    ArchiveOpenError,
    ContainerFormatError,
    InvalidCoverDataError,
    InvalidCoverPathError,
    MissingEntryError,
)
from ..domain.models import Cover, CoverKind, Playlist
from ..domain.validators import has_signature, is_safe_relative_path, is_single_file_name
from .manifest import MANIFEST_ENTRY, decode_manifest, encode_manifest

logger = logging.getLogger(__name__)

PLAYLIST_EXTENSION: Final[str] = ".blist"

PlaylistSource: TypeAlias = str | os.PathLike[str] | BinaryIO
PlaylistTarget: TypeAlias = str | os.PathLike[str] | BinaryIO

# Raised by zipfile for damaged, encrypted or unsupported-compression entries.
_ARCHIVE_ERRORS: Final[tuple[type[Exception], ...]] = (
    zipfile.BadZipFile,
    zlib.error,
    RuntimeError,
    NotImplementedError,
    EOFError,
)


def encode_playlist(playlist: Playlist) -> bytes:
    """Validate ``playlist`` and return the container bytes.

    Raises:
        PlaylistValidationError: The playlist (cover included) is invalid.
        ManifestEncodeError: Custom data cannot be represented as JSON.
    """
    playlist.validate()
    manifest = encode_manifest(playlist)

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(MANIFEST_ENTRY, manifest)
        if playlist.cover is not None:
            archive.writestr(str(playlist.cover.relative_path), playlist.cover.image_bytes)

    data = buffer.getvalue()
    logger.debug(
        "Encoded playlist %r (%d tracks, cover=%s, %d bytes)",
        playlist.title,
        len(playlist.maps),
        playlist.cover.relative_path if playlist.cover is not None else None,
        len(data),
    )
    return data


def write_playlist(playlist: Playlist, target: PlaylistTarget) -> None:
    """Validate ``playlist`` and write it to a path or binary stream.

    The archive is built in memory first, so nothing is written when
    validation or encoding fails.
    """
    data = encode_playlist(playlist)
    if isinstance(target, (str, os.PathLike)):
        _ = Path(target).write_bytes(data)
        return
    _ = target.write(data)


def decode_playlist(data: bytes, *, preserve_custom_data: bool = True) -> Playlist:
    """Decode container bytes into a validated playlist."""

    return read_playlist(io.BytesIO(data), preserve_custom_data=preserve_custom_data)


def read_playlist(source: PlaylistSource, *, preserve_custom_data: bool = True) -> Playlist:
    """Read a container from a path or binary stream and validate it.

    Args:
        source: Filesystem path or seekable binary stream.
        preserve_custom_data: Keep custom data and unknown manifest keys.

    Returns:
        Playlist: Fully validated playlist, cover bytes included.

    Raises:
        ContainerFormatError: The archive or its manifest cannot be decoded.
        CoverError: The declared cover is unsafe, missing its signature or
            uses an unsupported extension.
        PlaylistValidationError: The decoded playlist violates the schema.
        OSError: The underlying storage failed.
    """
    try:
        archive = zipfile.ZipFile(source)
    except _ARCHIVE_ERRORS as error:
        raise ArchiveOpenError(f"not a playlist archive: {error}") from error

    with archive:
        manifest = _read_entry(archive, MANIFEST_ENTRY)
        playlist = decode_manifest(manifest, preserve_custom_data=preserve_custom_data)
        if playlist.cover is not None:
            _load_cover(archive, playlist.cover)

    playlist.validate()
    logger.debug("Read playlist %r with %d tracks", playlist.title, len(playlist.maps))
    return playlist


def _read_entry(archive: zipfile.ZipFile, name: str) -> bytes:
    try:
        return archive.read(name)
    except KeyError as error:
        raise MissingEntryError(name) from error
    except _ARCHIVE_ERRORS as error:
        raise ContainerFormatError(f"archive entry `{name}` cannot be read: {error}") from error


def _load_cover(archive: zipfile.ZipFile, cover: Cover) -> None:
    """Resolve the cover entry, check its signature, then read it in full.

    Failures are raised immediately instead of leaving an unknown cover behind.
    """
    path: PurePosixPath = cover.relative_path
    kind = CoverKind.from_path(path)
    signature = kind.signature
    if signature is None or not is_single_file_name(path):
        raise InvalidCoverPathError(kind.value, path)

    name = str(path)
    if not is_safe_relative_path(path, archive.namelist()):
        raise MissingEntryError(name)

    try:
        with archive.open(name) as entry:
            head = entry.read(len(signature))
            if not has_signature(head, signature):
                raise InvalidCoverDataError(kind.value)
            rest = entry.read()
    except _ARCHIVE_ERRORS as error:
        raise ContainerFormatError(f"archive entry `{name}` cannot be read: {error}") from error

    cover.image_bytes = head + rest
    cover.kind = kind


__all__ = [
    "PLAYLIST_EXTENSION",
    "PlaylistSource",
    "PlaylistTarget",
    "decode_playlist",
    "encode_playlist",
    "read_playlist",
    "write_playlist",
]
