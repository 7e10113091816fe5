"""
Summary: Public surface for the playlist container format (model, validation, codec).
Why: Provide a single canonical import path for callers and the batch converter.
"""

from .domain import (
    ArchiveOpenError,
    BeatlistError,
    ContainerFormatError,
    Cover,
    CoverError,
    CoverKind,
    Difficulty,
    InvalidCoverDataError,
    InvalidCoverPathError,
    InvalidDifficultyError,
    InvalidFieldError,
    InvalidTrackError,
    LegacyFormatError,
    ManifestDecodeError,
    ManifestEncodeError,
    ManifestSchemaError,
    MismatchedTypeError,
    MissingEntryError,
    Playlist,
    PlaylistValidationError,
    Track,
    TrackKind,
    UnknownCoverTypeError,
)
from .usecases import (
    MANIFEST_ENTRY,
    PLAYLIST_EXTENSION,
    decode_playlist,
    encode_playlist,
    read_playlist,
    write_playlist,
)

__all__ = [
    "ArchiveOpenError",
    "BeatlistError",
    "ContainerFormatError",
    "Cover",
    "CoverError",
    "CoverKind",
    "Difficulty",
    "InvalidCoverDataError",
    "InvalidCoverPathError",
    "InvalidDifficultyError",
    "InvalidFieldError",
    "InvalidTrackError",
    "LegacyFormatError",
    "MANIFEST_ENTRY",
    "ManifestDecodeError",
    "ManifestEncodeError",
    "ManifestSchemaError",
    "MismatchedTypeError",
    "MissingEntryError",
    "PLAYLIST_EXTENSION",
    "Playlist",
    "PlaylistValidationError",
    "Track",
    "TrackKind",
    "UnknownCoverTypeError",
    "decode_playlist",
    "encode_playlist",
    "read_playlist",
    "write_playlist",
]
