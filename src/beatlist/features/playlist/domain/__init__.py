"""Domain layer of the playlist feature."""

from .errors import (
    ArchiveOpenError,
    BeatlistError,
    ContainerFormatError,
    CoverError,
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
    PlaylistValidationError,
    UnknownCoverTypeError,
)
from .models import Cover, CoverKind, Difficulty, Playlist, Track, TrackKind

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
    "ManifestDecodeError",
    "ManifestEncodeError",
    "ManifestSchemaError",
    "MismatchedTypeError",
    "MissingEntryError",
    "Playlist",
    "PlaylistValidationError",
    "Track",
    "TrackKind",
    "UnknownCoverTypeError",
]
