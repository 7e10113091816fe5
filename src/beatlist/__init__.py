"""beatlist: portable playlist containers with validation and legacy conversion."""

from beatlist.features.playlist import (
    BeatlistError,
    Cover,
    CoverKind,
    Difficulty,
    Playlist,
    PlaylistValidationError,
    Track,
    TrackKind,
    decode_playlist,
    encode_playlist,
    read_playlist,
    write_playlist,
)

__version__ = "0.1.0"

__all__ = [
    "BeatlistError",
    "Cover",
    "CoverKind",
    "Difficulty",
    "Playlist",
    "PlaylistValidationError",
    "Track",
    "TrackKind",
    "__version__",
    "decode_playlist",
    "encode_playlist",
    "read_playlist",
    "write_playlist",
]
