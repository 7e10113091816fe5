"""Use cases of the playlist feature: manifest mapping and the archive codec."""

from .archive_codec import (
    PLAYLIST_EXTENSION,
    decode_playlist,
    encode_playlist,
    read_playlist,
    write_playlist,
)
from .manifest import MANIFEST_ENTRY, decode_manifest, encode_manifest

__all__ = [
    "MANIFEST_ENTRY",
    "PLAYLIST_EXTENSION",
    "decode_manifest",
    "decode_playlist",
    "encode_manifest",
    "encode_playlist",
    "read_playlist",
    "write_playlist",
]
