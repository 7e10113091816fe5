"""Use cases converting legacy playlists into the current model."""

from .cover_image import DecodedImage, LegacyImageDecoder
from .upgrade import (
    load_legacy_playlist,
    parse_legacy_playlist,
    upgrade_legacy_playlist,
    upgrade_legacy_song,
)

__all__ = [
    "DecodedImage",
    "LegacyImageDecoder",
    "load_legacy_playlist",
    "parse_legacy_playlist",
    "upgrade_legacy_playlist",
    "upgrade_legacy_song",
]
