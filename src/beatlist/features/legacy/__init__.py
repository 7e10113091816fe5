"""Public surface for the legacy playlist adapter."""

from .domain.models import ImageEncoding, LegacyPlaylist, LegacySong
from .usecases.cover_image import DecodedImage, LegacyImageDecoder
from .usecases.upgrade import (
    load_legacy_playlist,
    parse_legacy_playlist,
    upgrade_legacy_playlist,
    upgrade_legacy_song,
)

__all__ = [
    "DecodedImage",
    "ImageEncoding",
    "LegacyImageDecoder",
    "LegacyPlaylist",
    "LegacySong",
    "load_legacy_playlist",
    "parse_legacy_playlist",
    "upgrade_legacy_playlist",
    "upgrade_legacy_song",
]
