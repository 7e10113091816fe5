"""Domain layer of the legacy playlist feature."""

from .models import ImageEncoding, LegacyPlaylist, LegacySong

__all__ = ["ImageEncoding", "LegacyPlaylist", "LegacySong"]
