"""Parse targets for the flat legacy playlist JSON schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Final

from beatlist.features.playlist.domain.errors import LegacyFormatError
from beatlist.features.playlist.usecases.manifest import parse_timestamp
from beatlist.shared.json_value import JsonObject, JsonValue, split_known_keys

_PLAYLIST_KEYS: Final[frozenset[str]] = frozenset(
    {"playlistTitle", "playlistAuthor", "playlistDescription", "songs", "image"}
)
_SONG_KEYS: Final[frozenset[str]] = frozenset({"key", "hash", "dateAdded"})


class ImageEncoding(str, Enum):
    """How the legacy ``image`` field encodes the cover."""

    AUTO = "auto"
    BASE64 = "base64"
    DATA_URI = "data-uri"

    @staticmethod
    def from_user_input(value: str) -> "ImageEncoding":
        """Translate raw CLI or config input into the matching encoding."""

        normalized = value.strip().lower().replace("_", "-")
        for encoding in ImageEncoding:
            if encoding.value == normalized:
                return encoding
        valid: Final[str] = ", ".join(e.value for e in ImageEncoding)
        msg = f"Unsupported image encoding '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True)
class LegacySong:
    """One entry of the legacy ``songs`` array."""

    key: str | None = None
    hash: str | None = None
    date_added: datetime | None = None
    custom_data: JsonObject = field(default_factory=dict)

    @classmethod
    def from_document(cls, value: JsonValue, index: int) -> LegacySong:
        owner = f"song {index}"
        if not isinstance(value, dict):
            raise LegacyFormatError(f"{owner} must be a JSON object")

        raw_date = _optional_str(value, "dateAdded", owner)
        date_added: datetime | None = None
        if raw_date is not None:
            try:
                date_added = parse_timestamp(raw_date)
            except ValueError as error:
                raise LegacyFormatError(f"{owner} has malformed dateAdded `{raw_date}`") from error

        return cls(
            key=_optional_str(value, "key", owner),
            hash=_optional_str(value, "hash", owner),
            date_added=date_added,
            custom_data=split_known_keys(value, _SONG_KEYS),
        )


@dataclass(slots=True)
class LegacyPlaylist:
    """Whole legacy playlist document (``playlistTitle``, ``songs``, ``image``...)."""

    title: str
    author: str | None = None
    description: str | None = None
    songs: list[LegacySong] = field(default_factory=list)
    image: str | None = None
    custom_data: JsonObject = field(default_factory=dict)

    @classmethod
    def from_document(cls, value: JsonValue) -> LegacyPlaylist:
        """Parse a decoded legacy JSON document.

        Raises:
            LegacyFormatError: Required fields are missing or have the wrong type.
        """
        if not isinstance(value, dict):
            raise LegacyFormatError("legacy playlist must be a JSON object")

        title = value.get("playlistTitle")
        if not isinstance(title, str):
            raise LegacyFormatError("legacy playlist field `playlistTitle` must be a string")

        songs_value = value.get("songs")
        if songs_value is None:
            songs_value = []
        if not isinstance(songs_value, list):
            raise LegacyFormatError("legacy playlist field `songs` must be an array")

        return cls(
            title=title,
            author=_optional_str(value, "playlistAuthor", "legacy playlist"),
            description=_optional_str(value, "playlistDescription", "legacy playlist"),
            songs=[LegacySong.from_document(song, index) for index, song in enumerate(songs_value)],
            image=_optional_str(value, "image", "legacy playlist"),
            custom_data=split_known_keys(value, _PLAYLIST_KEYS),
        )


def _optional_str(document: Mapping[str, JsonValue], key: str, owner: str) -> str | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise LegacyFormatError(f"{owner} field `{key}` must be a string")
    return value


__all__ = ["ImageEncoding", "LegacyPlaylist", "LegacySong"]
