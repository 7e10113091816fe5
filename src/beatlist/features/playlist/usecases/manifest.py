"""src/beatlist/features/playlist/usecases/manifest.py
What: Map playlists to and from the current ``playlist.json`` document shape.
Why: Keep the JSON schema (camelCase keys, flattened cover path) separate from the domain model.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime, timedelta
from pathlib import PurePosixPath
from typing import Final

from beatlist.shared.json_value import (
    JsonObject,
    JsonValue,
    is_json_value,
    loads_json,
    split_known_keys,
)

from ..domain.errors import (
    InvalidCoverPathError,
    ManifestDecodeError,
    ManifestEncodeError,
    ManifestSchemaError,
)
from ..domain.models import Cover, CoverKind, Difficulty, Playlist, Track, TrackKind
from ..domain.validators import is_single_file_name

MANIFEST_ENTRY: Final[str] = "playlist.json"

_PLAYLIST_KEYS: Final[frozenset[str]] = frozenset(
    {"title", "author", "description", "cover", "maps", "customData"}
)
_TRACK_KEYS: Final[frozenset[str]] = frozenset(
    {"type", "date", "difficulties", "key", "hash", "levelID", "customData"}
)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as ISO-8601, using ``Z`` for UTC."""

    rendered = value.isoformat()
    if value.utcoffset() == timedelta(0) and rendered.endswith("+00:00"):
        rendered = rendered.removesuffix("+00:00") + "Z"
    return rendered


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp carrying a UTC offset.

    Raises:
        ValueError: ``value`` is malformed or has no offset.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.utcoffset() is None:
        raise ValueError(f"timestamp `{value}` has no UTC offset")
    return parsed


def playlist_to_document(playlist: Playlist) -> JsonObject:
    """Build the JSON document stored as ``playlist.json``.

    Only the cover path is serialized; the image bytes live in their own entry.
    """
    document: JsonObject = {"title": playlist.title}
    if playlist.author is not None:
        document["author"] = playlist.author
    if playlist.description is not None:
        document["description"] = playlist.description
    if playlist.cover is not None:
        document["cover"] = str(playlist.cover.relative_path)
    document["maps"] = [_track_to_document(track) for track in playlist.maps]
    if playlist.custom_data:
        document["customData"] = playlist.custom_data
    return document


def _track_to_document(track: Track) -> JsonObject:
    document: JsonObject = {"type": track.kind.value}
    if track.added_at is not None:
        document["date"] = format_timestamp(track.added_at)
    if track.difficulties:
        document["difficulties"] = [
            {"name": difficulty.name, "characteristic": difficulty.characteristic}
            for difficulty in track.difficulties
        ]
    if track.key is not None:
        document["key"] = track.key
    if track.hash is not None:
        document["hash"] = track.hash
    if track.level_id is not None:
        document["levelID"] = track.level_id
    if track.custom_data:
        document["customData"] = track.custom_data
    return document


def playlist_from_document(
    document: JsonValue,
    *,
    preserve_custom_data: bool = True,
) -> Playlist:
    """Build a playlist skeleton from a decoded ``playlist.json`` document.

    A cover, when declared, carries only its path at this stage: empty bytes
    and ``CoverKind.UNKNOWN``. The archive codec fills in the rest.

    Args:
        document: Decoded JSON value.
        preserve_custom_data: Keep ``customData`` and unknown keys when True.

    Raises:
        ManifestSchemaError: The document does not have the expected shape.
        InvalidCoverPathError: The declared cover is not a plain file name.
    """
    root = _require_object(document, "playlist")

    cover_path = _optional_str(root, "cover", "playlist")
    if cover_path is not None and not is_single_file_name(cover_path):
        raise InvalidCoverPathError(CoverKind.from_path(cover_path).value, cover_path)
    maps_value = root.get("maps")
    if not isinstance(maps_value, list):
        raise ManifestSchemaError("playlist field `maps` must be an array")

    return Playlist(
        title=_require_str(root, "title", "playlist"),
        author=_optional_str(root, "author", "playlist"),
        description=_optional_str(root, "description", "playlist"),
        cover=Cover(relative_path=PurePosixPath(cover_path)) if cover_path is not None else None,
        maps=[
            _track_from_document(item, index, preserve_custom_data=preserve_custom_data)
            for index, item in enumerate(maps_value)
        ],
        custom_data=_custom_data(root, _PLAYLIST_KEYS, "playlist", preserve_custom_data),
    )


def _track_from_document(value: JsonValue, index: int, *, preserve_custom_data: bool) -> Track:
    owner = f"track {index}"
    item = _require_object(value, owner)

    raw_kind = _require_str(item, "type", owner)
    try:
        kind = TrackKind(raw_kind)
    except ValueError as error:
        raise ManifestSchemaError(f"{owner} has unknown type `{raw_kind}`") from error

    raw_date = _optional_str(item, "date", owner)
    added_at: datetime | None = None
    if raw_date is not None:
        try:
            added_at = parse_timestamp(raw_date)
        except ValueError as error:
            raise ManifestSchemaError(f"{owner} has malformed date `{raw_date}`") from error

    return Track(
        kind=kind,
        key=_optional_str(item, "key", owner),
        hash=_optional_str(item, "hash", owner),
        level_id=_optional_str(item, "levelID", owner),
        added_at=added_at,
        difficulties=_difficulties_from_document(item.get("difficulties"), owner),
        custom_data=_custom_data(item, _TRACK_KEYS, owner, preserve_custom_data),
    )


def _difficulties_from_document(value: JsonValue, owner: str) -> list[Difficulty]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ManifestSchemaError(f"{owner} field `difficulties` must be an array")

    difficulties: list[Difficulty] = []
    for index, item in enumerate(value):
        difficulty_owner = f"{owner} difficulty {index}"
        entry = _require_object(item, difficulty_owner)
        difficulties.append(
            Difficulty(
                name=_require_str(entry, "name", difficulty_owner),
                characteristic=_require_str(entry, "characteristic", difficulty_owner),
            )
        )
    return difficulties


def _custom_data(
    document: Mapping[str, JsonValue],
    known_keys: frozenset[str],
    owner: str,
    preserve: bool,
) -> JsonObject:
    if not preserve:
        return {}

    explicit = document.get("customData")
    if explicit is None:
        explicit = {}
    if not isinstance(explicit, dict):
        raise ManifestSchemaError(f"{owner} field `customData` must be an object")

    merged = split_known_keys(document, known_keys)
    merged.update(explicit)
    return merged


def _require_object(value: JsonValue, owner: str) -> JsonObject:
    if not isinstance(value, dict):
        raise ManifestSchemaError(f"{owner} must be a JSON object")
    return value


def _require_str(document: Mapping[str, JsonValue], key: str, owner: str) -> str:
    value = document.get(key)
    if not isinstance(value, str):
        raise ManifestSchemaError(f"{owner} field `{key}` must be a string")
    return value


def _optional_str(document: Mapping[str, JsonValue], key: str, owner: str) -> str | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ManifestSchemaError(f"{owner} field `{key}` must be a string")
    return value


def encode_manifest(playlist: Playlist) -> bytes:
    """Serialize ``playlist`` into compact UTF-8 JSON.

    Raises:
        ManifestEncodeError: Custom data holds values JSON cannot represent.
    """
    document = playlist_to_document(playlist)
    if not is_json_value(document):
        raise ManifestEncodeError("playlist custom data contains values that are not JSON")
    try:
        text = json.dumps(document, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as error:
        raise ManifestEncodeError(f"failed to encode playlist manifest: {error}") from error
    return text.encode("utf-8")


def decode_manifest(data: bytes, *, preserve_custom_data: bool = True) -> Playlist:
    """Decode ``playlist.json`` bytes into a playlist skeleton.

    Raises:
        ManifestDecodeError: The bytes are not UTF-8 or not JSON.
        ManifestSchemaError: The JSON does not describe a playlist.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise ManifestDecodeError(f"`{MANIFEST_ENTRY}` is not valid UTF-8: {error}") from error
    try:
        document = loads_json(text)
    except ValueError as error:
        raise ManifestDecodeError(f"`{MANIFEST_ENTRY}` is not valid JSON: {error}") from error
    return playlist_from_document(document, preserve_custom_data=preserve_custom_data)


__all__ = [
    "MANIFEST_ENTRY",
    "decode_manifest",
    "encode_manifest",
    "format_timestamp",
    "parse_timestamp",
    "playlist_from_document",
    "playlist_to_document",
]
