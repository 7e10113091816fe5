"""Tests for the ``playlist.json`` document mapping."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta, timezone
from pathlib import PurePosixPath

import pytest

from beatlist.features.playlist import (
    CoverKind,
    InvalidCoverPathError,
    ManifestDecodeError,
    ManifestEncodeError,
    ManifestSchemaError,
    Playlist,
    Track,
    TrackKind,
)
from beatlist.features.playlist.usecases.manifest import (
    decode_manifest,
    encode_manifest,
    format_timestamp,
    playlist_from_document,
    playlist_to_document,
)


def test_document_omits_absent_fields() -> None:
    playlist = Playlist(title="Only title")

    assert playlist_to_document(playlist) == {"title": "Only title", "maps": []}


def test_document_flattens_cover_to_its_path(sample_playlist: Playlist) -> None:
    document = playlist_to_document(sample_playlist)

    assert document["cover"] == "cover.png"
    assert document["customData"] == sample_playlist.custom_data
    maps = document["maps"]
    assert isinstance(maps, list)
    assert maps[0] == {
        "type": "key",
        "date": "2021-03-04T05:06:07Z",
        "difficulties": [{"name": "Expert", "characteristic": "Standard"}],
        "key": "1a2b",
        "customData": {"songName": "First"},
    }
    assert maps[2] == {
        "type": "levelID",
        "date": "2021-03-04T05:06:07.123456Z",
        "levelID": "custom_level_ABCDEF",
    }


def test_format_timestamp_keeps_non_utc_offsets() -> None:
    value = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=9)))

    assert format_timestamp(value) == "2020-01-02T03:04:05+09:00"
    assert format_timestamp(datetime(2020, 1, 2, tzinfo=UTC)) == "2020-01-02T00:00:00Z"


def test_manifest_is_compact_utf8_json() -> None:
    playlist = Playlist(title="Café ☕", maps=[Track(kind=TrackKind.KEY, key="ff")])

    data = encode_manifest(playlist)

    assert data == '{"title":"Café ☕","maps":[{"type":"key","key":"ff"}]}'.encode()


def test_decoded_cover_carries_only_its_path() -> None:
    playlist = playlist_from_document({"title": "T", "cover": "cover.jpg", "maps": []})

    assert playlist.cover is not None
    assert playlist.cover.relative_path == PurePosixPath("cover.jpg")
    assert playlist.cover.kind is CoverKind.UNKNOWN
    assert playlist.cover.image_bytes == b""


def test_unknown_keys_are_folded_into_custom_data() -> None:
    document = {
        "title": "T",
        "maps": [{"type": "key", "key": "ff", "songName": "Song", "customData": {"a": 1}}],
        "syncURL": "https://example.com",
        "customData": {"syncURL": "explicit", "other": True},
    }

    playlist = playlist_from_document(document)

    assert playlist.custom_data == {"syncURL": "explicit", "other": True}
    assert playlist.maps[0].custom_data == {"songName": "Song", "a": 1}


def test_custom_data_can_be_discarded() -> None:
    document = {
        "title": "T",
        "maps": [{"type": "hash", "hash": "ab", "customData": {"a": 1}}],
        "extra": 1,
        "customData": {"b": 2},
    }

    playlist = playlist_from_document(document, preserve_custom_data=False)

    assert playlist.custom_data == {}
    assert playlist.maps[0].custom_data == {}


def test_dates_are_parsed_with_zulu_suffix() -> None:
    playlist = playlist_from_document(
        {"title": "T", "maps": [{"type": "key", "key": "ff", "date": "2020-05-16T19:35:12Z"}]}
    )

    assert playlist.maps[0].added_at == datetime(2020, 5, 16, 19, 35, 12, tzinfo=UTC)


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"maps": []},
        {"title": 1, "maps": []},
        {"title": "T"},
        {"title": "T", "maps": {}},
        {"title": "T", "maps": [{"type": "byKey", "key": "ff"}]},
        {"title": "T", "maps": [{"key": "ff"}]},
        {"title": "T", "maps": [{"type": "key", "key": "ff", "date": "yesterday"}]},
        {"title": "T", "maps": [{"type": "key", "key": 12}]},
        {"title": "T", "maps": [{"type": "key", "key": "ff", "difficulties": [{"name": "E"}]}]},
        {"title": "T", "maps": [], "customData": []},
        {"title": "T", "cover": 3, "maps": []},
    ],
)
def test_malformed_documents_raise_schema_errors(document: object) -> None:
    with pytest.raises(ManifestSchemaError):
        _ = playlist_from_document(document)  # pyright: ignore[reportArgumentType]


def test_decode_rejects_non_utf8_and_non_json() -> None:
    with pytest.raises(ManifestDecodeError):
        _ = decode_manifest(b"\xff\xfe\x00")

    with pytest.raises(ManifestDecodeError):
        _ = decode_manifest(b"{not json")


def test_decode_tolerates_byte_order_mark() -> None:
    data = b"\xef\xbb\xbf" + json.dumps({"title": "T", "maps": []}).encode()

    assert decode_manifest(data).title == "T"


@pytest.mark.parametrize(
    "custom_data",
    [{"bad": {1, 2}}, {"nan": float("nan")}, {"inf": [float("inf")]}],
)
def test_encode_rejects_non_json_custom_data(custom_data: dict[str, object]) -> None:
    playlist = Playlist(title="T", custom_data=custom_data)  # pyright: ignore[reportArgumentType]

    with pytest.raises(ManifestEncodeError):
        _ = encode_manifest(playlist)


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_decode_rejects_non_standard_number_constants(constant: str) -> None:
    data = f'{{"title":"T","maps":[],"customData":{{"x":{constant}}}}}'.encode()

    with pytest.raises(ManifestDecodeError):
        _ = decode_manifest(data)


def test_decode_rejects_excessive_nesting() -> None:
    data = b'{"title":"T","maps":[],"customData":{"x":' + b"[" * 100_000 + b"]" * 100_000 + b"}}"

    with pytest.raises(ManifestDecodeError):
        _ = decode_manifest(data)


def test_dates_without_offset_are_rejected() -> None:
    document = {
        "title": "T",
        "maps": [
            {"type": "key", "key": "aa", "date": "2021-01-01T00:00:00Z"},
            {"type": "key", "key": "bb", "date": "2020-01-01T00:00:00"},
        ],
    }

    with pytest.raises(ManifestSchemaError, match="malformed date"):
        _ = playlist_from_document(document)


@pytest.mark.parametrize("cover", ["./cover.png", "cover.png/"])
def test_cover_path_is_checked_before_normalisation(cover: str) -> None:
    with pytest.raises(InvalidCoverPathError) as excinfo:
        _ = playlist_from_document({"title": "T", "cover": cover, "maps": []})

    assert excinfo.value.kind == "png"
