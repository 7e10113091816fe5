"""Shared pytest fixtures: sample image bytes, playlists and isolated configuration."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from beatlist.features.playlist import Difficulty, Playlist, Track, TrackKind
from beatlist.features.playlist.domain.validators import JPEG_SIGNATURE, PNG_SIGNATURE

VALID_HASH = "0123456789abcdef0123456789abcdef01234567"


@pytest.fixture
def valid_hash() -> str:
    """A well-formed SHA-1 hex digest."""

    return VALID_HASH


@pytest.fixture
def png_bytes() -> bytes:
    """PNG signature followed by the start of an IHDR chunk."""

    return PNG_SIGNATURE + b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"


@pytest.fixture
def jpeg_bytes() -> bytes:
    """JPEG signature followed by a JFIF APP0 header."""

    return JPEG_SIGNATURE + b"\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"


@pytest.fixture
def sample_playlist(png_bytes: bytes) -> Playlist:
    """A valid playlist exercising every field."""

    playlist = Playlist(
        title="Weekend Mix",
        author="Someone",
        description="Songs for the weekend.\nSecond line.",
        maps=[
            Track(
                kind=TrackKind.KEY,
                key="1a2b",
                added_at=datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC),
                difficulties=[Difficulty(name="Expert", characteristic="Standard")],
                custom_data={"songName": "First"},
            ),
            Track(kind=TrackKind.HASH, hash=VALID_HASH),
            Track(
                kind=TrackKind.LEVEL_ID,
                level_id="custom_level_ABCDEF",
                added_at=datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=UTC),
            ),
        ],
        custom_data={"syncURL": "https://example.com/list", "nested": {"a": [1, 2.5, None, True]}},
    )
    playlist.set_png_cover(png_bytes)
    return playlist


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration file at a temporary location and reset the singleton."""

    import beatlist.config.config as config_module

    config_file = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("BEATLIST_CONFIG", str(config_file))

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_file
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
