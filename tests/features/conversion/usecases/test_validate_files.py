"""Tests for checking existing playlist containers."""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path

from pytest_mock import MockerFixture

from beatlist.features.conversion import validate_container, validate_containers
from beatlist.features.playlist import Playlist, write_playlist


def _write_raw_container(path: Path, document: object) -> Path:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, mode="w") as archive:
        archive.writestr("playlist.json", json.dumps(document))
    _ = path.write_bytes(buffer.getvalue())
    return path


def test_valid_container_reports_summary(sample_playlist: Playlist, tmp_path: Path) -> None:
    path = tmp_path / "mix.blist"
    write_playlist(sample_playlist, path)

    result = validate_container(path)

    assert result.valid
    assert result.title == "Weekend Mix"
    assert result.track_count == 3
    assert result.has_cover
    assert result.error_message is None


def test_invalid_container_reports_location(tmp_path: Path) -> None:
    path = _write_raw_container(
        tmp_path / "bad.blist",
        {
            "title": "T",
            "maps": [
                {"type": "key", "key": "ff"},
                {"type": "key", "key": "ff", "difficulties": [{"name": "", "characteristic": "S"}]},
            ],
        },
    )

    result = validate_container(path)

    assert not result.valid
    assert result.location == ("maps", 1, "difficulties", 0, "name")
    assert result.error_message is not None


def test_unreadable_inputs_are_reported_not_raised(tmp_path: Path) -> None:
    not_zip = tmp_path / "text.blist"
    _ = not_zip.write_text("hello", encoding="utf-8")
    missing = tmp_path / "missing.blist"

    results = validate_containers([not_zip, missing])

    assert [result.valid for result in results] == [False, False]
    assert all(result.location == () for result in results)
    assert all(result.error_message for result in results)


def test_encrypted_entry_is_reported_and_later_files_still_checked(
    sample_playlist: Playlist, tmp_path: Path
) -> None:
    encrypted = _write_raw_container(tmp_path / "locked.blist", {"title": "T", "maps": []})
    patched = bytearray(encrypted.read_bytes())
    for signature, offset in ((b"PK\x03\x04", 6), (b"PK\x01\x02", 8)):
        start = patched.find(signature) + offset
        patched[start : start + 2] = (1).to_bytes(2, "little")
    _ = encrypted.write_bytes(bytes(patched))
    good = tmp_path / "good.blist"
    write_playlist(sample_playlist, good)

    results = validate_containers([encrypted, good])

    assert [result.valid for result in results] == [False, True]
    assert results[0].error_message is not None
    assert "playlist.json" in results[0].error_message


def test_unexpected_errors_become_invalid_results(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "beatlist.features.conversion.usecases.validate_files.read_playlist",
        side_effect=RecursionError(),
    )

    result = validate_container(tmp_path / "any.blist")

    assert not result.valid
    assert result.error_message == "RecursionError"
