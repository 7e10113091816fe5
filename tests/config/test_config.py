"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from beatlist.config.config import Config
from beatlist.config.paths import default_config_path


def test_default_config(portable_repo_root: Path) -> None:
    """Test default configuration creation at portable repo location."""
    config = Config()
    assert config.log_file is None
    assert config.preserve_custom_data is True
    assert config.legacy_image_encoding == "auto"
    assert config.workers is None

    config.save()
    assert default_config_path() == portable_repo_root / "config" / "config.toml"
    assert default_config_path().exists()


def test_load_creates_missing_file(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    assert not default_config_path().exists()

    config = Config.load()

    assert default_config_path().exists()
    assert config == Config()


def test_save_load_toml(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    """Test saving and loading configuration in TOML format at repo path."""
    original_config = Config(
        log_file=Path("/test/logs/beatlist.log"),
        preserve_custom_data=False,
        legacy_image_encoding="data-uri",
        workers=3,
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/beatlist.log")
    assert loaded_config.preserve_custom_data is False
    assert loaded_config.legacy_image_encoding == "data-uri"
    assert loaded_config.workers == 3


def test_save_load_none_values(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    Config(log_file=None, workers=None).save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.log_file is None
    assert loaded_config.workers is None


def test_singleton_behavior(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    config1 = Config.load()
    config1.workers = 2
    config1.save()

    config2 = Config.load()
    assert config2 is config1
    assert config2.workers == 2


def test_toml_comments(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    Config(log_file=Path("/test/logs/beatlist.log")).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# beatlist Configuration File" in content
    assert "# Log file path" in content
    assert 'legacy_image_encoding = "auto"' in content
    assert "preserve_custom_data = true" in content


def test_unknown_keys_and_blank_log_file_are_ignored(
    portable_repo_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('log_file = ""\nbase_path = "/music"\n', encoding="utf-8")

    config = Config.load()

    assert config.log_file is None
    assert "base_path" in caplog.text


@pytest.mark.parametrize("workers", [0, -2, True, "4"])
def test_invalid_worker_count_is_reset(workers: object) -> None:
    config = Config(workers=workers)  # pyright: ignore[reportArgumentType]

    assert config.workers is None


def test_env_override_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    override = tmp_path / "elsewhere" / "custom.toml"
    monkeypatch.setenv("BEATLIST_CONFIG", str(override))

    _ = Config.load()

    assert override.exists()


def test_malformed_toml_is_raised(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("workers = = 3\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_unsupported_image_encoding_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    config = Config(legacy_image_encoding="DATA_URI")
    assert config.legacy_image_encoding == "data-uri"

    config = Config(legacy_image_encoding="hex")
    assert config.legacy_image_encoding == "auto"
    assert "hex" in caplog.text


def test_save_leaves_no_temporary_files(portable_repo_root: Path) -> None:
    _ = portable_repo_root  # acknowledge fixture usage
    Config(workers=2).save()
    Config(workers=5).save()

    target = default_config_path()
    assert [p.name for p in target.parent.iterdir()] == ["config.toml"]
    assert "workers = 5" in target.read_text(encoding="utf-8")
