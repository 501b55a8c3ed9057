"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tracklist.config.config import Config
from tracklist.config.paths import default_config_path


def test_default_config(config_runtime_env: Path) -> None:
    """Test default configuration creation at portable repo location."""
    _ = config_runtime_env
    config = Config()
    assert config.playlist_file is None
    assert config.log_file is None
    assert config.play_demo_limit == 5
    assert config.autoload and config.autosave_on_quit
    assert config.resolved_playlist_file == Path("playlist.csv")

    config.save()
    assert default_config_path().exists()


def test_load_creates_default_file(config_runtime_env: Path) -> None:
    """A missing config file is written with defaults on first load."""
    loaded = Config.load()

    target = config_runtime_env / "config" / "config.toml"
    assert target.exists()
    assert loaded.playlist_file is None
    assert Config.load() is loaded


def test_save_load_toml(config_runtime_env: Path) -> None:
    """Test saving and loading configuration in TOML format at repo path."""
    _ = config_runtime_env
    original_config = Config(
        playlist_file=Path("/test/music/mix.csv"),
        log_file=Path("/test/logs/tracklist.log"),
        play_demo_limit=2,
        autoload=False,
        autosave_on_quit=False,
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.playlist_file == Path("/test/music/mix.csv")
    assert loaded_config.log_file == Path("/test/logs/tracklist.log")
    assert loaded_config.play_demo_limit == 2
    assert not loaded_config.autoload
    assert not loaded_config.autosave_on_quit


def test_save_omits_unset_paths(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config().save()

    with open(default_config_path(), "rb") as f:
        data = tomllib.load(f)

    assert "playlist_file" not in data
    assert "log_file" not in data
    assert data["play_demo_limit"] == 5
    assert data["autoload"] is True


def test_save_escapes_quotes_and_backslashes(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config(playlist_file=Path('C:\\music\\"best".csv')).save()

    with open(default_config_path(), "rb") as f:
        data = tomllib.load(f)

    assert data["playlist_file"] == 'C:\\music\\"best".csv'


def test_load_ignores_unknown_keys(config_runtime_env: Path, mocker: MockerFixture) -> None:
    target = config_runtime_env / "config" / "config.toml"
    target.parent.mkdir(parents=True)
    _ = target.write_text('play_demo_limit = 3\nbase_path = "/music"\n', encoding="utf-8")
    mock_logger = mocker.patch("tracklist.config.config.logger")

    loaded = Config.load()

    assert loaded.play_demo_limit == 3
    mock_logger.warning.assert_called_once()
    assert "base_path" in mock_logger.warning.call_args.args


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(-4, 0), (0, 0), (12, 12), ("7", 5), (True, 5)],
)
def test_play_demo_limit_is_normalised(raw: object, expected: int) -> None:
    config = Config(play_demo_limit=raw)  # pyright: ignore[reportArgumentType]
    assert config.play_demo_limit == expected


def test_blank_path_strings_become_none() -> None:
    config = Config(playlist_file="  ", log_file="logs/x.log")  # pyright: ignore[reportArgumentType]
    assert config.playlist_file is None
    assert config.log_file == Path("logs/x.log")


def test_load_raises_on_invalid_toml(config_runtime_env: Path) -> None:
    target = config_runtime_env / "config" / "config.toml"
    target.parent.mkdir(parents=True)
    _ = target.write_text("play_demo_limit = = 3\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
