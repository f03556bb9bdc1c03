"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError

from pomo_cli.config import (
    Config,
    ConfigManager,
    DefaultsConfig,
    TimerConfig,
    get_config_manager,
)


@pytest.fixture()
def config_manager(tmp_path) -> ConfigManager:
    return ConfigManager(config_dir=tmp_path / "config")


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.timer.tick_interval_ms == 100
    assert config.timer.finish_bell_count == 5
    assert config.timer.finish_bell_delay_ms == 300
    assert config.timer.ring_on_quit is False
    assert config.defaults.time == "25:00"
    assert config.defaults.goal == ""


def test_timer_config_seconds_properties():
    timer = TimerConfig(tick_interval_ms=250, finish_bell_delay_ms=1500)
    assert timer.tick_interval == 0.25
    assert timer.finish_bell_delay == 1.5


@pytest.mark.parametrize(
    "overrides",
    [
        {"tick_interval_ms": 0},
        {"tick_interval_ms": -5},
        {"finish_bell_count": -1},
        {"finish_bell_delay_ms": -1},
    ],
)
def test_timer_config_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        TimerConfig(**overrides)


def test_missing_file_gives_defaults(config_manager):
    assert not config_manager.config_file.exists()
    assert config_manager.config == Config()


def test_config_save_load(config_manager, tmp_path):
    """Test saving and loading configuration."""
    config_manager.set("timer.finish_bell_count", 2)
    assert config_manager.get("timer.finish_bell_count") == 2

    # A new manager over the same directory sees the saved value
    reloaded = ConfigManager(config_dir=tmp_path / "config")
    assert reloaded.config.timer.finish_bell_count == 2
    assert reloaded.config.timer.tick_interval_ms == 100


def test_saved_file_is_json(config_manager):
    config_manager.set("defaults.goal", "Deep work")
    data = json.loads(config_manager.config_file.read_text())
    assert data["defaults"]["goal"] == "Deep work"
    assert data["timer"]["tick_interval_ms"] == 100


def test_set_validates(config_manager):
    with pytest.raises(ValidationError):
        config_manager.set("timer.tick_interval_ms", 0)


def test_get_unknown_key_returns_none(config_manager):
    assert config_manager.get("timer.nope") is None
    assert config_manager.get("timer.ring_on_quit.deeper") is None


def test_reset_single_key(config_manager):
    config_manager.set("defaults.time", "50:00")
    config_manager.reset("defaults.time")
    assert config_manager.get("defaults.time") == "25:00"


def test_reset_all(config_manager):
    config_manager.set("timer.ring_on_quit", True)
    config_manager.reset()
    assert config_manager.config == Config()
    assert json.loads(config_manager.config_file.read_text())["timer"]["ring_on_quit"] is False


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2, 3]", '{"timer": {"tick_interval_ms": -1}}'],
)
def test_corrupted_config_falls_back_to_defaults(config_manager, content):
    config_manager.config_dir.mkdir(parents=True)
    config_manager.config_file.write_text(content)
    assert config_manager.load_config() == Config()


def test_partial_config_merges_with_defaults(config_manager):
    config_manager.config_dir.mkdir(parents=True)
    config_manager.config_file.write_text('{"defaults": {"time": "45:00"}}')
    config = config_manager.load_config()
    assert config.defaults == DefaultsConfig(time="45:00")
    assert config.timer == TimerConfig()


def test_get_config_manager_is_cached(monkeypatch, tmp_path):
    import pomo_cli.config as config_mod

    monkeypatch.setattr(config_mod, "_config_manager", None)
    monkeypatch.setattr(config_mod, "user_config_dir", lambda name: str(tmp_path / name))

    first = get_config_manager()
    assert get_config_manager() is first
    assert first.config_file == tmp_path / "pomo-cli" / "config.json"
