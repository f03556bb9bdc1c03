"""Tests for the config command group."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pomo_cli.config import ConfigManager
from pomo_cli.main import app
from pomo_cli.utils.exit_codes import ERROR_INVALID_ARGS, SUCCESS

runner = CliRunner()


@pytest.fixture()
def config_manager(tmp_path):
    manager = ConfigManager(config_dir=tmp_path / "config")
    with patch("pomo_cli.commands.config.get_config_manager", return_value=manager):
        yield manager


@pytest.fixture(autouse=True)
def no_session():
    with patch("pomo_cli.main.run_session") as mock:
        yield mock


class TestView:
    def test_view_prints_json(self, config_manager, no_session):
        result = runner.invoke(app, ["config", "view"])
        assert result.exit_code == SUCCESS
        data = json.loads(result.output)
        assert data["timer"]["tick_interval_ms"] == 100
        assert data["defaults"]["time"] == "25:00"
        no_session.assert_not_called()


class TestGet:
    def test_get_value(self, config_manager):
        result = runner.invoke(app, ["config", "get", "timer.finish_bell_count"])
        assert result.exit_code == SUCCESS
        assert result.output.strip() == "5"

    def test_get_string_value(self, config_manager):
        result = runner.invoke(app, ["config", "get", "defaults.time"])
        assert result.output.strip() == "'25:00'"

    def test_get_unknown_key(self, config_manager):
        result = runner.invoke(app, ["config", "get", "timer.nope"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "not found" in result.output


class TestSet:
    def test_set_coerces_and_persists(self, config_manager):
        result = runner.invoke(app, ["config", "set", "timer.tick_interval_ms", "50"])
        assert result.exit_code == SUCCESS
        assert config_manager.config.timer.tick_interval_ms == 50
        saved = json.loads(config_manager.config_file.read_text())
        assert saved["timer"]["tick_interval_ms"] == 50

    def test_set_bool(self, config_manager):
        result = runner.invoke(app, ["config", "set", "timer.ring_on_quit", "true"])
        assert result.exit_code == SUCCESS
        assert config_manager.config.timer.ring_on_quit is True

    def test_set_invalid_value(self, config_manager):
        result = runner.invoke(app, ["config", "set", "timer.tick_interval_ms", "0"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert config_manager.config.timer.tick_interval_ms == 100

    def test_set_unknown_key(self, config_manager):
        result = runner.invoke(app, ["config", "set", "timer.nope", "1"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert not config_manager.config_file.exists()


class TestReset:
    def test_reset_key(self, config_manager):
        config_manager.set("defaults.goal", "Essay")
        result = runner.invoke(app, ["config", "reset", "defaults.goal", "--yes"])
        assert result.exit_code == SUCCESS
        assert config_manager.config.defaults.goal == ""

    def test_reset_all_confirmed(self, config_manager):
        config_manager.set("timer.finish_bell_count", 1)
        result = runner.invoke(app, ["config", "reset"], input="y\n")
        assert result.exit_code == SUCCESS
        assert config_manager.config.timer.finish_bell_count == 5

    def test_reset_declined_keeps_config(self, config_manager):
        config_manager.set("timer.finish_bell_count", 1)
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == SUCCESS
        assert config_manager.config.timer.finish_bell_count == 1
