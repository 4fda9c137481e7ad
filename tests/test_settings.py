"""Tests for settings defaults, JSON persistence and logging setup."""

from __future__ import annotations

import json
import logging

import pytest

import ringtimer.settings as settings_mod
from ringtimer.log import setup_logging, LOG_LEVEL_ENV
from ringtimer.settings import Settings, load_settings, save_settings


class TestSettingsDefaults:

    def test_default_duration(self):
        assert Settings().default_seconds == 300

    def test_sound_defaults(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_window_defaults(self):
        s = Settings()
        assert s.window_width == 420
        assert s.window_height == 560
        assert s.always_on_top is False


class TestSettingsPersistence:

    def test_round_trip(self):
        save_settings(Settings(default_seconds=25 * 60, sound_volume=42))
        loaded = load_settings()
        assert loaded.default_seconds == 25 * 60
        assert loaded.sound_volume == 42

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self, caplog):
        settings_mod.SETTINGS_PATH.write_text("NOT VALID JSON", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="ringtimer.settings"):
            s = load_settings()
        assert s == Settings()
        assert "unreadable settings" in caplog.text

    def test_non_object_json_returns_defaults(self):
        settings_mod.SETTINGS_PATH.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self):
        data = {"default_seconds": 600, "unknown_future_key": True}
        settings_mod.SETTINGS_PATH.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings()
        assert s.default_seconds == 600
        assert not hasattr(s, "unknown_future_key")

    def test_invalid_duration_falls_back(self):
        data = {"default_seconds": -5, "sound_volume": 10}
        settings_mod.SETTINGS_PATH.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings()
        assert s.default_seconds == 300
        assert s.sound_volume == 10

    @pytest.mark.parametrize("key, bad", [
        ("sound_volume", "loud"),
        ("sound_volume", None),
        ("sound_volume", True),
        ("sound_volume", 2.5),
        ("window_width", None),
        ("window_width", 0),
        ("window_height", "tall"),
        ("window_height", -1),
        ("sound_enabled", "yes"),
        ("sound_enabled", 1),
        ("always_on_top", None),
        ("default_seconds", "300"),
        ("default_seconds", False),
    ])
    def test_wrong_type_falls_back_per_field(self, key, bad, caplog):
        data = {"default_seconds": 600, "sound_volume": 15}
        data[key] = bad
        settings_mod.SETTINGS_PATH.write_text(json.dumps(data), encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="ringtimer.settings"):
            s = load_settings()

        assert getattr(s, key) == getattr(Settings(), key)
        assert f"Invalid {key}" in caplog.text
        # Neighbouring valid values survive
        if key != "default_seconds":
            assert s.default_seconds == 600
        if key != "sound_volume":
            assert s.sound_volume == 15

    def test_saved_file_is_pretty_json(self):
        save_settings(Settings())
        text = settings_mod.SETTINGS_PATH.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text)["default_seconds"] == 300


class TestLogging:

    def test_level_from_env(self, monkeypatch):
        calls = {}
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging()
        assert calls["level"] == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        calls = {}
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging()
        assert calls["level"] == logging.INFO
