"""Tests for chime synthesis and the SoundManager playback API.

Covers:
- WAV generation for every cached sound
- SoundManager volume/enable handling
- Playback failures are logged and never raised
"""

from __future__ import annotations

import io
import logging
import wave

import pytest

from ringtimer.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    _GENERATORS,
    _generate_alarm,
    _generate_click,
    _make_envelope,
)


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", [_generate_alarm, _generate_click])
    def test_generator_produces_wav(self, gen_fn):
        data = gen_fn()
        assert isinstance(data, bytes)
        assert len(data) > 100
        assert data[:4] == b"RIFF"

    @pytest.mark.parametrize("gen_fn", [_generate_alarm, _generate_click])
    def test_wav_is_parseable(self, gen_fn):
        with wave.open(io.BytesIO(gen_fn()), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 44100
            assert wf.getnframes() > 0

    def test_alarm_is_longer_than_click(self):
        assert len(_generate_alarm()) > len(_generate_click())

    def test_every_sound_has_a_generator(self):
        assert set(SOUND_NAMES) == set(_GENERATORS)

    def test_envelope_bounds(self):
        env = _make_envelope(2000)
        assert env.shape == (2000,)
        assert env.min() >= 0.0
        assert env.max() <= 1.0
        assert env[0] == 0.0
        assert env[-1] == 0.0


# ═══════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSoundManager:

    def test_create(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        assert mgr.enabled is True
        assert mgr.volume == 70

    def test_wav_files_generated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_existing_wav_not_regenerated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        path = tmp_path / "timer_complete.wav"
        mtime = path.stat().st_mtime_ns
        SoundManager(parent=None, sounds_dir=tmp_path)
        assert path.stat().st_mtime_ns == mtime

    def test_all_sounds_loaded(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            assert name in mgr._effects

    @pytest.mark.parametrize("level, expected", [(30, 30), (200, 100), (-10, 0)])
    def test_set_volume_clamps(self, tmp_path, level, expected):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_volume(level)
        assert mgr.volume == expected

    def test_play_while_disabled_is_noop(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.play("timer_complete") is False

    def test_play_unknown_name_logs(self, tmp_path, caplog):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        with caplog.at_level(logging.WARNING, logger="ringtimer.audio.sounds"):
            assert mgr.play("nonexistent_sound") is False
        assert "nonexistent_sound" in caplog.text

    def test_play_failure_is_logged_not_raised(self, tmp_path, caplog):
        class BrokenEffect:
            def status(self):
                return None

            def play(self):
                raise RuntimeError("wrapped C/C++ object has been deleted")

            def isPlaying(self):
                return False

        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr._effects["timer_complete"] = BrokenEffect()
        with caplog.at_level(logging.WARNING, logger="ringtimer.audio.sounds"):
            assert mgr.play("timer_complete") is False
        assert "Audio playback failed" in caplog.text

    def test_unwritable_cache_is_logged(self, tmp_path, caplog):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        with caplog.at_level(logging.WARNING, logger="ringtimer.audio.sounds"):
            mgr = SoundManager(parent=None, sounds_dir=blocker / "sounds")
        assert "Cannot write sound cache" in caplog.text
        assert mgr._effects == {}
        assert mgr.play("timer_complete") is False

    def test_stop_without_playback(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.stop()  # nothing playing, no raise
