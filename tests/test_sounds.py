#!/usr/bin/env python3
"""Tests for SoundPlayer failure handling.

These never need a real audio device: missing files and mixer errors are
exactly the paths that must be skipped quietly.

Run with: pytest tests/test_sounds.py -v
"""

import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

sys.path.insert(0, str(Path(__file__).parent.parent))

import pygame
import pytest
from math_tutor.sounds import SoundPlayer, default_sounds_dir, _find_libasound
from math_tutor.constants import SOUND_CORRECT, SOUND_WRONG


@pytest.fixture
def sounds_dir(tmp_path):
    (tmp_path / "correct.wav").write_bytes(b"RIFF")
    (tmp_path / "wrong.wav").write_bytes(b"RIFF")
    return tmp_path


class TestDisabled:

    def test_muted_player_skips(self, sounds_dir):
        player = SoundPlayer(sounds_dir, enabled=False)
        with patch("math_tutor.sounds.pygame.mixer.init") as init:
            assert player.play(SOUND_CORRECT) is False
        init.assert_not_called()


class TestMissingAsset:

    def test_missing_file_logged_and_skipped(self, tmp_path, caplog):
        player = SoundPlayer(tmp_path)
        with caplog.at_level(logging.WARNING, logger="math_tutor.sounds"):
            assert player.play(SOUND_WRONG) is False
        assert "Could not read sound: wrong" in caplog.text

    def test_missing_file_logged_once(self, tmp_path, caplog):
        player = SoundPlayer(tmp_path)
        with caplog.at_level(logging.WARNING, logger="math_tutor.sounds"):
            player.play(SOUND_WRONG)
            player.play(SOUND_WRONG)
        assert caplog.text.count("Could not read sound") == 1


class TestMixerFailure:

    def test_mixer_init_error_skips(self, sounds_dir, caplog):
        player = SoundPlayer(sounds_dir)
        with patch("math_tutor.sounds.pygame.mixer.get_init", return_value=None), \
             patch("math_tutor.sounds.pygame.mixer.init", side_effect=pygame.error("no device")) as init:
            with caplog.at_level(logging.WARNING, logger="math_tutor.sounds"):
                assert player.play(SOUND_CORRECT) is False
                assert player.play(SOUND_WRONG) is False
        # Failure is remembered, no retry storm
        assert init.call_count == 1
        assert "Audio unavailable" in caplog.text

    def test_decode_error_skips(self, sounds_dir, caplog):
        player = SoundPlayer(sounds_dir)
        with patch("math_tutor.sounds.pygame.mixer.get_init", return_value=(44100, -16, 2)), \
             patch("math_tutor.sounds.pygame.mixer.Sound", side_effect=pygame.error("bad wav")):
            with caplog.at_level(logging.WARNING, logger="math_tutor.sounds"):
                assert player.play(SOUND_CORRECT) is False
        assert "Could not load sound" in caplog.text


class TestPlayback:

    def test_plays_and_caches(self, sounds_dir):
        player = SoundPlayer(sounds_dir, volume=0.3)
        fake_sound = MagicMock()
        with patch("math_tutor.sounds.pygame.mixer.get_init", return_value=(44100, -16, 2)), \
             patch("math_tutor.sounds.pygame.mixer.Sound", return_value=fake_sound) as sound_cls:
            assert player.play(SOUND_CORRECT) is True
            assert player.play(SOUND_CORRECT) is True
        sound_cls.assert_called_once_with(str(sounds_dir / "correct.wav"))
        fake_sound.set_volume.assert_called_once_with(0.3)
        assert fake_sound.play.call_count == 2

    def test_cleanup_quits_mixer(self, sounds_dir):
        player = SoundPlayer(sounds_dir)
        with patch("math_tutor.sounds.pygame.mixer.get_init", return_value=(44100, -16, 2)), \
             patch("math_tutor.sounds.pygame.mixer.Sound", return_value=MagicMock()), \
             patch("math_tutor.sounds.pygame.mixer.stop") as stop, \
             patch("math_tutor.sounds.pygame.mixer.quit") as quit_mixer:
            player.play(SOUND_CORRECT)
            player.cleanup()
        stop.assert_called_once()
        quit_mixer.assert_called_once()

    def test_cleanup_without_mixer_is_noop(self, sounds_dir):
        player = SoundPlayer(sounds_dir)
        with patch("math_tutor.sounds.pygame.mixer.quit") as quit_mixer:
            player.cleanup()
        quit_mixer.assert_not_called()


def test_default_sounds_dir_is_path():
    assert default_sounds_dir().name in ("content", "sounds")


class TestFindLibasound:
    """ALSA lookup must work where ldconfig is missing"""

    def test_uses_find_library_when_it_works(self):
        with patch("ctypes.util.find_library", return_value="libasound.so.2") as find, \
             patch("ctypes.CDLL") as cdll:
            assert _find_libasound() == "libasound.so.2"
        find.assert_called_once_with("asound")
        cdll.assert_not_called()

    def test_falls_back_to_soname(self):
        with patch("ctypes.util.find_library", return_value=None), \
             patch("ctypes.CDLL") as cdll:
            assert _find_libasound() == "libasound.so.2"
        cdll.assert_called_once_with("libasound.so.2")

    def test_falls_back_to_unversioned_name(self):
        def only_unversioned(name):
            if name != "libasound.so":
                raise OSError(name)
            return MagicMock()

        with patch("ctypes.util.find_library", return_value=None), \
             patch("ctypes.CDLL", side_effect=only_unversioned):
            assert _find_libasound() == "libasound.so"

    def test_no_alsa_at_all(self):
        with patch("ctypes.util.find_library", return_value=None), \
             patch("ctypes.CDLL", side_effect=OSError("not found")):
            assert _find_libasound() is None
