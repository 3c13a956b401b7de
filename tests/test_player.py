import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import wave
from unittest import mock

import pygame
import pytest

from tunedeck.player import AudioPlayer


@pytest.fixture(autouse=True)
def _quit_mixer():
    yield
    if pygame.mixer.get_init():
        pygame.mixer.quit()


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "tone.wav"
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(8000)
        handle.writeframes(b"\x00\x00" * 8000)
    return str(path)


def test_initial_state():
    player = AudioPlayer()
    assert player.is_paused() is False
    assert player.poll() is False
    assert player.volume == 1.0


def test_set_volume_uses_percentage():
    player = AudioPlayer()
    player.set_volume(40)
    assert player.volume == pytest.approx(0.4)


def test_play_empty_path_is_ignored():
    player = AudioPlayer()
    player.play("")
    assert player.source == ""
    assert player.playing is False


def test_pause_and_resume(wav_file):
    player = AudioPlayer()
    player.play(wav_file)
    assert player.source == wav_file
    assert player.playing is True
    player.pause()
    assert player.is_paused() is True
    player.resume()
    assert player.is_paused() is False
    assert player.playing is True


def test_stop_prevents_end_report(wav_file):
    player = AudioPlayer()
    player.play(wav_file)
    player.stop()
    assert player.playing is False
    assert player.poll() is False


def test_pause_without_playback_does_nothing():
    player = AudioPlayer()
    player.pause()
    assert player.is_paused() is False


def test_poll_reports_end_once(wav_file):
    player = AudioPlayer()
    player.play(wav_file)
    with mock.patch.object(pygame.mixer.music, "get_busy", return_value=False):
        assert player.poll() is True
        assert player.poll() is False


def test_poll_while_busy(wav_file):
    player = AudioPlayer()
    player.play(wav_file)
    with mock.patch.object(pygame.mixer.music, "get_busy", return_value=True):
        assert player.poll() is False
    assert player.playing is True


def test_play_missing_file_raises(tmp_path):
    player = AudioPlayer()
    with pytest.raises(pygame.error):
        player.play(str(tmp_path / "missing.wav"))
    assert player.playing is False