"""Audio playback of a single file at a time."""

from __future__ import annotations

import enum
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class _State(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class AudioPlayer:
    """Plays one audio file at a time and reports when it has run out."""

    def __init__(self) -> None:
        self.volume = 1.0
        self.source = ""
        self._state = _State.STOPPED

    @property
    def playing(self) -> bool:
        """True while a file is playing (not paused, not stopped)."""
        return self._state is _State.PLAYING

    def _music(self):
        if not pygame.mixer.get_init():
            pygame.mixer.init()
            pygame.mixer.music.set_volume(self.volume)
        return pygame.mixer.music

    def play(self, path: str) -> None:
        """Start playing ``path`` from the beginning; an empty path is ignored."""
        if not path:
            return
        music = self._music()
        music.stop()
        self._state = _State.STOPPED
        music.load(path)
        music.play()
        self.source = path
        self._state = _State.PLAYING

    def pause(self) -> None:
        """Pause playback if something is playing."""
        if self._state is _State.PLAYING:
            self._music().pause()
            self._state = _State.PAUSED

    def resume(self) -> None:
        """Continue a paused file."""
        if self._state is _State.PAUSED:
            self._music().unpause()
            self._state = _State.PLAYING

    def stop(self) -> None:
        """Stop playback."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self._state = _State.STOPPED

    def set_volume(self, volume: int) -> None:
        """Set the volume from a percentage (0 to 100)."""
        self.volume = volume / 100.0
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(self.volume)

    def is_paused(self) -> bool:
        """True if playback is paused."""
        return self._state is _State.PAUSED

    def poll(self) -> bool:
        """Return True once when the playing file has reached its end."""
        if self._state is not _State.PLAYING:
            return False
        if pygame.mixer.get_init() and pygame.mixer.music.get_busy():
            return False
        self._state = _State.STOPPED
        return True