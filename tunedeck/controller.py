"""Coordinates the playlist, the window and the audio player."""

from __future__ import annotations

import random
import threading
from typing import Optional

from tunedeck.model import Model

CONFIRM_REMOVE = "Are you sure you wanna delete this song?"
AD_CHANCE_PERCENT = 25


class Controller:
    """Reacts to user actions and playback events.

    ``view`` must offer ``current_row``, ``clear_selection``,
    ``enable_buttons``, ``update_playlist``, ``update_volume``,
    ``update_selection``, ``show_skip_ad``, ``show_confirmation`` and
    ``ask_open_file``; ``player`` must offer ``play``, ``pause``, ``resume``,
    ``stop``, ``set_volume`` and ``is_paused``.
    """

    def __init__(self, model: Model, view, player, rng: Optional[random.Random] = None) -> None:
        self.model = model
        self.view = view
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.repeat = False
        self.current_id = ""
        self.selected_id = ""
        self._song_stack: list[int] = []
        self._skip_timer: Optional[threading.Timer] = None
        view.update_playlist(model.names())

    def play_selected(self) -> None:
        """Play the selected song, or resume if playback is paused."""
        self.selected_id = self._save_id()
        song_index = self.model.index_of(self.selected_id)
        if self.player.is_paused():
            self.player.resume()
            return
        self._process_selection(song_index, False)

    def pause(self) -> None:
        """Pause playback."""
        self.player.pause()

    def play_next(self) -> None:
        """Play the song after the current one, or stop at the end."""
        next_index = self.model.index_of(self.current_id) + 1
        if next_index <= len(self.model.names()) - 1:
            self._process_selection(next_index, False)
        else:
            self.player.stop()

    def play_previous(self) -> None:
        """Play the song before the current one, if any."""
        previous_index = self.model.index_of(self.current_id) - 1
        if previous_index >= 0:
            self._process_selection(previous_index, False)

    def toggle_repeat(self) -> None:
        """Switch repeating of the current song on or off."""
        self.repeat = not self.repeat

    def add(self) -> None:
        """Ask for a file, add it to the playlist and select it."""
        file_path = self.view.ask_open_file()
        if not file_path:
            return
        self.model.add(file_path)
        self.view.update_playlist(self.model.names())
        songs = self.model.names()
        if songs:
            self._restore_id(self.model.id_at(len(songs) - 1))

    def remove(self) -> None:
        """Delete the selected song after confirmation."""
        self.selected_id = self._save_id()
        if not self.selected_id:
            return
        file_path = self.model.path_at(self.model.index_of(self.selected_id))
        if not file_path:
            return
        if self.view.show_confirmation(CONFIRM_REMOVE):
            self.model.remove(file_path)
            self._update_playlist(self.selected_id)
            if self.selected_id == self.current_id:
                self.player.stop()
                self.current_id = ""

    def skip_ad(self) -> None:
        """End the running announcement early."""
        if not self.model.playing_ad:
            return
        self.player.stop()
        self._handle_ad_status()

    def sort_by_number(self) -> None:
        """Order by track number, keeping the selection."""
        selection = self._save_id()
        self.model.sort_by_number()
        self._update_playlist(selection)

    def sort_by_name(self) -> None:
        """Order by title, keeping the selection."""
        selection = self._save_id()
        self.model.sort_by_name()
        self._update_playlist(selection)

    def update_volume(self, volume: int) -> None:
        """Apply a volume percentage to the player and the window."""
        self.player.set_volume(volume)
        self.view.update_volume(volume)

    def search(self, text: str) -> None:
        """Show only the songs whose names contain ``text``."""
        self.view.update_playlist([song.name for song in self.model.search(text)])

    def handle_drop(self, paths) -> None:
        """Add dropped files and restore a sensible selection."""
        paths = list(paths)
        if not paths:
            return
        self.current_id = self._save_id()
        self.model.drop(paths)
        self.view.update_playlist(self.model.names())

        if self.current_id and self.model.index_of(self.current_id) != -1:
            self._restore_id(self.current_id)
            return

        first_id = self.model.id_at(0)
        if first_id:
            self._restore_id(first_id)
            return

        self.view.clear_selection()

    def media_finished(self) -> None:
        """React to the playing file reaching its end."""
        if self.model.playing_ad:
            self._handle_ad_status()
        else:
            self._handle_song_status()

    def _is_playback(self) -> bool:
        return self.rng.randrange(100) < AD_CHANCE_PERCENT

    def _play(self, file_path: str) -> None:
        if not file_path:
            return
        self.player.stop()
        self.player.play(file_path)

    def _handle_playback(self, song_index: int) -> None:
        self.view.show_skip_ad(False)
        self._play(self.model.path_at(song_index))

    def _process_selection(self, song_index: int, update_selected: bool) -> None:
        if update_selected:
            self.selected_id = self.model.id_at(song_index)
        self.current_id = self.model.id_at(song_index)
        self._restore_id(self.current_id)

        if self._is_playback():
            self._song_stack.append(song_index)
            self._process_random_ad()
        else:
            self._handle_playback(song_index)

    def _process_random_ad(self) -> None:
        path = self.model.random_ad()
        if not path:
            return
        self.model.playing_ad = True
        self.view.enable_buttons(False)
        delay = self.rng.randrange(5, 10)
        self._cancel_skip_timer()
        self._skip_timer = threading.Timer(delay, self._offer_skip)
        self._skip_timer.daemon = True
        self._skip_timer.start()
        self._play(path)

    def _offer_skip(self) -> None:
        if self.model.playing_ad:
            self.view.show_skip_ad(True)

    def _cancel_skip_timer(self) -> None:
        if self._skip_timer is not None:
            self._skip_timer.cancel()
            self._skip_timer = None

    def _handle_ad_status(self) -> None:
        self._cancel_skip_timer()
        self.model.playing_ad = False
        self.view.show_skip_ad(False)
        self.view.enable_buttons(True)

        if self._song_stack:
            next_index = self._song_stack.pop()
            self.view.update_selection(next_index)
            self.play_selected()
        else:
            self.play_next()

    def _handle_song_status(self) -> None:
        if self.repeat:
            current_index = self.model.index_of(self.current_id)
            if current_index != -1:
                self._handle_playback(current_index)
            return

        next_index = self.model.index_of(self.current_id) + 1
        if next_index >= len(self.model.names()):
            if not self._is_playback():
                self.player.stop()
            return

        if self._is_playback():
            self._process_selection(next_index, True)
        else:
            self._restore_id(self.model.id_at(next_index))
            self.play_selected()

    def _update_playlist(self, song_id: str) -> None:
        self.view.update_playlist(self.model.names())
        self._restore_id(song_id)
        self.view.enable_buttons(True)

    def _save_id(self) -> str:
        row = self.view.current_row()
        if row is None or row < 0:
            return ""
        return self.model.id_at(row)

    def _restore_id(self, song_id: str) -> None:
        restored = self.model.index_of(song_id)
        if restored == -1 and self.model.playing_ad:
            restored = self.model.index_of(self.current_id)
        if restored != -1:
            self.view.update_selection(restored)
            self.current_id = self.model.id_at(restored)