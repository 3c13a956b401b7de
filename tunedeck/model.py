"""The playlist: songs on disk, announcements, ordering and search."""

from __future__ import annotations

import random
import shutil
from pathlib import Path, PurePath
from typing import Callable, Optional

from tunedeck.song import Song
from tunedeck.sorting import quick_sort, shell_sort

SUPPORTED_EXTENSIONS = (".mp3", ".wav")

MSG_UNSUPPORTED = "❌ Unsupported file type."
MSG_EXISTS = "⚠️ This song already exists."
MSG_ADDED = "✅ Song added successfully!"
MSG_INVALID_PATH = "⚠️ Invalid file path."
MSG_NOT_FOUND = "❌ Song not found."

SongsCallback = Callable[[list], None]
FeedbackCallback = Callable[[str, bool], None]


def _is_supported(file_name: str) -> bool:
    return PurePath(file_name).suffix in SUPPORTED_EXTENSIONS


def _audio_files(directory: str) -> list[str]:
    """Names of the regular .mp3/.wav files directly inside ``directory``."""
    folder = Path(directory)
    if not folder.is_dir():
        return []
    return sorted(
        entry.name
        for entry in folder.iterdir()
        if entry.is_file() and entry.suffix in SUPPORTED_EXTENSIONS
    )


class Model:
    """Holds the songs found under ``<base>/resources/music`` and the
    announcements under ``<base>/resources/announcements``.

    ``on_songs_updated`` receives the list of song names whenever the
    playlist changes; ``on_feedback`` receives a message and a success flag.
    """

    def __init__(
        self,
        base_path: Optional[str] = None,
        on_songs_updated: Optional[SongsCallback] = None,
        on_feedback: Optional[FeedbackCallback] = None,
    ) -> None:
        self.base_path = str(Path.cwd()) if base_path is None else str(base_path)
        self.resources_path = f"{self.base_path}/resources"
        self.music_path = f"{self.resources_path}/music"
        self.ads_path = f"{self.resources_path}/announcements"
        self.playing_ad = False
        self.songs: list[Song] = []
        self.ads: list[str] = []
        self._song_names: list[str] = []
        self._on_songs_updated = on_songs_updated or (lambda names: None)
        self._on_feedback = on_feedback or (lambda message, success: None)
        self._rng = random.Random()
        self._load_music()
        self._load_ads()

    def names(self) -> list[str]:
        """Names of the songs in playlist order."""
        return [song.name for song in self.songs]

    def index_of(self, song_id: str) -> int:
        """Position of the song with ``song_id``, or -1 if absent."""
        return next(
            (index for index, song in enumerate(self.songs) if song.id == song_id),
            -1,
        )

    def id_at(self, index: int) -> str:
        """Identifier of the song at ``index``, or an empty string."""
        if 0 <= index < len(self.songs):
            return self.songs[index].id
        return ""

    def path_at(self, index: int) -> str:
        """File path of the song at ``index``, or an empty string."""
        if 0 <= index < len(self.songs):
            return self.songs[index].path
        return ""

    def add(self, file_path: str) -> None:
        """Copy ``file_path`` into the music folder and append it to the playlist."""
        if not file_path or not _is_supported(file_path):
            self._on_feedback(MSG_UNSUPPORTED, False)
            return

        filename = PurePath(file_path).name
        new_path = f"{self.music_path}/{filename}"
        if self._find(new_path) is not None:
            self._on_feedback(MSG_EXISTS, False)
            return

        self._save(file_path)
        self.songs.append(Song(len(self.songs) + 1, filename, new_path))
        self._song_names.append(filename)
        self._on_songs_updated(list(self._song_names))
        self._on_feedback(MSG_ADDED, True)

    def remove(self, file_path: str) -> None:
        """Drop the song stored at ``file_path`` and delete the file."""
        if not file_path:
            self._on_feedback(MSG_INVALID_PATH, False)
            return

        position = self._find(file_path)
        if position is None:
            self._on_feedback(MSG_NOT_FOUND, False)
            return

        del self.songs[position]
        Path(file_path).unlink(missing_ok=True)
        self._update_playlist()

    def drop(self, paths) -> None:
        """Add each path in turn, stopping at the first unsupported one."""
        for file_path in paths:
            if not _is_supported(file_path):
                self._on_feedback(MSG_UNSUPPORTED, False)
                return
            self.add(file_path)

    def sort_by_number(self) -> None:
        """Order the playlist by the track number in each name."""
        shell_sort(self.songs)
        self._update_playlist()

    def sort_by_name(self) -> None:
        """Order the playlist by title."""
        quick_sort(self.songs, 0, len(self.songs) - 1)
        self._update_playlist()

    def shuffle(self) -> None:
        """Put the playlist in random order."""
        self._rng.shuffle(self.songs)

    def search(self, query: str) -> list[Song]:
        """Songs whose name contains ``query``."""
        return [song for song in self.songs if song.matches(query)]

    def random_ad(self) -> str:
        """Path of a random announcement, or an empty string if there are none."""
        if not self.ads:
            return ""
        return self._rng.choice(self.ads)

    def _load_music(self) -> None:
        if not Path(self.music_path).exists():
            return
        self._song_names = _audio_files(self.music_path)
        self.songs = [
            Song(number, name, f"{self.music_path}/{name}")
            for number, name in enumerate(self._song_names, start=1)
        ]
        self._update_playlist()
        self.shuffle()

    def _load_ads(self) -> None:
        if not Path(self.ads_path).exists():
            return
        self.ads = [f"{self.ads_path}/{name}" for name in _audio_files(self.ads_path)]

    def _find(self, file_path: str) -> Optional[int]:
        return next(
            (index for index, song in enumerate(self.songs) if song.path == file_path),
            None,
        )

    def _save(self, file_path: str) -> None:
        source = Path(file_path)
        destination = Path(self.music_path) / source.name
        if not destination.exists():
            shutil.copyfile(source, destination)

    def _update_playlist(self) -> None:
        self._song_names = self.names()
        self._on_songs_updated(list(self._song_names))