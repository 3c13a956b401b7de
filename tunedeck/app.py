"""Command-line entry point that opens the player window."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from tunedeck.controller import Controller
from tunedeck.model import Model
from tunedeck.player import AudioPlayer
from tunedeck.view import View

POLL_INTERVAL_MS = 200


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="tunedeck", description="Play the songs kept in a resources folder."
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="folder holding resources/music and resources/announcements "
        "(default: the current directory)",
    )
    parser.add_argument(
        "files", nargs="*", help="audio files to add to the playlist at start"
    )
    return parser.parse_args(argv)


def _watch_playback(root, player, controller, interval: int = POLL_INTERVAL_MS) -> None:
    """Check the player regularly and report files that have ended."""

    def tick() -> None:
        if player.poll():
            controller.media_finished()
        root.after(interval, tick)

    root.after(interval, tick)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the player window and run until it is closed."""
    args = parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    view = View(root)
    model = Model(
        args.base_path,
        on_songs_updated=view.update_playlist,
        on_feedback=view.show_user_feedback,
    )
    player = AudioPlayer()
    controller = Controller(model, view, player)
    view.connect(controller)
    if args.files:
        controller.handle_drop(args.files)
    _watch_playback(root, player, controller)
    root.mainloop()
    player.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())