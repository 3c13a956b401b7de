# tunedeck

A small desktop music player. It keeps a playlist of `.mp3` and `.wav`
files, plays them one after another, and now and then slips in a short
announcement before a song.

## Installing

```
pip install .
```

Playback uses `pygame`, which is installed along with the package. The
window is drawn with `tkinter`, so the Python in use must have Tk
support.

## Running

```
tunedeck [--base-path DIR] [FILE ...]
```

- `--base-path DIR` — the directory that holds `resources/` (default: the
  current directory).
- `FILE ...` — audio files to add to the playlist at start-up, as if they
  had been added one by one; the first unsupported file stops the rest.

`tunedeck --help` lists the options.

The player works from a `resources` directory under its base directory:

```
resources/
    music/           your songs (.mp3, .wav)
    announcements/   short clips played before songs (.mp3, .wav)
```

On start-up every supported file in `resources/music` is loaded into the
playlist, which is then shuffled. Files in `resources/announcements` are
used for the announcement breaks. Either directory may be missing; the
playlist or the breaks are then simply empty.

## What it does

- **Play / pause / previous / next.** Play starts the selected song, or
  resumes it if paused. Next stops playback after the last song. When a
  song ends, the next one in the list follows.
- **Repeat.** When on, the current song starts again when it ends.
- **Announcements.** About one play in four is preceded by a random
  announcement. The controls are disabled while it runs; a *Skip Ad*
  button shows up after five to nine seconds. When the announcement ends
  or is skipped, the chosen song is started again (which may in turn draw
  another announcement).
- **Add Song.** Pick a file; it is copied into `resources/music` and
  appended to the playlist. Unsupported types and songs already in the
  list are refused with a message.
- **Remove Song.** After confirmation the selected song is taken off the
  playlist **and its file is deleted from `resources/music`**.
- **Sort by number** orders songs by a leading track number in the file
  name, such as `03 - Title.mp3` or `(3) Title.mp3`; names without one
  count as 0.
- **Sort by name** orders songs by title, ignoring a leading `(n) ` prefix.
- **Search** narrows the shown list to songs whose file name contains the
  typed text (case-sensitive).
- **Volume** slider from 0 to 100; the label shows the percentage.

## What it does not do

- Files cannot be dragged onto the window; pass them on the command line
  or use *Add Song*.
- There is no seek bar, progress display or playback position.

## Using the pieces

The playlist logic can be used without the window:

```python
from tunedeck.model import Model

model = Model(".", on_songs_updated=print, on_feedback=lambda msg, ok: print(msg))
model.sort_by_name()
print(model.names())
```

- `tunedeck.model.Model` — the playlist: `names`, `index_of`, `id_at`,
  `path_at`, `add`, `remove`, `drop`, `sort_by_number`, `sort_by_name`,
  `shuffle`, `search` and `random_ad`.
- `tunedeck.song.Song` — a playlist entry whose `id` is a SHA-256 digest
  of its number, name and path; `tunedeck.song.extract_number` and
  `tunedeck.song.extract_name` hold the rules used for sorting.
- `tunedeck.sorting.shell_sort` and `tunedeck.sorting.quick_sort` — the
  in-place sorts by track number and by title.
- `tunedeck.hashing.generate` — the SHA-256 hex digest used for ids.
- `tunedeck.player.AudioPlayer` — one-file-at-a-time playback; `poll()`
  returns `True` once when a file has run out.
- `tunedeck.controller.Controller` — ties a model, a view and a player
  together.
- `tunedeck.view.View` — the window. Created without a Tk root it runs
  headless: feedback messages collect in `feedback`, confirmations
  answer `confirm_answer`, and no file is ever chosen.

## Tests

```
pip install .[test]
pytest
```