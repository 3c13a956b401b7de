"""The player window: playlist, transport buttons, volume and search."""

from __future__ import annotations

from typing import Callable, Optional

WINDOW_TITLE = "Music Player"
SEARCH_PLACEHOLDER = "🔍"
DEFAULT_VOLUME = 50
TITLE_SUCCESS = "Success"
TITLE_FAILURE = "Oops"

_BUTTONS = (
    ("sort_by_number", "Sort by number"),
    ("sort_by_name", "Sort by name"),
    ("previous", "⏮"),
    ("play", "▶"),
    ("pause", "⏸"),
    ("repeat", "↻"),
    ("next", "⏭"),
    ("add", "✚ Add Song"),
    ("remove", "✖ Remove Song"),
)


def format_volume(volume: int) -> str:
    """Text of the volume label for a percentage."""
    return f"🔊 {volume}%"


class View:
    """The main window.

    The displayed state (playlist, selected row, whether the buttons are
    enabled, whether "Skip Ad" is shown, the volume label) is kept on the
    object itself; with a Tk ``root`` the same state is also drawn as
    widgets. Without a root the view runs headless: feedback messages are
    collected in ``feedback``, confirmations answer ``confirm_answer`` and
    no file is ever chosen.
    """

    def __init__(self, root=None) -> None:
        self.root = root
        self.playlist: list[str] = []
        self.buttons_enabled = True
        self.skip_visible = False
        self.volume = DEFAULT_VOLUME
        self.volume_text = format_volume(DEFAULT_VOLUME)
        self.search_text = SEARCH_PLACEHOLDER
        self.feedback: list[tuple[str, str]] = []
        self.confirm_answer = False
        self.controller = None
        self._row: Optional[int] = None
        self._actions: dict[str, Callable[[], None]] = {}
        self._buttons: dict = {}
        self._listbox = None
        self._volume_label = None
        self._skip_button = None
        if root is not None:
            self._build(root)

    def connect(self, controller) -> None:
        """Route the window's buttons, slider and search field to ``controller``."""
        self.controller = controller
        self._actions = {
            "play": controller.play_selected,
            "pause": controller.pause,
            "repeat": controller.toggle_repeat,
            "next": controller.play_next,
            "previous": controller.play_previous,
            "add": controller.add,
            "remove": controller.remove,
            "skip": controller.skip_ad,
            "sort_by_number": controller.sort_by_number,
            "sort_by_name": controller.sort_by_name,
        }

    def current_row(self) -> Optional[int]:
        """Row of the selected playlist entry, or None."""
        return self._row

    def clear_selection(self) -> None:
        """Deselect every playlist entry."""
        self._row = None
        if self._listbox is not None:
            self._listbox.selection_clear(0, "end")

    def enable_buttons(self, enable: bool) -> None:
        """Enable or disable every button except "Skip Ad"."""
        self.buttons_enabled = bool(enable)
        state = "normal" if enable else "disabled"
        for button in self._buttons.values():
            button.configure(state=state)

    def update_playlist(self, songs) -> None:
        """Show ``songs`` as the playlist; the selection is reset."""
        self.playlist = list(songs)
        self._row = None
        if self._listbox is not None:
            self._listbox.delete(0, "end")
            if self.playlist:
                self._listbox.insert("end", *self.playlist)

    def update_volume(self, volume: int) -> None:
        """Show ``volume`` (a percentage) in the volume label."""
        self.volume = volume
        self.volume_text = format_volume(volume)
        if self._volume_label is not None:
            self._volume_label.configure(text=self.volume_text)

    def update_selection(self, index: int) -> None:
        """Select the playlist row ``index``; out-of-range rows are ignored."""
        if not 0 <= index < len(self.playlist):
            return
        self._row = index
        if self._listbox is not None:
            self._listbox.selection_clear(0, "end")
            self._listbox.selection_set(index)
            self._listbox.activate(index)
            self._listbox.see(index)

    def show_user_feedback(self, message: str, success: bool) -> None:
        """Tell the user how an action went."""
        title = TITLE_SUCCESS if success else TITLE_FAILURE
        if self.root is None:
            self.feedback.append((title, message))
            return
        from tkinter import messagebox

        messagebox.showinfo(title, message, parent=self.root)

    def show_confirmation(self, message: str) -> bool:
        """Ask a yes/no question; True means yes."""
        if self.root is None:
            return self.confirm_answer
        from tkinter import messagebox

        return bool(messagebox.askyesno("", message, parent=self.root))

    def show_skip_ad(self, visible: bool) -> None:
        """Show or hide the "Skip Ad" button."""
        self.skip_visible = bool(visible)
        if self.root is not None and self._skip_button is not None:
            # May be called from a timer thread; let the event loop redraw.
            self.root.after(0, self._draw_skip_button)

    def ask_open_file(self) -> str:
        """Let the user pick a file; an empty string if none was chosen."""
        if self.root is None:
            return ""
        from tkinter import filedialog

        chosen = filedialog.askopenfilename(parent=self.root)
        return chosen if isinstance(chosen, str) else ""

    def _fire(self, name: str) -> None:
        action = self._actions.get(name)
        if action is not None:
            action()

    def _on_volume(self, value: str) -> None:
        if self.controller is not None:
            self.controller.update_volume(int(float(value)))

    def _on_search(self, text: str) -> None:
        self.search_text = text
        if self.controller is not None:
            self.controller.search(text)

    def _on_select(self, _event=None) -> None:
        chosen = self._listbox.curselection()
        if chosen:
            self._row = int(chosen[0])

    def _draw_skip_button(self) -> None:
        if self.skip_visible:
            self._skip_button.pack()
        else:
            self._skip_button.pack_forget()

    def _build(self, root) -> None:
        import tkinter as tk

        root.title(WINDOW_TITLE)

        sort_row = tk.Frame(root)
        sort_row.pack(pady=4)
        search_var = tk.StringVar(master=root, value=SEARCH_PLACEHOLDER)
        search_bar = tk.Entry(root, textvariable=search_var)
        search_bar.pack(fill="x", padx=6)
        search_var.trace_add("write", lambda *_: self._on_search(search_var.get()))
        self._search_var = search_var

        self._listbox = tk.Listbox(root, exportselection=False, height=15)
        self._listbox.pack(fill="both", expand=True, padx=6, pady=4)
        self._listbox.bind("<<ListboxSelect>>", self._on_select)

        control_row = tk.Frame(root)
        control_row.pack(pady=4)
        volume_row = tk.Frame(root)
        volume_row.pack(pady=4)
        skip_row = tk.Frame(root)
        skip_row.pack()
        files_row = tk.Frame(root)
        files_row.pack(pady=4)

        parents = {
            "sort_by_number": sort_row,
            "sort_by_name": sort_row,
            "previous": control_row,
            "play": control_row,
            "pause": control_row,
            "repeat": control_row,
            "next": control_row,
            "add": files_row,
            "remove": files_row,
        }
        for name, text in _BUTTONS:
            button = tk.Button(parents[name], text=text, command=lambda n=name: self._fire(n))
            button.pack(side="left", padx=2)
            self._buttons[name] = button

        self._volume_label = tk.Label(volume_row, text=self.volume_text)
        self._volume_label.pack(side="left")
        slider = tk.Scale(
            volume_row, from_=0, to=100, orient="horizontal", showvalue=False
        )
        slider.set(DEFAULT_VOLUME)
        slider.configure(command=self._on_volume)
        slider.pack(side="left")

        self._skip_button = tk.Button(
            skip_row, text="⏭ Skip Ad", command=lambda: self._fire("skip")
        )