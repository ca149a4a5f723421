# app.py
# CustomTkinter demo for the ghost-text field (dark theme).
# - Load suggestion / preferred lists from text files (one candidate per line).
# - Background loading thread (keeps UI responsive).
# - Inline suggestion painted behind the cursor; Tab or Right accepts.

from __future__ import annotations
import logging
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src)
from ghosttext import GhostTextField, RenderDirective, load_candidates
from ghosttext import config as CFG

log = logging.getLogger("ghosttext.app")

DEMO_SUGGESTIONS = [
    "hello world wide web",
    "help me find my keys",
    "how are you doing today",
    "the quick brown fox jumps over the lazy dog",
]


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def blend(hex_rgba: str, background: str) -> str:
    """
    Tk has no alpha, so pre-mix #RRGGBBAA over an opaque #RRGGBB background.
    Pure black is treated as white first so the dark theme still shows it.
    """
    h = hex_rgba.lstrip("#")
    if len(h) != 8:
        return hex_rgba
    r, g, b, a = (int(h[i:i + 2], 16) for i in range(0, 8, 2))
    if (r, g, b) == (0, 0, 0):
        r = g = b = 255
    bg = background.lstrip("#")
    br, bgc, bb = (int(bg[i:i + 2], 16) for i in range(0, 6, 2))
    alpha = max(a / 255, 0.35)  # .22 is unreadable on a dark entry
    mix = lambda fg, back: round(fg * alpha + back * (1 - alpha))
    return "#{:02x}{:02x}{:02x}".format(mix(r, br), mix(g, bgc), mix(b, bb))


# -------------------- main app --------------------

class GhostTextApp(ctk.CTk):
    """Dark-themed window with one ghost-text entry driven by GhostTextField."""

    ENTRY_BG = "#343638"

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Ghost text")
        self.geometry("760x420")
        self.minsize(620, 360)

        # State
        self.field = GhostTextField(DEMO_SUGGESTIONS, bordered=True)
        self._loading_thread: Optional[threading.Thread] = None

        # Fonts: entry and overlay must share one font for the widths to line up
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_field = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=15)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        self._build_header()
        self._build_source_bar()
        self._build_field()
        self._build_log()

        self.field.subscribe(self._paint)
        self._set_status(f"{len(DEMO_SUGGESTIONS)} demo suggestions")
        self.protocol("WM_DELETE_WINDOW", self.destroy)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Ghost text autocomplete", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(3, weight=1)

        ctk.CTkButton(bar, text="Suggestions…", command=lambda: self._choose("suggestions")).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        ctk.CTkButton(bar, text="Preferred…", command=lambda: self._choose("preferred")).grid(
            row=0, column=1, padx=(0, 6), pady=10
        )

        self.mode_switch = ctk.CTkSegmentedButton(bar, values=["word", "sentence"], command=self._on_mode)
        self.mode_switch.set(self.field.mode.value)
        self.mode_switch.grid(row=0, column=2, padx=(6, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_field(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry = ctk.CTkEntry(box, font=self.font_field, fg_color=self.ENTRY_BG, height=38)
        self.entry.grid(row=0, column=0, sticky="ew", padx=12, pady=12)

        # the overlay only ever shows the visible part, placed right after the typed text
        self.lbl_ghost = ctk.CTkLabel(
            self.entry, text="", font=self.font_field, anchor="w",
            fg_color=self.ENTRY_BG, text_color=blend(self.field.completion_color, self.ENTRY_BG),
            height=20,
        )

        self.entry.bind("<KeyRelease>", self._on_key_release)
        self.entry.bind("<Tab>", self._on_accept)
        self.entry.bind("<Right>", self._on_right)

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("Ready. Start typing, or load your own lists.")

    # --------- painting ---------

    def _paint(self, d: RenderDirective) -> None:
        if d.is_empty or not d.visible_text:
            self.lbl_ghost.place_forget()
            return
        x = self.field.padding + self.font_field.measure(d.hidden_text)
        self.lbl_ghost.configure(text=d.visible_text)
        self.lbl_ghost.place(x=x, rely=0.5, y=self.field.pixel_correction, anchor="w")

    # --------- events ---------

    def _on_key_release(self, ev=None) -> None:
        if ev is not None and ev.keysym in ("Tab", "Right"):
            return
        self.field.text_changed(self.entry.get())

    def _on_accept(self, _ev=None):
        if self.field.directive.is_empty:
            return None
        text = self.field.accept()
        self.entry.delete(0, "end")
        self.entry.insert(0, text)
        self.entry.icursor("end")
        self._log(f"Accepted: {text!r}")
        return "break"

    def _on_right(self, ev=None):
        # only accept when the cursor sits at the end of the text
        if self.entry.index("insert") < len(self.entry.get()):
            return None
        return self._on_accept(ev)

    def _on_mode(self, value: str) -> None:
        self.field.mode = value
        self.field.refresh()
        self._log(f"Mode: {self.field.mode.value}")

    # --------- loading (threaded) ---------

    def _choose(self, which: str) -> None:
        paths = fd.askopenfilenames(
            title=f"Choose {which} files",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if not paths:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "Lists are already loading. Please wait.")
            return
        self._set_status(f"Loading {which}…")
        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(which, list(paths)), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, which: str, paths: List[str]) -> None:
        try:
            items = load_candidates(paths)
        except (OSError, UnicodeError) as exc:
            self.after(0, self._on_load_error, exc)
            return
        self.after(0, self._on_load_ok, which, paths, items)

    def _on_load_ok(self, which: str, paths: List[str], items: List[str]) -> None:
        setattr(self.field, which, items)
        self._set_status(f"{which}: {len(items):,}")
        self._log(f"Loaded {len(items)} {which} from {', '.join(shorten_path(p) for p in paths)}")
        self.field.text_changed(self.entry.get())
        self.entry.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self._set_status("Error while loading.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load the list.\nSee event log for details.")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _log(self, msg: str) -> None:
        log.info(msg)
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    if CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)
    app = GhostTextApp()
    app.mainloop()
