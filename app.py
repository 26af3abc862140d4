# app.py
# CustomTkinter picker for open files (dark theme).
# - Load the open items from a path list file or from the command line.
# - Live filtering with debounce; a single digit jumps while fewer than 10 items are open.
# - Enter accepts the highlighted row; the chosen path lands in the event log.

from __future__ import annotations
import sys
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e .[gui])
import frontend as api
from focusindex import config as CFG
from focusindex.engine import SelectionError
from focusindex.loader import load_paths
from focusindex.models import PickItem


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class PickerApp(ctk.CTk):
    """Dark-themed window listing the open items by index and label."""

    def __init__(self, paths: Optional[List[str]] = None) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Focus by index")
        self.geometry("720x520")
        self.minsize(560, 420)

        # State
        self._rows: List[PickItem] = []
        self._active: int = 0
        self._filter_after_id: Optional[str] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # rows
        self.grid_rowconfigure(3, weight=0)  # log

        # Build UI
        self._build_header()
        self._build_search()
        self._build_rows()
        self._build_log()

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        if paths:
            self._open(paths, origin="command line")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(header, text="Focus by index", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.lbl_source = ctk.CTkLabel(header, text="No items open", anchor="w")
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        btn = ctk.CTkButton(header, text="Open path list", command=self._choose_list)
        btn.grid(row=0, column=2, padx=12, pady=10)

    def _build_search(self) -> None:
        self.entry_query = ctk.CTkEntry(self, placeholder_text=CFG.PLACEHOLDER)
        self.entry_query.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        self.entry_query.bind("<KeyRelease>", self._on_key)

    def _build_rows(self) -> None:
        self.txt_rows = ctk.CTkTextbox(self, wrap="none", font=self.font_mono)
        self.txt_rows.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        self.txt_rows.configure(state="disabled")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("Ready. Open a path list to begin.")

    # --------- loading ---------

    def _choose_list(self) -> None:
        path = fd.askopenfilename(
            title="Choose path list",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        try:
            paths = load_paths([path])
        except OSError as exc:
            self._log(f"ERROR: {exc!r}")
            mb.showerror("Load error", "Failed to read the path list.")
            return
        self._open(paths, origin=path)

    def _open(self, paths: List[str], origin: str) -> None:
        try:
            items = api.initialize(paths)
        except ValueError as exc:
            self._log(f"ERROR: {exc}")
            mb.showerror("Load error", str(exc))
            return
        self.lbl_source.configure(text=shorten_path(origin))
        self._log(f"{len(items)} items open.")
        self.entry_query.delete(0, "end")
        self._refresh()
        self.entry_query.focus_set()

    # --------- filtering & selection ---------

    def _on_key(self, ev=None) -> None:
        keysym = getattr(ev, "keysym", "")
        if keysym == "Return":
            self._accept_active(); return
        if keysym in ("Down", "Up") and self._rows:
            step = 1 if keysym == "Down" else -1
            self._active = max(0, min(len(self._rows) - 1, self._active + step))
            self._render(); return

        value = self.entry_query.get()
        try:
            picker = api.current()
        except RuntimeError:
            return
        if picker.is_jump_key(value):
            jumped = picker.jump(value)
            if jumped is not None:
                self._chosen(jumped.path)
            return  # out-of-range digits do nothing

        # debounce for smoother typing
        if self._filter_after_id is not None:
            self.after_cancel(self._filter_after_id)
        self._filter_after_id = self.after(120, self._refresh)

    def _refresh(self) -> None:
        self._filter_after_id = None
        self._rows = api.items(self.entry_query.get())
        self._active = 0
        self._render()

    def _render(self) -> None:
        self.txt_rows.configure(state="normal")
        self.txt_rows.delete("0.0", "end")
        if not self._rows:
            self.txt_rows.insert("end", "(no matches)")
        for i, row in enumerate(self._rows):
            marker = "> " if i == self._active else "  "
            self.txt_rows.insert("end", f"{marker}{row.text}\n")
        self.txt_rows.configure(state="disabled")

    def _accept_active(self) -> None:
        if not self._rows:
            return
        try:
            path = api.select(self._rows[self._active].text)
        except SelectionError as err:
            self._log(f"ERROR: {err.value!r} did not resolve")
            mb.showerror("Focus by index", err.message)
            return
        self._chosen(path)

    def _chosen(self, path: str) -> None:
        self._log(f"Selected: {path}")
        print(path)

    # --------- misc UI helpers ---------

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        api.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = PickerApp(load_paths([], extra=sys.argv[1:]))
    app.mainloop()
