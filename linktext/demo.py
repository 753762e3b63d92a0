# linktext/demo.py
"""
Demo window for LinkedTextLabel.

Two links ("Google", "Apple") each flip a BooleanVar owned by the screen.
A trace on each variable shows or hides a small modal sheet with a Dismiss
button, so the label itself never opens or closes windows.

Run:
    linktext-demo
    # or: python -m linktext.demo
"""

from __future__ import annotations
import tkinter as tk
from typing import Callable, Dict, Optional

from linktext.link_text import LinkedTextLabel, LinkSpec
from linktext.logger import get_logger

log = get_logger("linktext.demo")

FULL_TEXT = "Google is a search engine and Apple is a company"


class SheetDialog(tk.Toplevel):
    """Modal sheet with one message and a Dismiss button."""

    def __init__(self, master, message: str, on_dismiss: Callable[[], None]):
        super().__init__(master)
        self.title("Link")
        self.resizable(False, False)
        self._on_dismiss = on_dismiss

        self.message = tk.Label(self, text=message, font=("Segoe UI", 16, "bold"))
        self.message.pack(padx=24, pady=(20, 8))
        self.dismiss_button = tk.Button(self, text="Dismiss", command=self.dismiss)
        self.dismiss_button.pack(pady=(0, 16))

        self.protocol("WM_DELETE_WINDOW", self.dismiss)
        self.bind("<Escape>", lambda _e: self.dismiss())
        self.transient(master)
        try:
            self.grab_set()
        except tk.TclError as e:
            # not viewable yet (e.g. withdrawn root); stays usable, just not modal
            log.debug("Sheet grab skipped: %s", e)

    def dismiss(self) -> None:
        self._on_dismiss()


class ContentScreen(tk.Frame):
    def __init__(self, master, full_text: str = FULL_TEXT, **kwargs):
        super().__init__(master, **kwargs)
        self.google_shown = tk.BooleanVar(self, value=False)
        self.apple_shown = tk.BooleanVar(self, value=False)
        self.sheets: Dict[str, SheetDialog] = {}

        self.label = LinkedTextLabel(
            self,
            full_text,
            [
                LinkSpec("Google", lambda: self._toggle(self.google_shown)),
                LinkSpec("Apple", lambda: self._toggle(self.apple_shown)),
            ],
            font=("Segoe UI", 13),
        )
        self.label.pack(fill="x", padx=16, pady=16)

        self._watch("google", self.google_shown, "You tapped on Google!")
        self._watch("apple", self.apple_shown, "You tapped on Apple!")

    @staticmethod
    def _toggle(var: tk.BooleanVar) -> None:
        var.set(not var.get())

    def _watch(self, key: str, var: tk.BooleanVar, message: str) -> None:
        var.trace_add("write", lambda *_args: self._sync_sheet(key, var, message))

    def _sync_sheet(self, key: str, var: tk.BooleanVar, message: str) -> None:
        sheet: Optional[SheetDialog] = self.sheets.get(key)
        if var.get() and sheet is None:
            log.info("Presenting %s sheet", key)
            self.sheets[key] = SheetDialog(self, message, on_dismiss=lambda: var.set(False))
        elif not var.get() and sheet is not None:
            log.info("Dismissing %s sheet", key)
            del self.sheets[key]
            sheet.grab_release()
            sheet.destroy()


def main() -> None:
    root = tk.Tk()
    root.title("Text With Multiple Links")
    ContentScreen(root).pack(fill="both", expand=True)
    root.mainloop()


if __name__ == "__main__":
    main()
