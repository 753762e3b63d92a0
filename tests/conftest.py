import tkinter as tk

import pytest


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"no display available: {e}")
    root.withdraw()
    yield root
    root.destroy()


@pytest.fixture
def calls():
    """Callback factory that records how often each named callback ran."""
    seen = {}

    def make(name):
        seen.setdefault(name, 0)

        def cb():
            seen[name] += 1

        return cb

    make.seen = seen
    return make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LINKTEXT_LINK_COLOR", "LINKTEXT_LINK_UNDERLINE", "LINKTEXT_LINE_SPACING"):
        monkeypatch.delenv(name, raising=False)
