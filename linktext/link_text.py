# linktext/link_text.py
"""
Linked text label for Tkinter.
- Shows a plain string and turns the first case-insensitive occurrence of each
  given label into a clickable link.
- Each link carries the index of its LinkSpec; a click looks the index up and
  calls that LinkSpec's callback. Unknown indexes do nothing.
- Stateless between renders: runs are rebuilt from (text, links) every time.

Usage:
    from linktext.link_text import LinkedTextLabel

    label = LinkedTextLabel(
        root,
        "Google is a search engine and Apple is a company",
        [("Google", open_google), ("Apple", open_apple)],
    )
    label.pack(fill="x")
"""

from __future__ import annotations
import re
import tkinter as tk
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from linktext.link_config import LinkStyle, load_style
from linktext.logger import get_logger

log = get_logger("linktext.link_text")

BASE_TAG = "base"
LINK_TAG = "link"
TOKEN_TAG_PREFIX = "link-"
ACTION_URL_PREFIX = "action://link/"

# a no-argument callable, or any object with a no-argument activate() method
Handler = Union[Callable[[], None], Any]


@dataclass(frozen=True)
class LinkSpec:
    label: str
    on_activate: Optional[Handler] = None


@dataclass(frozen=True)
class Run:
    start: int
    end: int
    text: str
    token: Optional[int] = None

    @property
    def is_link(self) -> bool:
        return self.token is not None


def _check_handler(label: str, handler) -> None:
    if handler is None or callable(handler):
        return
    if callable(getattr(handler, "activate", None)):
        return
    raise TypeError(f"link {label!r}: handler must be callable or have an activate() method")


def as_link_spec(item) -> LinkSpec:
    """Accept a LinkSpec, a (label, handler) pair, or a bare label."""
    if isinstance(item, LinkSpec):
        spec = item
    elif isinstance(item, str):
        spec = LinkSpec(item)
    elif isinstance(item, tuple) and len(item) == 2:
        spec = LinkSpec(item[0], item[1])
    else:
        raise TypeError(f"cannot build a link from {item!r}")
    if not isinstance(spec.label, str):
        raise TypeError(f"link label must be a str, got {type(spec.label).__name__}")
    _check_handler(spec.label, spec.on_activate)
    return spec


def as_link_specs(links: Iterable) -> Tuple[LinkSpec, ...]:
    return tuple(as_link_spec(item) for item in links)


def find_label(full_text: str, label: str) -> Optional[Tuple[int, int]]:
    # re.IGNORECASE keeps offsets aligned with full_text (casefold() can change lengths)
    if not label:
        return None
    m = re.search(re.escape(label), full_text, re.IGNORECASE)
    if m is None:
        return None
    return m.start(), m.end()


def attribute_links(full_text: str, links: Sequence) -> List[Tuple[int, int, int]]:
    """
    Return (start, end, index) for every LinkSpec that gets a span, sorted by start.
    LinkSpecs are matched in list order; an earlier span keeps its claim when a
    later one overlaps it.
    """
    if not isinstance(full_text, str):
        raise TypeError("full_text must be a str")
    specs = as_link_specs(links)
    claimed: List[Tuple[int, int, int]] = []
    for index, spec in enumerate(specs):
        span = find_label(full_text, spec.label)
        if span is None:
            log.debug("Link %d %r not found in text; skipped", index, spec.label)
            continue
        start, end = span
        clash = next((c for c in claimed if start < c[1] and c[0] < end), None)
        if clash is not None:
            log.debug("Link %d %r overlaps link %d at %d-%d; skipped",
                      index, spec.label, clash[2], clash[0], clash[1])
            continue
        claimed.append((start, end, index))
    claimed.sort()
    return claimed


def split_runs(full_text: str, links: Sequence) -> List[Run]:
    runs: List[Run] = []
    pos = 0
    for start, end, index in attribute_links(full_text, links):
        if pos < start:
            runs.append(Run(pos, start, full_text[pos:start]))
        runs.append(Run(start, end, full_text[start:end], index))
        pos = end
    if pos < len(full_text):
        runs.append(Run(pos, len(full_text), full_text[pos:]))
    return runs


def resolve_token(token, count: int) -> Optional[int]:
    """Decode an activation token into a LinkSpec index, or None if it is unusable."""
    if isinstance(token, bool):
        return None
    if isinstance(token, str):
        raw = token.strip()
        if raw.startswith(ACTION_URL_PREFIX):
            raw = raw[len(ACTION_URL_PREFIX):]
        if not (raw.isascii() and raw.isdigit()):
            return None
        token = int(raw)
    if not isinstance(token, int):
        return None
    if 0 <= token < count:
        return token
    return None


def dispatch(links: Sequence, token) -> str:
    """Run the handler behind `token`. Always returns "break": the click is consumed."""
    links = as_link_specs(links)
    index = resolve_token(token, len(links))
    if index is None:
        log.debug("Inert activation token %r", token)
        return "break"
    spec = links[index]
    handler = spec.on_activate
    if handler is None:
        log.debug("Link %d %r has no handler", index, spec.label)
        return "break"
    log.info("Link activated: %d %r", index, spec.label)
    if callable(handler):
        handler()
    else:
        handler.activate()
    return "break"


class LinkedTextLabel(tk.Text):
    """
    Read-only Text widget showing `full_text` with the given labels as links.
    `links` is an ordered list of LinkSpec, (label, handler) pairs or labels.
    Style arguments left as None come from the environment (see link_config).
    """

    def __init__(self, parent, full_text: str, links: Iterable = (), font=None,
                 text_color: Optional[str] = None, link_color: Optional[str] = None,
                 line_spacing: Optional[int] = None, underline: Optional[bool] = None,
                 **kwargs):
        if not isinstance(full_text, str):
            raise TypeError("full_text must be a str")
        links = as_link_specs(links)
        self._fixed_height = "height" in kwargs
        kwargs.setdefault("height", 1)
        kwargs.setdefault("width", 40)
        kwargs.setdefault("wrap", "word")
        kwargs.setdefault("borderwidth", 0)
        kwargs.setdefault("highlightthickness", 0)
        kwargs.setdefault("relief", "flat")
        kwargs.setdefault("takefocus", 0)
        super().__init__(parent, **kwargs)
        try:
            self.configure(background=parent.cget("background"))
        except tk.TclError as e:
            log.debug("Parent background not copied: %s", e)

        self.style: LinkStyle = load_style(font, text_color, link_color, underline, line_spacing)
        self._full_text = full_text
        self._links = links
        self._runs: List[Run] = []

        self.tag_bind(LINK_TAG, "<Enter>", self._on_enter)
        self.tag_bind(LINK_TAG, "<Leave>", self._on_leave)
        self.bind("<Configure>", self._fit_height, add="+")
        self.render()

    @property
    def full_text(self) -> str:
        return self._full_text

    @property
    def links(self) -> Tuple[LinkSpec, ...]:
        return self._links

    @property
    def runs(self) -> List[Run]:
        return list(self._runs)

    def set_text(self, full_text: str) -> None:
        if not isinstance(full_text, str):
            raise TypeError("full_text must be a str")
        self._full_text = full_text
        self.render()

    def set_links(self, links: Iterable) -> None:
        self._links = as_link_specs(links)
        self.render()

    def activate(self, token) -> str:
        return dispatch(self._links, token)

    def render(self) -> None:
        style = self.style
        self._runs = split_runs(self._full_text, self._links)

        self.configure(state="normal", spacing2=style.line_spacing,
                       spacing3=style.line_spacing, cursor="")
        self.delete("1.0", "end")
        for name in self.tag_names():
            if name.startswith(TOKEN_TAG_PREFIX):
                self.tag_delete(name)

        self.tag_configure(BASE_TAG, font=style.font, foreground=style.text_color)
        self.tag_configure(LINK_TAG, foreground=style.link_color, underline=style.underline)
        self.tag_raise(LINK_TAG, BASE_TAG)

        for run in self._runs:
            if run.is_link:
                token_tag = f"{TOKEN_TAG_PREFIX}{run.token}"
                self.tag_bind(token_tag, "<Button-1>", self._click_handler(run.token))
                self.insert("end", run.text, (BASE_TAG, LINK_TAG, token_tag))
            else:
                self.insert("end", run.text, (BASE_TAG,))

        self.configure(state="disabled")
        self._fit_height()

    def _fit_height(self, _event=None) -> None:
        if self._fixed_height:
            return
        try:
            lines = self.count("1.0", "end-1c", "displaylines")
        except tk.TclError:
            return
        if isinstance(lines, tuple):
            lines = lines[0]
        lines = max(int(lines or 0), 1)
        if lines != int(str(self.cget("height"))):
            self.configure(height=lines)

    def _click_handler(self, token: int) -> Callable[[tk.Event], str]:
        def on_click(_event) -> str:
            return self.activate(token)
        return on_click

    def _on_enter(self, _event) -> None:
        self.configure(cursor="hand2")

    def _on_leave(self, _event) -> None:
        self.configure(cursor="")

