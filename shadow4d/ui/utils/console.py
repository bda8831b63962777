#!/usr/bin/env python3
# shadow4d/ui/utils/console.py
from __future__ import annotations

import sys
from typing import TextIO

from shadow4d.helpers.pacing import Pacing, RealTimePacing

from .ansi import ANSI, colorize, enable_windows_vt


class Terminal:
    """
    Output sink for the show: plain lines, colored lines, typewriter text.

    Every delay goes through `pacing`, so an InstantPacing terminal renders
    the whole sequence without waiting.
    """

    def __init__(
        self,
        file: TextIO | None = None,
        *,
        pacing: Pacing | None = None,
        char_delay: float = 0.004,
    ) -> None:
        self.file = file if file is not None else sys.stdout
        self.pacing = pacing if pacing is not None else RealTimePacing()
        self.char_delay = char_delay
        enable_windows_vt()

    def write(self, text: str) -> None:
        self.file.write(text)
        self.file.flush()

    def line(self, text: str = "", *styles: str) -> None:
        """Write one line, optionally colored."""
        self.write(colorize(text, *styles) + "\n")

    def typewrite(self, text: str, *styles: str, char_delay: float | None = None) -> None:
        """Write a line one character at a time."""
        delay = self.char_delay if char_delay is None else char_delay
        if delay <= 0:
            self.line(text, *styles)
            return
        prefix = "".join(ANSI[s] for s in styles if s in ANSI)
        if prefix:
            self.write(prefix)
        for ch in text:
            self.write(ch)
            self.pacing.pause(delay)
        self.write((ANSI["reset"] if prefix else "") + "\n")

    def pause(self, seconds: float) -> None:
        self.pacing.pause(seconds)

    def set_title(self, title_text: str) -> None:
        """Set the terminal window title (TTY only)."""
        isatty = getattr(self.file, "isatty", None)
        if isatty is not None and isatty():
            self.write(f"\x1b]2;{title_text}\x07")
