#!/usr/bin/env python3
# shadow4d/ui/static/banner.py
from __future__ import annotations

from shadow4d.ui.utils.console import Terminal

BANNER_LINES = (
    r"  ____  _  _  ____    ____    _  _  _  _  _  _",
    " / ___|| || ||  _ \\  / ___|  / \\/ \\/ \\/ \\/ \\/ \\",
    r"| |  _ | || || |_) | \___ \ / /\ /\ /\ /\ /\ /",
    r"| |_| || || ||  _ <   ___) / /__\/__\/__\/__\/",
    r" \____||_||_||_| \_\ |____/\____/\____/\____/",
)


def render_banner(terminal: Terminal) -> None:
    """Print the installer header followed by a blank line."""
    for row in BANNER_LINES:
        terminal.line(row, "magenta", "bold")
    terminal.line()
