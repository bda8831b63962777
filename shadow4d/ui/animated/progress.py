#!/usr/bin/env python3
# shadow4d/ui/animated/progress.py
from __future__ import annotations

from shadow4d.ui.utils.ansi import colorize
from shadow4d.ui.utils.console import Terminal


def format_bar(completed: int, total: int, label: str = "") -> str:
    """Return `<label> [####----]  NN%` for the given step counts."""
    total = max(1, total)
    completed = max(0, min(total, completed))
    percent = int(completed / total * 100)
    bar = "[" + "#" * completed + "-" * (total - completed) + "]"
    prefix = f"{label} " if label else ""
    return f"{prefix}{bar} {percent:3d}%"


class ProgressBar:
    """
    A fixed-width progress bar repainted in place with a carriage return.

    Usage:
        with ProgressBar(terminal, label_text="initramfs-pack") as bar:
            bar.increment()

    or, for a timed animation:
        ProgressBar(terminal, label_text="artifact").animate(0.7)
    """

    def __init__(
        self,
        terminal: Terminal,
        *,
        label_text: str = "",
        total_units: int = 36,
        color: str = "cyan",
    ) -> None:
        self.terminal = terminal
        self.label_text = label_text
        self.total_units = max(8, int(total_units))
        self.completed_units = 0
        self.color = color
        self._closed = False
        self._render()

    def __enter__(self) -> "ProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def update(self, new_value: int) -> None:
        """Set absolute completed units."""
        self.completed_units = max(0, min(self.total_units, new_value))
        self._render()

    def increment(self, step: int = 1) -> None:
        """Increase completed units by a step."""
        self.update(self.completed_units + step)

    def animate(self, seconds: float) -> None:
        """Fill the bar over `seconds`, then finish the line."""
        step_delay = seconds / self.total_units
        self.terminal.pause(step_delay)
        while self.completed_units < self.total_units:
            self.increment()
            self.terminal.pause(step_delay)
        self.close()

    # ---- internals ---------------------------------------------------------

    def _render(self) -> None:
        text = format_bar(self.completed_units, self.total_units, self.label_text)
        self.terminal.write("\r" + colorize(text, self.color))

    def close(self) -> None:
        """Finalize the bar line; the last frame stays on screen."""
        if self._closed:
            return
        self._closed = True
        self.terminal.write("\n")
