#!/usr/bin/env python3
# shadow4d/boot/boot.py
from __future__ import annotations
"""
Simulated boot for the 4D kernel.

Stages run once, in order:
    EARLY -> MID -> FAULT -> RECOVER -> LATE -> PROMPT -> DONE
The FAULT/RECOVER pair is scripted and always ends in "Compensation complete".
"""

import enum
import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence

from shadow4d.commands import CommandContext, CommandResult
from shadow4d.helpers import EntropySource, SystemEntropy
from shadow4d.interface import BaseCLI, handle_line
from shadow4d.ui import ProgressBar, Terminal, colorize

from .logs import EARLY, FAULT, MID, RECOVER_DONE, RECOVER_START, LogLine, late_lines

log = logging.getLogger("shadow4d.boot")

PROMPT = colorize("4d# ", "magenta")
TIME_FORMAT = "%H:%M:%S"

# The stage picks the timestamp tint; severity only styles the message.
SEVERITY_STYLES: dict[str, tuple[str, ...]] = {
    "info": (),
    "ok": (),
    "warn": ("bold",),
}


class BootStage(enum.Enum):
    EARLY = "early"
    MID = "mid"
    FAULT = "fault"
    RECOVER = "recover"
    LATE = "late"
    PROMPT = "prompt"
    DONE = "done"


class BootSequencer:
    """Renders the staged boot log, then answers exactly one prompt command."""

    def __init__(
        self,
        sandbox: Path,
        terminal: Terminal,
        cli: BaseCLI,
        *,
        entropy: EntropySource | None = None,
        clock: Callable[[], datetime] = datetime.now,
        preview_hex_len: int = 48,
        bar_steps: int = 36,
    ) -> None:
        self.sandbox = Path(sandbox)
        self.terminal = terminal
        self.cli = cli
        self.clock = clock
        self.bar_steps = bar_steps
        self.context = CommandContext(
            entropy=entropy if entropy is not None else SystemEntropy(),
            preview_hex_len=preview_hex_len,
        )
        self.visited: list[BootStage] = []
        self.emitted: list[LogLine] = []
        self.last_command: str | None = None
        self.response: CommandResult | None = None

    # ---- stages ------------------------------------------------------------

    def run(self) -> CommandResult:
        self._enter(BootStage.EARLY)
        self._emit_all(EARLY, "blue", 0.45)

        self._enter(BootStage.MID)
        self._emit_all(MID, "cyan", 0.40)

        self._enter(BootStage.FAULT)
        self._emit(FAULT, "red")
        self.terminal.pause(0.8)

        self._enter(BootStage.RECOVER)
        self._emit(RECOVER_START, "yellow")
        ProgressBar(
            self.terminal, label_text="drift-correct", total_units=self.bar_steps
        ).animate(1.2)
        self._emit(RECOVER_DONE, "green")
        self.terminal.pause(0.35)

        self._enter(BootStage.LATE)
        self._emit_all(late_lines(self.sandbox), "green", 0.35)

        self._enter(BootStage.PROMPT)
        line = self.cli.get_line(PROMPT)
        self.last_command = line
        self.response = handle_line(line, self.context)
        self.terminal.line(self.response.message, self.response.color)

        self._enter(BootStage.DONE)
        return self.response

    # ---- internals ---------------------------------------------------------

    def _enter(self, stage: BootStage) -> None:
        log.debug("boot stage -> %s", stage.value)
        self.visited.append(stage)

    def _emit(self, entry: LogLine, tint: str) -> None:
        stamp = self.clock().strftime(TIME_FORMAT)
        message = colorize(entry.message, *SEVERITY_STYLES[entry.severity])
        self.terminal.line(colorize(f"[{stamp}] ", tint) + message)
        self.emitted.append(replace(entry, timestamp=stamp))

    def _emit_all(self, entries: Sequence[LogLine], tint: str, delay: float) -> None:
        for entry in entries:
            self._emit(entry, tint)
            self.terminal.pause(delay)
