#!/usr/bin/env python3
# shadow4d/installer/sequencer.py
from __future__ import annotations
"""
Setup sequence: sandbox, ordered preparation phases, boot opt-in.

Returns a RunOutcome instead of raising. A sandbox directory that cannot be
created aborts before any phase runs; an artifact write error only fails its
own phase.
"""

import enum
import logging
from pathlib import Path
from typing import Sequence

from shadow4d.config import SimulatorConfig
from shadow4d.errors import DirectoryCreationFailed
from shadow4d.helpers import EntropySource, SystemEntropy
from shadow4d.interface import BaseCLI
from shadow4d.security import ensure_sandbox
from shadow4d.ui import ProgressBar, Terminal, render_banner

from .phases import SETUP_PHASES, Phase

log = logging.getLogger("shadow4d.installer")

BOOT_QUESTION = "Would you like to simulate boot now? (y/N)"


class RunOutcome(enum.Enum):
    COMPLETED_NO_BOOT_REQUESTED = "completed-no-boot"
    COMPLETED_BOOT_REQUESTED = "completed-boot"
    ABORTED_DIRECTORY_ERROR = "aborted-directory-error"

    @property
    def completed(self) -> bool:
        return self is not RunOutcome.ABORTED_DIRECTORY_ERROR


def wants_boot(answer: str) -> bool:
    """True when the reply starts with y/Y."""
    return answer[:1].lower() == "y"


class SetupSequencer:
    """Runs the setup phases in declaration order, then asks about booting."""

    def __init__(
        self,
        config: SimulatorConfig,
        terminal: Terminal,
        cli: BaseCLI,
        *,
        entropy: EntropySource | None = None,
        phases: Sequence[Phase] = SETUP_PHASES,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.cli = cli
        self.entropy = entropy if entropy is not None else SystemEntropy()
        self.phases = tuple(phases)
        self.sandbox: Path = config.sandbox_dir
        self.executed_phases: list[str] = []
        self.failed_phases: list[str] = []
        self.verified_modules: list[str] = []
        self.checksum: str = ""

    def report(self, verb: str, name: str) -> None:
        """Print the `-> <verb> <sandbox>/<name>` line for a produced artifact."""
        self.terminal.typewrite(f"-> {verb} {(self.sandbox / name).as_posix()}", "green")

    def run(self) -> RunOutcome:
        term = self.terminal
        render_banner(term)
        term.typewrite("shadow 4D kernel installer - v4.0-sim", "cyan", char_delay=term.char_delay / 2)
        term.typewrite("Preparing local sandbox environment...", "yellow", char_delay=term.char_delay / 2)
        term.pause(0.2)

        try:
            ensure_sandbox(self.sandbox, self.config.dir_mode)
        except DirectoryCreationFailed as exc:
            log.error("%s", exc)
            term.typewrite(
                f"Failed to create environment directory: {self.sandbox.as_posix()}", "red")
            return RunOutcome.ABORTED_DIRECTORY_ERROR

        term.typewrite(f"Environment directory: ./{self.sandbox.as_posix()}", "green")
        term.pause(0.2)

        for phase in self.phases:
            self._run_phase(phase)

        term.typewrite(
            "4D Kernel image prepared successfully (SIMULATION MODE)", "green", "bold")
        term.pause(0.25)

        term.typewrite(BOOT_QUESTION, "cyan", char_delay=term.char_delay / 2)
        answer = self.cli.get_line("> ")
        outcome = (
            RunOutcome.COMPLETED_BOOT_REQUESTED
            if wants_boot(answer)
            else RunOutcome.COMPLETED_NO_BOOT_REQUESTED
        )
        log.debug("setup finished: %s", outcome.value)
        return outcome

    def _run_phase(self, phase: Phase) -> None:
        log.debug("phase %s: start", phase.label)
        self.terminal.typewrite(phase.announce, phase.announce_color)
        if phase.duration > 0:
            ProgressBar(
                self.terminal,
                label_text=phase.bar_label,
                total_units=self.config.bar_steps,
            ).animate(phase.duration)
        try:
            phase.action(self)
        except OSError as exc:
            log.error("phase %s failed: %s", phase.label, exc)
            self.terminal.line(
                f"[error] {phase.label}: {type(exc).__name__}: {exc}", "red")
            self.failed_phases.append(phase.label)
        self.executed_phases.append(phase.label)
        self.terminal.pause(phase.settle)
        log.debug("phase %s: done", phase.label)
