#!/usr/bin/env python3
# shadow4d/app.py
from __future__ import annotations

"""
Entry point: setup, optional boot, goodbye.

Always returns 0, including after a sandbox failure (the error is printed).
"""

import logging
from typing import TextIO

from shadow4d.boot import BootSequencer
from shadow4d.config import SimulatorConfig, load_config
from shadow4d.helpers import EntropySource, Pacing, RealTimePacing, SystemEntropy
from shadow4d.installer import RunOutcome, SetupSequencer
from shadow4d.interface import BaseCLI, make_cli
from shadow4d.ui import Terminal, init_logger

log = logging.getLogger("shadow4d")


def run(
    config: SimulatorConfig,
    *,
    terminal: Terminal,
    cli: BaseCLI,
    entropy: EntropySource,
) -> RunOutcome:
    """Run the whole show against already-built collaborators."""
    setup = SetupSequencer(config, terminal, cli, entropy=entropy)
    outcome = setup.run()

    if outcome is RunOutcome.ABORTED_DIRECTORY_ERROR:
        return outcome

    if outcome is RunOutcome.COMPLETED_BOOT_REQUESTED:
        terminal.typewrite("Starting simulated boot...", "magenta", char_delay=terminal.char_delay * 1.5)
        BootSequencer(
            setup.sandbox,
            terminal,
            cli,
            entropy=entropy,
            preview_hex_len=config.preview_hex_len,
            bar_steps=config.bar_steps,
        ).run()
    else:
        terminal.typewrite(
            f"Skipping boot simulation. Inspect files in ./{setup.sandbox.as_posix()}", "yellow")

    terminal.typewrite(
        "Simulation complete. Note: this was a local-only theatrical simulation.", "cyan")
    return outcome


def main(
    *,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
    pacing: Pacing | None = None,
    config: SimulatorConfig | None = None,
) -> int:
    config = config if config is not None else load_config()
    init_logger("shadow4d", level=config.log_level_no, logfile=config.log_file_path)

    terminal = Terminal(
        stdout,
        pacing=pacing if pacing is not None else RealTimePacing(),
        char_delay=config.char_delay,
    )
    terminal.set_title("shadow4d (simulation)")
    terminal.line()
    outcome = run(
        config,
        terminal=terminal,
        cli=make_cli(terminal, stdin),
        entropy=SystemEntropy(),
    )
    log.debug("run finished: %s", outcome.value)
    terminal.line()
    return 0
