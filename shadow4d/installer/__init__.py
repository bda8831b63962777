#!/usr/bin/env python3
# shadow4d/installer/__init__.py
from __future__ import annotations
"""
Setup sequence package.

Exports:
- SetupSequencer: sandbox creation + ordered preparation phases + boot opt-in.
- RunOutcome: how the setup ended.
- Phase / SETUP_PHASES / MODULES: the static phase table.
"""


from .phases import MODULES, SETUP_PHASES, Phase
from .sequencer import BOOT_QUESTION, RunOutcome, SetupSequencer, wants_boot

__all__ = [
    "BOOT_QUESTION",
    "MODULES",
    "SETUP_PHASES",
    "Phase",
    "RunOutcome",
    "SetupSequencer",
    "wants_boot",
]
