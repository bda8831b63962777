#!/usr/bin/env python3
# shadow4d/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- BootSequencer: staged timestamped log with a scripted fault, then one prompt command.
- BootStage: the linear stage enum.
- LogLine and the static log tables.
"""


from .boot import PROMPT, BootSequencer, BootStage
from .logs import EARLY, FAULT, MID, RECOVER_DONE, RECOVER_START, LogLine, late_lines

__all__ = [
    "PROMPT",
    "BootSequencer",
    "BootStage",
    "EARLY",
    "FAULT",
    "MID",
    "RECOVER_DONE",
    "RECOVER_START",
    "LogLine",
    "late_lines",
]
