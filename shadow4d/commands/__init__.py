#!/usr/bin/env python3
# shadow4d/commands/__init__.py
from __future__ import annotations

"""
Package for boot-prompt command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandResult`, `CommandContext`).
- In-memory registry and decorators (`REGISTRY`, `command`).
- The fixed built-in vocabulary (`status`, `dump artifact`), registered on import.
"""


from .command_types import Command, CommandCallback, CommandContext, CommandResult
from .commands import REGISTRY, CommandRegistry, command
from . import builtin  # noqa: F401  (registers the built-in commands)

__all__ = [
    "Command",
    "CommandCallback",
    "CommandContext",
    "CommandResult",
    "CommandRegistry",
    "REGISTRY",
    "command",
]
