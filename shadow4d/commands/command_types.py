#!/usr/bin/env python3
# shadow4d/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandContext: what a boot-prompt command may use (randomness, sizes).
- CommandCallback: the callable protocol for any command implementation.
- CommandResult: the response text plus how to color it.
- Command: a registered command with metadata and a callable.
"""

from dataclasses import dataclass
from typing import Protocol

from shadow4d.helpers.entropy import EntropySource


@dataclass(slots=True)
class CommandContext:
    entropy: EntropySource
    preview_hex_len: int = 48


class CommandCallback(Protocol):
    """Protocol for any command function."""

    def __call__(self, ctx: CommandContext) -> "CommandResult":  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class CommandResult:
    """
    Normalized result container from command execution.

    Attributes:
        ok: False only when the input was not a known command.
        message: Text printed at the prompt (may span several lines).
        color: ANSI key used to print the message.
    """
    ok: bool = True
    message: str = ""
    color: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class Command:
    """
    A registered boot-prompt command.

    Important fields:
        name: Exact input line that selects this command.
        description: Short, user-facing description.
        callback: Function implementing the command.
    """

    name: str
    description: str
    callback: CommandCallback

    def invoke(self, ctx: CommandContext) -> CommandResult:
        """Execute the underlying command callback."""
        return self.callback(ctx)
