#!/usr/bin/env python3
# shadow4d/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: in-memory registry of boot-prompt commands.
- command: decorator to register functions as commands with metadata.
"""

from typing import Callable, Dict, Optional

from .command_types import Command, CommandCallback


class CommandRegistry:
    """Holds all command definitions keyed by their exact input line."""

    def __init__(self) -> None:
        self._commands_by_name: Dict[str, Command] = {}

    def register(self, command_obj: Command) -> None:
        """Register a command, refusing duplicates and the empty name."""
        if not command_obj.name:
            raise ValueError("Command name must not be empty.")
        if command_obj.name in self._commands_by_name:
            raise ValueError(
                f"Command '{command_obj.name}' already registered.")
        self._commands_by_name[command_obj.name] = command_obj

    def get(self, name: str) -> Optional[Command]:
        """Return the command for an exact input line, or None."""
        return self._commands_by_name.get(name)

    def names(self) -> list[str]:
        return list(self._commands_by_name.keys())


# Global registry used by the boot prompt
REGISTRY = CommandRegistry()


def command(
    *,
    name: str | None = None,
    description: str | None = None,
) -> Callable[[CommandCallback], CommandCallback]:
    """
    Decorator to register a function as a boot-prompt command.

    - Function name is transformed from snake_case to space-separated words
      for `name` if not provided ("dump_artifact" -> "dump artifact").
    """

    def wrapper(func: CommandCallback) -> CommandCallback:
        command_obj = Command(
            name=name or func.__name__.replace("_", " "),
            description=(description or (func.__doc__ or "")).strip(),
            callback=func,
        )
        REGISTRY.register(command_obj)
        return func

    return wrapper
