#!/usr/bin/env python3
# shadow4d/interface/handler.py
from __future__ import annotations

"""
Boot-prompt dispatch.

`handle_line` is total: every string maps to exactly one of
  - a registered command (`status`, `dump artifact`)
  - the empty-line no-op
  - the "command not found" fallback
Matching is exact; no trimming or case folding.
"""

from shadow4d.commands import REGISTRY, CommandContext, CommandResult

NOOP_TEXT = "(no-op) returning to host"


def not_found(line: str) -> CommandResult:
    return CommandResult(
        ok=False, message=f"{line}: command not found (simulation)", color="red")


def handle_line(input_line: str, ctx: CommandContext) -> CommandResult:
    """Map one prompt line to its response."""
    if input_line == "":
        return CommandResult(message=NOOP_TEXT, color="yellow")

    command_obj = REGISTRY.get(input_line)
    if command_obj is None:
        return not_found(input_line)
    return command_obj.invoke(ctx)
