#!/usr/bin/env python3
# shadow4d/commands/builtin.py
from __future__ import annotations

from .command_types import CommandContext, CommandResult
from .commands import command

STATUS_LINES = (
    "4D Kernel Status: All temporal slices nominal.",
    "Uptime: 0 days, 0:00:12 (simulated)",
    "Active workers: 16",
)


@command(description="Show the simulated kernel status block.")
def status(ctx: CommandContext) -> CommandResult:
    return CommandResult(message="\n".join(STATUS_LINES), color="cyan")


@command(description="Print a fresh random preview of the integrity artifact.")
def dump_artifact(ctx: CommandContext) -> CommandResult:
    # Not the stored artifact.hex: a new value every time
    preview = ctx.entropy.hex(ctx.preview_hex_len)
    return CommandResult(message=f"Artifact preview: {preview}", color="yellow")
