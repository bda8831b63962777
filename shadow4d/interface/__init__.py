#!/usr/bin/env python3
# shadow4d/interface/__init__.py
from __future__ import annotations

"""
Package for console input and boot-prompt dispatch.

Provides:
- Line readers (prompt_toolkit for terminals, plain streams otherwise).
- The total command dispatcher used at the `4d#` prompt.
"""


from .handler import NOOP_TEXT, handle_line, not_found
from .cli import BaseCLI, PromptToolkitCLI, StreamCLI, make_cli

__all__ = [
    "NOOP_TEXT",
    "handle_line",
    "not_found",
    "BaseCLI",
    "PromptToolkitCLI",
    "StreamCLI",
    "make_cli",
]
