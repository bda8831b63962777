#!/usr/bin/env python3
# shadow4d/interface/cli.py
from __future__ import annotations

"""
Line input frontends for the two decision points (boot opt-in, `4d#` prompt).

Selection order:
    1) prompt_toolkit, when stdin is an interactive terminal
    2) plain stream reads (pipes, files, tests)

Both return the line without its terminator; end-of-input reads as "".
"""

import sys
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI as ANSIText

from shadow4d.ui import Terminal


class BaseCLI:
    """
    Base interface for line readers.

    Subclasses implement get_line(); setup()/teardown() are optional and run
    through the context manager helpers.
    """

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self, prompt_text: str = "") -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class PromptToolkitCLI(BaseCLI):
    """Interactive line editor; the prompt may carry ANSI colors."""

    def __init__(self) -> None:
        self._session: PromptSession[str] = PromptSession()

    def get_line(self, prompt_text: str = "") -> str:
        try:
            return self._session.prompt(ANSIText(prompt_text))
        except EOFError:
            return ""


class StreamCLI(BaseCLI):
    """Reads one line per call from a text stream, echoing the prompt to the terminal."""

    def __init__(self, stream: TextIO | None = None, terminal: Terminal | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.terminal = terminal if terminal is not None else Terminal()

    def get_line(self, prompt_text: str = "") -> str:
        if prompt_text:
            self.terminal.write(prompt_text)
        raw = self.stream.readline()
        if not raw:
            # EOF: finish the prompt line ourselves
            if prompt_text:
                self.terminal.write("\n")
            return ""
        return raw.rstrip("\r\n")


def make_cli(terminal: Terminal | None = None, stream: TextIO | None = None) -> BaseCLI:
    """
    Factory to select the line reader at runtime.
    """
    source = stream if stream is not None else sys.stdin
    isatty = getattr(source, "isatty", None)
    if stream is None and isatty is not None and isatty():
        return PromptToolkitCLI()
    return StreamCLI(source, terminal)
