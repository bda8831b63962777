#!/usr/bin/env python3
# shadow4d/errors.py
from __future__ import annotations

from pathlib import Path


class Shadow4DError(Exception):
    """Base class for simulator errors."""


class DirectoryCreationFailed(Shadow4DError):
    """The sandbox directory could not be created (and is not already a directory)."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"cannot create sandbox directory {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
