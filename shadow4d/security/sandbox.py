#!/usr/bin/env python3
# shadow4d/security/sandbox.py
from __future__ import annotations
"""
Sandbox directory management.

All simulator file output is confined to one local directory. Creating it is
idempotent; a non-directory occupying the name is a hard failure.
"""

import logging
import os
from pathlib import Path

from shadow4d.errors import DirectoryCreationFailed

log = logging.getLogger("shadow4d.sandbox")


def ensure_sandbox(path: str | os.PathLike[str], mode: int = 0o755) -> Path:
    """
    Create the sandbox directory if needed and return it.

    Raises DirectoryCreationFailed when the path cannot be created and is not
    already a directory. Nothing is written on failure.
    """
    root = Path(path)
    try:
        root.mkdir(mode=mode, exist_ok=True)
    except FileExistsError:
        raise DirectoryCreationFailed(root, "a non-directory already uses that name") from None
    except OSError as exc:
        if not root.is_dir():
            raise DirectoryCreationFailed(root, exc.strerror or str(exc)) from exc
    if not root.is_dir():
        raise DirectoryCreationFailed(root, "not a directory")
    log.debug("sandbox ready at %s", root)
    return root


def resolve_in_sandbox(root: Path, name: str | os.PathLike[str]) -> Path:
    """
    Resolve `name` strictly within `root`.

    Raises PermissionError when the result would escape the sandbox.
    """
    base = Path(root).resolve()
    resolved = (base / name).resolve()
    if not resolved.is_relative_to(base) or resolved == base:
        raise PermissionError(f"Path escapes sandbox: {name}")
    return resolved
