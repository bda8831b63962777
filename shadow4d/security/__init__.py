#!/usr/bin/env python3
# shadow4d/security/__init__.py
from __future__ import annotations

"""
Package for sandbox directory management.

Provides:
- Idempotent sandbox creation with fail-fast errors (`ensure_sandbox`).
- Strict path resolution inside the sandbox (`resolve_in_sandbox`).
"""


from .sandbox import ensure_sandbox, resolve_in_sandbox

__all__ = ["ensure_sandbox", "resolve_in_sandbox"]
