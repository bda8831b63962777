#!/usr/bin/env python3
# shadow4d/__init__.py
from __future__ import annotations
"""
shadow4d: a harmless, theatrical "4D kernel" installer and boot simulator.

Only writes placeholder files into a local sandbox directory (./4d_kernel_env).
Run with `python -m shadow4d` or the `shadow4d` console script.
"""

__version__ = "4.0.0"
