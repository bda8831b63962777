#!/usr/bin/env python3
# shadow4d/ui/animated/__init__.py
from __future__ import annotations
from .progress import ProgressBar, format_bar

__all__ = ["ProgressBar", "format_bar"]
