#!/usr/bin/env python3
# shadow4d/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    colorize,
    Terminal,
)
from .static import (
    BANNER_LINES,
    render_banner,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .animated import ProgressBar, format_bar

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "Terminal",
    "BANNER_LINES",
    "render_banner",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "ProgressBar",
    "format_bar",
]
