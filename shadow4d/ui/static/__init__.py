#!/usr/bin/env python3
# shadow4d/ui/static/__init__.py
from __future__ import annotations
from .banner import BANNER_LINES, render_banner
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "BANNER_LINES",
    "render_banner",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
