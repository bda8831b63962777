#!/usr/bin/env python3
# shadow4d/helpers/__init__.py
from __future__ import annotations

from .entropy import HEX_DIGITS, EntropySource, SeededEntropy, SystemEntropy
from .pacing import InstantPacing, Pacing, RealTimePacing

__all__ = [
    "HEX_DIGITS",
    "EntropySource",
    "SeededEntropy",
    "SystemEntropy",
    "Pacing",
    "RealTimePacing",
    "InstantPacing",
]
