#!/usr/bin/env python3
# shadow4d/helpers/entropy.py
from __future__ import annotations

"""
Randomness providers for fake checksums and filler bytes.

Nothing produced here is used for security; it only has to look random.
"""

import os
import random
from typing import Protocol

HEX_DIGITS = "0123456789abcdef"


class EntropySource(Protocol):
    def hex(self, length: int) -> str:  # pragma: no cover - signature only
        ...

    def bytes(self, count: int) -> bytes:  # pragma: no cover - signature only
        ...


class SystemEntropy:
    """Backed by os.urandom."""

    def hex(self, length: int) -> str:
        if length <= 0:
            return ""
        return os.urandom((length + 1) // 2).hex()[:length]

    def bytes(self, count: int) -> bytes:
        return os.urandom(max(0, count))


class SeededEntropy:
    """Deterministic provider for tests and reproducible demos."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def hex(self, length: int) -> str:
        return "".join(self._rng.choice(HEX_DIGITS) for _ in range(max(0, length)))

    def bytes(self, count: int) -> bytes:
        return self._rng.randbytes(max(0, count))
