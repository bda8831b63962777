#!/usr/bin/env python3
# shadow4d/helpers/pacing.py
from __future__ import annotations

import time
from typing import Protocol


class Pacing(Protocol):
    """Blocking delay used between animated writes."""

    def pause(self, seconds: float) -> None:  # pragma: no cover - signature only
        ...


class RealTimePacing:
    """Sleeps on the wall clock."""

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class InstantPacing:
    """Never waits; keeps the requested durations so callers can inspect them."""

    def __init__(self) -> None:
        self.requested: list[float] = []

    def pause(self, seconds: float) -> None:
        self.requested.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.requested)
