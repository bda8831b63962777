#!/usr/bin/env python3
# shadow4d/boot/logs.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from shadow4d.artifacts import ARTIFACT_HEX

Severity = Literal["info", "warn", "ok"]


@dataclass(frozen=True, slots=True)
class LogLine:
    severity: Severity
    message: str
    timestamp: str = ""          # HH:MM:SS, stamped when emitted


EARLY: tuple[LogLine, ...] = (
    LogLine("info", "Booting 4D Kernel Simulator v4.0-sim"),
    LogLine("ok", "Setting up CPU micro-slices [OK]"),
    LogLine("ok", "Initializing chrono-scheduler [OK]"),
    LogLine("ok", "Probing pseudo-hardware: temporal bus, entropy bridge [OK]"),
    LogLine("info", "Mounting pseudo rootfs: /simroot [RO]"),
    LogLine("info", "Loading main modules: chrono_scheduler, slice_manager, quantum_sandbox"),
)

MID: tuple[LogLine, ...] = (
    LogLine("ok", "Activating inter-slice comms [OK]"),
    LogLine("ok", "Registering 4th-dimension manager [OK]"),
    LogLine("info", "Spawning temporal worker threads x16"),
    LogLine("info", "Entropy bridge calibration: 0.9 -> 0.98"),
    LogLine("ok", "Virtual devices: /dev/slice0, /dev/slice1 [OK]"),
)

FAULT = LogLine("warn", "WARNING: Temporal skew detected on slice1")
RECOVER_START = LogLine("warn", "Attempting corrective drift compensation...")
RECOVER_DONE = LogLine("ok", "Compensation complete. No data loss.")


def late_lines(sandbox: Path) -> tuple[LogLine, ...]:
    """LATE stage lines; one of them points at the artifact written during setup."""
    return (
        LogLine("info", "Starting user-land shim (simulated)"),
        LogLine("info", "Applying policy: temporal-safe-mode"),
        LogLine("info", "Network stack: disabled (simulation)"),
        LogLine("info", f"Loading artifact: {(Path(sandbox) / ARTIFACT_HEX).as_posix()}"),
        LogLine("ok", "Kernel prompt: 4d#"),
    )
