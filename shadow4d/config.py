#!/usr/bin/env python3
# shadow4d/config.py
from __future__ import annotations

"""
Simulator settings (hard-coded).

There are no config files, flags or environment variables: DEFAULTS is the
whole configuration. `load_config` accepts keyword overrides so tests can point
the sandbox somewhere disposable.

Validation:
  - SANDBOX_DIR: non-empty path
  - IMAGE_KB: int >= 1
  - ARTIFACT_HEX_LEN / CHECKSUM_HEX_LEN / PREVIEW_HEX_LEN: int >= 1
  - DIR_MODE: int in 0..0o777
  - CHAR_DELAY: float >= 0
  - BAR_STEPS: int >= 8
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import logging

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "SANDBOX_DIR": "4d_kernel_env",
    "IMAGE_KB": 48,                 # 4d-kernel.img size in KiB
    "ARTIFACT_HEX_LEN": 128,        # artifact.hex payload length
    "CHECKSUM_HEX_LEN": 64,         # displayed sha256-sim value
    "PREVIEW_HEX_LEN": 48,          # `dump artifact` preview
    "DIR_MODE": 0o755,
    "CHAR_DELAY": 0.004,            # typewriter delay per character (seconds)
    "BAR_STEPS": 36,
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class SimulatorConfig:
    sandbox_dir: Path
    image_kb: int
    artifact_hex_len: int
    checksum_hex_len: int
    preview_hex_len: int
    dir_mode: int
    char_delay: float
    bar_steps: int
    log_level: str
    log_file_path: Path | None

    @property
    def image_bytes(self) -> int:
        return self.image_kb * 1024

    @property
    def log_level_no(self) -> int:
        return getattr(logging, self.log_level)


# ---------- validation ----------


def _as_int(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None
    if number < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {number}")
    return number


def _validate(values: dict[str, Any]) -> SimulatorConfig:
    sandbox = values["SANDBOX_DIR"]
    if sandbox is None or str(sandbox).strip() == "":
        raise ValueError("SANDBOX_DIR must be a non-empty path")

    dir_mode = _as_int("DIR_MODE", values["DIR_MODE"], 0)
    if dir_mode > 0o777:
        raise ValueError(f"DIR_MODE must be a permission mode, got {oct(dir_mode)}")

    try:
        char_delay = float(values["CHAR_DELAY"])
    except (TypeError, ValueError):
        raise ValueError(f"CHAR_DELAY must be a number, got {values['CHAR_DELAY']!r}") from None
    if char_delay < 0:
        raise ValueError("CHAR_DELAY must be >= 0")

    level = str(values["LOG_LEVEL"]).upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")

    log_file = values["LOG_FILE_PATH"]

    return SimulatorConfig(
        sandbox_dir=Path(sandbox),
        image_kb=_as_int("IMAGE_KB", values["IMAGE_KB"], 1),
        artifact_hex_len=_as_int("ARTIFACT_HEX_LEN", values["ARTIFACT_HEX_LEN"], 1),
        checksum_hex_len=_as_int("CHECKSUM_HEX_LEN", values["CHECKSUM_HEX_LEN"], 1),
        preview_hex_len=_as_int("PREVIEW_HEX_LEN", values["PREVIEW_HEX_LEN"], 1),
        dir_mode=dir_mode,
        char_delay=char_delay,
        bar_steps=_as_int("BAR_STEPS", values["BAR_STEPS"], 8),
        log_level=level,
        log_file_path=Path(log_file) if log_file else None,
    )


def load_config(**overrides: Any) -> SimulatorConfig:
    """
    Build the simulator config from DEFAULTS.

    Overrides use lowercase field names (e.g. ``sandbox_dir=tmp_path``).
    Unknown keys raise ValueError.
    """
    values = dict(DEFAULTS)
    for key, value in overrides.items():
        upper = key.upper()
        if upper not in DEFAULTS:
            raise ValueError(f"Unknown setting: {key}")
        values[upper] = value
    return _validate(values)
