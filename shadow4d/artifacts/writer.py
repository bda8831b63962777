#!/usr/bin/env python3
# shadow4d/artifacts/writer.py
from __future__ import annotations

"""
Placeholder artifact writers.

Each writer drops one file into the sandbox and returns its path. Contents are
filler: nothing here is parsed back. Existing files are overwritten.
"""

import logging
from pathlib import Path

from shadow4d.helpers.entropy import EntropySource
from shadow4d.security.sandbox import resolve_in_sandbox

log = logging.getLogger("shadow4d.artifacts")

KERNEL_IMAGE = "4d-kernel.img"
INITRAMFS = "4d-initramfs.cpio.gz"
CONFIG_FILE = "4d.conf"
ARTIFACT_HEX = "artifact.hex"
SERVICE_SAMPLE = "4d-kernel.service.sample"

ARTIFACT_NAMES = (KERNEL_IMAGE, INITRAMFS, CONFIG_FILE, ARTIFACT_HEX, SERVICE_SAMPLE)

INITRAMFS_PLACEHOLDER = "SIMULATED_INITRAMFS_ARCHIVE_CONTENT\n"

CONFIG_TEXT = """\
# 4D Kernel simulated config
[core]
name = "4d-kernel-sim"
version = "4.0-sim"
mode = "temporal-safe"
max_dimensions = 4

[modules]
module0 = "chrono_scheduler"
module1 = "entropy-bridge"
module2 = "slice-manager"
module3 = "quantum-sandbox"
"""

SERVICE_TEXT = """\
# 4d-kernel.service.sample (DO NOT ENABLE - sample only)
[Unit]
Description=4D Kernel Simulation (sample)
After=network.target

[Service]
Type=oneshot
ExecStart=/bin/echo "This is a sample service file. DO NOT enable on production."
RemainAfterExit=yes

[Install]
WantedBy=multi-user.target
"""


def write_text(root: Path, name: str, content: str) -> Path:
    target = resolve_in_sandbox(root, name)
    # newline="" keeps the payload byte-for-byte on every platform
    with open(target, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    log.debug("wrote %s (%d chars)", target, len(content))
    return target


def write_kernel_image(root: Path, size_bytes: int, entropy: EntropySource) -> Path:
    """Random filler of exactly `size_bytes` bytes, no structure."""
    target = resolve_in_sandbox(root, KERNEL_IMAGE)
    payload = entropy.bytes(size_bytes)
    target.write_bytes(payload)
    log.debug("wrote %s (%d bytes)", target, len(payload))
    return target


def write_initramfs(root: Path) -> Path:
    return write_text(root, INITRAMFS, INITRAMFS_PLACEHOLDER)


def write_config(root: Path) -> Path:
    return write_text(root, CONFIG_FILE, CONFIG_TEXT)


def write_artifact_hex(root: Path, length: int, entropy: EntropySource) -> Path:
    """One line of `length` lowercase hex characters."""
    return write_text(root, ARTIFACT_HEX, entropy.hex(length) + "\n")


def write_service_sample(root: Path) -> Path:
    return write_text(root, SERVICE_SAMPLE, SERVICE_TEXT)
