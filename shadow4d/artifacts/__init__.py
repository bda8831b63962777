#!/usr/bin/env python3
# shadow4d/artifacts/__init__.py
from __future__ import annotations

from .writer import (
    ARTIFACT_HEX,
    ARTIFACT_NAMES,
    CONFIG_FILE,
    CONFIG_TEXT,
    INITRAMFS,
    INITRAMFS_PLACEHOLDER,
    KERNEL_IMAGE,
    SERVICE_SAMPLE,
    SERVICE_TEXT,
    write_artifact_hex,
    write_config,
    write_initramfs,
    write_kernel_image,
    write_service_sample,
    write_text,
)

__all__ = [
    "ARTIFACT_HEX",
    "ARTIFACT_NAMES",
    "CONFIG_FILE",
    "CONFIG_TEXT",
    "INITRAMFS",
    "INITRAMFS_PLACEHOLDER",
    "KERNEL_IMAGE",
    "SERVICE_SAMPLE",
    "SERVICE_TEXT",
    "write_artifact_hex",
    "write_config",
    "write_initramfs",
    "write_kernel_image",
    "write_service_sample",
    "write_text",
]
