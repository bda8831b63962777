#!/usr/bin/env python3
# shadow4d/installer/phases.py
from __future__ import annotations
"""
Setup phase table.

Phases run strictly in SETUP_PHASES order. Each one announces itself, plays an
optional timed progress bar, runs its action, then settles for a moment.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from shadow4d import artifacts
from shadow4d.ui import ProgressBar, colorize

if TYPE_CHECKING:
    from .sequencer import SetupSequencer


@dataclass(frozen=True, slots=True)
class Phase:
    label: str
    announce: str
    action: Callable[["SetupSequencer"], None]
    duration: float = 0.0           # progress animation length, 0 = no bar
    bar_label: str = ""
    settle: float = 0.2
    announce_color: str = "yellow"


MODULES = (
    "chrono_scheduler.kmod",
    "entropy_bridge.kmod",
    "slice_manager.kmod",
    "quantum_sandbox.kmod",
    "retro_compat.kmod",
)
MODULE_BAR_SECONDS = 0.35


# ---- actions -------------------------------------------------------------


def _kernel_image(seq: "SetupSequencer") -> None:
    artifacts.write_kernel_image(seq.sandbox, seq.config.image_bytes, seq.entropy)
    seq.report("created", artifacts.KERNEL_IMAGE)


def _initramfs(seq: "SetupSequencer") -> None:
    artifacts.write_initramfs(seq.sandbox)
    seq.report("created", artifacts.INITRAMFS)


def _config(seq: "SetupSequencer") -> None:
    artifacts.write_config(seq.sandbox)
    seq.report("wrote", artifacts.CONFIG_FILE)


def _artifact(seq: "SetupSequencer") -> None:
    artifacts.write_artifact_hex(seq.sandbox, seq.config.artifact_hex_len, seq.entropy)
    seq.report("artifact saved to", artifacts.ARTIFACT_HEX)


def _service(seq: "SetupSequencer") -> None:
    artifacts.write_service_sample(seq.sandbox)
    seq.report("wrote", artifacts.SERVICE_SAMPLE)


def _modules(seq: "SetupSequencer") -> None:
    for index, module in enumerate(MODULES, start=1):
        ProgressBar(
            seq.terminal,
            label_text=f"{index:2d}. {module}",
            total_units=seq.config.bar_steps,
        ).animate(MODULE_BAR_SECONDS)
        seq.terminal.line("  " + colorize("OK", "green"))
        seq.verified_modules.append(module)


def _integrity(seq: "SetupSequencer") -> None:
    seq.checksum = seq.entropy.hex(seq.config.checksum_hex_len)
    seq.terminal.line(f"sha256: {seq.checksum}", "green")


SETUP_PHASES: tuple[Phase, ...] = (
    Phase("kernel-image", "Generating 4D kernel image...", _kernel_image,
          duration=1.3, bar_label="module-compile", settle=0.25),
    Phase("initramfs", "Creating compressed initramfs (simulated)...", _initramfs,
          duration=0.9, bar_label="initramfs-pack", settle=0.25),
    Phase("config", "Writing runtime configuration...", _config),
    Phase("artifact", "Generating integrity artifact (sha-sim)...", _artifact,
          duration=0.7, bar_label="artifact"),
    Phase("service", "Preparing service descriptor (sample)...", _service),
    Phase("modules", "Verifying image and modules...", _modules,
          settle=0.12, announce_color="cyan"),
    Phase("integrity", "Performing integrity check (simulated SHA256)...", _integrity,
          duration=1.0, bar_label="sha256-sim", settle=0.18),
)
