import logging
import re

import pytest

from shadow4d import artifacts
from shadow4d.installer import MODULES, SETUP_PHASES, RunOutcome, SetupSequencer, wants_boot
from shadow4d.ui import strip_ansi

PHASE_ORDER = ["kernel-image", "initramfs", "config", "artifact", "service", "modules", "integrity"]


def _run(config, terminal, scripted, entropy, answer="n"):
    seq = SetupSequencer(config, terminal, scripted(answer), entropy=entropy)
    return seq, seq.run()


def test_phase_table_order():
    assert [p.label for p in SETUP_PHASES] == PHASE_ORDER


def test_all_artifacts_written(config, terminal, scripted, entropy, sandbox_path):
    seq, outcome = _run(config, terminal, scripted, entropy)

    assert outcome is RunOutcome.COMPLETED_NO_BOOT_REQUESTED
    assert sorted(p.name for p in sandbox_path.iterdir()) == sorted(artifacts.ARTIFACT_NAMES)
    assert (sandbox_path / "4d-kernel.img").stat().st_size == config.image_bytes
    hex_text = (sandbox_path / "artifact.hex").read_text()
    assert re.fullmatch(r"[0-9a-f]{128}\n", hex_text)


def test_phases_run_in_declared_order(config, terminal, scripted, entropy):
    seq, _ = _run(config, terminal, scripted, entropy)
    assert seq.executed_phases == PHASE_ORDER
    assert seq.verified_modules == list(MODULES)


def test_console_narration(config, terminal, scripted, entropy, out, sandbox_path):
    seq, _ = _run(config, terminal, scripted, entropy)
    text = strip_ansi(out.getvalue())

    announcements = [p.announce for p in SETUP_PHASES]
    positions = [text.index(a) for a in announcements]
    assert positions == sorted(positions)

    assert f"-> created {sandbox_path.as_posix()}/4d-kernel.img" in text
    assert f"-> artifact saved to {sandbox_path.as_posix()}/artifact.hex" in text
    assert text.count("  OK\n") == len(MODULES)
    assert f"sha256: {seq.checksum}" in text
    assert len(seq.checksum) == 64
    assert "Would you like to simulate boot now? (y/N)" in text
    assert "module-compile [" in text
    assert " 1. chrono_scheduler.kmod [" in text


@pytest.mark.parametrize("answer", ["y", "Y", "yes", "Yolo", "y n"])
def test_opt_in(answer, config, terminal, scripted, entropy):
    _, outcome = _run(config, terminal, scripted, entropy, answer)
    assert outcome is RunOutcome.COMPLETED_BOOT_REQUESTED
    assert outcome.completed


@pytest.mark.parametrize("answer", ["", "n", "N", "no", " y", "sure"])
def test_opt_out(answer, config, terminal, scripted, entropy):
    _, outcome = _run(config, terminal, scripted, entropy, answer)
    assert outcome is RunOutcome.COMPLETED_NO_BOOT_REQUESTED


def test_end_of_input_means_no_boot(config, terminal, entropy):
    from io import StringIO

    from shadow4d.interface import StreamCLI

    seq = SetupSequencer(config, terminal, StreamCLI(StringIO(""), terminal), entropy=entropy)
    assert seq.run() is RunOutcome.COMPLETED_NO_BOOT_REQUESTED


def test_wants_boot():
    assert wants_boot("y") and wants_boot("Y")
    assert not wants_boot("") and not wants_boot("n")


def test_second_run_reuses_sandbox(config, terminal, scripted, entropy, sandbox_path):
    _run(config, terminal, scripted, entropy)
    first_hex = (sandbox_path / "artifact.hex").read_text()

    _, outcome = _run(config, terminal, scripted, entropy)

    assert outcome.completed
    assert sorted(p.name for p in sandbox_path.iterdir()) == sorted(artifacts.ARTIFACT_NAMES)
    # seeded entropy keeps advancing, so the second write replaced the first
    assert (sandbox_path / "artifact.hex").read_text() != first_hex


def test_blocked_sandbox_aborts_before_any_phase(
    config, terminal, scripted, entropy, out, sandbox_path, tmp_path, caplog
):
    sandbox_path.write_text("not a directory")

    with caplog.at_level(logging.ERROR, logger="shadow4d"):
        seq, outcome = _run(config, terminal, scripted, entropy, "y")

    assert outcome is RunOutcome.ABORTED_DIRECTORY_ERROR
    assert not outcome.completed
    assert seq.executed_phases == []
    assert [p.name for p in tmp_path.iterdir()] == [sandbox_path.name]
    assert sandbox_path.is_file()
    text = strip_ansi(out.getvalue())
    assert f"Failed to create environment directory: {sandbox_path.as_posix()}" in text
    assert "Would you like" not in text
    assert any("cannot create sandbox directory" in r.getMessage() for r in caplog.records)


def test_pacing_drives_all_delays(config, terminal, scripted, entropy, pacing):
    _run(config, terminal, scripted, entropy)
    # 4 timed bars + 5 module bars, 37 pauses each, plus settles
    assert len(pacing.requested) >= 9 * 37
    assert pacing.total > 0


def test_artifact_write_error_fails_only_its_phase(
    config, terminal, scripted, entropy, out, sandbox_path, caplog
):
    sandbox_path.mkdir()
    (sandbox_path / "artifact.hex").mkdir()

    with caplog.at_level(logging.ERROR, logger="shadow4d"):
        seq, outcome = _run(config, terminal, scripted, entropy, "y")

    assert outcome is RunOutcome.COMPLETED_BOOT_REQUESTED
    assert seq.failed_phases == ["artifact"]
    assert seq.executed_phases == PHASE_ORDER
    assert (sandbox_path / "artifact.hex").is_dir()
    for name in set(artifacts.ARTIFACT_NAMES) - {"artifact.hex"}:
        assert (sandbox_path / name).is_file()
    text = strip_ansi(out.getvalue())
    assert "[error] artifact: IsADirectoryError" in text
    assert "-> artifact saved to" not in text
    assert text.index("[error] artifact:") < text.index(SETUP_PHASES[4].announce)
    assert any("phase artifact failed" in r.getMessage() for r in caplog.records)


def test_clean_run_has_no_failed_phases(config, terminal, scripted, entropy):
    seq, _ = _run(config, terminal, scripted, entropy)
    assert seq.failed_phases == []


def test_narration_types_at_half_the_configured_delay(
    config, out, pacing, scripted, entropy
):
    from shadow4d.ui import Terminal

    terminal = Terminal(out, pacing=pacing, char_delay=0.01)
    SetupSequencer(config, terminal, scripted("n"), entropy=entropy).run()
    narration = "shadow 4D kernel installer - v4.0-sim"
    assert pacing.requested.count(0.005) >= len(narration)
    assert 0.002 not in pacing.requested


def test_zero_char_delay_disables_typing_pauses(config, terminal, scripted, entropy, pacing):
    _run(config, terminal, scripted, entropy)
    assert 0 not in pacing.requested
    assert 0.002 not in pacing.requested
