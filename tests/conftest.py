from __future__ import annotations

import io
import logging

import pytest

from shadow4d.config import load_config
from shadow4d.helpers import InstantPacing, SeededEntropy
from shadow4d.interface import StreamCLI
from shadow4d.ui import Terminal


@pytest.fixture(autouse=True)
def _reset_shadow4d_logger():
    """init_logger() stops propagation; undo it so caplog keeps working."""
    yield
    logger = logging.getLogger("shadow4d")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def pacing() -> InstantPacing:
    return InstantPacing()


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminal(out, pacing) -> Terminal:
    return Terminal(out, pacing=pacing, char_delay=0)


@pytest.fixture
def entropy() -> SeededEntropy:
    return SeededEntropy(7)


@pytest.fixture
def sandbox_path(tmp_path):
    return tmp_path / "4d_kernel_env"


@pytest.fixture
def config(sandbox_path):
    return load_config(sandbox_dir=sandbox_path, char_delay=0)


@pytest.fixture
def scripted(terminal):
    """Build a line reader that answers prompts from the given lines."""

    def factory(*lines: str) -> StreamCLI:
        text = "".join(f"{line}\n" for line in lines)
        return StreamCLI(io.StringIO(text), terminal)

    return factory
