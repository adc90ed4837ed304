# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

Every test runs under a SIGALRM watchdog so a child process that never exits
fails the test instead of hanging the session.
"""

from __future__ import annotations

import signal
from pathlib import Path
from types import FrameType
from typing import Generator

import pytest

from protoweld.config import ProcessTimeouts
from protoweld.system import MockSystemManager, UnixSystemManager


WATCHDOG_SECONDS = 60.0


def _watchdog_seconds(request: pytest.FixtureRequest) -> float:
    """Budget for the current test; ``@pytest.mark.timeout(seconds=...)`` overrides it."""
    marker = request.node.get_closest_marker("timeout")
    if marker is None:
        return WATCHDOG_SECONDS

    seconds = marker.kwargs.get("seconds", marker.args[0] if marker.args else None)
    if seconds is None or float(seconds) <= 0:
        pytest.fail(f"{request.node.nodeid}: timeout marker needs positive seconds")
    return float(seconds)


@pytest.fixture(autouse=True)
def child_process_watchdog(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Fail a test whose spawned toolchain (real or fake) never returns.

    The runner kills children on its own timeouts; this only catches a
    regression there, e.g. a blocked read on an inherited stderr pipe.
    """
    if not hasattr(signal, "setitimer"):
        yield
        return

    seconds = _watchdog_seconds(request)

    def _expired(signum: int, frame: FrameType | None) -> None:
        pytest.fail(f"{request.node.nodeid} still waiting on a child process after {seconds:g}s")

    previous = signal.signal(signal.SIGALRM, _expired)
    signal.setitimer(signal.ITIMER_REAL, seconds)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0.0)
        signal.signal(signal.SIGALRM, previous)


# =========================================================================== #
#                        SYSTEM MANAGER FIXTURES                              #
# =========================================================================== #


@pytest.fixture
def mock_system() -> MockSystemManager:
    """Fresh recording system manager; every program succeeds by default."""
    return MockSystemManager()


@pytest.fixture
def fast_timeouts() -> ProcessTimeouts:
    """Short timeouts so process tests finish quickly."""
    return ProcessTimeouts(dependency_probe=0.5, compilation=1.0)


@pytest.fixture
def unix_system(fast_timeouts: ProcessTimeouts) -> UnixSystemManager:
    """Real system manager with shortened timeouts."""
    return UnixSystemManager(fast_timeouts)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory holding a configuration file and its proto tree."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory
