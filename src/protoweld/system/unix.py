"""Unix implementation of :class:`~protoweld.system.protocols.SystemManager`."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Sequence

from protoweld.config.models import ProcessTimeouts
from protoweld.errors.system import (
    CommandError,
    CommandFailed,
    CommandSpawnFailed,
    CommandTimedOut,
    FileOperationFailed,
    UnsupportedPlatform,
)
from protoweld.result import Failure, Result, Success
from protoweld.system.operations import SearchOutcome, insert_bytes, search_text


logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS: tuple[str, ...] = ("linux", "darwin")


class UnixSystemManager:
    """Runs processes with ``subprocess`` and edits files through ``pathlib``.

    Args:
        timeouts: Probe and compilation timeouts; defaults to 1s / 5s.
    """

    def __init__(self, timeouts: ProcessTimeouts | None = None) -> None:
        self._timeouts = timeouts if timeouts is not None else ProcessTimeouts()

    @property
    def timeouts(self) -> ProcessTimeouts:
        return self._timeouts

    def run_command(
        self,
        program: str,
        arguments: Sequence[str],
        *,
        dependency: bool,
        cwd: Path | None = None,
    ) -> Result[None, CommandError]:
        timeout = (
            self._timeouts.dependency_probe if dependency else self._timeouts.compilation
        )
        logger.debug("Running %s %s (timeout %gs)", program, " ".join(arguments), timeout)

        try:
            child = subprocess.Popen(
                [program, *arguments],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                cwd=cwd,
            )
        except OSError as exc:
            logger.info("Child spawn error for %s: %s", program, exc)
            return Failure(CommandSpawnFailed(program=program, message=str(exc)))

        try:
            _, stderr = child.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            child.kill()
            # a hung plugin may still hold the inherited stderr pipe open
            if child.stderr is not None:
                child.stderr.close()
            child.wait()
            if dependency:
                return Failure(CommandTimedOut(program=program, timeout_seconds=timeout))
            # protoc plugins are known to hang after emitting everything they generate
            logger.warning(
                "%s still running after %gs; killed and treated as finished", program, timeout
            )
            return Success(None)

        if child.returncode == 0:
            return Success(None)
        return Failure(
            CommandFailed(
                program=program,
                exit_code=child.returncode,
                stderr=stderr.decode("utf-8", errors="replace") if stderr else "",
            )
        )

    def search(self, path: Path, needle: str) -> Result[SearchOutcome, FileOperationFailed]:
        try:
            content = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return Failure(FileOperationFailed(operation="search", path=path, message=str(exc)))
        return Success(search_text(content, needle))

    def rename_file(self, source: Path, target: Path) -> Result[None, FileOperationFailed]:
        try:
            source.rename(target)
        except OSError as exc:
            return Failure(FileOperationFailed(operation="rename", path=source, message=str(exc)))
        return Success(None)

    def find_replace(
        self, path: Path, pattern: str, replacement: str
    ) -> Result[int, FileOperationFailed]:
        try:
            # bytes in, bytes out: line endings are left exactly as generated
            content = path.read_bytes().decode("utf-8")
            count = content.count(pattern) if pattern else 0
            if count:
                path.write_bytes(content.replace(pattern, replacement).encode("utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            return Failure(
                FileOperationFailed(operation="find_replace", path=path, message=str(exc))
            )
        return Success(count)

    def insert_text(
        self, path: Path, position: int, text: str
    ) -> Result[None, FileOperationFailed]:
        try:
            content = path.read_bytes()
            updated = insert_bytes(content, position, text)
            if updated is None:
                return Failure(
                    FileOperationFailed(
                        operation="insert",
                        path=path,
                        message=f"Position out of bounds. File length {len(content)} bytes",
                    )
                )
            path.write_bytes(updated)
        except OSError as exc:
            return Failure(FileOperationFailed(operation="insert", path=path, message=str(exc)))
        return Success(None)

    def write_file(self, path: Path, text: str) -> Result[None, FileOperationFailed]:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            return Failure(FileOperationFailed(operation="write", path=path, message=str(exc)))
        return Success(None)


def get_system_manager(
    timeouts: ProcessTimeouts | None = None,
    platform: str = sys.platform,
) -> Result[UnixSystemManager, UnsupportedPlatform]:
    """Return the system manager for ``platform`` (the running one by default)."""
    logger.info("Current platform: %s", platform)
    if platform.startswith(SUPPORTED_PLATFORMS):
        return Success(UnixSystemManager(timeouts))
    return Failure(UnsupportedPlatform(platform=platform))


__all__ = ["SUPPORTED_PLATFORMS", "UnixSystemManager", "get_system_manager"]
