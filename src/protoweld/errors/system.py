"""ADTs for failures of the platform primitives (processes and files)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


FileOperationName = Literal["search", "rename", "find_replace", "insert", "write"]


@dataclass(frozen=True)
class CommandSpawnFailed:
    """The executable could not be started at all (not found, not executable)."""

    program: str
    message: str
    kind: Literal["CommandSpawnFailed"] = "CommandSpawnFailed"


@dataclass(frozen=True)
class CommandFailed:
    """The process exited within its timeout with a non-zero status.

    ``stderr`` holds the captured standard error text; it is empty when the
    tool wrote nothing, in which case the exit status is reported instead.
    """

    program: str
    exit_code: int
    stderr: str
    kind: Literal["CommandFailed"] = "CommandFailed"


@dataclass(frozen=True)
class CommandTimedOut:
    """A dependency probe did not finish within its timeout and was killed."""

    program: str
    timeout_seconds: float
    kind: Literal["CommandTimedOut"] = "CommandTimedOut"


@dataclass(frozen=True)
class FileOperationFailed:
    """A file primitive failed (missing file, permissions, bad offset, ...)."""

    operation: FileOperationName
    path: Path
    message: str
    kind: Literal["FileOperationFailed"] = "FileOperationFailed"


@dataclass(frozen=True)
class UnsupportedPlatform:
    """No system manager exists for the running platform."""

    platform: str
    kind: Literal["UnsupportedPlatform"] = "UnsupportedPlatform"


CommandError = CommandSpawnFailed | CommandFailed | CommandTimedOut

PlatformError = CommandError | FileOperationFailed | UnsupportedPlatform

__all__ = [
    "CommandError",
    "CommandFailed",
    "CommandSpawnFailed",
    "CommandTimedOut",
    "FileOperationFailed",
    "FileOperationName",
    "PlatformError",
    "UnsupportedPlatform",
]
