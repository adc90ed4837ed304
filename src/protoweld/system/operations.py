"""
Operation ADTs describing every call made through a system manager.

The real manager executes these operations directly; the mock manager
records them in order so tests can assert exactly which processes were
spawned and which files were touched, without touching the machine.

Type Safety:
    - All operation types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class RunCommand:
    """Spawn ``program`` with ``arguments``.

    Attributes:
        program: Executable name, resolved through ``PATH``.
        arguments: Arguments passed verbatim.
        dependency: True for a short installation probe, False for real work.
        cwd: Working directory for the child; inherits ours when None.
    """

    program: str
    arguments: tuple[str, ...] = ()
    dependency: bool = False
    cwd: Path | None = None
    kind: Literal["RunCommand"] = "RunCommand"


@dataclass(frozen=True)
class SearchFile:
    """Read ``path`` and locate the first occurrence of ``needle``."""

    path: Path
    needle: str
    kind: Literal["SearchFile"] = "SearchFile"


@dataclass(frozen=True)
class RenameFile:
    """Rename ``source`` to ``target``."""

    source: Path
    target: Path
    kind: Literal["RenameFile"] = "RenameFile"


@dataclass(frozen=True)
class FindReplace:
    """Replace every literal occurrence of ``pattern`` in ``path``."""

    path: Path
    pattern: str
    replacement: str
    kind: Literal["FindReplace"] = "FindReplace"


@dataclass(frozen=True)
class InsertText:
    """Insert ``text`` at byte offset ``position`` of ``path``."""

    path: Path
    position: int
    text: str
    kind: Literal["InsertText"] = "InsertText"


@dataclass(frozen=True)
class WriteFile:
    """Create ``path`` (or truncate it) and write ``text``."""

    path: Path
    text: str
    kind: Literal["WriteFile"] = "WriteFile"


FileOperation = SearchFile | RenameFile | FindReplace | InsertText | WriteFile

SystemOperation = RunCommand | FileOperation


@dataclass(frozen=True)
class SearchHit:
    """``needle`` was found; ``position`` is its character offset in ``content``."""

    content: str
    position: int
    kind: Literal["SearchHit"] = "SearchHit"


@dataclass(frozen=True)
class SearchMiss:
    """``needle`` does not occur in ``content``."""

    content: str
    kind: Literal["SearchMiss"] = "SearchMiss"


SearchOutcome = SearchHit | SearchMiss


def search_text(content: str, needle: str) -> SearchOutcome:
    """Pure search shared by every system manager."""
    position = content.find(needle)
    return SearchMiss(content=content) if position < 0 else SearchHit(content, position)


def insert_bytes(content: bytes, position: int, text: str) -> bytes | None:
    """Insert UTF-8 ``text`` at byte ``position``; None when out of bounds."""
    if position < 0 or position > len(content):
        return None
    return content[:position] + text.encode("utf-8") + content[position:]


__all__ = [
    "FileOperation",
    "FindReplace",
    "InsertText",
    "RenameFile",
    "RunCommand",
    "SearchFile",
    "SearchHit",
    "SearchMiss",
    "SearchOutcome",
    "SystemOperation",
    "WriteFile",
    "insert_bytes",
    "search_text",
]
