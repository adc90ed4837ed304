"""
Protocol for the platform services the compilation engine depends on.

Compilers never spawn processes or open files themselves: every such side
effect goes through a :class:`SystemManager`. ``UnixSystemManager`` is the
real implementation; ``MockSystemManager`` is the test double.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from protoweld.errors.system import CommandError, FileOperationFailed
from protoweld.result import Result
from protoweld.system.operations import SearchOutcome


class SystemManager(Protocol):
    """Process execution and text surgery on files."""

    def run_command(
        self,
        program: str,
        arguments: Sequence[str],
        *,
        dependency: bool,
        cwd: Path | None = None,
    ) -> Result[None, CommandError]:
        """Run ``program`` under the dependency-probe or compilation timeout.

        A probe that times out fails. A compilation that times out is
        killed and reported as success: some code-generator plugins hang
        after writing all of their output.
        """
        ...

    def search(self, path: Path, needle: str) -> Result[SearchOutcome, FileOperationFailed]:
        """Return the file content and where ``needle`` first occurs, if at all."""
        ...

    def rename_file(self, source: Path, target: Path) -> Result[None, FileOperationFailed]: ...

    def find_replace(
        self, path: Path, pattern: str, replacement: str
    ) -> Result[int, FileOperationFailed]:
        """Replace every occurrence of ``pattern``; returns how many were replaced."""
        ...

    def insert_text(
        self, path: Path, position: int, text: str
    ) -> Result[None, FileOperationFailed]: ...

    def write_file(self, path: Path, text: str) -> Result[None, FileOperationFailed]: ...


__all__ = ["SystemManager"]
