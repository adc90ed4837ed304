"""
Mock system manager for testing compilers without processes or disk access.

Every call is recorded as an operation ADT, files live in an in-memory
dict, and command outcomes are configured per program.

Example:
    >>> mock = MockSystemManager()
    >>> mock.probe_results["go"] = Failure(CommandSpawnFailed("go", "not found"))
    >>> mock.files[Path("api.proto")] = "package api.v1;"
    >>>
    >>> compiler = ProtobufCompiler(mock, Path("."), profile_for(Language.GO))
    >>> compiler.compile_project(project)
    >>>
    >>> assert mock.count_commands("protoc", dependency=False) == 0
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from protoweld.errors.system import CommandError, FileOperationFailed, FileOperationName
from protoweld.result import Failure, Result, Success
from protoweld.system.operations import (
    FileOperation,
    FindReplace,
    InsertText,
    RenameFile,
    RunCommand,
    SearchFile,
    SearchOutcome,
    SystemOperation,
    WriteFile,
    insert_bytes,
    search_text,
)


class MockSystemManager:
    """Test double that records operations instead of executing them.

    Attributes:
        recorded_operations: Every operation, in call order.
        files: In-memory file system keyed by path.
        probe_results: Outcome per program for dependency probes.
        command_results: Outcome per program for real (non-probe) runs.
        Programs not listed succeed.
        file_failures: Forced failure per file-operation type.
        on_command: Hook run for every successful non-probe command, e.g. to
            drop the files a real compiler would have generated into ``files``.
    """

    def __init__(self) -> None:
        self.recorded_operations: list[SystemOperation] = []
        self.files: dict[Path, str] = {}
        self.probe_results: dict[str, Result[None, CommandError]] = {}
        self.command_results: dict[str, Result[None, CommandError]] = {}
        self.file_failures: dict[type[FileOperation], FileOperationFailed] = {}
        self.on_command: Callable[[RunCommand], None] | None = None

    def run_command(
        self,
        program: str,
        arguments: Sequence[str],
        *,
        dependency: bool,
        cwd: Path | None = None,
    ) -> Result[None, CommandError]:
        operation = RunCommand(
            program=program, arguments=tuple(arguments), dependency=dependency, cwd=cwd
        )
        self.recorded_operations.append(operation)
        results = self.probe_results if dependency else self.command_results
        result = results.get(program, Success(None))
        if isinstance(result, Success) and not dependency and self.on_command is not None:
            self.on_command(operation)
        return result

    def search(self, path: Path, needle: str) -> Result[SearchOutcome, FileOperationFailed]:
        return self._read(SearchFile(path=path, needle=needle), path, "search").and_then(
            lambda content: Success(search_text(content, needle))
        )

    def rename_file(self, source: Path, target: Path) -> Result[None, FileOperationFailed]:
        match self._read(RenameFile(source=source, target=target), source, "rename"):
            case Failure(error):
                return Failure(error)
            case Success(content):
                del self.files[source]
                self.files[target] = content
                return Success(None)

    def find_replace(
        self, path: Path, pattern: str, replacement: str
    ) -> Result[int, FileOperationFailed]:
        operation = FindReplace(path=path, pattern=pattern, replacement=replacement)
        match self._read(operation, path, "find_replace"):
            case Failure(error):
                return Failure(error)
            case Success(content):
                count = content.count(pattern) if pattern else 0
                self.files[path] = content.replace(pattern, replacement) if count else content
                return Success(count)

    def insert_text(
        self, path: Path, position: int, text: str
    ) -> Result[None, FileOperationFailed]:
        operation = InsertText(path=path, position=position, text=text)
        match self._read(operation, path, "insert"):
            case Failure(error):
                return Failure(error)
            case Success(content):
                encoded = content.encode("utf-8")
                updated = insert_bytes(encoded, position, text)
                if updated is None:
                    return Failure(
                        FileOperationFailed(
                            operation="insert",
                            path=path,
                            message=f"Position out of bounds. File length {len(encoded)} bytes",
                        )
                    )
                self.files[path] = updated.decode("utf-8")
                return Success(None)

    def write_file(self, path: Path, text: str) -> Result[None, FileOperationFailed]:
        operation = WriteFile(path=path, text=text)
        self.recorded_operations.append(operation)
        forced = self.file_failures.get(WriteFile)
        if forced is not None:
            return Failure(forced)
        self.files[path] = text
        return Success(None)

    def _read(
        self,
        operation: FileOperation,
        path: Path,
        name: FileOperationName,
    ) -> Result[str, FileOperationFailed]:
        self.recorded_operations.append(operation)
        forced = self.file_failures.get(type(operation))
        if forced is not None:
            return Failure(forced)
        if path not in self.files:
            return Failure(
                FileOperationFailed(
                    operation=name, path=path, message="No such file or directory"
                )
            )
        return Success(self.files[path])

    # ------------------------------------------------------------------ queries

    def commands(self, program: str | None = None) -> list[RunCommand]:
        """Recorded commands, optionally only those spawning ``program``."""
        return [
            op
            for op in self.recorded_operations
            if isinstance(op, RunCommand) and (program is None or op.program == program)
        ]

    def count_commands(self, program: str, *, dependency: bool | None = None) -> int:
        """Number of times ``program`` was spawned (probes, real runs, or both)."""
        return sum(
            1
            for op in self.commands(program)
            if dependency is None or op.dependency == dependency
        )

    def assert_operation_sequence(self, expected: list[type[SystemOperation]]) -> None:
        """Assert the recorded operation types match ``expected`` exactly."""
        actual = [type(op) for op in self.recorded_operations]
        if actual != expected:
            raise AssertionError(f"Expected operation sequence {expected}, got {actual}")

    def reset(self) -> None:
        """Forget recorded operations but keep files and configured results."""
        self.recorded_operations.clear()


__all__ = ["MockSystemManager"]
