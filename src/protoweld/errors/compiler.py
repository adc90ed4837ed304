"""ADTs for failures while compiling and post-processing a single project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from protoweld.errors.system import CommandError, FileOperationFailed


PostProcessingStep = Literal["rename", "strip_include", "insert_use", "write_module"]


@dataclass(frozen=True)
class MissingDependencies:
    """One or more required executables failed their probe.

    Carries every failing name, in the order the language declares them.
    """

    dependencies: tuple[str, ...]
    kind: Literal["MissingDependencies"] = "MissingDependencies"


@dataclass(frozen=True)
class ReservedFlagOverride:
    """``compile_options`` tries to set an output flag protoweld manages itself."""

    project: str
    flag: str
    kind: Literal["ReservedFlagOverride"] = "ReservedFlagOverride"


@dataclass(frozen=True)
class PluginPathMissing:
    """The language needs a gRPC plugin but the project has no ``plugin_path``."""

    project: str
    plugin: str
    kind: Literal["PluginPathMissing"] = "PluginPathMissing"


@dataclass(frozen=True)
class ProtoFileUnreadable:
    """A proto file could not be read while looking for its package."""

    proto_file: str
    error: FileOperationFailed
    kind: Literal["ProtoFileUnreadable"] = "ProtoFileUnreadable"


@dataclass(frozen=True)
class PackageKeywordMissing:
    """A proto file has no ``package`` keyword at all."""

    proto_file: str
    kind: Literal["PackageKeywordMissing"] = "PackageKeywordMissing"


@dataclass(frozen=True)
class MalformedPackageDeclaration:
    """The ``package`` keyword is present but no usable declaration follows."""

    proto_file: str
    detail: str
    kind: Literal["MalformedPackageDeclaration"] = "MalformedPackageDeclaration"


@dataclass(frozen=True)
class CompilationFailed:
    """The protoc invocation itself failed."""

    project: str
    error: CommandError
    kind: Literal["CompilationFailed"] = "CompilationFailed"


@dataclass(frozen=True)
class PostProcessingFailed:
    """A post-processing step failed for one package."""

    package: str
    step: PostProcessingStep
    error: FileOperationFailed
    kind: Literal["PostProcessingFailed"] = "PostProcessingFailed"


@dataclass(frozen=True)
class BasePathUnresolvable:
    """The configuration file path could not be canonicalized."""

    path: Path
    message: str
    kind: Literal["BasePathUnresolvable"] = "BasePathUnresolvable"


AssemblyError = MissingDependencies | ReservedFlagOverride | PluginPathMissing

PackageError = ProtoFileUnreadable | PackageKeywordMissing | MalformedPackageDeclaration

CompileError = AssemblyError | PackageError | CompilationFailed | PostProcessingFailed


@dataclass(frozen=True)
class ProjectFailed:
    """The first project that failed, with the failure that stopped the run."""

    project: str
    error: CompileError
    kind: Literal["ProjectFailed"] = "ProjectFailed"


__all__ = [
    "AssemblyError",
    "BasePathUnresolvable",
    "CompilationFailed",
    "CompileError",
    "MalformedPackageDeclaration",
    "MissingDependencies",
    "PackageError",
    "PackageKeywordMissing",
    "PluginPathMissing",
    "PostProcessingFailed",
    "PostProcessingStep",
    "ProjectFailed",
    "ProtoFileUnreadable",
    "ReservedFlagOverride",
]
