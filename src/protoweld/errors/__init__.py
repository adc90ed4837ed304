"""Protoweld error ADTs."""

from protoweld.errors.compiler import (
    AssemblyError,
    BasePathUnresolvable,
    CompilationFailed,
    CompileError,
    MalformedPackageDeclaration,
    MissingDependencies,
    PackageError,
    PackageKeywordMissing,
    PluginPathMissing,
    PostProcessingFailed,
    PostProcessingStep,
    ProjectFailed,
    ProtoFileUnreadable,
    ReservedFlagOverride,
)
from protoweld.errors.config import (
    ConfigError,
    ConfigFileUnreadable,
    ConfigParseFailed,
    InvalidConfig,
)
from protoweld.errors.fingerprint import (
    FingerprintError,
    FingerprintReadFailed,
    FingerprintWriteFailed,
)
from protoweld.errors.messages import ProtoweldError, assert_never, describe_error
from protoweld.errors.system import (
    CommandError,
    CommandFailed,
    CommandSpawnFailed,
    CommandTimedOut,
    FileOperationFailed,
    FileOperationName,
    PlatformError,
    UnsupportedPlatform,
)

__all__ = [
    "AssemblyError",
    "BasePathUnresolvable",
    "CommandError",
    "CommandFailed",
    "CommandSpawnFailed",
    "CommandTimedOut",
    "CompilationFailed",
    "CompileError",
    "ConfigError",
    "ConfigFileUnreadable",
    "ConfigParseFailed",
    "FileOperationFailed",
    "FileOperationName",
    "FingerprintError",
    "FingerprintReadFailed",
    "FingerprintWriteFailed",
    "InvalidConfig",
    "MalformedPackageDeclaration",
    "MissingDependencies",
    "PackageError",
    "PackageKeywordMissing",
    "PlatformError",
    "PluginPathMissing",
    "PostProcessingFailed",
    "PostProcessingStep",
    "ProjectFailed",
    "ProtoFileUnreadable",
    "ProtoweldError",
    "ReservedFlagOverride",
    "UnsupportedPlatform",
    "assert_never",
    "describe_error",
]
