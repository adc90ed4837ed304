"""Rendering of error ADTs into the single message shown to the user."""

from __future__ import annotations

from typing import Never

from protoweld.errors.compiler import (
    BasePathUnresolvable,
    CompilationFailed,
    MalformedPackageDeclaration,
    MissingDependencies,
    PackageKeywordMissing,
    PluginPathMissing,
    PostProcessingFailed,
    ProjectFailed,
    ProtoFileUnreadable,
    ReservedFlagOverride,
)
from protoweld.errors.config import ConfigFileUnreadable, ConfigParseFailed, InvalidConfig
from protoweld.errors.fingerprint import FingerprintReadFailed, FingerprintWriteFailed
from protoweld.errors.system import (
    CommandFailed,
    CommandSpawnFailed,
    CommandTimedOut,
    FileOperationFailed,
    UnsupportedPlatform,
)


ProtoweldError = (
    CommandSpawnFailed
    | CommandFailed
    | CommandTimedOut
    | FileOperationFailed
    | UnsupportedPlatform
    | ConfigFileUnreadable
    | ConfigParseFailed
    | InvalidConfig
    | MissingDependencies
    | ReservedFlagOverride
    | PluginPathMissing
    | ProtoFileUnreadable
    | PackageKeywordMissing
    | MalformedPackageDeclaration
    | CompilationFailed
    | PostProcessingFailed
    | BasePathUnresolvable
    | ProjectFailed
    | FingerprintReadFailed
    | FingerprintWriteFailed
)

_STEP_LABELS = {
    "rename": "renaming the service file",
    "strip_include": "removing the include directive",
    "insert_use": "inserting the use directive",
    "write_module": "writing the module file",
}


def assert_never(value: Never) -> Never:
    """Type-safe exhaustiveness check for pattern matching."""
    raise AssertionError(f"Unhandled case: {value!r}")


def describe_error(error: ProtoweldError) -> str:
    """Return the human-readable message for any protoweld error."""
    match error:
        case CommandSpawnFailed(program=program, message=message):
            return f"Could not start {program}: {message}"
        case CommandFailed(program=program, exit_code=code, stderr=stderr):
            text = stderr.strip()
            return text if text else f"{program} exited with status: {code}"
        case CommandTimedOut(program=program, timeout_seconds=seconds):
            return f"{program} command timed out after {seconds:g} seconds."
        case FileOperationFailed(operation=operation, path=path, message=message):
            return f"{operation} failed on {path}: {message}"
        case UnsupportedPlatform(platform=platform):
            return f"Platform not recognized: {platform}"
        case ConfigFileUnreadable(path=path, message=message):
            return f"Cannot read configuration file {path}: {message}"
        case ConfigParseFailed(path=path, message=message):
            return f"Configuration file {path} is not valid YAML: {message}"
        case InvalidConfig(path=path, error=validation_error):
            return f"Configuration file {path} is invalid:\n{validation_error}"
        case MissingDependencies(dependencies=names):
            return "Failed to check installation of the following dependencies: " + ",".join(
                names
            )
        case ReservedFlagOverride(flag=flag):
            return (
                f"The argument {flag} must not appear in compile_options. "
                "Protoweld handles it using the compiled_proto_folder option"
            )
        case PluginPathMissing(plugin=plugin):
            return f"The plugin {plugin} must have a path in plugin_path option"
        case ProtoFileUnreadable(proto_file=proto_file, error=file_error):
            return f"Cannot read {proto_file}: {file_error.message}"
        case PackageKeywordMissing(proto_file=proto_file):
            return f"Package keyword missing in {proto_file}"
        case MalformedPackageDeclaration(proto_file=proto_file, detail=detail):
            return f"Bad .proto structure - keyword package in {proto_file}: {detail}"
        case CompilationFailed(error=command_error):
            return describe_error(command_error)
        case PostProcessingFailed(package=package, step=step, error=file_error):
            return f"Post-processing of package {package} failed while {_STEP_LABELS[step]}: " + (
                describe_error(file_error)
            )
        case BasePathUnresolvable(path=path, message=message):
            return f"Canonicalize base path failed for {path}: {message}"
        case ProjectFailed(project=project, error=inner):
            return f"[{project}] {describe_error(inner)}"
        case FingerprintReadFailed(path=path, message=message):
            return f"Cannot hash {path}: {message}"
        case FingerprintWriteFailed(path=path, message=message):
            return f"Cannot write fingerprints to {path}: {message}"
        case _:
            assert_never(error)


__all__ = ["ProtoweldError", "assert_never", "describe_error"]
