"""Per-language protoc orchestration."""

from __future__ import annotations

from protoweld.compilers.assembler import (
    CompilationCommand,
    assemble_command,
    build_arguments,
    render_compile_options,
)
from protoweld.compilers.compiler import ProtobufCompiler, get_compiler, resolve_base_path
from protoweld.compilers.dependencies import ensure_dependencies
from protoweld.compilers.languages import LANGUAGE_PROFILES, LanguageProfile, profile_for
from protoweld.compilers.packages import extract_package, extract_packages
from protoweld.compilers.postprocess import (
    RustPackageLayout,
    repair_rust_modules,
    repair_rust_package,
)

__all__ = [
    "CompilationCommand",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "ProtobufCompiler",
    "RustPackageLayout",
    "assemble_command",
    "build_arguments",
    "ensure_dependencies",
    "extract_package",
    "extract_packages",
    "get_compiler",
    "profile_for",
    "render_compile_options",
    "repair_rust_modules",
    "repair_rust_package",
    "resolve_base_path",
]
