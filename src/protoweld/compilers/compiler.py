"""
Compile one project for its target language.

:class:`ProtobufCompiler` strings the pieces together:

* languages with a post-processor extract packages first, so a proto file
  without a package declaration fails before any tool is probed or run;
* the command is assembled (flag validation, then dependency probes);
* protoc runs with the base path as its working directory, so relative
  paths in the configuration resolve against the configuration file;
* the post-processor, if any, rewrites the generated files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from protoweld.compilers.assembler import assemble_command
from protoweld.compilers.languages import LanguageProfile, profile_for
from protoweld.compilers.packages import extract_packages
from protoweld.compilers.postprocess import repair_rust_modules
from protoweld.config.models import Language, Project
from protoweld.errors.compiler import BasePathUnresolvable, CompilationFailed, CompileError
from protoweld.errors.messages import assert_never
from protoweld.result import Failure, Result, Success
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)


class ProtobufCompiler:
    """Compiles projects for a single language.

    Args:
        system: Platform services used for every process and file operation.
        base_path: Canonical directory the project paths are relative to.
        profile: The language's compilation profile.
    """

    def __init__(self, system: SystemManager, base_path: Path, profile: LanguageProfile) -> None:
        self._system = system
        self._base_path = base_path
        self._profile = profile

    @property
    def profile(self) -> LanguageProfile:
        return self._profile

    @property
    def base_path(self) -> Path:
        return self._base_path

    def compile_project(self, project: Project) -> Result[None, CompileError]:
        """Generate code for ``project``; returns the first failure encountered."""
        packages: frozenset[str] = frozenset()
        if self._profile.post_processor is not None:
            match extract_packages(self._system, self._base_path, project.associated_proto_files):
                case Failure(package_error):
                    return Failure(package_error)
                case Success(found):
                    packages = found

        match assemble_command(self._system, project, self._profile):
            case Failure(assembly_error):
                return Failure(assembly_error)
            case Success(command):
                pass

        match self._system.run_command(
            command.program, command.arguments, dependency=False, cwd=self._base_path
        ):
            case Failure(command_error):
                return Failure(CompilationFailed(project=project.path, error=command_error))
            case Success(_):
                pass

        return self._post_process(project, packages)

    def _post_process(
        self, project: Project, packages: frozenset[str]
    ) -> Result[None, CompileError]:
        output_dir = self._base_path / project.compiled_proto_folder
        match self._profile.post_processor:
            case None:
                return Success(None)
            case "rust-modules":
                match repair_rust_modules(self._system, output_dir, packages):
                    case Failure(error):
                        return Failure(error)
                    case Success(_):
                        return Success(None)
            case _ as unreachable:
                assert_never(unreachable)


def resolve_base_path(config_path: Path) -> Result[Path, BasePathUnresolvable]:
    """Canonicalize the configuration file and return its directory."""
    try:
        canonical = config_path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        logger.error("Canonical path failed %s", exc)
        return Failure(BasePathUnresolvable(path=config_path, message=str(exc)))
    return Success(canonical.parent if canonical.is_file() else canonical)


def get_compiler(
    language: Language, config_path: Path, system: SystemManager
) -> Result[ProtobufCompiler, BasePathUnresolvable]:
    """Create the compiler for ``language`` rooted at the configuration's directory."""
    return resolve_base_path(config_path).and_then(
        lambda base_path: Success(ProtobufCompiler(system, base_path, profile_for(language)))
    )


__all__ = ["ProtobufCompiler", "get_compiler", "resolve_base_path"]
