"""
Assemble the protoc command line for one project.

Argument order is fixed:

1. user ``compile_options`` (``flag`` or ``flag=value``), in configuration order
2. the message output flag, then the service output flag, both pointing at
   ``compiled_proto_folder``
3. ``--plugin=protoc-gen-grpc=<plugin_path>`` for languages that need a plugin
4. every proto file, in configuration order

The only I/O is the dependency probing, done once the arguments are known to be valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from protoweld.compilers.dependencies import ensure_dependencies
from protoweld.compilers.languages import PROTOC, LanguageProfile
from protoweld.config.models import Project
from protoweld.errors.compiler import AssemblyError, PluginPathMissing, ReservedFlagOverride
from protoweld.result import Failure, Result, Success
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)

GRPC_PLUGIN_FLAG = "--plugin=protoc-gen-grpc"


@dataclass(frozen=True)
class CompilationCommand:
    """A fully assembled compiler invocation."""

    program: str
    arguments: tuple[str, ...]

    def render(self) -> str:
        return " ".join((self.program, *self.arguments))


def render_compile_options(
    project_name: str,
    options: Mapping[str, str],
    reserved: frozenset[str],
) -> Result[list[str], ReservedFlagOverride]:
    """Render user flags, rejecting any flag protoweld emits itself.

    An empty value renders the bare flag; anything else renders ``flag=value``.
    """
    rendered: list[str] = []
    for flag, value in options.items():
        if flag in reserved:
            return Failure(ReservedFlagOverride(project=project_name, flag=flag))
        rendered.append(flag if value == "" else f"{flag}={value}")
    return Success(rendered)


def build_arguments(
    project: Project, profile: LanguageProfile
) -> Result[tuple[str, ...], AssemblyError]:
    """Build the argument list without probing any dependency."""
    match render_compile_options(project.path, project.compile_options, profile.reserved_flags):
        case Failure(error):
            return Failure(error)
        case Success(options):
            arguments = list(options)

    arguments.append(f"{profile.message_out_flag}={project.compiled_proto_folder}")
    arguments.append(f"{profile.service_out_flag}={project.compiled_proto_folder}")

    if profile.plugin_name is not None:
        if project.plugin_path is None:
            return Failure(PluginPathMissing(project=project.path, plugin=profile.plugin_name))
        arguments.append(f"{GRPC_PLUGIN_FLAG}={project.plugin_path}")

    arguments.extend(project.associated_proto_files)
    return Success(tuple(arguments))


def assemble_command(
    system: SystemManager,
    project: Project,
    profile: LanguageProfile,
) -> Result[CompilationCommand, AssemblyError]:
    """Validate the project's flags, probe the language's tools, then assemble.

    Configuration errors are detected before any process is spawned, so a
    bad ``compile_options`` or a missing ``plugin_path`` never costs a probe.
    """
    match build_arguments(project, profile):
        case Failure(error):
            return Failure(error)
        case Success(arguments):
            pass

    match ensure_dependencies(system, profile.dependencies, profile.probe_flags):
        case Failure(missing):
            return Failure(missing)
        case Success(_):
            command = CompilationCommand(program=PROTOC, arguments=arguments)
            logger.debug("Assembled command: %s", command.render())
            return Success(command)


__all__ = [
    "CompilationCommand",
    "GRPC_PLUGIN_FLAG",
    "assemble_command",
    "build_arguments",
    "render_compile_options",
]
