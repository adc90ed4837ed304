"""
Generate code for every configured project.

Projects run strictly one after another, in configuration order. The first
project that fails stops the run: later projects are not attempted and the
failure is returned wrapped in :class:`~protoweld.errors.ProjectFailed`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from protoweld.compilers.compiler import get_compiler
from protoweld.config.models import Project, ProtoweldConfig
from protoweld.errors.compiler import BasePathUnresolvable, ProjectFailed
from protoweld.result import Failure, Result, Success
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)

GenerationError = ProjectFailed | BasePathUnresolvable

ProjectCallback = Callable[[Project], None]


def generate_protos(
    config: ProtoweldConfig,
    config_path: Path,
    system: SystemManager,
    on_project_compiled: ProjectCallback | None = None,
) -> Result[None, GenerationError]:
    """Compile every project in ``config``.

    Args:
        config: Loaded configuration.
        config_path: Path of the configuration file; project paths are
            relative to its directory.
        system: Platform services used for all processes and files.
        on_project_compiled: Called after each project completes successfully.

    Returns:
        Success(None) when every project compiled, otherwise the first failure.
    """
    for project in config.active_projects:
        match get_compiler(project.lang, config_path, system):
            case Failure(path_error):
                return Failure(path_error)
            case Success(compiler):
                pass

        match compiler.compile_project(project):
            case Failure(error):
                logger.error("Project %s failed: %s", project.path, error.kind)
                return Failure(ProjectFailed(project=project.path, error=error))
            case Success(_):
                logger.info("Compiled project %s", project.path)
                if on_project_compiled is not None:
                    on_project_compiled(project)

    return Success(None)


__all__ = ["GenerationError", "ProjectCallback", "generate_protos"]
