"""Verify that the external tools a language needs are installed."""

from __future__ import annotations

import logging
from typing import Sequence

from protoweld.errors.compiler import MissingDependencies
from protoweld.errors.system import CommandError
from protoweld.result import Failure, Result, Success, partition_results
from protoweld.system.protocols import SystemManager


logger = logging.getLogger(__name__)


def _probe(
    system: SystemManager, dependency: str, flag: str
) -> Result[str, tuple[str, CommandError]]:
    arguments = (flag,) if flag else ()
    match system.run_command(dependency, arguments, dependency=True):
        case Success(_):
            return Success(dependency)
        case Failure(error):
            return Failure((dependency, error))


def ensure_dependencies(
    system: SystemManager,
    dependencies: Sequence[str],
    probe_flags: Sequence[str],
) -> Result[None, MissingDependencies]:
    """Probe every dependency and report all of the ones that failed.

    ``dependencies`` and ``probe_flags`` are index-aligned. Every tool is
    probed even after a failure so the error lists the complete set.
    """
    probes = [
        _probe(system, dependency, flag)
        for dependency, flag in zip(dependencies, probe_flags, strict=True)
    ]
    _, failures = partition_results(probes)
    for dependency, error in failures:
        logger.debug("Dependency probe failed for %s: %s", dependency, error)

    if failures:
        return Failure(MissingDependencies(tuple(dependency for dependency, _ in failures)))
    return Success(None)


__all__ = ["ensure_dependencies"]
