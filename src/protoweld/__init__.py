"""
protoweld: compile ``.proto`` files for several projects from one YAML file.

Each configured project names its proto files, a target language and an
output folder. protoweld checks that ``protoc`` and the language plugins are
installed, builds the protoc command line, runs it, and for Rust rewrites the
generated modules so they can be used without ``include!``.

Typical usage::

    from pathlib import Path

    from protoweld import generate_protos, get_system_manager, load_config

    config_path = Path("protoweld.yaml")
    config = load_config(config_path).unwrap()
    system = get_system_manager(config.timeouts).unwrap()
    generate_protos(config, config_path, system)
"""

from __future__ import annotations

from protoweld.config import Language, Project, ProtoweldConfig, load_config
from protoweld.errors import describe_error
from protoweld.executor import generate_protos
from protoweld.result import Failure, Result, Success
from protoweld.system import get_system_manager


__version__ = "0.1.0"

__all__ = [
    "Failure",
    "Language",
    "Project",
    "ProtoweldConfig",
    "Result",
    "Success",
    "__version__",
    "describe_error",
    "generate_protos",
    "get_system_manager",
    "load_config",
]
