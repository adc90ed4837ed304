"""ADTs for configuration loading failures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class ConfigFileUnreadable:
    """The configuration file could not be read from disk."""

    path: Path
    message: str
    kind: Literal["ConfigFileUnreadable"] = "ConfigFileUnreadable"


@dataclass(frozen=True)
class ConfigParseFailed:
    """The configuration file is not valid YAML."""

    path: Path
    message: str
    kind: Literal["ConfigParseFailed"] = "ConfigParseFailed"


@dataclass(frozen=True)
class InvalidConfig:
    """The YAML document does not match the configuration schema."""

    path: Path
    error: ValidationError
    kind: Literal["InvalidConfig"] = "InvalidConfig"


ConfigError = ConfigFileUnreadable | ConfigParseFailed | InvalidConfig

__all__ = [
    "ConfigError",
    "ConfigFileUnreadable",
    "ConfigParseFailed",
    "InvalidConfig",
]
