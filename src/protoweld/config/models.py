"""
Configuration schema for protoweld.

A configuration file lists the projects whose ``.proto`` files must be
compiled, one entry per target project:

.. code-block:: yaml

    active_projects:
      - path: services/billing
        compiled_proto_folder: services/billing/gen
        associated_proto_files:
          - protos/billing/v1/billing.proto
        lang: GoLang
        compile_options:
          -I: protos
          --experimental_allow_proto3_optional: ""

All models are frozen and reject unknown keys, so a loaded configuration is
immutable for the lifetime of one run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


__all__ = ["Language", "ProcessTimeouts", "Project", "ProtoweldConfig"]


class Language(str, Enum):
    """Target languages, spelled exactly as they appear in configuration."""

    GO = "GoLang"
    DOTNET = "DotNet"
    RUST = "Rust"


class ProcessTimeouts(BaseModel):
    """Timeouts (seconds) applied by the process runner.

    ``dependency_probe`` bounds ``<tool> --version`` style checks;
    ``compilation`` bounds the real protoc invocation.
    """

    dependency_probe: float = Field(1.0, gt=0)
    compilation: float = Field(5.0, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")


class Project(BaseModel):
    """One compilation unit: a set of proto files compiled for one language."""

    path: str = Field(..., min_length=1)
    compiled_proto_folder: str = Field(..., min_length=1)
    associated_proto_files: tuple[str, ...] = Field(..., min_length=1)
    plugin_path: str | None = None
    lang: Language
    compile_options: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("compile_options", mode="before")
    @classmethod
    def _bare_flags(cls, value: object) -> object:
        """Treat a YAML null (``--flag:``) as a flag without argument."""
        if isinstance(value, dict):
            return {key: "" if flag is None else flag for key, flag in value.items()}
        return value


class ProtoweldConfig(BaseModel):
    """Root of a protoweld configuration file."""

    active_projects: tuple[Project, ...]
    timeouts: ProcessTimeouts = Field(default_factory=ProcessTimeouts)

    model_config = ConfigDict(frozen=True, extra="forbid")
