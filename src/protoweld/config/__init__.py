"""Configuration models and loading."""

from __future__ import annotations

from protoweld.config.loader import load_config, parse_config
from protoweld.config.models import Language, ProcessTimeouts, Project, ProtoweldConfig

__all__ = [
    "Language",
    "ProcessTimeouts",
    "Project",
    "ProtoweldConfig",
    "load_config",
    "parse_config",
]
