"""Load and validate a YAML configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from protoweld.config.models import ProtoweldConfig
from protoweld.errors.config import (
    ConfigError,
    ConfigFileUnreadable,
    ConfigParseFailed,
    InvalidConfig,
)
from protoweld.result import Failure, Result, Success
from protoweld.validation import validate_mapping


logger = logging.getLogger(__name__)


def parse_config(text: str, source: Path) -> Result[ProtoweldConfig, ConfigError]:
    """Parse YAML text into a validated :class:`ProtoweldConfig`.

    ``source`` is only used to label errors.
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return Failure(ConfigParseFailed(path=source, message=str(exc)))

    match validate_mapping(ProtoweldConfig, document):
        case Success(config):
            logger.debug(
                "Loaded %d project(s) from %s", len(config.active_projects), source
            )
            return Success(config)
        case Failure(validation_error):
            return Failure(InvalidConfig(path=source, error=validation_error))


def load_config(path: Path) -> Result[ProtoweldConfig, ConfigError]:
    """Read ``path`` from disk and parse it as a protoweld configuration."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Failure(ConfigFileUnreadable(path=path, message=str(exc)))
    return parse_config(text, path)
