"""Helper utilities for Result-based Pydantic validation."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from protoweld.result import Failure, Result, Success


TModel = TypeVar("TModel", bound=BaseModel)

__all__: list[str] = ["validate_model", "validate_mapping"]


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """
    Construct a Pydantic model and surface validation issues as a Result.

    Pydantic still raises internally; the exception is caught at this
    boundary so configuration loading stays expression-oriented while
    keeping Pydantic's detailed error messages.
    """
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


def validate_mapping(model_cls: type[TModel], data: object) -> Result[TModel, ValidationError]:
    """Validate an arbitrary decoded document (e.g. parsed YAML) against ``model_cls``."""
    try:
        return Success(model_cls.model_validate(data))
    except ValidationError as exc:
        return Failure(exc)
