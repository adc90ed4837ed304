"""Result type unwrapping utilities for protoweld tests."""

from __future__ import annotations

from typing import TypeVar

from protoweld.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def expect_success(result: Result[T, E]) -> T:
    """Unwrap Success or fail test with error message.

    Args:
        result: Result to unwrap

    Returns:
        The success value

    Raises:
        AssertionError: If result is Failure with the error message

    Example:
        >>> config = expect_success(parse_config(text, Path("protoweld.yaml")))
    """
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise AssertionError(f"Unexpected failure: {error}")


def expect_failure(result: Result[T, E]) -> E:
    """Unwrap Failure or fail test.

    Example:
        >>> error = expect_failure(load_config(Path("missing.yaml")))
        >>> assert error.kind == "ConfigFileUnreadable"
    """
    match result:
        case Failure(error):
            return error
        case Success(value):
            raise AssertionError(f"Expected failure but got success: {value}")
