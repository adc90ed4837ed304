"""
Result type for explicit error handling.

Every stage of proto generation (dependency probes, command assembly, the
compiler run, post-processing) reports its outcome as a ``Result`` instead of
raising, so the orchestrator can stop on the first failure and hand a single
error value back to the caller.

Usage:
    >>> def output_flag(lang: str) -> Result[str, str]:
    ...     flags = {"GoLang": "--go_out", "Rust": "--prost_out"}
    ...     return Success(flags[lang]) if lang in flags else Failure(f"unknown lang {lang}")
    ...
    >>> match output_flag("Rust"):
    ...     case Success(flag):
    ...         print(flag)
    ...     case Failure(error):
    ...         print(error)
    --prost_out
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T

    def is_success(self) -> bool:
        """Check if this result is a success."""
        return True

    def is_failure(self) -> bool:
        """Check if this result is a failure."""
        return False

    def unwrap(self) -> T:
        """Unwrap the success value. Safe to call on Success."""
        return self.value

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map the error value through function f. No-op on Success."""
        result: Result[T, F] = Success(self.value)
        return result

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that itself returns a Result."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E

    def is_success(self) -> bool:
        """Check if this result is a success."""
        return False

    def is_failure(self) -> bool:
        """Check if this result is a failure."""
        return True

    def unwrap(self) -> NoReturn:
        """
        Unwrap the success value.

        Raises:
            RuntimeError: Always, since Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map the error value through function f."""
        return Failure(f(self.error))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op on Failure: the error is carried forward unchanged."""
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]


def partition_results(
    results: list[Result[T, E]],
) -> tuple[list[T], list[E]]:
    """
    Partition a list of Results into successes and failures.

    Args:
        results: List of Result values to partition

    Returns:
        Tuple of (successes, failures), each keeping the input order
    """
    successes: list[T] = [result.value for result in results if isinstance(result, Success)]
    failures: list[E] = [result.error for result in results if isinstance(result, Failure)]
    return (successes, failures)


def fold_results(
    items: list[T],
    f: Callable[[U, T], Result[U, E]],
    initial: U,
) -> Result[U, E]:
    """
    Fold over items with early exit on the first failure.

    Items after the failing one are never passed to ``f``.

    Args:
        items: List of items to fold over
        f: Fold function taking (accumulator, item) and returning Result
        initial: Initial accumulator value

    Returns:
        Success(final_accumulator) if all steps succeed, else first Failure

    Example:
        >>> def add_if_positive(acc: int, x: int) -> Result[int, str]:
        ...     return Success(acc + x) if x > 0 else Failure("negative")
        >>> fold_results([1, 2, 3], add_if_positive, 0)
        Success(value=6)
        >>> fold_results([1, -2, 3], add_if_positive, 0)
        Failure(error='negative')
    """
    current = initial
    for item in items:
        match f(current, item):
            case Failure(err):
                return Failure(err)
            case Success(val):
                current = val
    return Success(current)
