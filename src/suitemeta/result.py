"""
Success-or-error values returned by the parser.

A parse ends in exactly one of two shapes: :class:`Success` carrying the
complete metadata collection, or :class:`Failure` carrying a typed
:mod:`suitemeta.errors` value. Parser code returns these instead of raising,
so a caller can never observe half of a translated class.

Usage:
    >>> def parse_depth(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Failure(f"not a number: {text!r}")
    ...     return Success(int(text))
    ...
    >>> match parse_depth("512"):
    ...     case Success(value):
    ...         print(f"depth: {value}")
    ...     case Failure(error):
    ...         print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A finished computation holding its value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply ``f`` to the value."""
        return Success(f(self.value))

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        result: Result[T, F] = Success(self.value)
        return result

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Continue with a step that may itself fail."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A computation that stopped with ``error``; value transforms skip it."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        There is no value to return.

        Raises:
            RuntimeError: Always, with the error in the message.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        result: Result[U, E] = Failure(self.error)
        return result

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Translate the error, for example into a caller's own error type."""
        return Failure(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Turn a sequence of results into one result holding every value.

    Values keep their input order. The first failure is returned as is, and
    nothing after it is consumed.

    Example:
        >>> collect_results([Success(1), Failure("bad"), Success(3)])
        Failure(error='bad')
    """
    values: list[T] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure():
                return result
    return Success(values)


__all__ = ["Success", "Failure", "Result", "collect_results"]
