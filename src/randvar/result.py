"""
Result type for explicit error handling.

Registry lookups and distribution factories report failures as values
instead of raising, so a caller resolving a generator for an unsupported
type sees the problem before the first draw.

Usage:
    >>> match default_distribution(dict[str, int]):
    ...     case Success(dist):
    ...         print(dist)
    ...     case Failure(error):
    ...         print(f"cannot generate: {error.type_name}")
    cannot generate: dict[str, int]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value of type T."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the wrapped value with f."""
        return Success(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a further fallible step."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error ADT of type E."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Unwrap the success value.

        Raises:
            RuntimeError: Always, since Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Collect Results into a Result of list, stopping at the first Failure.

    Evaluation is lazy: when ``results`` is a generator, items after the
    first Failure are never produced. The registry relies on this to stop
    resolving tuple slots once one slot is unresolvable.

    Args:
        results: Iterable of Result values, consumed in order

    Returns:
        Success(list of values) if all succeed, or the first Failure
    """
    values: list[T] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                return Failure(error)
    return Success(values)
