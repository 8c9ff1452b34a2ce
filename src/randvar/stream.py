"""
Input-stream adaptor over a nullary generator.

A :class:`GeneratorStream` is an infinite stream: extraction always
succeeds and the stream never enters a failed state. Any zero-argument
callable works as the source, most usefully a
:class:`~randvar.variable.RandomVariable`.

Example::

    stream = GeneratorStream(make_random_variable(engine, dist))
    head = stream.ignore(3).and_then(lambda s: s.take(5)).unwrap()
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from randvar.algorithms import IndexAssignable
from randvar.errors import NegativeSamples
from randvar.result import Failure, Result, Success


__all__: list[str] = ["GeneratorStream"]

R = TypeVar("R")


class GeneratorStream(Generic[R]):
    """Pull successive values out of ``generator``."""

    def __init__(self, generator: Callable[[], R]) -> None:
        self._generator = generator

    def get(self) -> R:
        """Next value in the stream."""
        return self._generator()

    def take(self, n_values: int) -> Result[list[R], NegativeSamples]:
        if n_values < 0:
            return Failure(NegativeSamples(n_samples=n_values))
        return Success([self._generator() for _ in range(n_values)])

    def read_into(self, destination: IndexAssignable) -> GeneratorStream[R]:
        """Overwrite every position of ``destination``; returns the stream for chaining."""
        for index in range(len(destination)):
            destination[index] = self._generator()
        return self

    def ignore(self, n_values: int = 1) -> Result[GeneratorStream[R], NegativeSamples]:
        """Draw and discard ``n_values`` values; the stream comes back for chaining."""
        if n_values < 0:
            return Failure(NegativeSamples(n_samples=n_values))
        for _ in range(n_values):
            self._generator()
        return Success(self)

    def __iter__(self) -> Iterator[R]:
        return self

    def __next__(self) -> R:
        return self._generator()

    def __bool__(self) -> bool:
        return True
