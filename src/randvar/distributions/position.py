"""
Uniformly distributed positions inside an existing collection.

:class:`PositionDistribution` borrows the collection only for the length
of one draw, so it can never outlive it. :class:`BoundPositionDistribution`
captures a collection it does not own, for use where a plain
engine-only distribution is required (random variables, tuple slots); it
must not outlive, or see emptied, the collection it is bound to.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

from randvar.distributions.base import Engine
from randvar.distributions.scalar import UniformIntDistribution
from randvar.errors import EmptyCollection
from randvar.result import Failure, Result, Success


__all__: list[str] = ["BoundPositionDistribution", "Cursor", "PositionDistribution"]

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Cursor(Generic[T]):
    """Position ``index`` steps from the start, with the element found there."""

    index: int
    value: T

    def advance(self, collection: Iterable[T]) -> Iterator[T]:
        """Iterator over ``collection`` starting at this position."""
        return islice(collection, self.index, None)


def _cursor_at(collection: Collection[T], index: int) -> Cursor[T]:
    match collection:
        case Sequence():
            return Cursor(index=index, value=collection[index])
        case _:
            return Cursor(index=index, value=next(islice(collection, index, None)))


@dataclass(frozen=True)
class PositionDistribution:
    """Uniform position in ``[0, len(collection) - 1]`` of a borrowed collection."""

    @property
    def result_type(self) -> type:
        return Cursor

    def draw(self, engine: Engine, collection: Collection[T]) -> Result[Cursor[T], EmptyCollection]:
        size = len(collection)
        if size == 0:
            return Failure(EmptyCollection(type_name=type(collection).__name__))
        index = int(UniformIntDistribution(0, size - 1)(engine))
        return Success(_cursor_at(collection, index))


@dataclass(frozen=True, eq=False)
class BoundPositionDistribution(Generic[T]):
    """Position distribution bound to one non-owned collection.

    Two instances are equal only when bound to the *same* collection
    object; equal but distinct collections do not count.
    """

    collection: Collection[T]

    @property
    def result_type(self) -> type:
        return Cursor

    def __call__(self, engine: Engine) -> Cursor[T]:
        match PositionDistribution().draw(engine, self.collection):
            case Success(cursor):
                return cursor
            case Failure(error):
                raise RuntimeError(f"bound collection was emptied: {error}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BoundPositionDistribution) and self.collection is other.collection

    def __hash__(self) -> int:
        return id(self.collection)

    @classmethod
    def create(
        cls, collection: Collection[T]
    ) -> Result[BoundPositionDistribution[T], EmptyCollection]:
        if len(collection) == 0:
            _logger.debug("refusing to bind position distribution to empty %s", type(collection))
            return Failure(EmptyCollection(type_name=type(collection).__name__))
        return Success(cls(collection=collection))

