"""Bulk generation into existing storage."""

from __future__ import annotations

from typing import Any, Protocol

from randvar.distributions import Distribution, Engine


__all__: list[str] = ["fill", "fill_range"]


class IndexAssignable(Protocol):
    """Sized storage with integer item assignment (list, numpy array, ...)."""

    def __len__(self) -> int: ...

    def __setitem__(self, index: int, value: Any, /) -> None: ...


def fill_range(
    destination: IndexAssignable,
    first: int,
    last: int,
    engine: Engine,
    distribution: Distribution[Any],
) -> None:
    """Assign ``destination[first:last]`` one draw per position, in order."""
    for index in range(first, last):
        destination[index] = distribution(engine)


def fill(destination: IndexAssignable, engine: Engine, distribution: Distribution[Any]) -> None:
    """Assign every position of ``destination``, first to last, with a fresh draw."""
    fill_range(destination, 0, len(destination), engine, distribution)
