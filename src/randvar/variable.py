"""
Random variables: an engine bound to a distribution.

Example::

    engine = make_engine(GeneratorConfig(seed=7))
    match make_default_random_variable(engine, list[int]):
        case Success(variable):
            first, second = variable(), variable()
        case Failure(error):
            raise SystemExit(f"cannot generate {error.type_name}")
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from randvar.config import DEFAULT_CONFIG, GeneratorConfig
from randvar.distributions import Distribution, Engine
from randvar.errors import NegativeSamples, RegistryError
from randvar.registry import default_distribution
from randvar.result import Failure, Result, Success


__all__: list[str] = [
    "RandomVariable",
    "make_default_random_variable",
    "make_random_variable",
]

R = TypeVar("R")


class RandomVariable(Generic[R]):
    """Nullary generator: each call returns ``distribution(engine)``.

    Calling advances the engine and never modifies the distribution. The
    engine is held by reference; callers that need an independent stream
    should bind a separately seeded engine.
    """

    __slots__ = ("_engine", "_distribution")

    def __init__(self, engine: Engine, distribution: Distribution[R]) -> None:
        self._engine = engine
        self._distribution = distribution

    def __call__(self) -> R:
        return self._distribution(self._engine)

    def __repr__(self) -> str:
        return f"RandomVariable(distribution={self._distribution!r})"

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def distribution(self) -> Distribution[R]:
        return self._distribution

    @property
    def result_type(self) -> type:
        return self._distribution.result_type

    def sample(self, n_samples: int) -> Result[list[R], NegativeSamples]:
        """Return ``n_samples`` successive draws."""
        if n_samples < 0:
            return Failure(NegativeSamples(n_samples=n_samples))
        return Success([self() for _ in range(n_samples)])


def make_random_variable(engine: Engine, distribution: Distribution[R]) -> RandomVariable[R]:
    """Bind ``engine`` to ``distribution``."""
    return RandomVariable(engine, distribution)


def make_default_random_variable(
    engine: Engine,
    value_type: object,
    *,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> Result[RandomVariable[Any], RegistryError]:
    """Bind ``engine`` to the default distribution of ``value_type``.

    Resolution happens here, before any draw; an unresolvable type is
    reported as a Failure and no variable is created.
    """
    return default_distribution(value_type, config=config).map(
        lambda dist: RandomVariable(engine, dist)
    )
