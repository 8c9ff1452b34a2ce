"""
Scalar distributions: Bernoulli, uniform integer, uniform real, truncated
Zipf and the constant single-value distribution.

Every class is a frozen dataclass. Direct construction does not validate;
use the ``create`` factories when the parameters come from user input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import numpy as np
from scipy.stats import zipfian

from randvar.distributions.base import Engine
from randvar.errors import InvalidBounds, InvalidExponent, InvalidProbability
from randvar.result import Failure, Result, Success


__all__: list[str] = [
    "BernoulliDistribution",
    "SingleValueDistribution",
    "UniformIntDistribution",
    "UniformRealDistribution",
    "ZipfDistribution",
    "integral_range",
]

T = TypeVar("T")

# Python ints are unbounded; the int64 range stands in for "representable".
_PY_INT_DTYPE: np.dtype[np.int64] = np.dtype(np.int64)


def _integer_dtype(result_type: type) -> np.dtype[Any]:
    return np.dtype(result_type) if issubclass(result_type, np.integer) else _PY_INT_DTYPE


def integral_range(result_type: type) -> tuple[int, int]:
    """Inclusive ``(min, max)`` representable by an integer type."""
    info = np.iinfo(_integer_dtype(result_type))
    return int(info.min), int(info.max)


@dataclass(frozen=True)
class BernoulliDistribution:
    """``True`` with probability ``p``, otherwise ``False``."""

    p: float = 0.5
    result_type: type = bool

    def __call__(self, engine: Engine) -> Any:
        return self.result_type(engine.random() < self.p)

    @classmethod
    def create(
        cls, p: float = 0.5, result_type: type = bool
    ) -> Result[BernoulliDistribution, InvalidProbability]:
        if not 0.0 <= p <= 1.0:
            return Failure(InvalidProbability(p=p))
        return Success(cls(p=p, result_type=result_type))


@dataclass(frozen=True)
class UniformIntDistribution:
    """Uniform integer over the closed interval ``[low, high]``.

    Attributes
    ----------
    low, high
        Inclusive bounds.
    result_type
        ``int`` (drawn in int64) or a NumPy integer scalar type.
    """

    low: int
    high: int
    result_type: type = int

    def __call__(self, engine: Engine) -> Any:
        raw = engine.integers(
            self.low, self.high, endpoint=True, dtype=_integer_dtype(self.result_type)
        )
        return self.result_type(raw)

    @classmethod
    def create(
        cls, low: int, high: int, result_type: type = int
    ) -> Result[UniformIntDistribution, InvalidBounds]:
        type_min, type_max = integral_range(result_type)
        if low > high or low < type_min or high > type_max:
            return Failure(InvalidBounds(low=low, high=high))
        return Success(cls(low=low, high=high, result_type=result_type))


@dataclass(frozen=True)
class UniformRealDistribution:
    """Uniform floating-point value over ``[low, high)``."""

    low: float = 0.0
    high: float = 1.0
    result_type: type = float

    def __call__(self, engine: Engine) -> Any:
        # Work on halved bounds so that high - low stays finite even when
        # the interval is the whole representable range.
        half_low = self.low / 2.0
        half = half_low + engine.random() * (self.high / 2.0 - half_low)
        return self.result_type(half * 2.0)

    @classmethod
    def create(
        cls, low: float = 0.0, high: float = 1.0, result_type: type = float
    ) -> Result[UniformRealDistribution, InvalidBounds]:
        if not (np.isfinite(low) and np.isfinite(high)) or low > high:
            return Failure(InvalidBounds(low=low, high=high))
        return Success(cls(low=low, high=high, result_type=result_type))


@dataclass(frozen=True)
class ZipfDistribution:
    """Truncated Zipf law over ``[low, high]``.

    ``P(low + k)`` is proportional to ``1 / (k + 1) ** exponent``, so ``low``
    is the most likely outcome. With ``low=0`` this is a length law that
    favours empty and short sequences.
    """

    low: int = 0
    high: int = 32
    exponent: float = 1.0

    @property
    def result_type(self) -> type:
        return int

    def __call__(self, engine: Engine) -> int:
        rank = zipfian.rvs(self.exponent, self.high - self.low + 1, random_state=engine)
        return self.low + int(rank) - 1

    @classmethod
    def create(
        cls, low: int = 0, high: int = 32, exponent: float = 1.0
    ) -> Result[ZipfDistribution, InvalidBounds | InvalidExponent]:
        if low > high:
            return Failure(InvalidBounds(low=low, high=high))
        if exponent < 0.0:
            return Failure(InvalidExponent(exponent=exponent))
        return Success(cls(low=low, high=high, exponent=exponent))


@dataclass(frozen=True)
class SingleValueDistribution(Generic[T]):
    """Constant distribution: every draw returns ``value``.

    The engine is never consulted, so drawing does not advance it. Array
    values compare element-wise as a whole.
    """

    value: T

    @property
    def result_type(self) -> type:
        return type(self.value)

    def __call__(self, engine: Engine) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleValueDistribution):
            return NotImplemented
        if isinstance(self.value, np.ndarray) or isinstance(other.value, np.ndarray):
            return bool(np.array_equal(self.value, other.value))
        return bool(self.value == other.value)
