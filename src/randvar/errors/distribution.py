"""Error ADTs for distribution construction and sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class InvalidBounds:
    """Lower bound exceeds upper bound, or a bound is outside the value type."""

    low: float
    high: float
    kind: Literal["InvalidBounds"] = "InvalidBounds"


@dataclass(frozen=True)
class InvalidProbability:
    """Bernoulli probability outside ``[0, 1]``."""

    p: float
    kind: Literal["InvalidProbability"] = "InvalidProbability"


@dataclass(frozen=True)
class InvalidExponent:
    """Zipf exponent must be non-negative."""

    exponent: float
    kind: Literal["InvalidExponent"] = "InvalidExponent"


@dataclass(frozen=True)
class EmptyCollection:
    """A position was requested inside a collection with no elements."""

    type_name: str
    kind: Literal["EmptyCollection"] = "EmptyCollection"


@dataclass(frozen=True)
class NegativeSamples:
    """Requested a negative number of draws."""

    n_samples: int
    kind: Literal["NegativeSamples"] = "NegativeSamples"
