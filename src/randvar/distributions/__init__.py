"""Distributions: callables that turn engine output into typed values."""

from randvar.distributions.adapted import AdaptedDistribution
from randvar.distributions.base import Distribution, Engine
from randvar.distributions.position import (
    BoundPositionDistribution,
    Cursor,
    PositionDistribution,
)
from randvar.distributions.scalar import (
    BernoulliDistribution,
    SingleValueDistribution,
    UniformIntDistribution,
    UniformRealDistribution,
    ZipfDistribution,
    integral_range,
)
from randvar.distributions.sequence import SequenceDistribution, StringDistribution
from randvar.distributions.tuples import TupleDistribution

__all__ = [
    "AdaptedDistribution",
    "BernoulliDistribution",
    "BoundPositionDistribution",
    "Cursor",
    "Distribution",
    "Engine",
    "PositionDistribution",
    "SequenceDistribution",
    "SingleValueDistribution",
    "StringDistribution",
    "TupleDistribution",
    "UniformIntDistribution",
    "UniformRealDistribution",
    "ZipfDistribution",
    "integral_range",
]
