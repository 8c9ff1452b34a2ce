"""randvar: composable random value generators with type-driven defaults."""

from randvar.algorithms import fill, fill_range
from randvar.config import DEFAULT_CONFIG, GeneratorConfig, make_engine
from randvar.distributions import (
    AdaptedDistribution,
    BernoulliDistribution,
    BoundPositionDistribution,
    Cursor,
    Distribution,
    Engine,
    PositionDistribution,
    SequenceDistribution,
    SingleValueDistribution,
    StringDistribution,
    TupleDistribution,
    UniformIntDistribution,
    UniformRealDistribution,
    ZipfDistribution,
)
from randvar.registry import default_distribution
from randvar.result import Failure, Result, Success
from randvar.shapes import Shape, classify
from randvar.stream import GeneratorStream
from randvar.variable import RandomVariable, make_default_random_variable, make_random_variable

__all__ = [
    "AdaptedDistribution",
    "BernoulliDistribution",
    "BoundPositionDistribution",
    "Cursor",
    "DEFAULT_CONFIG",
    "Distribution",
    "Engine",
    "Failure",
    "GeneratorConfig",
    "GeneratorStream",
    "PositionDistribution",
    "RandomVariable",
    "Result",
    "SequenceDistribution",
    "Shape",
    "SingleValueDistribution",
    "StringDistribution",
    "Success",
    "TupleDistribution",
    "UniformIntDistribution",
    "UniformRealDistribution",
    "ZipfDistribution",
    "classify",
    "default_distribution",
    "fill",
    "fill_range",
    "make_default_random_variable",
    "make_engine",
    "make_random_variable",
]
