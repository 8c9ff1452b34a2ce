"""randvar error ADTs."""

from randvar.errors.distribution import (
    EmptyCollection,
    InvalidBounds,
    InvalidExponent,
    InvalidProbability,
    NegativeSamples,
)
from randvar.errors.registry import MissingTypeArguments, RegistryError, UnresolvableType

__all__ = [
    "EmptyCollection",
    "InvalidBounds",
    "InvalidExponent",
    "InvalidProbability",
    "NegativeSamples",
    "MissingTypeArguments",
    "RegistryError",
    "UnresolvableType",
]
