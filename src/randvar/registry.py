"""
Default-distribution registry.

``default_distribution(T)`` returns the canonical distribution for values
of type ``T``:

==================  ====================================================
Shape               Default distribution
==================  ====================================================
Boolean             fair Bernoulli trial
Integral            uniform over the full representable range
Floating-point      uniform over ``[lowest, max]`` of the type
Tuple               tuple generator over the per-slot defaults
String              length uniform ``[0, 32]``, chars uniform ``[33, 126]``
Sequence            truncated-Zipf length ``[0, 32]``, default elements
Custom              whatever ``T.__default_distribution__()`` returns
Unclassified        ``Failure(UnresolvableType)``
==================  ====================================================

Lookup is pure: no registry state is kept and no randomness is consumed.
Failures surface before any value is drawn and name the type that could
not be resolved (for structured types, the innermost offending component).
"""

from __future__ import annotations

import logging
from typing import Any, assert_never

import numpy as np

from randvar.config import DEFAULT_CONFIG, GeneratorConfig
from randvar.distributions import (
    BernoulliDistribution,
    Distribution,
    SequenceDistribution,
    StringDistribution,
    TupleDistribution,
    UniformIntDistribution,
    UniformRealDistribution,
    ZipfDistribution,
    integral_range,
)
from randvar.errors import MissingTypeArguments, RegistryError, UnresolvableType
from randvar.result import Failure, Result, Success, collect_results
from randvar.shapes import (
    BooleanShape,
    CustomShape,
    FloatingShape,
    IntegralShape,
    SequenceShape,
    StringShape,
    TupleShape,
    UnclassifiedShape,
    classify,
    type_name,
)


__all__: list[str] = ["default_distribution", "default_length_distribution"]

_logger = logging.getLogger(__name__)

_BYTE_MAX: int = 255
_FLOAT64_MAX: float = float(np.finfo(np.float64).max)


def default_length_distribution(config: GeneratorConfig = DEFAULT_CONFIG) -> Distribution[int]:
    """Length law for default non-string sequences."""
    match config.sequence_length_law:
        case "zipf":
            return ZipfDistribution(low=0, high=config.max_length, exponent=config.zipf_exponent)
        case "uniform":
            return UniformIntDistribution(0, config.max_length)
        case _ as unreachable:
            assert_never(unreachable)


def _floating_range(value_type: type) -> tuple[float, float]:
    info = np.finfo(value_type if issubclass(value_type, np.floating) else np.float64)
    # Extended precision types are clamped to what a Python float can hold.
    return max(float(info.min), -_FLOAT64_MAX), min(float(info.max), _FLOAT64_MAX)


def _string_distribution(
    value_type: type, config: GeneratorConfig
) -> Result[Distribution[Any], RegistryError]:
    if issubclass(value_type, bytes) and config.alphabet_high > _BYTE_MAX:
        return Failure(
            UnresolvableType(
                type_name=type_name(value_type), reason="alphabet exceeds the byte range"
            )
        )
    return Success(
        StringDistribution(
            size=UniformIntDistribution(0, config.max_length),
            element=UniformIntDistribution(config.alphabet_low, config.alphabet_high),
            result_type=value_type,
        )
    )


def _custom_distribution(value_type: type) -> Result[Distribution[Any], RegistryError]:
    dist = value_type.__default_distribution__()  # type: ignore[attr-defined]
    if not isinstance(dist, Distribution):
        return Failure(
            UnresolvableType(
                type_name=type_name(value_type),
                reason="__default_distribution__ did not return a distribution",
            )
        )
    return Success(dist)


def _resolve(
    value_type: object, config: GeneratorConfig
) -> Result[Distribution[Any], RegistryError]:
    match classify(value_type):
        case BooleanShape(value_type=vt):
            return Success(BernoulliDistribution(p=0.5, result_type=vt))
        case IntegralShape(value_type=vt):
            low, high = integral_range(vt)
            return Success(UniformIntDistribution(low, high, result_type=vt))
        case FloatingShape(value_type=vt):
            low_f, high_f = _floating_range(vt)
            return Success(UniformRealDistribution(low_f, high_f, result_type=vt))
        case TupleShape(slot_types=slot_types, value_type=vt):
            return collect_results(_resolve(slot, config) for slot in slot_types).map(
                lambda slots: TupleDistribution(slots=tuple(slots), result_type=vt)
            )
        case StringShape(value_type=vt):
            return _string_distribution(vt, config)
        case SequenceShape(container=container, element_type=element_type):
            return _resolve(element_type, config).map(
                lambda element: SequenceDistribution(
                    size=default_length_distribution(config),
                    element=element,
                    result_type=container,
                )
            )
        case CustomShape(value_type=vt):
            return _custom_distribution(vt)
        case UnclassifiedShape(type_name=name, missing_arguments=True):
            return Failure(MissingTypeArguments(type_name=name))
        case UnclassifiedShape(type_name=name, reason=reason):
            return Failure(UnresolvableType(type_name=name, reason=reason))
        case _ as unreachable:
            assert_never(unreachable)


def default_distribution(
    value_type: object, *, config: GeneratorConfig = DEFAULT_CONFIG
) -> Result[Distribution[Any], RegistryError]:
    """Resolve the default distribution of ``value_type``.

    Args:
        value_type: A class (``int``, ``numpy.float32``, a NamedTuple) or a
            parameterised alias (``list[int]``, ``tuple[bool, str]``).
        config: Length and alphabet parameters of the composite defaults.

    Returns:
        Success with a distribution whose ``result_type`` is ``value_type``
        (its origin, for aliases), or Failure naming the unresolvable type.
    """
    result = _resolve(value_type, config)
    match result:
        case Success(dist):
            _logger.debug("default distribution for %s: %r", type_name(value_type), dist)
        case Failure(error):
            _logger.debug("no default distribution for %s: %s", type_name(value_type), error)
    return result
