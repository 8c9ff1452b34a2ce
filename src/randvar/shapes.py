"""
Shape classification of value types.

:func:`classify` maps a Python type (a class or a parameterised alias
such as ``list[int]``) onto exactly one variant of the closed
:data:`Shape` union. The registry dispatches on the result with an
exhaustive ``match``; :class:`UnclassifiedShape` is the dead end that
becomes a resolution failure.

Type Safety:
    - All shapes are frozen dataclasses with a ``kind`` discriminator
    - Classification is total: every input yields exactly one shape
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, MutableSequence, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Literal, get_args, get_origin, get_type_hints

import numpy as np


__all__: list[str] = [
    "BooleanShape",
    "CustomShape",
    "FloatingShape",
    "IntegralShape",
    "SequenceShape",
    "Shape",
    "StringShape",
    "TupleShape",
    "UnclassifiedShape",
    "classify",
    "type_name",
]


@dataclass(frozen=True)
class BooleanShape:
    value_type: type
    kind: Literal["Boolean"] = "Boolean"


@dataclass(frozen=True)
class IntegralShape:
    value_type: type
    kind: Literal["Integral"] = "Integral"


@dataclass(frozen=True)
class FloatingShape:
    value_type: type
    kind: Literal["FloatingPoint"] = "FloatingPoint"


@dataclass(frozen=True)
class TupleShape:
    """Fixed arity; ``value_type`` is ``tuple`` or a NamedTuple class."""

    slot_types: tuple[object, ...]
    value_type: type = tuple
    kind: Literal["Tuple"] = "Tuple"


@dataclass(frozen=True)
class StringShape:
    value_type: type
    kind: Literal["String"] = "String"


@dataclass(frozen=True)
class SequenceShape:
    """Variable-length homogeneous sequence built as ``container``."""

    container: type
    element_type: object
    kind: Literal["Sequence"] = "Sequence"


@dataclass(frozen=True)
class CustomShape:
    """Class that supplies its own ``__default_distribution__``."""

    value_type: type
    kind: Literal["Custom"] = "Custom"


@dataclass(frozen=True)
class UnclassifiedShape:
    type_name: str
    reason: str = "matches no shape rule"
    missing_arguments: bool = False
    kind: Literal["Unclassified"] = "Unclassified"


Shape = (
    BooleanShape
    | IntegralShape
    | FloatingShape
    | TupleShape
    | StringShape
    | SequenceShape
    | CustomShape
    | UnclassifiedShape
)

# Parameterised origins that build as the mapped concrete container.
_SEQUENCE_ORIGINS: dict[object, type] = {
    list: list,
    deque: deque,
    Sequence: list,
    MutableSequence: list,
}

_BARE_CONTAINERS: tuple[type, ...] = (list, tuple, deque, Sequence, MutableSequence, np.ndarray)

_ASSOCIATIVE = "associative container"


def type_name(value_type: object) -> str:
    """Readable name for diagnostics, e.g. ``int`` or ``dict[str, int]``."""
    if get_origin(value_type) is None and isinstance(value_type, type):
        return value_type.__qualname__
    return repr(value_type)


def classify(value_type: object) -> Shape:
    """Return the single shape of ``value_type``."""
    # `type X = ...` aliases classify as their definition.
    alias_value = getattr(value_type, "__value__", None)
    if alias_value is not None:
        return classify(alias_value)
    origin = get_origin(value_type)
    origin_value = getattr(origin, "__value__", None)
    if origin_value is not None:
        return classify(origin_value[get_args(value_type)])
    if origin is None:
        return _classify_class(value_type)
    return _classify_alias(value_type, origin, get_args(value_type))


def _classify_class(value_type: object) -> Shape:
    name = type_name(value_type)
    if not isinstance(value_type, type):
        return UnclassifiedShape(type_name=name, reason="not a type")
    if hasattr(value_type, "__default_distribution__"):
        return CustomShape(value_type=value_type)
    if issubclass(value_type, Enum):
        return UnclassifiedShape(type_name=name, reason="enumeration")
    if issubclass(value_type, (bool, np.bool_)):
        return BooleanShape(value_type=value_type)
    if issubclass(value_type, int) or _is_numpy_integer(value_type):
        return IntegralShape(value_type=value_type)
    if issubclass(value_type, (float, np.floating)):
        return FloatingShape(value_type=value_type)
    if issubclass(value_type, (str, bytes)):
        return StringShape(value_type=value_type)
    if issubclass(value_type, tuple) and hasattr(value_type, "_fields"):
        return _classify_named_tuple(value_type)
    if value_type in _BARE_CONTAINERS:
        return UnclassifiedShape(
            type_name=name, reason="missing element type", missing_arguments=True
        )
    if issubclass(value_type, (Mapping, Set)):
        return UnclassifiedShape(type_name=name, reason=_ASSOCIATIVE)
    return UnclassifiedShape(type_name=name)


def _is_numpy_integer(value_type: type) -> bool:
    # timedelta64 subclasses np.signedinteger but has no integer limits.
    return issubclass(value_type, np.integer) and not issubclass(value_type, np.timedelta64)


def _classify_named_tuple(value_type: type) -> Shape:
    fields: tuple[str, ...] = value_type._fields  # type: ignore[attr-defined]
    hints = get_type_hints(value_type)
    if not all(field in hints for field in fields):
        return UnclassifiedShape(
            type_name=type_name(value_type), reason="named tuple without field annotations"
        )
    return TupleShape(slot_types=tuple(hints[field] for field in fields), value_type=value_type)


def _classify_alias(value_type: object, origin: object, args: tuple[object, ...]) -> Shape:
    name = type_name(value_type)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceShape(container=tuple, element_type=args[0])
        return TupleShape(slot_types=args)
    if origin in _SEQUENCE_ORIGINS:
        return SequenceShape(container=_SEQUENCE_ORIGINS[origin], element_type=args[0])
    if origin is np.ndarray:
        match _array_scalar_type(args):
            case None:
                return UnclassifiedShape(type_name=name, reason="array dtype is not a scalar type")
            case scalar:
                return SequenceShape(container=np.ndarray, element_type=scalar)
    if isinstance(origin, type) and issubclass(origin, (Mapping, Set)):
        return UnclassifiedShape(type_name=name, reason=_ASSOCIATIVE)
    return UnclassifiedShape(type_name=name)


def _array_scalar_type(args: tuple[object, ...]) -> type | None:
    """Scalar type of ``numpy.typing.NDArray[scalar]`` arguments, if any."""
    if len(args) != 2:
        return None
    dtype_args = get_args(args[1])
    if not dtype_args:
        return None
    scalar = dtype_args[0]
    if isinstance(scalar, type) and issubclass(scalar, (np.bool_, np.integer, np.floating)):
        return scalar
    return None
