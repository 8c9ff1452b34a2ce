"""
Capability bounds shared by every distribution.

A distribution is any equality-comparable object that declares the type
it produces and, given an engine, returns one value of that type. The
concrete classes in this package are frozen dataclasses, so their
generated ``__eq__`` compares exactly the shaping parameters.
"""

from __future__ import annotations

from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

import numpy as np


__all__: list[str] = ["Distribution", "Engine"]

R_co = TypeVar("R_co", covariant=True)

# The engine is injected, never created by a distribution. numpy's
# Generator (PCG64 by default) is the reference bit source.
Engine: TypeAlias = np.random.Generator


@runtime_checkable
class Distribution(Protocol[R_co]):
    """Callable that shapes engine output into one value of ``result_type``."""

    @property
    def result_type(self) -> type: ...

    def __call__(self, engine: Engine) -> R_co: ...

    def __eq__(self, other: object) -> bool: ...
