"""
Random sequences and strings.

Both draw a length from a size distribution and then exactly that many
independent elements, in draw order. Strings are the special case whose
elements are code points assembled into ``str`` (or bytes into ``bytes``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from randvar.distributions.base import Distribution, Engine
from randvar.distributions.scalar import UniformIntDistribution


__all__: list[str] = ["SequenceDistribution", "StringDistribution"]


@dataclass(frozen=True)
class SequenceDistribution:
    """Sequences of ``size(engine)`` elements each drawn from ``element``.

    Attributes
    ----------
    size
        Distribution of the sequence length.
    element
        Distribution of every element.
    result_type
        Container built from the drawn elements: ``list``, ``tuple``,
        ``collections.deque`` or ``numpy.ndarray`` (whose dtype is the
        element distribution's result type).
    """

    size: Distribution[int]
    element: Distribution[Any]
    result_type: type = list

    def __call__(self, engine: Engine) -> Any:
        length = int(self.size(engine))
        items = [self.element(engine) for _ in range(length)]
        return self._assemble(items)

    def _assemble(self, items: list[Any]) -> Any:
        if self.result_type is np.ndarray:
            return np.array(items, dtype=self.element.result_type)
        return self.result_type(items)


@dataclass(frozen=True)
class StringDistribution(SequenceDistribution):
    """Strings of uniformly chosen characters.

    Defaults: length uniform over ``[0, 32]``, characters uniform over the
    printable ASCII code points ``[33, 126]``.
    """

    size: Distribution[int] = UniformIntDistribution(0, 32)
    element: Distribution[Any] = UniformIntDistribution(33, 126)
    result_type: type = str

    def _assemble(self, items: list[Any]) -> Any:
        codes = [int(code) for code in items]
        if issubclass(self.result_type, bytes):
            return self.result_type(codes)
        return self.result_type("".join(map(chr, codes)))
