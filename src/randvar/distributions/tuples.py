"""Fixed-arity tuples of independently distributed slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from randvar.distributions.base import Distribution, Engine


__all__: list[str] = ["TupleDistribution"]


@dataclass(frozen=True)
class TupleDistribution:
    """One distribution per tuple slot.

    Slots are drawn in ascending order (slot 0 first) against the same
    engine. The order is part of the contract: with a stateful engine,
    reordering the slots changes every value that follows.

    Attributes
    ----------
    slots
        Per-slot distributions; the arity is ``len(slots)``.
    result_type
        ``tuple`` or a ``typing.NamedTuple`` class, built positionally.
    """

    slots: tuple[Distribution[Any], ...]
    result_type: type = tuple

    def __call__(self, engine: Engine) -> Any:
        values = [slot(engine) for slot in self.slots]
        if self.result_type is tuple:
            return tuple(values)
        return self.result_type(*values)

    @property
    def arity(self) -> int:
        return len(self.slots)
