"""Result-converting wrapper around another distribution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from randvar.config import DEFAULT_CONFIG, GeneratorConfig
from randvar.distributions.base import Distribution, Engine
from randvar.errors import RegistryError
from randvar.result import Result


__all__: list[str] = ["AdaptedDistribution"]


@dataclass(frozen=True)
class AdaptedDistribution:
    """Draw from ``inner`` and convert the value with ``result_type(value)``.

    Lets a generator of a raw representation (say ``int``) serve a distinct
    but constructible type such as an identifier wrapper or an ``IntEnum``.

    Example::

        class UserId(int): ...

        match AdaptedDistribution.create(UserId, int):
            case Success(dist):
                uid = dist(engine)  # a UserId
    """

    result_type: type
    inner: Distribution[Any]

    def __call__(self, engine: Engine) -> Any:
        return self.result_type(self.inner(engine))

    @classmethod
    def create(
        cls,
        result_type: type,
        source_type: object,
        *,
        config: GeneratorConfig = DEFAULT_CONFIG,
    ) -> Result[AdaptedDistribution, RegistryError]:
        """Adapt the default distribution of ``source_type`` to ``result_type``."""
        # Deferred: the registry module imports this package.
        from randvar.registry import default_distribution

        return default_distribution(source_type, config=config).map(
            lambda inner: cls(result_type=result_type, inner=inner)
        )
