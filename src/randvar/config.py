"""
randvar.config
==============
Validated, immutable knobs for the default distributions and for engine
construction.

The registry never reads global state; every lookup receives a
:class:`GeneratorConfig` (``DEFAULT_CONFIG`` unless the caller supplies
one), so two lookups with equal configs always produce equal
distributions.
"""

from __future__ import annotations

from typing import Annotated, Final, Literal, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from randvar.result import Failure, Result, Success


__all__: list[str] = ["DEFAULT_CONFIG", "GeneratorConfig", "make_engine", "validate_model"]

TModel = TypeVar("TModel", bound=BaseModel)


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """Construct a Pydantic model, returning validation errors as a Failure."""
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


class GeneratorConfig(BaseModel):
    """Parameters of the default distributions.

    Attributes
    ----------
    seed
        Non-negative seed used by :func:`make_engine`.
    max_length
        Upper bound (inclusive) on default sequence and string lengths.
    alphabet_low, alphabet_high
        Inclusive code-point range of default string characters.
    zipf_exponent
        Exponent of the truncated Zipf law for default sequence lengths.
    sequence_length_law
        ``"zipf"`` favours short and empty sequences; ``"uniform"`` draws
        lengths uniformly over ``[0, max_length]``.
    """

    seed: Annotated[int, Field(ge=0, description="Seed for make_engine")] = 0
    max_length: Annotated[int, Field(ge=0, description="Longest default sequence")] = 32
    alphabet_low: Annotated[int, Field(ge=0, le=0x10FFFF)] = 33
    alphabet_high: Annotated[int, Field(ge=0, le=0x10FFFF)] = 126
    zipf_exponent: Annotated[float, Field(ge=0.0)] = 1.0
    sequence_length_law: Literal["zipf", "uniform"] = "zipf"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _validate_alphabet(self) -> GeneratorConfig:
        """The alphabet must contain at least one code point."""
        if self.alphabet_low > self.alphabet_high:
            raise ValueError("`alphabet_low` must not exceed `alphabet_high`.")
        return self

    @classmethod
    def create(cls, **data: object) -> Result[GeneratorConfig, ValidationError]:
        return validate_model(cls, **data)


DEFAULT_CONFIG: Final[GeneratorConfig] = GeneratorConfig()


def make_engine(config: GeneratorConfig = DEFAULT_CONFIG) -> np.random.Generator:
    """Return a fresh PCG64-backed engine seeded from ``config.seed``."""
    return np.random.default_rng(config.seed)
