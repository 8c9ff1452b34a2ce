"""Error ADTs for default-distribution resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class UnresolvableType:
    """No default distribution exists for the requested type.

    ``type_name`` is the outermost type requested; ``reason`` names the
    component that could not be classified when the failure happened while
    resolving a tuple slot or sequence element.
    """

    type_name: str
    reason: str = ""
    kind: Literal["UnresolvableType"] = "UnresolvableType"


@dataclass(frozen=True)
class MissingTypeArguments:
    """A container type was given without its element type(s), e.g. ``list``."""

    type_name: str
    kind: Literal["MissingTypeArguments"] = "MissingTypeArguments"


RegistryError = UnresolvableType | MissingTypeArguments
