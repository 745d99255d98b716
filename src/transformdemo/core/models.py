"""Data models and type definitions for the addend demonstrations."""

from dataclasses import dataclass
from typing import Callable, Literal


UnaryIntFunction = Callable[[int], int]

ProviderKind = Literal["functor", "lambda", "lambda_copy", "bound_operator"]


@dataclass(frozen=True)
class DemoOptions:
    """Inputs shared by every demonstration."""

    values: tuple[int, ...] = (1, 2, 3, 4, 5)
    addend: int = 10


@dataclass(frozen=True)
class Approach:
    """One numbered way of passing the addend function to the transform."""

    number: int
    kind: ProviderKind
    description: str
