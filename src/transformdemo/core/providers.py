"""Interchangeable unary functions that add a fixed integer."""

import operator
from typing import Callable

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from transformdemo.core.models import ProviderKind, UnaryIntFunction


@pydantic_dataclass(frozen=True)
class Adder:
    """Callable object carrying the addend as immutable state."""

    value: int = Field(description="Addend applied to every input")

    def __call__(self, x: int) -> int:
        return x + self.value


def closure_adder(k: int) -> UnaryIntFunction:
    """Return an anonymous function that adds ``k``."""
    # Default argument pins the current value of k.
    return lambda x, k=k: x + k


def bind_second(op: Callable[[int, int], int], value: int) -> UnaryIntFunction:
    """
    Fix the right operand of a binary function.

    ``functools.partial`` only binds from the left, so the bound operand is
    captured in a closure instead.
    """

    def bound(x: int) -> int:
        return op(x, value)

    return bound


def bound_adder(k: int) -> UnaryIntFunction:
    """Addition with its right operand bound to ``k``."""
    return bind_second(operator.add, k)


_FACTORIES: dict[str, Callable[[int], UnaryIntFunction]] = {
    "functor": Adder,
    "lambda": closure_adder,
    "lambda_copy": closure_adder,
    "bound_operator": bound_adder,
}


def build_provider(kind: ProviderKind, k: int) -> UnaryIntFunction:
    """Build the provider of the given kind for addend ``k``."""
    try:
        factory = _FACTORIES[kind]
    except KeyError:
        raise ValueError(f"Unknown provider kind: {kind}") from None
    return factory(k)
