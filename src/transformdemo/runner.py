"""Driver that runs each numbered approach in order."""

import logging
from dataclasses import dataclass
from typing import Iterator

from transformdemo.core.models import Approach, DemoOptions
from transformdemo.core.providers import build_provider
from transformdemo.core.transform import transform_in_place

logger = logging.getLogger(__name__)


APPROACHES: tuple[Approach, ...] = (
    Approach(1, "functor", "named callable object holding the addend"),
    Approach(2, "lambda", "inline closure capturing the addend by value"),
    Approach(3, "lambda_copy", "identical inline closure, written again"),
    Approach(4, "bound_operator", "addition with its right operand bound"),
)


@dataclass
class ApproachStarted:
    """An approach is about to run."""

    approach: Approach
    label: str


@dataclass
class ApproachComplete:
    """An approach finished and produced its transformed values."""

    approach: Approach
    values: list[int]


def label_for(approach: Approach) -> str:
    return f"approach {approach.number}:"


def demonstrate(approach: Approach, options: DemoOptions) -> list[int]:
    """
    Run one approach on a fresh copy of the input values.

    Args:
        approach: Which way of passing the addend function to use
        options: Input values and addend

    Returns:
        The transformed values
    """
    values = list(options.values)
    add_value = options.addend

    if approach.kind == "lambda":
        transform_in_place(values, lambda x, add_value=add_value: x + add_value)
    elif approach.kind == "lambda_copy":
        transform_in_place(values, lambda x, add_value=add_value: x + add_value)
    else:
        transform_in_place(values, build_provider(approach.kind, add_value))

    return values


def run_approaches(
    options: DemoOptions | None = None,
) -> Iterator[ApproachStarted | ApproachComplete]:
    """
    Run every approach in order, yielding an event before and after each.

    The consumer is expected to finish handling ``ApproachComplete`` before
    asking for the next event.
    """
    options = options or DemoOptions()

    for approach in APPROACHES:
        logger.debug(f"Starting approach {approach.number}: {approach.description}")
        yield ApproachStarted(approach=approach, label=label_for(approach))

        values = demonstrate(approach, options)
        logger.debug(f"Approach {approach.number} produced {values}")
        yield ApproachComplete(approach=approach, values=values)
