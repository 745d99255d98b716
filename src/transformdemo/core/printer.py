"""Console output of integer sequences."""

from typing import Callable, Iterable

import click


def format_sequence(values: Iterable[int]) -> str:
    """Render every element followed by a single space."""
    return "".join(f"{v} " for v in values)


def print_sequence(
    values: Iterable[int], echo: Callable[..., None] | None = None
) -> None:
    """Write ``values`` as one line to standard output."""
    echo = echo or click.echo
    echo(format_sequence(values))
