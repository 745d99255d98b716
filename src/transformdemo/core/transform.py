"""In-place transform over a mutable integer sequence."""

import logging
from typing import MutableSequence

from transformdemo.core.models import UnaryIntFunction


logger = logging.getLogger(__name__)


def transform_in_place(values: MutableSequence[int], fn: UnaryIntFunction) -> None:
    """
    Overwrite every element of ``values`` with ``fn`` applied to it.

    Elements are visited left to right and the length never changes.
    ``fn`` must not mutate ``values`` while the transform runs.

    Args:
        values: Sequence to update in place
        fn: Unary function from int to int
    """
    logger.debug(f"Transforming {len(values)} elements with {fn!r}")
    for i in range(len(values)):
        values[i] = fn(values[i])
