"""Transform primitive, addend providers and printer."""

from transformdemo.core.models import DemoOptions, ProviderKind
from transformdemo.core.printer import format_sequence, print_sequence
from transformdemo.core.providers import (
    Adder,
    bind_second,
    bound_adder,
    build_provider,
    closure_adder,
)
from transformdemo.core.transform import transform_in_place

__all__ = [
    "Adder",
    "DemoOptions",
    "ProviderKind",
    "bind_second",
    "bound_adder",
    "build_provider",
    "closure_adder",
    "format_sequence",
    "print_sequence",
    "transform_in_place",
]
