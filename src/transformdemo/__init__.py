"""Four ways to add a constant to every element of a sequence."""

__version__ = "0.1.0"
