"""tangle: cards made of typed, uniquely-named fields."""

__version__ = "0.1.0"
