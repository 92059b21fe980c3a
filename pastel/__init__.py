"""Color conversion, manipulation, parsing, mixing and color scales."""

__version__ = "0.1.0"