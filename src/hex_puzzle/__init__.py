"""Hexagonal tiling puzzle logic core."""

__version__ = "0.1.0"

__all__ = ["__version__"]
