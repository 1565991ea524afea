"""Extent geometry and string helpers for editor tooling."""

__all__ = [
    "adapters",
    "extents",
    "runtime",
    "text",
]

__version__ = "0.1.0"
