"""Utility functions for seed hashing."""

from .hashing import seed_from_string, to_int32

__all__ = [
    "seed_from_string",
    "to_int32",
]
