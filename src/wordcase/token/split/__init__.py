# wordcase/token/split/__init__.py
"""
split
=====

Does: Expose the word slicer.
Exports: DELIMITERS, slice_into_words
"""

from .split_core import (
    DELIMITERS,
    slice_into_words,
)

__all__ = [
    "DELIMITERS",
    "slice_into_words",
]
