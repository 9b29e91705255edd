# wordcase/token/__init__.py
"""
token.
=====

Does: Provide grapheme-aware token utilities: classification, word slicing,
      first-letter capitalization.
Exports: split_graphemes, grapheme_count, is_uppercase, slice_into_words,
         uppercase_first_letter, DELIMITERS, InvalidGraphemeCount, EmptyWordError
Used by: wordcase.case and external callers.
"""

from __future__ import annotations

from .capitalize import (
    EmptyWordError,
    uppercase_first_letter,
)
from .graphemes import (
    InvalidGraphemeCount,
    grapheme_count,
    is_uppercase,
    split_graphemes,
)
from .split.split_core import (
    DELIMITERS,
    slice_into_words,
)

__all__ = [
    # graphemes
    "split_graphemes",
    "grapheme_count",
    "is_uppercase",
    "InvalidGraphemeCount",
    # capitalize
    "uppercase_first_letter",
    "EmptyWordError",
    # split
    "slice_into_words",
    "DELIMITERS",
]
