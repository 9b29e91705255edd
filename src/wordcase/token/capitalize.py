# wordcase/token/capitalize.py
"""
capitalize.

Does: Uppercase the first grapheme of a word, leaving the rest untouched.
Used by: Case styles that capitalize words (camel, pascal, title, sentence).
"""

from __future__ import annotations

from .graphemes import split_graphemes

__all__ = ["EmptyWordError", "uppercase_first_letter"]


class EmptyWordError(ValueError):
    """Raise when a word operation receives an empty string."""


def uppercase_first_letter(word: str) -> str:
    """
    Does: Rebuild `word` with its first grapheme uppercased. Later graphemes
          are kept as-is (not lowercased); "ß" expands to "SS".
    Returns: New string.
    Raises: EmptyWordError on "".
    """
    graphemes = split_graphemes(word)
    if not graphemes:
        raise EmptyWordError("cannot uppercase the first letter of an empty word")
    first, rest = graphemes[0], graphemes[1:]
    return first.upper() + "".join(rest)
