# wordcase/token/graphemes.py
"""
graphemes.

Does: Segment text into extended grapheme clusters and classify a single
      grapheme as uppercase using Python's Unicode case mapping.
Returns: split_graphemes(), grapheme_count(), is_uppercase().
Used by: The word slicer and the first-letter capitalizer.
"""

from __future__ import annotations

import regex

__all__ = [
    "InvalidGraphemeCount",
    "split_graphemes",
    "grapheme_count",
    "is_uppercase",
]

_GRAPHEME_RE = regex.compile(r"\X")


class InvalidGraphemeCount(ValueError):
    """Raise when a one-grapheme argument holds zero or several graphemes."""

    def __init__(self, text: str, count: int):
        super().__init__(text, count)
        self.text = text
        self.count = count

    def __str__(self) -> str:
        return f"expected exactly 1 grapheme, got {self.count} in {self.text!r}"


def split_graphemes(text: str) -> list[str]:
    """
    Does: Split `text` into user-perceived characters (regex `\\X`), so a
          base letter and its combining marks, or a flag's regional
          indicator pair, stay together.
    Returns: List of grapheme strings in order; [] for empty text.
    """
    if not text:
        return []
    return _GRAPHEME_RE.findall(text)


def grapheme_count(text: str) -> int:
    return len(split_graphemes(text))


def is_uppercase(grapheme: str) -> bool:
    """
    Does: Test whether one grapheme has case and is already uppercase:
          upper() leaves it unchanged while lower() changes it.
    Returns: False for lowercase letters and case-less graphemes
             (digits, punctuation, CJK...).
    Raises: InvalidGraphemeCount unless `grapheme` is exactly one grapheme.
    """
    count = grapheme_count(grapheme)
    if count != 1:
        raise InvalidGraphemeCount(grapheme, count)
    return grapheme == grapheme.upper() and grapheme != grapheme.lower()
