# wordcase/types.py
"""
types.py.

Does: Define the typed shapes shared by the case converter and its config.
"""

from __future__ import annotations

from typing import Literal, TypedDict

WordCasing = Literal["lower", "upper", "capitalize"]

WORD_CASINGS: frozenset[str] = frozenset({"lower", "upper", "capitalize"})


class CaseStyle(TypedDict):
    separator: str
    first_word: WordCasing
    other_words: WordCasing


__all__ = ["CaseStyle", "WordCasing", "WORD_CASINGS"]

__docformat__ = "google"
