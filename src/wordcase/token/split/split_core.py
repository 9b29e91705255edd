# wordcase/token/split/split_core.py

"""
split_core.py.

Does: Single-pass slicing of text into lowercase words, breaking on a fixed
      delimiter set and before uppercase graphemes.
Returns: List of non-empty lowercase words ([] for empty input).
Used by: Case conversion and any caller needing identifier words.
"""
from __future__ import annotations

import logging

from wordcase.token.graphemes import is_uppercase, split_graphemes

__all__ = [
    "DELIMITERS",
    "slice_into_words",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# Compared per grapheme: a delimiter followed by a combining mark is no delimiter.
DELIMITERS: frozenset[str] = frozenset({" ", ".", "/", "_", "-", "\\"})


def slice_into_words(text: str, *, debug: bool = False) -> list[str]:
    """
    Does: Walk `text` grapheme by grapheme with a word buffer:
          - delimiter → flush buffer (delimiter itself is dropped)
          - uppercase grapheme with a non-empty buffer → flush, then start
            the next word with that grapheme
          - anything else → append
          The leftover buffer is flushed at the end. Every uppercase
          grapheme splits, so "ABC" gives ["a", "b", "c"].
    Returns: Lowercased words in input order, never empty strings.
    """
    if not isinstance(text, str):
        return []

    words: list[str] = []
    buf: list[str] = []

    def flush() -> None:
        word = "".join(buf).lower()
        buf.clear()
        words.append(word)
        if debug:
            log.debug("slice_into_words: emit %r", word)

    for g in split_graphemes(text):
        if g in DELIMITERS:
            if buf:
                flush()
            continue
        if buf and is_uppercase(g):
            flush()
        buf.append(g)

    if buf:
        flush()

    return words
