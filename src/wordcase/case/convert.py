# wordcase/case/convert.py
# ──────────────────────────────────────────────────────────────
# Case-style conversion on top of the word slicer
# ──────────────────────────────────────────────────────────────
"""
convert.

Does: Re-render text in a named case style (snake, kebab, camel, pascal,
      constant, dot, path, title, sentence). Words come from
      slice_into_words(); styles come from data/case_styles.json.
Returns: convert_case() and the to_*_case() shortcuts.
Used by: Callers that need identifiers in a given naming convention.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from wordcase.token import slice_into_words, uppercase_first_letter
from wordcase.types import WORD_CASINGS, CaseStyle, WordCasing
from wordcase.utils import ConfigTypeError, debug, load_config

__all__ = [
    "UnknownCaseStyle",
    "validate_case_styles",
    "case_styles",
    "get_case_style",
    "convert_case",
    "to_snake_case",
    "to_kebab_case",
    "to_camel_case",
    "to_pascal_case",
    "to_constant_case",
    "to_title_case",
]

log = logging.getLogger(__name__)

CASE_STYLES_FILE = "case_styles"


class UnknownCaseStyle(ValueError):
    """Raise when a style name is not in the case-style table."""


# ──────────────────────────────────────────────────────────────
# 1) Style table
# ──────────────────────────────────────────────────────────────


def _check_style(name: str, entry: Any) -> CaseStyle:
    """
    Does: Check one style has a str `separator` and `first_word` /
          `other_words` in lower|upper|capitalize.
    Returns: A fresh CaseStyle built from `entry`.
    Raises: ConfigTypeError naming the style and the bad field.
    """
    if not isinstance(entry, Mapping):
        raise ConfigTypeError(f"case style {name!r}: expected object, got {type(entry).__name__}")
    sep = entry.get("separator")
    if not isinstance(sep, str):
        raise ConfigTypeError(f"case style {name!r}: 'separator' must be a string")
    for key in ("first_word", "other_words"):
        if entry.get(key) not in WORD_CASINGS:
            raise ConfigTypeError(
                f"case style {name!r}: {key!r} must be one of {sorted(WORD_CASINGS)}"
            )
    return CaseStyle(
        separator=sep,
        first_word=entry["first_word"],
        other_words=entry["other_words"],
    )


def validate_case_styles(data: dict[str, Any]) -> dict[str, CaseStyle]:
    """Does: Validate every entry of a style table; keys are trimmed and lowercased."""
    return {name.strip().lower(): _check_style(name, entry) for name, entry in data.items()}


def _load_case_styles() -> dict[str, CaseStyle]:
    # load_config memoizes per file version; callers only ever see copies
    styles = load_config(CASE_STYLES_FILE, validator=validate_case_styles)
    log.debug("Using %d case styles", len(styles))
    return styles


def case_styles() -> dict[str, CaseStyle]:
    """Does: Return a copy of the current case-style table."""
    return {name: CaseStyle(**style) for name, style in _load_case_styles().items()}


def get_case_style(name: str) -> CaseStyle:
    styles = _load_case_styles()
    key = name.strip().lower()
    try:
        return CaseStyle(**styles[key])
    except KeyError:
        raise UnknownCaseStyle(
            f"unknown case style {name!r}; available: {', '.join(sorted(styles))}"
        ) from None


# ──────────────────────────────────────────────────────────────
# 2) Conversion
# ──────────────────────────────────────────────────────────────


def _apply_casing(word: str, casing: WordCasing) -> str:
    if casing == "lower":
        return word
    if casing == "upper":
        return word.upper()
    if casing == "capitalize":
        return uppercase_first_letter(word)
    raise ConfigTypeError(f"unknown word casing {casing!r}")


def convert_case(text: str, style: str | Mapping[str, Any]) -> str:
    """
    Does: Slice `text` into lowercase words, case the first word with
          `first_word` and the rest with `other_words`, join with
          `separator`. A mapping `style` is checked like a table entry.
    Returns: Converted string; "" when `text` has no words.
    Raises: UnknownCaseStyle for an unknown style name,
            ConfigTypeError for a malformed style mapping.
    """
    if isinstance(style, str):
        spec = get_case_style(style)
    else:
        spec = _check_style("<custom>", style)
    words = slice_into_words(text)
    if not words:
        return ""

    cased = [_apply_casing(words[0], spec["first_word"])]
    cased.extend(_apply_casing(w, spec["other_words"]) for w in words[1:])
    out = spec["separator"].join(cased)
    debug(f"convert_case({text!r}, {style!r}) -> {out!r}", topic="case")
    return out


def to_snake_case(text: str) -> str:
    return convert_case(text, "snake")


def to_kebab_case(text: str) -> str:
    return convert_case(text, "kebab")


def to_camel_case(text: str) -> str:
    return convert_case(text, "camel")


def to_pascal_case(text: str) -> str:
    return convert_case(text, "pascal")


def to_constant_case(text: str) -> str:
    return convert_case(text, "constant")


def to_title_case(text: str) -> str:
    return convert_case(text, "title")
