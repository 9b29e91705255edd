"""
wordcase
========

Does: Root package for the grapheme-aware word slicer and case converter.
Returns: Re-exports the public API of `wordcase.token` and `wordcase.case`.
Used by: All imports starting from `wordcase`.
"""

from wordcase.case import (
    UnknownCaseStyle,
    case_styles,
    convert_case,
    get_case_style,
    to_camel_case,
    to_constant_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)
from wordcase.token import (
    EmptyWordError,
    InvalidGraphemeCount,
    grapheme_count,
    is_uppercase,
    slice_into_words,
    split_graphemes,
    uppercase_first_letter,
)

__all__: list[str] = [
    "slice_into_words",
    "is_uppercase",
    "uppercase_first_letter",
    "split_graphemes",
    "grapheme_count",
    "InvalidGraphemeCount",
    "EmptyWordError",
    "convert_case",
    "case_styles",
    "get_case_style",
    "UnknownCaseStyle",
    "to_snake_case",
    "to_kebab_case",
    "to_camel_case",
    "to_pascal_case",
    "to_constant_case",
    "to_title_case",
]
__docformat__ = "google"
