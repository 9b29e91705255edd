"""
case.
=====

Does: Convert text between naming conventions using the word slicer.
Exports: convert_case, case_styles, get_case_style, UnknownCaseStyle, to_*_case
"""

from .convert import (
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
    validate_case_styles,
)

__all__ = [
    "UnknownCaseStyle",
    "case_styles",
    "convert_case",
    "get_case_style",
    "validate_case_styles",
    "to_snake_case",
    "to_kebab_case",
    "to_camel_case",
    "to_pascal_case",
    "to_constant_case",
    "to_title_case",
]
