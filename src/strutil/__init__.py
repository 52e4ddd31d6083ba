# noqa: D104
"""Top-level package for strutil: pure text normalisation and re-casing helpers."""
from __future__ import annotations

from .base62 import base62_to_int, int_to_base62
from .text import (
    camel_case,
    clean,
    is_letter,
    kebab_case,
    lower_camel_case,
    lower_first,
    pascal_case,
    remove_accents,
    remove_emojis,
    remove_slashes,
    replace_slashes,
    snake_case,
    upper_camel_case,
    upper_first,
    upper_snake_case,
    word_count,
)

__version__ = "0.1.0"
__all__ = [
    "int_to_base62",
    "base62_to_int",
    "remove_accents",
    "remove_emojis",
    "clean",
    "replace_slashes",
    "remove_slashes",
    "kebab_case",
    "snake_case",
    "upper_snake_case",
    "camel_case",
    "pascal_case",
    "upper_camel_case",
    "lower_camel_case",
    "upper_first",
    "lower_first",
    "word_count",
    "is_letter",
]
