"""strutil.text

Text cleaning, case conversion and word counting helpers.

All functions are pure: they take a ``str`` and return a new value without
touching any shared state, so they are safe to call from any thread.
"""
from __future__ import annotations

import logging
import unicodedata

__all__ = [
    "CJK_RANGES",
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

logger = logging.getLogger(__name__)

SLASH_CHARS = "/_-%()"
WORD_SEPARATORS = "._-"

# Characters that may sit inside a word without ending it when title-casing.
MID_WORD_CHARS = frozenset(
    "'.:"
    "\u00b7\u0387"  # middle dot, greek ano teleia
    "\u05f4"  # hebrew gershayim
    "\u2018\u2019"  # curly single quotes
    "\u2024\u2027"  # one dot leader, hyphenation point
    "\ufe13\ufe52\ufe55"
    "\uff07\uff0e\uff1a"  # fullwidth apostrophe, full stop, colon
)

# Half-open [start, end) ranges of letters that never count as words.
CJK_RANGES = (
    (0x3034, 0x30FF),  # hiragana and katakana
    (0x3400, 0x4DBF),  # CJK unified ideographs extension A
    (0x4E00, 0x9FFF),  # CJK unified ideographs
    (0xF900, 0xFAFF),  # CJK compatibility ideographs
    (0xFF66, 0xFF9F),  # half-width katakana
)

_WORD_SEPARATOR_TABLE = str.maketrans(dict.fromkeys(WORD_SEPARATORS, " "))


# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------

def remove_accents(s: str) -> str:
    """Strip diacritics: NFD, drop non-spacing marks (Mn), then NFC.

    If normalisation fails the input is returned untouched.
    """
    try:
        decomposed = unicodedata.normalize("NFD", s)
        stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
        return unicodedata.normalize("NFC", stripped)
    except (TypeError, ValueError):
        logger.debug("Accent removal failed for %r; returning input unchanged", s, exc_info=True)
        return s


def remove_emojis(s: str) -> str:
    """Keep only ASCII code points (<= 127), in their original order."""
    return s.encode("ascii", "ignore").decode("ascii")


def clean(s: str) -> str:
    """Remove accents, then drop everything outside ASCII."""
    return remove_emojis(remove_accents(s))


def replace_slashes(s: str, replacement: str) -> str:
    """Replace each of ``/ _ - % ( )`` with *replacement* in a single pass."""
    table = str.maketrans(dict.fromkeys(SLASH_CHARS, replacement))
    return s.translate(table)


def remove_slashes(s: str) -> str:
    return replace_slashes(s, "")


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------

# One-code-point lowercase forms where the full mapping adds combining marks.
_SIMPLE_LOWER = {
    "\u0130": "i",  # capital I with dot above
}


def _upper_char(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _lower_char(ch: str) -> str:
    if ch in _SIMPLE_LOWER:
        return _SIMPLE_LOWER[ch]
    lower = ch.lower()
    return lower if len(lower) == 1 else ch


def _upper(s: str) -> str:
    """Uppercase code point by code point; multi-character mappings are skipped."""
    return "".join(_upper_char(ch) for ch in s)


def _lower(s: str) -> str:
    """Lowercase code point by code point, ignoring context (no final sigma)."""
    return "".join(_lower_char(ch) for ch in s)


def _split_words(s: str) -> list[str]:
    """Turn ``. _ -`` into spaces and split on whitespace runs."""
    return s.translate(_WORD_SEPARATOR_TABLE).split()


def _is_cased(ch: str) -> bool:
    return ch.islower() or ch.isupper() or ch.istitle()


def _is_word_break(ch: str) -> bool:
    if ch in MID_WORD_CHARS:
        return False
    category = unicodedata.category(ch)
    # letters, marks, digits and connector punctuation ("_") keep the word going
    return category[0] not in "LMN" and category != "Pc"


def _title(word: str) -> str:
    """Title-case *word*: first cased letter of each segment up, the rest down.

    A segment ends at a break character or at two mid-word characters in a
    row, so ``"it's"`` -> ``"It's"`` while ``"foo/bar"`` -> ``"Foo/Bar"``.
    """
    out = []
    mid_word = False
    prev_mid = False
    for ch in word:
        is_mid = ch in MID_WORD_CHARS
        if prev_mid and is_mid:
            mid_word = False
        if _is_cased(ch):
            out.append(ch.lower() if mid_word else ch.title())
            mid_word = True
        else:
            out.append(ch)
            if _is_word_break(ch):
                mid_word = False
        prev_mid = is_mid
    return "".join(out)


def kebab_case(s: str) -> str:
    """``"Hello_World.Test"`` -> ``"hello-world-test"``."""
    return "-".join(_lower(word) for word in _split_words(s))


def snake_case(s: str) -> str:
    """``"Hello-World Test"`` -> ``"hello_world_test"``."""
    return "_".join(_lower(word) for word in _split_words(s))


def upper_snake_case(s: str) -> str:
    """``"Hello-World Test"`` -> ``"HELLO_WORLD_TEST"``."""
    return "_".join(_upper(word) for word in _split_words(s))


def camel_case(s: str) -> str:
    """Title-case every word and concatenate: ``"hello world"`` -> ``"HelloWorld"``."""
    return "".join(_title(word) for word in _split_words(s))


def pascal_case(s: str) -> str:
    return camel_case(s)


def upper_camel_case(s: str) -> str:
    return camel_case(s)


def lower_camel_case(s: str) -> str:
    """Title-case every word and concatenate.

    Kept compatible with existing callers: the first word is title-cased
    too, so the result is the same as :func:`camel_case`. Use
    ``lower_first(lower_camel_case(s))`` for ``"helloWorld"``.
    """
    return "".join(_title(word) for word in _split_words(s))


def upper_first(s: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return _upper(s[:1]) + s[1:]


def lower_first(s: str) -> str:
    """Lowercase the first character and leave the rest untouched."""
    return _lower(s[:1]) + s[1:]


# ---------------------------------------------------------------------------
# Word counting
# ---------------------------------------------------------------------------

def _in_cjk_ranges(cp: int) -> bool:
    for start, end in CJK_RANGES:
        if start <= cp < end:
            return True
    return False


def is_letter(ch: str) -> bool:
    """Return True for a Unicode letter outside the CJK ranges in ``CJK_RANGES``."""
    if not unicodedata.category(ch).startswith("L"):
        return False
    return not _in_cjk_ranges(ord(ch))


def word_count(s: str) -> int:
    """Count words in *s*.

    A word starts at a letter (see :func:`is_letter`); ``'`` and ``-`` are
    allowed inside a word, anything else ends it. CJK characters therefore
    never start or extend a word.
    """
    count = 0
    in_word = False
    for ch in s:
        if is_letter(ch):
            if not in_word:
                in_word = True
                count += 1
        elif in_word and ch in "'-":
            continue
        else:
            in_word = False
    return count
