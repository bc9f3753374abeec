# document_renamer/Z_utils/Z02_text_helpers.py
"""
Text helper functions shared by the normalization stages.
"""

from __future__ import annotations

import re

# Characters treated as separators around extracted spans
SEPARATOR_CHARS = " \t_-–—"

_MULTI_SPACE = re.compile(r"\s{2,}")


def capitalize_word(word: str) -> str:
    """First letter upper-cased, the rest lower-cased."""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def capitalize_segments(word: str) -> str:
    """
    Capitalize each apostrophe-separated segment of a word.

    Examples:
        >>> capitalize_segments("o'brien")
        "O'Brien"
        >>> capitalize_segments("SMITH")
        'Smith'
    """
    if "'" not in word:
        return capitalize_word(word)
    return "'".join(capitalize_word(part) for part in word.split("'"))


def collapse_spaces(text: str) -> str:
    """Collapse whitespace runs to a single space and strip."""
    return _MULTI_SPACE.sub(" ", text).strip()


def join_around_span(text: str, start: int, end: int, strip_chars: str = SEPARATOR_CHARS) -> str:
    """
    Delete text[start:end] and trim separator characters on both sides
    of the new boundary.

    Examples:
        >>> join_around_span("QME - 2024.04.02 - report", 6, 16)
        'QME report'
    """
    before = text[:start].rstrip(strip_chars)
    after = text[end:].lstrip(strip_chars)
    return " ".join(part for part in (before, after) if part).strip()


__all__ = [
    "SEPARATOR_CHARS",
    "capitalize_word",
    "capitalize_segments",
    "collapse_spaces",
    "join_around_span",
]
