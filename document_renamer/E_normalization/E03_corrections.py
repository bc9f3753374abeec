# document_renamer/E_normalization/E03_corrections.py
"""
Final correction and cleanup of a name segment.

Corrections are literal (regex-escaped), case-insensitive and applied in
table order. A correction whose replacement contains its search text
("supp" -> "supplemental") also matches the replacement itself and maps it
to itself, so text it already expanded is left alone. The formatting pass
then normalizes separators:

    - every dash run with its surrounding whitespace -> " - "
    - whitespace runs                                -> one space
    - period runs                                    -> one period
    - leading and trailing "-", "_" and whitespace   -> removed

Corrections and formatting are repeated until the text stops changing
(bounded by MAX_CLEANUP_PASSES); adjacent matches such as " with with "
and dashes around a search term need the extra passes, and
clean_name(clean_name(x)) == clean_name(x) holds with growing corrections.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Pattern, Tuple

from G_config.G01_renamer_config import DEFAULT_CORRECTIONS

_DASH_RUN_RE = re.compile(r"\s*[-–—]+(?:\s*[-–—]+)*\s*")
_SPACE_RUN_RE = re.compile(r"\s{2,}")
_PERIOD_RUN_RE = re.compile(r"\.{2,}")
_EDGE_RE = re.compile(r"^[-_\s]+|[-_\s]+$")

MAX_CLEANUP_PASSES = 8


def _compile_correction(find: str, replace: str) -> Pattern[str]:
    pattern = re.escape(find)
    if find.lower() in replace.lower():
        pattern = f"{re.escape(replace)}|{pattern}"
    return re.compile(pattern, re.IGNORECASE)


def _compile_all(corrections: Iterable[Tuple[str, str]]) -> List[Tuple[Pattern[str], str]]:
    return [(_compile_correction(find, replace), replace) for find, replace in corrections]


def _substitute(text: str, compiled: List[Tuple[Pattern[str], str]]) -> str:
    for pattern, replace in compiled:
        text = pattern.sub(lambda _m, r=replace: r, text)
    return text


def apply_corrections(text: str, corrections: Iterable[Tuple[str, str]] = DEFAULT_CORRECTIONS) -> str:
    """
    Examples:
        >>> apply_corrections("X-Ray with contrast")
        'XR w. contrast'
        >>> apply_corrections("supp and supplemental", [("supp", "supplemental")])
        'supplemental and supplemental'
    """
    return _substitute(text, _compile_all(corrections))


def format_separators(text: str) -> str:
    """One formatting pass over dashes, whitespace, periods and the edges."""
    text = _DASH_RUN_RE.sub(" - ", text)
    text = _SPACE_RUN_RE.sub(" ", text)
    text = _PERIOD_RUN_RE.sub(".", text)
    return _EDGE_RE.sub("", text.strip())


def clean_name(text: str, corrections: Iterable[Tuple[str, str]] = DEFAULT_CORRECTIONS) -> str:
    """
    Apply corrections and formatting until stable.

    Examples:
        >>> clean_name("EMGNCS with Dr. Lee_")
        'EMG - NCS w. Dr. Lee'
    """
    compiled = _compile_all(corrections)
    text = format_separators(_substitute(text, compiled))
    for _ in range(MAX_CLEANUP_PASSES):
        cleaned = format_separators(_substitute(text, compiled))
        if cleaned == text:
            break
        text = cleaned
    return text


__all__ = ["apply_corrections", "format_separators", "clean_name", "MAX_CLEANUP_PASSES"]
