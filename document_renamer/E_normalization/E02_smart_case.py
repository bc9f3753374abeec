# document_renamer/E_normalization/E02_smart_case.py
"""
Smart-case normalization of free-text descriptions.

The text is treated as alternating word and non-word spans. Non-word spans
are kept verbatim; each word span is cased independently:

    - upper form is a known acronym  -> upper case   ("qme" -> "QME")
    - lower form is a known title    -> "Dr." for dr/dr., else capitalized
    - anything else                  -> lower case

Acronyms and titles that contain punctuation ("M.D.", "C&R", "W/C") are
matched as a single word span so they are never split apart.
"""
from __future__ import annotations

import re
from typing import AbstractSet, Pattern

from G_config.G01_renamer_config import DEFAULT_ACRONYMS, DEFAULT_TITLES


def _build_token_pattern(protected: AbstractSet[str]) -> Pattern[str]:
    # Longest first so "OAC&R" wins over "C&R"
    multi = sorted((term for term in protected if re.search(r"\W", term)), key=len, reverse=True)
    if not multi:
        return re.compile(r"\w+")
    alternation = "|".join(re.escape(term) for term in multi)
    return re.compile(r"(?<!\w)(?:" + alternation + r")(?!\w)|\w+", re.IGNORECASE)


class SmartCaser:
    """
    Acronym- and title-aware casing.

    Attributes:
        acronyms: Upper-case acronym forms
        titles: Lower-case title forms
    """

    def __init__(
        self,
        acronyms: AbstractSet[str] = frozenset(DEFAULT_ACRONYMS),
        titles: AbstractSet[str] = frozenset(DEFAULT_TITLES),
    ):
        self.acronyms = frozenset(a.upper() for a in acronyms)
        self.titles = frozenset(t.lower() for t in titles)
        self._token_re = _build_token_pattern(self.acronyms | self.titles)

    def case_token(self, token: str) -> str:
        upper = token.upper()
        if upper in self.acronyms:
            return upper
        lower = token.lower()
        if lower in self.titles:
            if lower in ("dr", "dr."):
                return "Dr."
            return token[0].upper() + token[1:]
        return lower

    def apply(self, text: str) -> str:
        """
        Examples:
            >>> SmartCaser().apply("QME REPORT re. m.d. review")
            'QME report re. M.D. review'
        """
        return self._token_re.sub(lambda m: self.case_token(m.group(0)), text)


__all__ = ["SmartCaser"]
