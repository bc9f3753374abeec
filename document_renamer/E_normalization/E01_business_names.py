# document_renamer/E_normalization/E01_business_names.py
"""
Business-name normalization.

A description that ends in a company suffix ("Acme Widgets, Inc.",
"smith and jones llp") is treated as an organization: the suffix is
dropped and the name is title-cased. A suffix anywhere but the end of the
text never fires.
"""
from __future__ import annotations

import re
from typing import AbstractSet, Optional, Pattern

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import BusinessEntity, BusinessNormalization
from G_config.G01_renamer_config import DEFAULT_ACRONYMS, DEFAULT_MINOR_WORDS
from Z_utils.Z02_text_helpers import capitalize_segments, capitalize_word

logger = get_logger(__name__)

BUSINESS_SUFFIX_RE: Pattern[str] = re.compile(
    r"(?:,\s*|\s+)"
    r"(?:llp|inc\.?|pc|corp\.?|co\.?|ltd\.?|llc|pllc|p\.c\.?|l\.l\.p\.?|l\.l\.c\.?"
    r"|corporation|incorporated|company|limited)$",
    re.IGNORECASE,
)


def title_case(
    text: str,
    minor_words: AbstractSet[str] = frozenset(DEFAULT_MINOR_WORDS),
    acronyms: AbstractSet[str] = frozenset(DEFAULT_ACRONYMS),
) -> str:
    """
    Title-case a name split on single spaces.

    Minor words stay lowercase unless first or last, apostrophe words are
    capitalized per segment and acronyms keep their upper-case form.

    Examples:
        >>> title_case("law offices of o'brien and smith")
        "Law Offices of O'Brien and Smith"
        >>> title_case("acme qme services")
        'Acme QME Services'
    """
    words = text.split(" ")
    last = len(words) - 1
    cased = []
    for index, word in enumerate(words):
        if not word:
            cased.append(word)
        elif word.upper() in acronyms:
            cased.append(word.upper())
        elif "'" in word:
            cased.append(capitalize_segments(word))
        elif 0 < index < last and word.lower() in minor_words:
            cased.append(word.lower())
        else:
            cased.append(capitalize_word(word))
    return " ".join(cased)


def normalize_business(
    text: str,
    minor_words: AbstractSet[str] = frozenset(DEFAULT_MINOR_WORDS),
    acronyms: AbstractSet[str] = frozenset(DEFAULT_ACRONYMS),
) -> BusinessNormalization:
    """
    Strip a trailing business suffix and title-case the name.

    Returns:
        BusinessNormalization whose entity is None when no suffix matched
        (text is then returned unchanged).
    """
    match = BUSINESS_SUFFIX_RE.search(text)
    name: Optional[str] = None
    if match:
        name = text[: match.start()].strip().rstrip(",").strip()
    if not name:
        return BusinessNormalization(text=text)

    cased = title_case(name, minor_words, acronyms)
    logger.debug(f"Business name {cased!r} (suffix {match.group(0).strip()!r} dropped)")
    return BusinessNormalization(text=cased, entity=BusinessEntity(name=cased))


__all__ = ["BUSINESS_SUFFIX_RE", "title_case", "normalize_business"]
