# document_renamer/B_parsing/B02_physician_normalizer.py
"""
Physician reference detection on the date-free remainder.

Two patterns are tried in order:
    1. Title + name      "Dr John Smith", "doctor O'Brien", "Dr. J. Smith, MD"
    2. Name + credential "John Smith MD", "Smith, Ph.D."

Only the last name survives; it is rendered "Dr. Lastname" with
apostrophe segments capitalized. The matched span is removed from the
remainder. This stage never fails: no match leaves the text unchanged.

A standalone "re" is first marked as "re." (a regarding connector), and a
connector directly in front of a titled physician is removed with it.

Stop words (document keywords such as "report") are never taken as a
given or last name, so "Dr Smith Report" keeps "Report" in the remainder.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Pattern, Tuple

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import PhysicianExtraction, PhysicianMention, SourceSpan
from G_config.G01_renamer_config import DEFAULT_NAME_STOP_WORDS
from Z_utils.Z02_text_helpers import collapse_spaces

logger = get_logger(__name__)

_CREDENTIAL = r"(?i:m\.?d\.?|d\.?o\.?|ph\.?d\.?)(?![A-Za-z])"
_TITLE = r"\b(?i:dr\.?|doctor)\s+"
_CONNECTOR = r"(?:\b(?i:re\.|regarding)\s+)?"


def _name_tokens(stop_words: Iterable[str]) -> Tuple[str, str]:
    """Given-name and last-name patterns that refuse any stop word."""
    words = sorted((re.escape(w) for w in stop_words if w), key=len, reverse=True)
    guard = r"(?!(?i:" + "|".join(words) + r")(?![A-Za-z'-]))" if words else ""
    given = guard + r"(?:[A-Z]\.?|[A-Z][a-z][A-Za-z'-]*)"
    last = guard + r"(?P<last>[A-Z](?:[a-z]|'[A-Z])[A-Za-z'-]*)"
    return given, last


def build_patterns(
    stop_words: Iterable[str] = DEFAULT_NAME_STOP_WORDS,
) -> Tuple[Pattern[str], Pattern[str], Pattern[str]]:
    """Compile the title, connector+title and credential patterns."""
    given, last = _name_tokens(stop_words)
    title = _TITLE + r"(?:" + given + r"\s+){0,2}" + last + r"(?:(?:,\s*|\s+)" + _CREDENTIAL + r")?"
    credential = r"\b(?:" + given + r"\s+){0,2}" + last + r",?\s+" + _CREDENTIAL
    return re.compile(title), re.compile(_CONNECTOR + title), re.compile(credential)


TITLE_PATTERN, TITLE_WITH_CONNECTOR_PATTERN, CREDENTIAL_PATTERN = build_patterns()

# "re" as a whole word, not "re-", "re." or the tail of "you're"
_REGARDING_RE = re.compile(r"(?<![\w'])re(?![\w.'-])", re.IGNORECASE)
_LEADING_JUNK_RE = re.compile(r"^[\s\-–—,]+")


def mark_regarding(text: str) -> str:
    """
    Mark standalone "re" tokens as "re.".

    Examples:
        >>> mark_regarding("QME report re Dr Smith")
        'QME report re. Dr Smith'
        >>> mark_regarding("re-evaluation")
        're-evaluation'
    """
    return _REGARDING_RE.sub(lambda m: m.group(0) + ".", text)


def _remove_span(text: str, start: int, end: int) -> str:
    before = text[:start].rstrip()
    after = _LEADING_JUNK_RE.sub("", text[end:])
    return collapse_spaces(f"{before} {after}")


class PhysicianNormalizer:
    """
    Find and remove the first physician reference.

    Args:
        mark_regarding: Mark "re" connectors and remove one that directly
            precedes a titled physician.
        stop_words: Words refused as name tokens (case-insensitive).
    """

    def __init__(self, mark_regarding: bool = True, stop_words: Optional[Iterable[str]] = None):
        self.mark_regarding = mark_regarding
        if stop_words is None:
            patterns = (TITLE_PATTERN, TITLE_WITH_CONNECTOR_PATTERN, CREDENTIAL_PATTERN)
        else:
            patterns = build_patterns(stop_words)
        title_plain, title_connector, credential = patterns
        self._patterns: Tuple[Tuple[str, Pattern[str]], ...] = (
            ("title", title_connector if mark_regarding else title_plain),
            ("credential", credential),
        )

    def _search(self, text: str) -> Optional[Tuple[str, re.Match]]:
        for name, pattern in self._patterns:
            match = pattern.search(text)
            if match:
                return name, match
        return None

    def extract(self, text: str) -> PhysicianExtraction:
        if self.mark_regarding:
            text = mark_regarding(text)

        found = self._search(text)
        if found is None:
            return PhysicianExtraction(mention=None, remainder=text.strip())

        pattern_name, match = found
        last_name = match.group("last").replace(",", "").strip()
        mention = PhysicianMention(
            last_name=last_name,
            span=SourceSpan(start=match.start(), end=match.end()),
        )
        remainder = _remove_span(text, match.start(), match.end())
        logger.debug(f"Physician {mention.display} via {pattern_name} pattern, remainder {remainder!r}")
        return PhysicianExtraction(mention=mention, remainder=remainder)


__all__ = [
    "PhysicianNormalizer",
    "mark_regarding",
    "build_patterns",
    "TITLE_PATTERN",
    "CREDENTIAL_PATTERN",
]
