# document_renamer/B_parsing/B01_date_extractor.py
"""
Date extraction for raw document descriptions.

Finds the first calendar-valid date in a human-typed description, formats
it as YYYY.MM.DD and removes it from the text. Grammars are tried in
priority order; within one grammar every candidate is checked left to
right, and a candidate that is not a real calendar date (month 13, Feb 30)
is skipped rather than clamped.

Grammar priority:
    1. ymd_separated           2024.04.02, 2024-4-2, 2024_04_02
    2. mdy_separated           04/02/2024, 4-2-2024
    3. mdy_short_year          4-2-24, 04.02.24
    4. ymd_compact             20240402
    5. mdy_compact             04022024
    6. mdy_compact_short_year  040224

Separated grammars require the same separator (. / - _ or whitespace)
between both pairs of fields.

Example:
    >>> from B_parsing.B01_date_extractor import DateExtractor
    >>> result = DateExtractor().extract("4-2-24 QME report")
    >>> result.date_string, result.remainder
    ('2024.04.02', 'QME report')

Dependencies:
    - A_core.A01_domain_models: DateToken, DateExtraction, SourceSpan
    - G_config.G01_renamer_config: CenturyPolicy, MissingDatePolicy
"""
from __future__ import annotations

import re
from datetime import date
from typing import Callable, Iterator, NamedTuple, Optional, Pattern, Tuple

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import DateExtraction, DateToken, SourceSpan
from A_core.A02_exceptions import NoDateFoundError
from G_config.G01_renamer_config import CenturyPolicy, MissingDatePolicy
from Z_utils.Z02_text_helpers import join_around_span

logger = get_logger(__name__)

# Digit runs must not touch letters or other digits; "_" counts as a delimiter
_START = r"(?<![A-Za-z0-9])"
_END = r"(?![A-Za-z0-9])"
_SEP = r"(?P<sep>[./\s_-])"


class DateGrammar(NamedTuple):
    """One entry of the prioritized grammar table."""

    name: str
    pattern: Pattern[str]
    priority: int


DATE_GRAMMARS: Tuple[DateGrammar, ...] = tuple(
    sorted(
        (
            DateGrammar(
                "ymd_separated",
                re.compile(_START + r"(?P<year>\d{4})" + _SEP + r"(?P<month>\d{1,2})(?P=sep)(?P<day>\d{1,2})" + _END),
                1,
            ),
            DateGrammar(
                "mdy_separated",
                re.compile(_START + r"(?P<month>\d{1,2})" + _SEP + r"(?P<day>\d{1,2})(?P=sep)(?P<year>\d{4})" + _END),
                2,
            ),
            DateGrammar(
                "mdy_short_year",
                re.compile(_START + r"(?P<month>\d{1,2})" + _SEP + r"(?P<day>\d{1,2})(?P=sep)(?P<year>\d{2})" + _END),
                3,
            ),
            DateGrammar(
                "ymd_compact",
                re.compile(_START + r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})" + _END),
                4,
            ),
            DateGrammar(
                "mdy_compact",
                re.compile(_START + r"(?P<month>\d{2})(?P<day>\d{2})(?P<year>\d{4})" + _END),
                5,
            ),
            DateGrammar(
                "mdy_compact_short_year",
                re.compile(_START + r"(?P<month>\d{2})(?P<day>\d{2})(?P<year>\d{2})" + _END),
                6,
            ),
        ),
        key=lambda g: g.priority,
    )
)


def expand_two_digit_year(
    year: int,
    policy: CenturyPolicy = CenturyPolicy.PIVOT,
    pivot: int = 50,
) -> int:
    """
    Expand a two-digit year to four digits.

    Examples:
        >>> expand_two_digit_year(24)
        2024
        >>> expand_two_digit_year(85)
        1985
        >>> expand_two_digit_year(85, CenturyPolicy.ALWAYS_2000)
        2085
    """
    if policy == CenturyPolicy.ALWAYS_2000:
        return 2000 + year
    return 2000 + year if year < pivot else 1900 + year


def is_calendar_date(year: int, month: int, day: int) -> bool:
    """True when (year, month, day) names a real day."""
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return False
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


class DateExtractor:
    """
    Extract and remove the first calendar-valid date from a description.

    Attributes:
        century_policy: Two-digit year expansion policy.
        century_pivot: Threshold used by CenturyPolicy.PIVOT.
        missing_date_policy: Raise, or substitute today's date.
    """

    def __init__(
        self,
        century_policy: CenturyPolicy = CenturyPolicy.PIVOT,
        century_pivot: int = 50,
        missing_date_policy: MissingDatePolicy = MissingDatePolicy.RAISE,
        today: Optional[Callable[[], date]] = None,
    ):
        self.century_policy = century_policy
        self.century_pivot = century_pivot
        self.missing_date_policy = missing_date_policy
        self._today = today or date.today

    def _candidates(self, text: str) -> Iterator[Tuple[DateGrammar, re.Match]]:
        for grammar in DATE_GRAMMARS:
            for match in grammar.pattern.finditer(text):
                yield grammar, match

    def _to_token(self, match: re.Match) -> Optional[DateToken]:
        year_str = match.group("year")
        year = int(year_str)
        if len(year_str) == 2:
            year = expand_two_digit_year(year, self.century_policy, self.century_pivot)
        month = int(match.group("month"))
        day = int(match.group("day"))

        if not is_calendar_date(year, month, day):
            return None
        return DateToken(
            year=year,
            month=month,
            day=day,
            span=SourceSpan(start=match.start(), end=match.end()),
        )

    def find(self, text: str) -> Optional[Tuple[DateToken, str]]:
        """
        Return (token, grammar name) for the first valid date, or None.
        """
        for grammar, match in self._candidates(text):
            token = self._to_token(match)
            if token is None:
                logger.debug(f"Rejected {grammar.name} candidate {match.group(0)!r}: not a calendar date")
                continue
            return token, grammar.name
        return None

    def extract(self, text: str) -> DateExtraction:
        """
        Extract the date and return it with the date-free remainder.

        Raises:
            NoDateFoundError: If no grammar yields a calendar-valid date and
                the missing-date policy is RAISE.
        """
        found = self.find(text)
        if found is None:
            if self.missing_date_policy == MissingDatePolicy.TODAY:
                today = self._today()
                logger.warning(f"No date found in {text!r}, using today's date {today.isoformat()}")
                return DateExtraction(
                    token=DateToken(year=today.year, month=today.month, day=today.day),
                    remainder=text.strip(),
                )
            raise NoDateFoundError("no date found", input_text=text)

        token, grammar_name = found
        remainder = join_around_span(text, token.span.start, token.span.end)
        logger.debug(f"Extracted {token.canonical} via {grammar_name}, remainder {remainder!r}")
        return DateExtraction(token=token, remainder=remainder, grammar=grammar_name)


__all__ = [
    "DateGrammar",
    "DATE_GRAMMARS",
    "DateExtractor",
    "expand_two_digit_year",
    "is_calendar_date",
]
