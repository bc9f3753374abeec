# document_renamer/K_tests/K01_test_date_extractor.py
"""
Tests for B_parsing.B01_date_extractor module.

Tests grammar priority, calendar validation, century policies and the
missing-date policies.
"""

from __future__ import annotations

from datetime import date

import pytest

from A_core.A02_exceptions import NoDateFoundError
from B_parsing.B01_date_extractor import (
    DATE_GRAMMARS,
    DateExtractor,
    expand_two_digit_year,
    is_calendar_date,
)
from G_config.G01_renamer_config import CenturyPolicy, MissingDatePolicy


@pytest.fixture
def extractor():
    return DateExtractor()


class TestGrammarTable:
    """Tests for the prioritized grammar table."""

    def test_order(self):
        assert [g.name for g in DATE_GRAMMARS] == [
            "ymd_separated",
            "mdy_separated",
            "mdy_short_year",
            "ymd_compact",
            "mdy_compact",
            "mdy_compact_short_year",
        ]

    def test_priorities_ascending(self):
        priorities = [g.priority for g in DATE_GRAMMARS]
        assert priorities == sorted(priorities)


class TestEachGrammar:
    """A single valid date in any grammar is extracted."""

    @pytest.mark.parametrize(
        "text,expected,grammar",
        [
            ("2024.04.02 QME report", "2024.04.02", "ymd_separated"),
            ("2024-4-2 report", "2024.04.02", "ymd_separated"),
            ("report_2024_04_02", "2024.04.02", "ymd_separated"),
            ("04/02/2024 letter", "2024.04.02", "mdy_separated"),
            ("01.15.2025 appt notice", "2025.01.15", "mdy_separated"),
            ("4-2-24 QME report", "2024.04.02", "mdy_short_year"),
            ("4 2 24 report", "2024.04.02", "mdy_short_year"),
            ("20240402 UR denial", "2024.04.02", "ymd_compact"),
            ("04022024 UR denial", "2024.04.02", "mdy_compact"),
            ("040224 UR denial", "2024.04.02", "mdy_compact_short_year"),
        ],
    )
    def test_grammar(self, extractor, text, expected, grammar):
        result = extractor.extract(text)
        assert result.date_string == expected
        assert result.grammar == grammar

    def test_mixed_separators_rejected(self, extractor):
        with pytest.raises(NoDateFoundError):
            extractor.extract("2024.04-02 report")


class TestCalendarValidation:
    def test_feb_30_rejected(self, extractor):
        with pytest.raises(NoDateFoundError):
            extractor.extract("2/30/2024 report")

    def test_leap_day_accepted(self, extractor):
        assert extractor.extract("2/29/2024 report").date_string == "2024.02.29"

    def test_leap_day_non_leap_year_rejected(self, extractor):
        with pytest.raises(NoDateFoundError):
            extractor.extract("2/29/2023 report")

    def test_invalid_candidate_skipped_for_next(self, extractor):
        # 13/45/2024 is structurally mdy but not a date; the second one is
        result = extractor.extract("13/45/2024 corrected 3/1/2024")
        assert result.date_string == "2024.03.01"

    def test_falls_through_to_next_grammar(self, extractor):
        # Month 13 fails mdy_separated; the compact date is valid
        result = extractor.extract("13.13.2024 ref 20240105")
        assert result.date_string == "2024.01.05"
        assert result.grammar == "ymd_compact"

    def test_is_calendar_date(self):
        assert is_calendar_date(2024, 4, 30)
        assert not is_calendar_date(2024, 4, 31)
        assert not is_calendar_date(2024, 0, 1)
        assert not is_calendar_date(2024, 12, 32)


class TestPriority:
    def test_ymd_beats_mdy(self, extractor):
        result = extractor.extract("3/1/2024 letter re 2023.12.05 visit")
        assert result.date_string == "2023.12.05"

    def test_digits_inside_words_ignored(self, extractor):
        with pytest.raises(NoDateFoundError):
            extractor.extract("claim A20240402 report")


class TestRemainder:
    def test_leading_date_removed(self, extractor):
        assert extractor.extract("4-2-24 QME report").remainder == "QME report"

    def test_separators_trimmed_both_sides(self, extractor):
        assert extractor.extract("QME - 2024.04.02 - report").remainder == "QME report"

    def test_trailing_date(self, extractor):
        assert extractor.extract("PT notes_04.02.2024").remainder == "PT notes"

    def test_span_recorded(self, extractor):
        token = extractor.extract("QME 4-2-24").token
        assert (token.span.start, token.span.end) == (4, 10)


class TestCenturyPolicy:
    def test_pivot_default(self):
        assert expand_two_digit_year(24) == 2024
        assert expand_two_digit_year(49) == 2049
        assert expand_two_digit_year(50) == 1950
        assert expand_two_digit_year(99) == 1999

    def test_custom_pivot(self):
        assert expand_two_digit_year(60, pivot=70) == 2060

    def test_always_2000(self):
        assert expand_two_digit_year(85, CenturyPolicy.ALWAYS_2000) == 2085

    def test_extractor_uses_policy(self):
        pivot = DateExtractor().extract("1/2/85 report")
        always = DateExtractor(century_policy=CenturyPolicy.ALWAYS_2000).extract("1/2/85 report")
        assert pivot.date_string == "1985.01.02"
        assert always.date_string == "2085.01.02"


class TestMissingDate:
    def test_raise_policy(self, extractor):
        with pytest.raises(NoDateFoundError) as exc_info:
            extractor.extract("no date here")
        assert exc_info.value.input_text == "no date here"

    def test_today_policy(self, fixed_today):
        extractor = DateExtractor(missing_date_policy=MissingDatePolicy.TODAY, today=fixed_today)
        result = extractor.extract("  no date here ")
        assert result.date_string == "2025.01.15"
        assert result.remainder == "no date here"
        assert result.grammar is None
        assert result.token.span is None

    def test_today_policy_logs_warning(self, fixed_today, caplog):
        extractor = DateExtractor(missing_date_policy=MissingDatePolicy.TODAY, today=fixed_today)
        with caplog.at_level("WARNING", logger="document_renamer"):
            extractor.extract("no date here")
        assert any("No date found" in r.getMessage() for r in caplog.records)

    def test_today_default_clock(self):
        extractor = DateExtractor(missing_date_policy=MissingDatePolicy.TODAY)
        assert extractor.extract("undated").token.as_date() == date.today()
