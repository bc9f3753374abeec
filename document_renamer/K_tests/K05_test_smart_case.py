# document_renamer/K_tests/K05_test_smart_case.py
"""
Tests for E_normalization.E02_smart_case module.
"""

from __future__ import annotations

import pytest

from E_normalization.E02_smart_case import SmartCaser


@pytest.fixture
def caser():
    return SmartCaser()


class TestSmartCase:
    def test_acronym_upper_rest_lower(self, caser):
        assert caser.apply("qme REPORT") == "QME report"

    @pytest.mark.parametrize("text,expected", [
        ("m.d. review", "M.D. review"),
        ("c&r signed", "C&R signed"),
        ("oac&r draft", "OAC&R draft"),
        ("w/c claim form", "W/C claim form"),
        ("p&s report", "P&S report"),
    ])
    def test_punctuated_acronyms_single_span(self, caser, text, expected):
        assert caser.apply(text) == expected

    def test_slash_separated_acronyms(self, caser):
        assert caser.apply("emg/ncv results") == "EMG/NCV results"

    def test_dr_title(self, caser):
        assert caser.apply("dr smith") == "Dr. smith"
        assert caser.apply("DR. smith") == "Dr. smith"

    def test_other_title_capitalized(self, caser):
        assert caser.apply("judge brown order") == "Judge brown order"

    def test_non_word_spans_preserved(self, caser):
        assert caser.apply("PT - notes, 2nd   visit") == "PT - notes, 2nd   visit"

    def test_acronym_inside_word_not_matched(self, caser):
        assert caser.apply("ptp options") == "PTP options"
        assert caser.apply("options") == "options"

    def test_custom_vocabularies(self):
        caser = SmartCaser(acronyms={"abc"}, titles=set())
        assert caser.apply("abc DEF dr") == "ABC def dr"

    def test_empty(self, caser):
        assert caser.apply("") == ""
