# document_renamer/K_tests/K04_test_business_names.py
"""
Tests for E_normalization.E01_business_names module.
"""

from __future__ import annotations

import pytest

from E_normalization.E01_business_names import normalize_business, title_case


class TestTitleCase:
    def test_basic(self):
        assert title_case("acme widgets") == "Acme Widgets"

    def test_minor_words_lowercase_in_middle(self):
        assert title_case("LAW OFFICES OF SMITH AND JONES") == "Law Offices of Smith and Jones"

    def test_minor_words_capitalized_at_edges(self):
        assert title_case("the things to live for") == "The Things to Live For"

    def test_apostrophe_segments(self):
        assert title_case("o'brien and o'neil") == "O'Brien and O'Neil"

    def test_acronyms_kept(self):
        assert title_case("bay area qme services") == "Bay Area QME Services"

    def test_custom_minor_words(self):
        assert title_case("pay via wire", minor_words={"via"}) == "Pay via Wire"


class TestNormalizeBusiness:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("acme widgets inc", "Acme Widgets"),
            ("acme widgets, Inc.", "Acme Widgets"),
            ("smith and jones LLP", "Smith and Jones"),
            ("the hartford co.", "The Hartford"),
            ("zenith insurance company", "Zenith Insurance"),
            ("state comp corporation", "State Comp"),
            ("medex p.c.", "Medex"),
            ("ortho group l.l.c.", "Ortho Group"),
            ("west coast pllc", "West Coast"),
            ("global ltd", "Global"),
        ],
    )
    def test_suffix_stripped_and_title_cased(self, text, expected):
        result = normalize_business(text)
        assert result.is_business
        assert result.text == expected
        assert result.entity.name == expected

    def test_mid_string_suffix_never_fires(self):
        result = normalize_business("acme inc regarding billing")
        assert not result.is_business
        assert result.text == "acme inc regarding billing"

    def test_suffix_must_be_separate_word(self):
        assert not normalize_business("disco").is_business
        assert not normalize_business("zinc").is_business

    def test_suffix_alone_is_not_a_business(self):
        result = normalize_business("Inc")
        assert not result.is_business
        assert result.text == "Inc"
