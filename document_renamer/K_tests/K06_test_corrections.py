# document_renamer/K_tests/K06_test_corrections.py
"""
Tests for E_normalization.E03_corrections module.
"""

from __future__ import annotations

import pytest

from E_normalization.E03_corrections import apply_corrections, clean_name, format_separators


class TestApplyCorrections:
    def test_defaults(self):
        assert apply_corrections("X-Ray with contrast") == "XR w. contrast"
        assert apply_corrections("emgncs bilateral") == "EMG-NCS bilateral"

    def test_ordered(self):
        assert apply_corrections("a", [("a", "b"), ("b", "c")]) == "c"

    def test_literal_search_and_replace(self):
        assert apply_corrections("1+1 total", [("1+1", "two")]) == "two total"
        assert apply_corrections("foo", [("foo", r"a\1")]) == r"a\1"


class TestFormatSeparators:
    @pytest.mark.parametrize("text,expected", [
        ("2024.04.02 -- medical", "2024.04.02 - medical"),
        ("a – b", "a - b"),
        ("a—b", "a - b"),
        ("a - - - b", "a - b"),
        ("a   b", "a b"),
        ("file...name", "file.name"),
        ("name -_", "name"),
        ("- name", "name"),
        ("  padded  ", "padded"),
    ])
    def test_format(self, text, expected):
        assert format_separators(text) == expected


class TestCleanName:
    def test_full_cleanup(self):
        assert clean_name("2024.04.02 -- medical - EMGNCS with Dr. Lee_") == (
            "2024.04.02 - medical - EMG - NCS w. Dr. Lee"
        )

    @pytest.mark.parametrize("text", [
        "2024.04.02 - letter - x -",
        "a - - - b",
        "  x__ - ",
        "report with with with dr",
        "x-ray with contrast.. -",
        "2025.01.15 - notice - appointment with Dr. Smith",
    ])
    def test_idempotent(self, text):
        once = clean_name(text)
        assert clean_name(once) == once

    def test_adjacent_corrections(self):
        assert clean_name("report with with dr") == "report w. w. dr"

    def test_dashes_around_search_term(self):
        once = clean_name("report -with- dr")
        assert once == "report - w. - dr"
        assert clean_name(once) == once

    def test_growing_correction_applied_once(self):
        assert clean_name("QME supp report", [("supp", "supplemental")]) == "QME supplemental report"

    @pytest.mark.parametrize("text", [
        "QME supp report",
        "supp supp",
        "SUPPLEMENTAL supp",
        "suppository with supp",
    ])
    def test_growing_correction_idempotent(self, text):
        corrections = [("supp", "supplemental"), (" with ", " w. ")]
        once = clean_name(text, corrections)
        assert clean_name(once, corrections) == once
        assert "plemental" not in once.replace("supplemental", "")

    def test_growing_correction_leaves_expanded_text(self):
        assert apply_corrections("supplemental report", [("supp", "supplemental")]) == "supplemental report"

    def test_leading_separators_removed(self):
        assert clean_name("- _ report") == "report"
