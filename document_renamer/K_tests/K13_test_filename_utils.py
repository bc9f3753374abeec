# document_renamer/K_tests/K13_test_filename_utils.py
"""
Tests for Z_utils.Z01_filename_utils and Z_utils.Z02_text_helpers modules.
"""

from __future__ import annotations

import pytest

from Z_utils.Z01_filename_utils import split_extension
from Z_utils.Z02_text_helpers import (
    capitalize_segments,
    collapse_spaces,
    join_around_span,
)


class TestSplitExtension:
    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("4-2-24 QME report.pdf", ("4-2-24 QME report", ".pdf")),
            ("scan.JPEG", ("scan", ".JPEG")),
            ("01.15.2025 appt notice", ("01.15.2025 appt notice", "")),
            ("letter to Dr. Smith", ("letter to Dr. Smith", "")),
            ("appt notice 01.15.2025", ("appt notice 01.15.2025", "")),
            (".pdf", (".pdf", "")),
        ],
    )
    def test_split(self, filename, expected):
        assert split_extension(filename) == expected

    def test_custom_extensions(self):
        assert split_extension("notes.md", extensions=[".md"]) == ("notes", ".md")
        assert split_extension("notes.pdf", extensions=["md"]) == ("notes.pdf", "")


class TestTextHelpers:
    def test_capitalize_segments(self):
        assert capitalize_segments("o'brien") == "O'Brien"
        assert capitalize_segments("SMITH") == "Smith"
        assert capitalize_segments("") == ""

    def test_collapse_spaces(self):
        assert collapse_spaces("  a   b \t c ") == "a b c"

    def test_join_around_span(self):
        assert join_around_span("QME - 2024.04.02 - report", 6, 16) == "QME report"
        assert join_around_span("2024.04.02_report", 0, 10) == "report"
        assert join_around_span("report 2024.04.02", 7, 17) == "report"
