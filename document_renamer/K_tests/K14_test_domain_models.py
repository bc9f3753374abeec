# document_renamer/K_tests/K14_test_domain_models.py
"""
Tests for A_core.A01_domain_models module.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from A_core.A01_domain_models import (
    DateToken,
    DocumentType,
    PhysicianExtraction,
    PhysicianMention,
    SourceSpan,
)


class TestDateToken:
    def test_canonical(self):
        assert DateToken(year=2024, month=4, day=2).canonical == "2024.04.02"

    @pytest.mark.parametrize("month,day", [(2, 30), (4, 31), (13, 1), (0, 5)])
    def test_invalid_dates_rejected(self, month, day):
        with pytest.raises(ValidationError):
            DateToken(year=2023, month=month, day=day)

    def test_frozen(self):
        token = DateToken(year=2024, month=4, day=2)
        with pytest.raises(ValidationError):
            token.day = 3


class TestSourceSpan:
    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            SourceSpan(start=5, end=2)


class TestPhysician:
    def test_display(self):
        mention = PhysicianMention(last_name="o'brien", span=SourceSpan(start=0, end=10))
        assert mention.display == "Dr. O'Brien"

    def test_extraction_without_mention(self):
        assert PhysicianExtraction(remainder="QME report").doctor is None


class TestDocumentType:
    def test_labels(self):
        assert [t.label for t in DocumentType] == ["UR", "letter", "notice", "med-legal", "medical", "document"]

    def test_from_label(self):
        assert DocumentType("med-legal") is DocumentType.MED_LEGAL
