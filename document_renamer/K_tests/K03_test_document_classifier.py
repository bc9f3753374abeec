# document_renamer/K_tests/K03_test_document_classifier.py
"""
Tests for B_parsing.B03_document_classifier module.
"""

from __future__ import annotations

import pytest

from A_core.A01_domain_models import DocumentType
from B_parsing.B03_document_classifier import DocumentClassifier
from G_config.G01_renamer_config import ClassificationRule


@pytest.fixture
def classifier():
    return DocumentClassifier()


class TestDefaultRules:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("UR denial", DocumentType.UR),
            ("ur approval PT", DocumentType.UR),
            ("copy of letter", DocumentType.LETTER),
            ("appt notice", DocumentType.NOTICE),
            ("QME report", DocumentType.MED_LEGAL),
            ("AME supplemental", DocumentType.MED_LEGAL),
            ("PT progress report", DocumentType.MEDICAL),
            ("invoice", DocumentType.DOCUMENT),
            ("", DocumentType.DOCUMENT),
        ],
    )
    def test_classify(self, classifier, text, expected):
        assert classifier.classify(text) == expected

    def test_table_order_is_priority(self, classifier):
        # UR precedes letter in the table
        assert classifier.classify("UR denial letter") == DocumentType.UR
        # med-legal precedes medical
        assert classifier.classify("QME report") == DocumentType.MED_LEGAL

    def test_leading_letter_beats_table(self, classifier):
        assert classifier.classify("Letter re UR denial") == DocumentType.LETTER

    def test_word_boundaries(self, classifier):
        assert classifier.classify("your reporter") == DocumentType.DOCUMENT
        assert classifier.classify("lettering sample") == DocumentType.DOCUMENT

    def test_notice_needs_full_phrase(self, classifier):
        assert classifier.classify("notice of hearing") == DocumentType.DOCUMENT


class TestCustomRules:
    def test_custom_table(self):
        classifier = DocumentClassifier([
            ClassificationRule(pattern=r"\bdepo(?:sition)?\b", document_type=DocumentType.MED_LEGAL),
        ])
        assert classifier.classify("deposition transcript") == DocumentType.MED_LEGAL
        assert classifier.classify("QME report") == DocumentType.DOCUMENT

    def test_empty_table_still_checks_leading_letter(self):
        classifier = DocumentClassifier([])
        assert classifier.classify("letter from carrier") == DocumentType.LETTER
        assert classifier.classify("UR denial") == DocumentType.DOCUMENT
