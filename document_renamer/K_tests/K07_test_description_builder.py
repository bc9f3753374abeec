# document_renamer/K_tests/K07_test_description_builder.py
"""
Tests for C_generators.C01_description_builder module.
"""

from __future__ import annotations

import pytest

from A_core.A01_domain_models import DocumentType
from C_generators.C01_description_builder import DescriptionBuilder
from G_config.G01_renamer_config import RenamerConfig


@pytest.fixture
def builder(default_config):
    return DescriptionBuilder(default_config)


class TestLetter:
    def test_letter_from_removed(self, builder):
        assert builder.build(DocumentType.LETTER, "letter from carrier re. billing").text == "carrier re. billing"

    def test_letter_prefix_removed(self, builder):
        assert builder.build(DocumentType.LETTER, "Letter to applicant").text == "to applicant"

    def test_bare_letter_gives_empty_description(self, builder):
        assert builder.build(DocumentType.LETTER, "letter").text == ""

    def test_letter_from_business(self, builder):
        description = builder.build(DocumentType.LETTER, "letter from acme widgets inc")
        assert description.text == "Acme Widgets"
        assert description.business.name == "Acme Widgets"


class TestUR:
    def test_subtype_moved_to_front(self, builder):
        assert builder.build(DocumentType.UR, "UR Denial PT 12 visits").text == "denial UR PT 12 visits"

    def test_first_subtype_only(self, builder):
        assert builder.build(DocumentType.UR, "UR mod after denial").text == "mod UR after denial"

    def test_no_subtype(self, builder):
        assert builder.build(DocumentType.UR, "UR modification request").text == "UR modification request"

    def test_custom_subtypes(self):
        builder = DescriptionBuilder(RenamerConfig(ur_subtypes=("partial",)))
        assert builder.build(DocumentType.UR, "UR partial approval").text == "partial UR approval"

    def test_no_subtypes_configured(self):
        builder = DescriptionBuilder(RenamerConfig(ur_subtypes=()))
        assert builder.build(DocumentType.UR, "UR denial").text == "UR denial"


class TestOtherTypes:
    def test_notice_is_appointment(self, builder):
        assert builder.build(DocumentType.NOTICE, "appt notice for PQME").text == "appointment"

    @pytest.mark.parametrize("document_type", [
        DocumentType.MED_LEGAL,
        DocumentType.MEDICAL,
        DocumentType.DOCUMENT,
    ])
    def test_remainder_kept(self, builder, document_type):
        assert builder.build(document_type, "QME REPORT").text == "QME report"

    def test_edge_dashes_trimmed(self, builder):
        assert builder.build(DocumentType.MEDICAL, " - PT report – ").text == "PT report"

    def test_smart_case_skipped_for_business(self, builder):
        description = builder.build(DocumentType.DOCUMENT, "invoice from bay area mri llc")
        assert description.text == "Invoice From Bay Area MRI"
        assert description.business is not None
