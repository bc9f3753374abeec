# document_renamer/K_tests/K08_test_assembler.py
"""
Tests for C_generators.C02_assembler module.
"""

from __future__ import annotations

import pytest

from A_core.A01_domain_models import DocumentType
from C_generators.C02_assembler import Assembler
from G_config.G01_renamer_config import RenamerConfig


@pytest.fixture
def assembler(default_config):
    return Assembler(default_config)


class TestParts:
    def test_medical_appends_doctor(self, assembler):
        parts = assembler.parts("2024.04.02", DocumentType.MEDICAL, "PT report", "Dr. Lee")
        assert parts == ["2024.04.02", "medical", "PT report", "Dr. Lee"]

    def test_notice_folds_doctor(self, assembler):
        parts = assembler.parts("2025.01.15", DocumentType.NOTICE, "appointment", "Dr. Smith")
        assert parts == ["2025.01.15", "notice", "appointment with Dr. Smith"]

    @pytest.mark.parametrize("document_type", [
        DocumentType.UR,
        DocumentType.LETTER,
        DocumentType.MED_LEGAL,
        DocumentType.DOCUMENT,
    ])
    def test_other_types_discard_doctor(self, assembler, document_type):
        parts = assembler.parts("2024.04.02", document_type, "text", "Dr. Lee")
        assert parts == ["2024.04.02", document_type.label, "text"]

    def test_empty_description_dropped(self, assembler):
        assert assembler.parts("2024.03.01", DocumentType.LETTER, "") == ["2024.03.01", "letter"]

    def test_configured_placement(self):
        assembler = Assembler(RenamerConfig(physician_placement={"med-legal": "append", "medical": "discard"}))
        assert assembler.parts("d", DocumentType.MED_LEGAL, "QME report", "Dr. Smith")[-1] == "Dr. Smith"
        assert assembler.parts("d", DocumentType.MEDICAL, "PT report", "Dr. Lee")[-1] == "PT report"


class TestAssemble:
    def test_joined_and_cleaned(self, assembler):
        name = assembler.assemble("2025.01.15", DocumentType.NOTICE, "appointment", "Dr. Smith")
        assert name == "2025.01.15 - notice - appointment w. Dr. Smith"

    def test_corrections_applied(self, assembler):
        name = assembler.assemble("2024.05.06", DocumentType.MEDICAL, "emgncs bilateral")
        assert name == "2024.05.06 - medical - EMG - NCS bilateral"

    def test_custom_corrections(self):
        assembler = Assembler(RenamerConfig(corrections=[("supp", "supplemental")]))
        name = assembler.assemble("2024.05.06", DocumentType.MED_LEGAL, "QME supp report")
        assert name == "2024.05.06 - med-legal - QME supplemental report"

    @pytest.mark.parametrize("description", ["QME report", "re-evaluation", "", "- supp -"])
    def test_type_label_never_split(self, assembler, description):
        name = assembler.assemble("2024.04.02", DocumentType.MED_LEGAL, description)
        assert name.split(" - ")[:2] == ["2024.04.02", "med-legal"]

    def test_med_legal_with_appended_doctor(self):
        assembler = Assembler(RenamerConfig(physician_placement={"med-legal": "append"}))
        name = assembler.assemble("2024.04.02", DocumentType.MED_LEGAL, "QME report", "Dr. Smith")
        assert name == "2024.04.02 - med-legal - QME report - Dr. Smith"

    def test_description_cleaned_to_nothing_dropped(self, assembler):
        assert assembler.assemble("2024.03.01", DocumentType.LETTER, " - ") == "2024.03.01 - letter"

    def test_fold_without_description(self):
        assembler = Assembler(RenamerConfig(physician_placement={"letter": "fold"}))
        assert assembler.parts("2024.03.01", DocumentType.LETTER, "", "Dr. Lee") == [
            "2024.03.01", "letter", "with Dr. Lee",
        ]
        assert assembler.assemble("2024.03.01", DocumentType.LETTER, "", "Dr. Lee") == "2024.03.01 - letter - with Dr. Lee"
