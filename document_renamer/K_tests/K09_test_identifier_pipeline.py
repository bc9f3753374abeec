# document_renamer/K_tests/K09_test_identifier_pipeline.py
"""
Tests for H_pipeline.H01_identifier_pipeline module.

End-to-end normalization of realistic descriptions.
"""

from __future__ import annotations

import pytest

from A_core.A01_domain_models import DocumentType
from A_core.A02_exceptions import NoDateFoundError
from G_config.G01_renamer_config import CenturyPolicy, MissingDatePolicy, RenamerConfig
from H_pipeline.H01_identifier_pipeline import IdentifierNormalizer, normalize


class TestNormalize:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("01.15.2025 appt notice", "2025.01.15 - notice - appointment"),
            ("4-2-24 QME report re Dr John Smith MD", "2024.04.02 - med-legal - QME report"),
            ("3/1/24 letter from Acme Inc regarding billing", "2024.03.01 - letter - acme inc regarding billing"),
            ("3/1/24 letter from Acme Widgets Inc", "2024.03.01 - letter - Acme Widgets"),
            ("2024-05-06 PT progress report Dr Jane Lee", "2024.05.06 - medical - PT progress report - Dr. Lee"),
            ("1/15/25 appt notice Dr Patel", "2025.01.15 - notice - appointment w. Dr. Patel"),
            ("20240402 UR denial PT", "2024.04.02 - UR - denial UR PT"),
            ("5/6/24 x-ray lumbar report", "2024.05.06 - medical - XR lumbar report"),
            ("4/2/24 pt notes mri", "2024.04.02 - document - PT notes MRI"),
            ("3/1/24 letter", "2024.03.01 - letter"),
        ],
    )
    def test_examples(self, normalizer, raw, expected):
        assert normalizer.normalize(raw) == expected

    def test_no_date(self, normalizer):
        with pytest.raises(NoDateFoundError):
            normalizer.normalize("no date here")

    def test_module_level_normalize(self):
        assert normalize("01.15.2025 appt notice") == "2025.01.15 - notice - appointment"

    def test_module_level_with_config(self):
        config = RenamerConfig(century_policy=CenturyPolicy.ALWAYS_2000)
        assert normalize("1/2/85 report", config) == "2085.01.02 - medical - report"


class TestTypeLabel:
    @pytest.mark.parametrize("raw", [
        "4-2-24 QME report",
        "4-2-24 AME re-evaluation",
        "4-2-24 QME report - supp",
    ])
    def test_med_legal_label_intact(self, normalizer, raw):
        assert normalizer.normalize(raw).startswith("2024.04.02 - med-legal - ")

    def test_med_legal_exact(self, normalizer):
        assert normalizer.normalize("4-2-24 QME report") == "2024.04.02 - med-legal - QME report"


class TestPhysicianKeywords:
    def test_keyword_after_titled_name(self, normalizer):
        result = normalizer.analyze("4-2-24 Dr Smith Report")
        assert result.document_type == DocumentType.MEDICAL
        assert result.canonical_name == "2024.04.02 - medical - report - Dr. Smith"

    def test_keyword_before_credentialed_name(self, normalizer):
        result = normalizer.analyze("4-2-24 Medical Report John Smith MD")
        assert result.document_type == DocumentType.MEDICAL
        assert result.physician.last_name == "Smith"
        assert result.canonical_name == "2024.04.02 - medical - medical report - Dr. Smith"


class TestConfiguredBehaviour:
    def test_physician_appended_for_med_legal(self):
        config = RenamerConfig(physician_placement={"med-legal": "append"})
        result = IdentifierNormalizer(config).normalize("4-2-24 QME report re Dr John Smith MD")
        assert result == "2024.04.02 - med-legal - QME report - Dr. Smith"

    def test_missing_date_today(self, fixed_today):
        config = RenamerConfig(missing_date_policy=MissingDatePolicy.TODAY)
        assert IdentifierNormalizer(config, today=fixed_today).normalize("PT report") == (
            "2025.01.15 - medical - PT report"
        )

    def test_regarding_marking_disabled(self):
        config = RenamerConfig(mark_regarding=False)
        result = IdentifierNormalizer(config).normalize("4-2-24 QME report re Dr John Smith MD")
        assert result == "2024.04.02 - med-legal - QME report re"


class TestAnalyze:
    def test_fields(self, normalizer):
        result = normalizer.analyze("2024-05-06 PT progress report Dr Jane Lee")
        assert result.date_string == "2024.05.06"
        assert result.document_type == DocumentType.MEDICAL
        assert result.description == "PT progress report"
        assert result.physician.last_name == "Lee"
        assert result.business is None
        assert result.canonical_name == "2024.05.06 - medical - PT progress report - Dr. Lee"

    def test_business(self, normalizer):
        result = normalizer.analyze("3/1/24 letter from Acme Widgets Inc")
        assert result.business.name == "Acme Widgets"

    def test_acronyms_upper_in_output(self, normalizer):
        name = normalizer.normalize("2024.01.02 qme ptp mmi report")
        for acronym in ("QME", "PTP", "MMI"):
            assert acronym in name.split(" ")


class TestNormalizeFilename:
    def test_extension_kept(self, normalizer):
        assert normalizer.normalize_filename("4-2-24 QME report.pdf") == "2024.04.02 - med-legal - QME report.pdf"

    def test_extension_case_kept(self, normalizer):
        assert normalizer.normalize_filename("01.15.2025 appt notice.PDF") == "2025.01.15 - notice - appointment.PDF"

    def test_dotted_date_is_not_an_extension(self, normalizer):
        assert normalizer.normalize_filename("appt notice 01.15.2025") == "2025.01.15 - notice - appointment"
