# document_renamer/H_pipeline/H01_identifier_pipeline.py
"""
Identifier normalization pipeline.

Wires the stages together in their fixed order:

    Date Extractor -> Physician Normalizer -> Document Classifier
        -> Description Builder -> Assembler (corrections and cleanup)

Each stage sees only the remainder left by the previous one; the Assembler
is the only place where the extracted fields are recombined. The date
stage is the only one that can fail.

A configured IdentifierNormalizer holds immutable state only and can be
shared between threads.

Example:
    >>> from H_pipeline.H01_identifier_pipeline import IdentifierNormalizer
    >>> IdentifierNormalizer().normalize("01.15.2025 appt notice")
    '2025.01.15 - notice - appointment'

Dependencies:
    - B_parsing: Date, physician and document type extraction
    - C_generators: Description and final assembly
    - G_config: RenamerConfig
    - Z_utils: Extension handling for file names
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import NormalizationResult
from B_parsing.B01_date_extractor import DateExtractor
from B_parsing.B02_physician_normalizer import PhysicianNormalizer
from B_parsing.B03_document_classifier import DocumentClassifier
from C_generators.C01_description_builder import DescriptionBuilder
from C_generators.C02_assembler import Assembler
from G_config.G01_renamer_config import RenamerConfig
from Z_utils.Z01_filename_utils import split_extension

logger = get_logger(__name__)


class IdentifierNormalizer:
    """
    Turn a human-typed description into "YYYY.MM.DD - type - description".

    Args:
        config: Renamer configuration; defaults when omitted
        today: Clock used by the "today" missing-date policy
    """

    def __init__(
        self,
        config: Optional[RenamerConfig] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.config = config or RenamerConfig()
        self.date_extractor = DateExtractor(
            century_policy=self.config.century_policy,
            century_pivot=self.config.century_pivot,
            missing_date_policy=self.config.missing_date_policy,
            today=today,
        )
        self.physician_normalizer = PhysicianNormalizer(
            mark_regarding=self.config.mark_regarding,
            stop_words=self.config.name_stop_words,
        )
        self.classifier = DocumentClassifier(self.config.classification_rules)
        self.description_builder = DescriptionBuilder(self.config)
        self.assembler = Assembler(self.config)

    def analyze(self, raw: str) -> NormalizationResult:
        """
        Run every stage and return all intermediate fields.

        Raises:
            NoDateFoundError: When no calendar-valid date is present and the
                missing-date policy is "raise".
        """
        dated = self.date_extractor.extract(raw)
        physician = self.physician_normalizer.extract(dated.remainder)
        document_type = self.classifier.classify(physician.remainder)
        description = self.description_builder.build(document_type, physician.remainder)
        canonical = self.assembler.assemble(
            dated.date_string,
            document_type,
            description.text,
            physician.doctor,
        )
        logger.debug(f"{raw!r} -> {canonical!r}")
        return NormalizationResult(
            raw=raw,
            date_token=dated.token,
            document_type=document_type,
            description=description.text,
            physician=physician.mention,
            business=description.business,
            canonical_name=canonical,
        )

    def normalize(self, raw: str) -> str:
        """Canonical name for a raw stem (no extension)."""
        return self.analyze(raw).canonical_name

    def normalize_filename(self, filename: str) -> str:
        """
        Normalize a file name, keeping a known extension.

        Example:
            >>> IdentifierNormalizer().normalize_filename("4-2-24 QME report.pdf")
            '2024.04.02 - med-legal - QME report.pdf'
        """
        stem, extension = split_extension(filename)
        return self.normalize(stem) + extension


def normalize(raw: str, config: Optional[RenamerConfig] = None) -> str:
    """One-shot normalization with an optional configuration."""
    return IdentifierNormalizer(config).normalize(raw)


__all__ = ["IdentifierNormalizer", "normalize"]
