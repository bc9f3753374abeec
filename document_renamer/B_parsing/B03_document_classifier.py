# document_renamer/B_parsing/B03_document_classifier.py
"""
Document-type classification of the remainder text.

A remainder that starts with the word "letter" is always a letter. Otherwise
the prioritized rule table is scanned and the first rule whose pattern
occurs anywhere in the text decides; no match falls back to "document".
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern, Tuple

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import DocumentType
from G_config.G01_renamer_config import DEFAULT_CLASSIFICATION_RULES, ClassificationRule

logger = get_logger(__name__)

LEADING_LETTER_RE = re.compile(r"^letter\b", re.IGNORECASE)


class DocumentClassifier:
    """Rule-table classifier; the table order is the rule priority."""

    def __init__(self, rules: Optional[Iterable[ClassificationRule]] = None):
        rules = DEFAULT_CLASSIFICATION_RULES if rules is None else tuple(rules)
        self._compiled: List[Tuple[Pattern[str], DocumentType]] = [
            (rule.compile(), rule.document_type) for rule in rules
        ]

    def classify(self, text: str) -> DocumentType:
        if LEADING_LETTER_RE.search(text.lstrip()):
            return DocumentType.LETTER

        for pattern, document_type in self._compiled:
            if pattern.search(text):
                logger.debug(f"Classified {text!r} as {document_type.label} ({pattern.pattern})")
                return document_type
        return DocumentType.DOCUMENT


__all__ = ["DocumentClassifier", "LEADING_LETTER_RE"]
