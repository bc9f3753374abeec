# document_renamer/C_generators/C01_description_builder.py
"""
Type-aware description builder.

Per document type:
    letter                      leading "letter from" / "letter" removed
    UR                          first subtype keyword moved to the front
    notice                      literal "appointment"
    med-legal, medical, other   remainder unchanged

The fragment is then trimmed of dash/whitespace runs and cased: a
trailing business suffix selects business title case, otherwise smart
case is applied.
"""
from __future__ import annotations

import re
from typing import Optional, Pattern

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import Description, DocumentType
from E_normalization.E01_business_names import normalize_business
from E_normalization.E02_smart_case import SmartCaser
from G_config.G01_renamer_config import RenamerConfig
from Z_utils.Z02_text_helpers import collapse_spaces

logger = get_logger(__name__)

NOTICE_DESCRIPTION = "appointment"

# Also covers a bare "letter" so the type label is not repeated as description
_LETTER_PREFIX_RE = re.compile(r"^letter(?:\s+from)?(?:\s+|$)", re.IGNORECASE)
_EDGE_JUNK_RE = re.compile(r"^[-–—\s]+|[-–—\s]+$")


def _subtype_pattern(subtypes) -> Optional[Pattern[str]]:
    words = [re.escape(s) for s in subtypes if s]
    if not words:
        return None
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.IGNORECASE)


class DescriptionBuilder:
    """Build the description fragment for one classified remainder."""

    def __init__(self, config: Optional[RenamerConfig] = None):
        self.config = config or RenamerConfig()
        self._subtype_re = _subtype_pattern(self.config.ur_subtypes)
        self._caser = SmartCaser(self.config.acronyms, self.config.titles)

    def _ur_description(self, remainder: str) -> str:
        match = self._subtype_re.search(remainder) if self._subtype_re else None
        if not match:
            return remainder
        rest = collapse_spaces(remainder[: match.start()] + " " + remainder[match.end():])
        return f"{match.group(1).lower()} {rest}"

    def raw_fragment(self, document_type: DocumentType, remainder: str) -> str:
        """Type-specific fragment before trimming and casing."""
        if document_type == DocumentType.LETTER:
            return _LETTER_PREFIX_RE.sub("", remainder.strip(), count=1).strip()
        if document_type == DocumentType.UR:
            return self._ur_description(remainder)
        if document_type == DocumentType.NOTICE:
            return NOTICE_DESCRIPTION
        return remainder

    def build(self, document_type: DocumentType, remainder: str) -> Description:
        fragment = _EDGE_JUNK_RE.sub("", self.raw_fragment(document_type, remainder))

        business = normalize_business(fragment, self.config.minor_words, self.config.acronyms)
        if business.is_business:
            return Description(text=business.text, business=business.entity)

        text = self._caser.apply(fragment)
        logger.debug(f"Description for {document_type.label}: {text!r}")
        return Description(text=text)


__all__ = ["DescriptionBuilder", "NOTICE_DESCRIPTION"]
