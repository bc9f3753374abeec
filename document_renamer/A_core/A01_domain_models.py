# document_renamer/A_core/A01_domain_models.py
"""
Domain models for the document renamer.

Provides Pydantic models for:
- Document types and physician placement (enums)
- Date tokens, physician mentions and business entities
- Per-stage extraction results and the full normalization result
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from Z_utils.Z02_text_helpers import capitalize_segments


# -------------------------
# Enums
# -------------------------


class DocumentType(str, Enum):
    """
    Closed set of document types. The value is the label written into
    the canonical name.
    """

    UR = "UR"
    LETTER = "letter"
    NOTICE = "notice"
    MED_LEGAL = "med-legal"
    MEDICAL = "medical"

    # Fallback when no classification rule matches
    DOCUMENT = "document"

    @property
    def label(self) -> str:
        return self.value


class PhysicianPlacement(str, Enum):
    """Where an extracted physician ends up in the canonical name."""

    # "... - appointment with Dr. Smith"
    FOLD = "fold"

    # "... - report - Dr. Smith"
    APPEND = "append"

    # physician dropped from the output
    DISCARD = "discard"


# -------------------------
# Spans and tokens
# -------------------------


class SourceSpan(BaseModel):
    """Half-open character range [start, end) within the text a stage saw."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _validate_span(self):
        if self.end < self.start:
            raise ValueError(f"Invalid span: ({self.start}, {self.end})")
        return self


class DateToken(BaseModel):
    """
    A real calendar date found in the input.

    Impossible combinations (Feb 30, Apr 31) are rejected, never clamped.
    span is None when the date was substituted rather than extracted.
    """

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    span: Optional[SourceSpan] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _validate_calendar(self):
        try:
            date(self.year, self.month, self.day)
        except ValueError as e:
            raise ValueError(
                f"Not a calendar date: {self.year:04d}-{self.month:02d}-{self.day:02d} ({e})"
            ) from e
        return self

    @property
    def canonical(self) -> str:
        """YYYY.MM.DD"""
        return f"{self.year:04d}.{self.month:02d}.{self.day:02d}"

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


class PhysicianMention(BaseModel):
    """A doctor reference; only the last name survives extraction."""

    last_name: str = Field(min_length=1)
    span: SourceSpan

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def display(self) -> str:
        return f"Dr. {capitalize_segments(self.last_name)}"


class BusinessEntity(BaseModel):
    """Organization name left after stripping a trailing business suffix."""

    name: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")


# -------------------------
# Stage results
# -------------------------


class DateExtraction(BaseModel):
    token: DateToken
    remainder: str

    # Name of the grammar that matched; None for a substituted date
    grammar: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def date_string(self) -> str:
        return self.token.canonical


class PhysicianExtraction(BaseModel):
    mention: Optional[PhysicianMention] = None
    remainder: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def doctor(self) -> Optional[str]:
        return self.mention.display if self.mention else None


class BusinessNormalization(BaseModel):
    text: str
    entity: Optional[BusinessEntity] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_business(self) -> bool:
        return self.entity is not None


class Description(BaseModel):
    """Final description fragment for one document type."""

    text: str
    business: Optional[BusinessEntity] = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class NormalizationResult(BaseModel):
    """Every field extracted during one normalize() run."""

    raw: str
    date_token: DateToken
    document_type: DocumentType
    description: str
    physician: Optional[PhysicianMention] = None
    business: Optional[BusinessEntity] = None
    canonical_name: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def date_string(self) -> str:
        return self.date_token.canonical


__all__ = [
    "DocumentType",
    "PhysicianPlacement",
    "SourceSpan",
    "DateToken",
    "PhysicianMention",
    "BusinessEntity",
    "DateExtraction",
    "PhysicianExtraction",
    "BusinessNormalization",
    "Description",
    "NormalizationResult",
]
