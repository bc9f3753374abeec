# document_renamer/G_config/G01_renamer_config.py
"""
Immutable configuration for the identifier normalization pipeline.

All vocabularies (acronyms, titles, corrections), the prioritized
classification rule table and the behavioural policies live here and are
injected into the pipeline at construction time. Values are loaded from
config.yaml with hardcoded defaults as fallback.

Key Components:
    - RenamerConfig: Frozen pydantic model with every tunable
    - ClassificationRule: One (pattern, document type) row of the rule table
    - CenturyPolicy: How two-digit years are expanded
    - MissingDatePolicy: Whether a missing date is fatal or replaced by today
    - load_config: Load the "renamer" section of a YAML file

Example:
    >>> from A_core.A01_domain_models import DocumentType
    >>> from G_config.G01_renamer_config import RenamerConfig, CenturyPolicy
    >>> config = RenamerConfig(century_policy=CenturyPolicy.ALWAYS_2000)
    >>> config.placement_for(DocumentType.MEDICAL)
    <PhysicianPlacement.APPEND: 'append'>
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional, Pattern, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from A_core.A00_logging import get_logger
from A_core.A01_domain_models import DocumentType, PhysicianPlacement
from A_core.A02_exceptions import ConfigurationError

logger = get_logger(__name__)

CONFIG_PATH_ENV = "RENAMER_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"
CONFIG_SECTION = "renamer"


class CenturyPolicy(str, Enum):
    """Expansion of two-digit years."""

    # year < pivot -> 20xx, otherwise 19xx
    PIVOT = "pivot"

    # always 20xx
    ALWAYS_2000 = "always_2000"


class MissingDatePolicy(str, Enum):
    """Behaviour when no calendar-valid date is found."""

    RAISE = "raise"
    TODAY = "today"


class ClassificationRule(BaseModel):
    """
    One row of the document-type rule table.

    Rules are evaluated in table order and the first pattern found anywhere
    in the remainder (case-insensitive) decides the type.
    """

    pattern: str
    document_type: DocumentType

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    def compile(self) -> Pattern[str]:
        return re.compile(self.pattern, re.IGNORECASE)


# ========================================
# Defaults
# ========================================

DEFAULT_ACRONYMS: Tuple[str, ...] = (
    # Medical
    "PT", "MD", "M.D.", "EMG", "NCV", "NCS", "MRI", "XR", "DME", "FCE", "ADL",
    # Med-legal and utilization review
    "QME", "AME", "UR", "IMR", "PTP", "MMI", "PR2", "PR4", "P&S", "ME",
    # Benefits and settlement
    "TTD", "PPD", "PD", "TD", "RTW", "AWW", "SBR", "VR", "VRE", "MSA",
    "C&R", "OACR", "OAC&R", "F&A", "EOB", "EDD",
    # Agencies and general
    "WCAB", "W/C", "MOH", "CMS", "SSA", "DOB", "AKA",
)

DEFAULT_TITLES: Tuple[str, ...] = ("dr.", "dr", "judge")

DEFAULT_CORRECTIONS: Tuple[Tuple[str, str], ...] = (
    ("emgncs", "EMG-NCS"),
    ("x-ray", "XR"),
    (" with ", " w. "),
)

DEFAULT_CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(pattern=r"\bur\b", document_type=DocumentType.UR),
    ClassificationRule(pattern=r"\bletter\b", document_type=DocumentType.LETTER),
    ClassificationRule(pattern=r"\bappt notice\b", document_type=DocumentType.NOTICE),
    ClassificationRule(pattern=r"\b(?:qme|ame)\b", document_type=DocumentType.MED_LEGAL),
    ClassificationRule(pattern=r"\breport\b", document_type=DocumentType.MEDICAL),
)

DEFAULT_UR_SUBTYPES: Tuple[str, ...] = ("approval", "denial", "mod")

# Words never taken as a physician given or last name
DEFAULT_NAME_STOP_WORDS: Tuple[str, ...] = (
    "report", "letter", "notice", "appt", "appointment", "regarding",
    "approval", "denial", "mod", "supplemental", "qme", "ame", "ur",
)

DEFAULT_MINOR_WORDS: Tuple[str, ...] = (
    "a", "an", "and", "as", "at", "but", "by", "for", "in",
    "of", "on", "or", "the", "to", "up", "yet", "so", "nor",
)

DEFAULT_PHYSICIAN_PLACEMENT: Dict[DocumentType, PhysicianPlacement] = {
    DocumentType.UR: PhysicianPlacement.DISCARD,
    DocumentType.LETTER: PhysicianPlacement.DISCARD,
    DocumentType.NOTICE: PhysicianPlacement.FOLD,
    DocumentType.MED_LEGAL: PhysicianPlacement.DISCARD,
    DocumentType.MEDICAL: PhysicianPlacement.APPEND,
    DocumentType.DOCUMENT: PhysicianPlacement.DISCARD,
}


class RenamerConfig(BaseModel):
    """
    Frozen configuration injected into IdentifierNormalizer.

    Ordered fields (corrections, classification_rules, ur_subtypes) are
    tuples: their position is their priority.
    """

    acronyms: FrozenSet[str] = Field(default_factory=lambda: frozenset(DEFAULT_ACRONYMS))
    titles: FrozenSet[str] = Field(default_factory=lambda: frozenset(DEFAULT_TITLES))
    corrections: Tuple[Tuple[str, str], ...] = DEFAULT_CORRECTIONS
    classification_rules: Tuple[ClassificationRule, ...] = DEFAULT_CLASSIFICATION_RULES
    ur_subtypes: Tuple[str, ...] = DEFAULT_UR_SUBTYPES
    minor_words: FrozenSet[str] = Field(default_factory=lambda: frozenset(DEFAULT_MINOR_WORDS))
    name_stop_words: FrozenSet[str] = Field(default_factory=lambda: frozenset(DEFAULT_NAME_STOP_WORDS))

    century_policy: CenturyPolicy = CenturyPolicy.PIVOT
    century_pivot: int = Field(default=50, ge=0, le=100)
    missing_date_policy: MissingDatePolicy = MissingDatePolicy.RAISE
    physician_placement: Tuple[Tuple[DocumentType, PhysicianPlacement], ...] = tuple(
        DEFAULT_PHYSICIAN_PLACEMENT.items()
    )

    # "re" -> "re." before physician detection
    mark_regarding: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("acronyms", mode="before")
    @classmethod
    def _upper_acronyms(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(v).strip().upper() for v in value if str(v).strip())
        return value

    @field_validator("titles", "minor_words", "name_stop_words", mode="before")
    @classmethod
    def _lower_words(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(v).strip().lower() for v in value if str(v).strip())
        return value

    @field_validator("corrections", mode="before")
    @classmethod
    def _corrections_from_mapping(cls, value: Any) -> Any:
        # YAML mappings keep file order
        if isinstance(value, Mapping):
            return tuple((str(k), str(v)) for k, v in value.items())
        return value

    @field_validator("corrections")
    @classmethod
    def _no_empty_corrections(cls, value: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[str, str], ...]:
        for find, _ in value:
            if not find:
                raise ValueError("correction with an empty search string")
        return value

    @field_validator("physician_placement", mode="before")
    @classmethod
    def _merge_placement(cls, value: Any) -> Any:
        if value is None:
            return tuple(DEFAULT_PHYSICIAN_PLACEMENT.items())
        items = value.items() if isinstance(value, Mapping) else value
        merged: Dict[Any, Any] = dict(DEFAULT_PHYSICIAN_PLACEMENT)
        for doc_type, placement in items:
            merged[DocumentType(doc_type)] = PhysicianPlacement(placement)
        return tuple(merged.items())

    def placement_for(self, document_type: DocumentType) -> PhysicianPlacement:
        for doc_type, placement in self.physician_placement:
            if doc_type == document_type:
                return placement
        return PhysicianPlacement.DISCARD

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RenamerConfig":
        """
        Build a config from a plain dictionary (e.g. a YAML section).

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        try:
            return cls(**(data or {}))
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(
                f"Invalid renamer configuration: {first.get('msg', e)}",
                config_key=key or None,
                actual_value=first.get("input"),
            ) from e

    def with_overrides(self, **changes: Any) -> "RenamerConfig":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).from_dict(data)

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "RenamerConfig":
        """
        Load the "renamer" section of a YAML file.

        Resolution order for the path: argument, RENAMER_CONFIG_PATH,
        G_config/config.yaml. A missing file falls back to defaults.

        Raises:
            ConfigurationError: If the file cannot be read or parsed, or
                holds invalid values.
        """
        if config_path is None:
            env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                full_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_path}: {e}",
                config_key=CONFIG_SECTION,
            ) from e

        if not isinstance(full_config, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping",
                expected_type="mapping",
                actual_value=type(full_config).__name__,
            )

        section = full_config.get(CONFIG_SECTION) or {}
        logger.debug(f"Loaded renamer configuration from {config_path}")
        return cls.from_dict(section)


def load_config(config_path: Optional[Union[str, Path]] = None) -> RenamerConfig:
    """
    Load renamer configuration from config.yaml.

    Example:
        from G_config import load_config
        config = load_config()
        print(sorted(config.acronyms))
    """
    return RenamerConfig.from_yaml(config_path)


__all__ = [
    "CenturyPolicy",
    "MissingDatePolicy",
    "ClassificationRule",
    "RenamerConfig",
    "DEFAULT_ACRONYMS",
    "DEFAULT_TITLES",
    "DEFAULT_CORRECTIONS",
    "DEFAULT_CLASSIFICATION_RULES",
    "DEFAULT_UR_SUBTYPES",
    "DEFAULT_MINOR_WORDS",
    "DEFAULT_NAME_STOP_WORDS",
    "DEFAULT_PHYSICIAN_PLACEMENT",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH_ENV",
    "load_config",
]
