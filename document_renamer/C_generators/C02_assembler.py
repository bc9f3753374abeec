# document_renamer/C_generators/C02_assembler.py
"""
Canonical name assembly.

Format:
    YYYY.MM.DD - <type label>[ - <description>][ - Dr. Lastname]

Physician placement per document type comes from the configuration:
    fold     "... - appointment with Dr. Smith"
    append   "... - report - Dr. Smith"
    discard  physician dropped

Every segment after the type label goes through the correction and
cleanup pass on its own; the date and the label ("med-legal") are joined
verbatim so separator cleanup never splits them.
"""
from __future__ import annotations

from typing import List, Optional

from A_core.A01_domain_models import DocumentType, PhysicianPlacement
from E_normalization.E03_corrections import clean_name
from G_config.G01_renamer_config import RenamerConfig

PART_SEPARATOR = " - "


class Assembler:
    def __init__(self, config: Optional[RenamerConfig] = None):
        self.config = config or RenamerConfig()

    def parts(
        self,
        date_string: str,
        document_type: DocumentType,
        description: str,
        doctor: Optional[str] = None,
    ) -> List[str]:
        parts = [date_string, document_type.label]
        if description:
            parts.append(description)

        if doctor:
            placement = self.config.placement_for(document_type)
            if placement == PhysicianPlacement.FOLD:
                # never fold into the label
                if description:
                    parts[-1] = f"{parts[-1]} with {doctor}"
                else:
                    parts.append(f"with {doctor}")
            elif placement == PhysicianPlacement.APPEND:
                parts.append(doctor)
        return parts

    def assemble(
        self,
        date_string: str,
        document_type: DocumentType,
        description: str,
        doctor: Optional[str] = None,
    ) -> str:
        date_part, label, *segments = self.parts(date_string, document_type, description, doctor)
        cleaned = [clean_name(s, self.config.corrections) for s in segments]
        return PART_SEPARATOR.join([date_part, label] + [s for s in cleaned if s])


__all__ = ["Assembler", "PART_SEPARATOR"]
