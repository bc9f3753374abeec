# document_renamer/E_normalization/__init__.py
"""
Casing and cleanup of the description text.

Key Components:
    - E01_business_names: Trailing business suffix detection and title case
    - E02_smart_case: Acronym- and title-aware casing of free text
    - E03_corrections: Ordered literal corrections and idempotent cleanup
"""
