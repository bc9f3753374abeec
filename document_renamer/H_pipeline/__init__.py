"""
H_pipeline: Identifier normalization pipeline.

Provides:
- IdentifierNormalizer: Configured, reusable pipeline
- normalize: One-shot convenience function
"""

from .H01_identifier_pipeline import IdentifierNormalizer, normalize

__all__ = ["IdentifierNormalizer", "normalize"]
