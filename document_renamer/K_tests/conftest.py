# document_renamer/K_tests/conftest.py
"""
Pytest configuration and fixtures for document_renamer tests.

Provides:
- Default and customized RenamerConfig fixtures
- A shared IdentifierNormalizer
- A fixed clock for the "today" missing-date policy
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add document_renamer to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from G_config.G01_renamer_config import RenamerConfig  # noqa: E402
from H_pipeline.H01_identifier_pipeline import IdentifierNormalizer  # noqa: E402


FIXED_TODAY = date(2025, 1, 15)


@pytest.fixture
def default_config() -> RenamerConfig:
    return RenamerConfig()


@pytest.fixture
def normalizer(default_config) -> IdentifierNormalizer:
    return IdentifierNormalizer(default_config)


@pytest.fixture
def fixed_today():
    """Clock returning 2025-01-15."""
    return lambda: FIXED_TODAY
