"""
Configuration module for the document renamer.

RECOMMENDED: Load configuration from config.yaml:

    from G_config import load_config

    config = load_config()
    print(config.century_policy)

Or build one programmatically:

    from G_config import RenamerConfig, CenturyPolicy

    config = RenamerConfig(century_policy=CenturyPolicy.ALWAYS_2000)
"""

from .G01_renamer_config import (
    CenturyPolicy,
    ClassificationRule,
    MissingDatePolicy,
    RenamerConfig,
    load_config,
)

__all__ = [
    "CenturyPolicy",
    "ClassificationRule",
    "MissingDatePolicy",
    "RenamerConfig",
    "load_config",
]
