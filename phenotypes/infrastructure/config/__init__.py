"""
Configuration management: models, loading, and validation.

Handles:
- PhenotypesConfig: library settings (logging, cohort tallies)
- YAML loading with environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from phenotypes.infrastructure.config.loader import load_config
from phenotypes.infrastructure.config.models import CohortConfig, LoggingConfig, PhenotypesConfig

__all__ = [
    "PhenotypesConfig",
    "load_config",
    "LoggingConfig",
    "CohortConfig",
]
