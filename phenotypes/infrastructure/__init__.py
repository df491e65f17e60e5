"""
Infrastructure layer: configuration and observability.

This is the only layer that performs I/O operations.
"""

from phenotypes.infrastructure.config import PhenotypesConfig, load_config
from phenotypes.infrastructure.observability import cohort_context, configure_logging

__all__ = [
    "load_config",
    "PhenotypesConfig",
    "configure_logging",
    "cohort_context",
]
