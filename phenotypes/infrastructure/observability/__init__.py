"""
Observability: logging handlers and the cohort log context.

Provides:
- configure_logging: console + rotating file handlers on the `phenotypes` logger
- cohort_context: tags records emitted while a cohort is processed
"""

from phenotypes.infrastructure.observability.logging import (
    CohortTagFilter,
    cohort_context,
    configure_logging,
    current_cohort,
)

__all__ = [
    "configure_logging",
    "cohort_context",
    "current_cohort",
    "CohortTagFilter",
]
