"""
Application layer: helpers built on the domain types.

Contains:
- cohort: per-term frequency tallies by simple addition
"""

from phenotypes.application.cohort import tally_feature_frequencies

__all__ = [
    "tally_feature_frequencies",
]
