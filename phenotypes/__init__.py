"""
phenotypes: observed/excluded phenotypic features and their frequencies.

Most commonly used names are exposed at top level for convenience.
"""

from pydantic import ValidationError

from phenotypes.domain import (
    Count,
    CountFraction,
    Features,
    Fraction,
    Identified,
    Observable,
    ObservableFeatures,
    SimplePhenotypicFeature,
    TermId,
    excluded_feature_count,
    excluded_features,
    is_excluded,
    present_feature_count,
    present_features,
    sum_fractions,
)

__all__ = [
    "Fraction",
    "CountFraction",
    "Count",
    "sum_fractions",
    "Observable",
    "ObservableFeatures",
    "Features",
    "is_excluded",
    "present_features",
    "present_feature_count",
    "excluded_features",
    "excluded_feature_count",
    "TermId",
    "Identified",
    "SimplePhenotypicFeature",
    "ValidationError",
]
