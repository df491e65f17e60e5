"""
Domain layer: value types and presence/exclusion contracts.

Contains:
- model: Fraction (validated numerator/denominator pair) and helpers
- observation: Observable and ObservableFeatures contracts
- identifiers: TermId and the Identified capability
- simple: SimplePhenotypicFeature, an example implementation
"""

from phenotypes.domain.identifiers import Identified, TermId
from phenotypes.domain.model import Count, CountFraction, Fraction, sum_fractions
from phenotypes.domain.observation import (
    Features,
    Observable,
    ObservableFeatures,
    excluded_feature_count,
    excluded_features,
    is_excluded,
    present_feature_count,
    present_features,
)
from phenotypes.domain.simple import SimplePhenotypicFeature

__all__ = [
    # Fractions
    "Fraction",
    "CountFraction",
    "Count",
    "sum_fractions",
    # Contracts
    "Observable",
    "ObservableFeatures",
    "Features",
    "is_excluded",
    "present_features",
    "present_feature_count",
    "excluded_features",
    "excluded_feature_count",
    # Identity
    "TermId",
    "Identified",
    # Example implementation
    "SimplePhenotypicFeature",
]
