"""Per-term frequency tallies across a cohort."""

import logging
from collections.abc import Iterable

from phenotypes.domain.identifiers import TermId
from phenotypes.domain.model import Fraction, sum_fractions
from phenotypes.domain.simple import SimplePhenotypicFeature
from phenotypes.infrastructure.config.models import PhenotypesConfig
from phenotypes.infrastructure.observability.logging import cohort_context

logger = logging.getLogger(__name__)


def tally_feature_frequencies(
    features: Iterable[SimplePhenotypicFeature],
    *,
    cfg: PhenotypesConfig | None = None,
    revalidate: bool | None = None,
    cohort_id: str | None = None,
) -> dict[TermId, Fraction]:
    """
    Sum up the fractions of features that share a term identifier.

    Args:
        features: Features annotated in one or more subjects
        cfg: Settings; `cohort.revalidate_sums` is used when `revalidate` is None
        revalidate: Re-check numerator <= denominator on every total
        cohort_id: Tag for log records emitted during the tally

    Returns:
        Mapping of term identifier to combined fraction, in first-seen order

    Raises:
        pydantic.ValidationError: If revalidation is enabled and a total breaks the invariant
    """
    if revalidate is None:
        revalidate = (cfg or PhenotypesConfig()).cohort.revalidate_sums

    with cohort_context(cohort_id):
        grouped: dict[TermId, list[Fraction]] = {}
        n_features = 0
        for feature in features:
            grouped.setdefault(feature.identifier(), []).append(feature.fraction)
            n_features += 1

        totals: dict[TermId, Fraction] = {}
        for term_id, fractions in grouped.items():
            totals[term_id] = sum_fractions(fractions, revalidate=revalidate)
            logger.debug("%s: %s from %d features", term_id, totals[term_id], len(fractions))

        logger.debug(
            "Tallied %d features into %d terms (revalidate=%s)",
            n_features,
            len(totals),
            revalidate,
        )
    return totals
