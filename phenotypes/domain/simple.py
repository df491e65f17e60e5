"""Example implementation of the observation contracts."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from phenotypes.domain.identifiers import Identified, TermId
from phenotypes.domain.model import CountFraction, Fraction
from phenotypes.domain.observation import Observable


class SimplePhenotypicFeature(BaseModel, Identified, Observable):
    """
    A phenotypic feature together with its frequency.

    The feature is present if it was observed in at least one annotated item.
    Frequencies use the default counting instantiation (`CountFraction`).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    term_id: TermId = Field(..., alias="identifier")
    fraction: CountFraction

    @field_validator("fraction", mode="before")
    @classmethod
    def _as_count_fraction(cls, value: Any) -> Any:
        # Other parameterisations are re-checked as counts; CountFraction instances pass as is
        if isinstance(value, Fraction) and not isinstance(value, CountFraction):
            return value.as_tuple()
        return value

    def identifier(self) -> TermId:
        return self.term_id

    def is_present(self) -> bool:
        return self.fraction.numerator() > 0
