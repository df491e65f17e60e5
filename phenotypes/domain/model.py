"""
Frequency of a feature in one or more annotated items.

A `Fraction` represents the *n* of *m* frequency of a feature. For instance,
the number of times *n* a feature such as Polydactyly (HP:0010442) was present
in a cohort of *m* individuals.

Examples:
    >>> f = Fraction.from_pair((1, 10))
    >>> f.numerator(), f.denominator()
    (1, 10)
    >>> str(Fraction.from_pair((1, 2)) + Fraction.from_pair((3, 3)))
    '4/5'
"""

import logging
from collections.abc import Iterable
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from phenotypes.domain.constants import NOT_A_PAIR_MSG, NUMERATOR_GT_DENOMINATOR_MSG, U32_MAX

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default counting type: non-negative, fits in an unsigned 32-bit integer
Count = Annotated[int, Field(ge=0, le=U32_MAX)]


class Fraction(BaseModel, Generic[T]):
    """
    Validated (numerator, denominator) pair.

    The numerator must be less than or equal to the denominator, but both may be 0.
    The check uses the ordering of `T` and runs only on validated construction;
    `combine` (and `+`) build the result without re-checking.

    The unparameterised `Fraction` puts no bounds on its values: negative numbers
    pass as long as n <= m (e.g. `Fraction.from_pair((-1, 3))`). Use `CountFraction`
    for non-negative counts that fit an unsigned 32-bit integer.
    """

    model_config = ConfigDict(frozen=True)

    n: T = Field(..., description="Number of annotated items where the feature was present.")
    m: T = Field(
        ...,
        description="Total number of annotated items investigated for presence/absence of the feature.",
    )

    @model_validator(mode="before")
    @classmethod
    def _unpack_pair(cls, data: Any) -> Any:
        if isinstance(data, (tuple, list)):
            if len(data) != 2:
                raise ValueError(f"{NOT_A_PAIR_MSG}, got {len(data)} values")
            numerator, denominator = data
            return {"n": numerator, "m": denominator}
        return data

    @model_validator(mode="after")
    def _check_order(self) -> "Fraction[T]":
        if not self.n <= self.m:
            logger.debug("Rejected fraction n=%r m=%r", self.n, self.m)
            raise ValueError(NUMERATOR_GT_DENOMINATOR_MSG)
        return self

    @classmethod
    def from_pair(cls, pair: tuple[T, T]) -> "Fraction[T]":
        """
        Convert a (numerator, denominator) tuple into a `Fraction`.

        Raises:
            pydantic.ValidationError: If the numerator is greater than the denominator
        """
        return cls.model_validate(pair)

    def numerator(self) -> T:
        return self.n

    def denominator(self) -> T:
        return self.m

    def as_tuple(self) -> tuple[T, T]:
        return self.n, self.m

    def combine(self, other: "Fraction[T]") -> "Fraction[T]":
        """Make a new fraction by summing up the numerators and the denominators."""
        return type(self).model_construct(n=self.n + other.n, m=self.m + other.m)

    def __add__(self, other: object) -> "Fraction[T]":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.combine(other)

    def __str__(self) -> str:
        return f"{self.n}/{self.m}"


# The default instantiation, matching an unsigned 32-bit count
CountFraction = Fraction[Count]


def sum_fractions(fractions: Iterable[Fraction[T]], *, revalidate: bool = False) -> Fraction[T]:
    """
    Combine fractions left to right.

    Args:
        fractions: Non-empty iterable of fractions
        revalidate: If True, check the numerator/denominator invariant on the result

    Returns:
        The combined fraction

    Raises:
        ValueError: If `fractions` is empty
        pydantic.ValidationError: If `revalidate` is set and the result breaks the invariant
    """
    it = iter(fractions)
    try:
        total = next(it)
    except StopIteration:
        raise ValueError("Cannot sum an empty collection of fractions") from None

    for f in it:
        total = total.combine(f)

    if revalidate:
        return type(total).from_pair(total.as_tuple())
    return total
