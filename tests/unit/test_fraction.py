from decimal import Decimal

import pytest
from pydantic import ValidationError

from phenotypes.domain.constants import U32_MAX
from phenotypes.domain.model import CountFraction, Fraction, sum_fractions


@pytest.mark.parametrize("n, m", [(0, 0), (0, 5), (3, 10), (7, 7)])
def test_valid_pair_keeps_numerator_and_denominator(n: int, m: int) -> None:
    f = Fraction.from_pair((n, m))

    assert f.numerator() == n
    assert f.denominator() == m
    assert f.as_tuple() == (n, m)


@pytest.mark.parametrize("n, m", [(5, 3), (1, 0), (11, 10)])
def test_numerator_greater_than_denominator_is_rejected(n: int, m: int) -> None:
    with pytest.raises(ValidationError, match="Numerator must be less than or equal to denominator!"):
        Fraction.from_pair((n, m))


def test_keyword_construction_is_validated_too() -> None:
    assert Fraction(n=1, m=10).as_tuple() == (1, 10)
    with pytest.raises(ValidationError):
        Fraction(n=2, m=1)


@pytest.mark.parametrize("pair", [(1,), (1, 2, 3), []])
def test_from_pair_requires_exactly_two_values(pair) -> None:
    with pytest.raises(ValidationError, match="Expected a \\(numerator, denominator\\) pair"):
        Fraction.from_pair(pair)


def test_combine_sums_numerators_and_denominators() -> None:
    a = Fraction.from_pair((1, 2))
    b = Fraction.from_pair((3, 3))

    c = a.combine(b)

    assert c.numerator() == 4
    assert c.denominator() == 5
    # operands are untouched
    assert a.as_tuple() == (1, 2)
    assert b.as_tuple() == (3, 3)


def test_plus_operator_is_combine() -> None:
    a = Fraction.from_pair((1, 2))
    b = Fraction.from_pair((3, 3))

    assert a + b == a.combine(b) == Fraction.from_pair((4, 5))


def test_adding_a_non_fraction_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        Fraction.from_pair((1, 2)) + 1  # noqa: B018


def test_combine_keeps_the_parameterised_class() -> None:
    a = CountFraction.from_pair((1, 2))
    c = a + CountFraction.from_pair((1, 1))

    assert type(c) is CountFraction
    assert c.as_tuple() == (2, 3)


def test_equality_is_structural() -> None:
    assert Fraction.from_pair((2, 5)) == Fraction.from_pair((2, 5))
    assert Fraction.from_pair((2, 5)) != Fraction.from_pair((2, 6))
    assert Fraction.from_pair((1, 2)) + Fraction.from_pair((1, 3)) == Fraction.from_pair((2, 5))
    assert hash(Fraction.from_pair((2, 5))) == hash(Fraction.from_pair((2, 5)))


def test_fraction_is_immutable() -> None:
    f = Fraction.from_pair((1, 2))
    with pytest.raises(ValidationError):
        f.n = 2


def test_str_renders_n_of_m() -> None:
    assert str(Fraction.from_pair((3, 10))) == "3/10"


def test_other_numeric_types() -> None:
    f = Fraction[float].from_pair((0.25, 0.5))
    assert f.numerator() == 0.25

    d = Fraction[Decimal].from_pair((Decimal("1.5"), Decimal("2")))
    assert (d + d).as_tuple() == (Decimal("3.0"), Decimal("4"))

    with pytest.raises(ValidationError):
        Fraction[float].from_pair((1.0, 0.5))


def test_count_fraction_bounds() -> None:
    assert CountFraction.from_pair((0, U32_MAX)).denominator() == U32_MAX

    with pytest.raises(ValidationError):
        CountFraction.from_pair((-1, 3))
    with pytest.raises(ValidationError):
        CountFraction.from_pair((0, U32_MAX + 1))


def test_combine_does_not_revalidate() -> None:
    big = CountFraction.from_pair((1, U32_MAX))

    total = big + big

    assert total.as_tuple() == (2, 2 * U32_MAX)


def test_sum_fractions_folds_combine() -> None:
    fractions = [Fraction.from_pair(p) for p in [(1, 2), (0, 3), (4, 4)]]

    assert sum_fractions(fractions) == Fraction.from_pair((5, 9))
    assert sum_fractions(iter(fractions)) == Fraction.from_pair((5, 9))


def test_sum_fractions_revalidate_checks_the_result() -> None:
    big = CountFraction.from_pair((1, U32_MAX))

    assert sum_fractions([big, big]).denominator() == 2 * U32_MAX
    with pytest.raises(ValidationError):
        sum_fractions([big, big], revalidate=True)


def test_sum_fractions_of_nothing_is_an_error() -> None:
    with pytest.raises(ValueError, match="empty"):
        sum_fractions([])


def test_unbounded_fraction_allows_negative_values() -> None:
    f = Fraction.from_pair((-1, 3))

    assert f.as_tuple() == (-1, 3)
    with pytest.raises(ValidationError):
        CountFraction.from_pair((-1, 3))
