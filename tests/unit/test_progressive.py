from decimal import Decimal as D

import pytest

from taxca.core._progressive import (
    apply_credit,
    build_table,
    effective_rate,
    evaluate_tax,
    index_table,
    inflation_factor,
    marginal_rate,
    to_decimal,
)
from taxca.core.abatement import apply_abatement
from taxca.core.jurisdictions import Jurisdiction as J

TWO_STEP = build_table(
    J.CA,
    2025,
    [(D("0"), D("50000"), D("0.15")), (D("50000"), None, D("0.26"))],
    base_credit=D("0"),
    base_credit_rate=D("0"),
)


def test_two_step_table_accumulates_segments():
    assert evaluate_tax(TWO_STEP, 75000) == D("14000.00")
    assert evaluate_tax(TWO_STEP, 50000) == D("7500.00")
    assert evaluate_tax(TWO_STEP, 0) == D("0.00")


def test_quebec_abatement_then_credit():
    federal = apply_abatement(evaluate_tax(TWO_STEP, 75000), "QC")
    assert federal == D("11690")
    assert apply_credit(federal, 2000) == D("9690.00")
    assert apply_credit(federal, 20000) == D("0.00")


def test_abatement_is_identity_outside_quebec():
    assert apply_abatement(D("14000.00"), "ON") == D("14000.00")
    assert apply_abatement(D("14000.00"), "ZZ") == D("14000.00")


def test_marginal_rate_upper_bound_is_inclusive():
    assert marginal_rate(TWO_STEP, 75000) == D("0.26")
    assert marginal_rate(TWO_STEP, 40000) == D("0.15")
    assert marginal_rate(TWO_STEP, 50000) == D("0.15")
    assert marginal_rate(TWO_STEP, 0) == D("0.15")


@pytest.mark.parametrize("bad_income", [-1, -75000, float("nan"), float("inf"), D("-0.01")])
def test_non_finite_or_negative_income_is_taxed_as_zero(bad_income):
    assert evaluate_tax(TWO_STEP, bad_income) == D("0.00")
    assert marginal_rate(TWO_STEP, bad_income) == D("0.15")


@pytest.mark.parametrize("value", ["75000", None, True, [75000]])
def test_non_numeric_amounts_raise_type_error(value):
    with pytest.raises(TypeError):
        to_decimal(value)


def test_float_amounts_keep_their_decimal_spelling():
    assert to_decimal(0.1) == D("0.1")
    assert to_decimal(75000) == D("75000")


def test_index_table_without_years_is_identity():
    indexed = index_table(TWO_STEP, 0.02, 0)
    assert indexed.segments == TWO_STEP.segments
    assert indexed.inflation_factor == D("1")


def test_index_table_scales_bounds_and_tax():
    indexed = index_table(TWO_STEP, D("0.1"), 2)
    assert indexed.inflation_factor == D("1.21")
    assert indexed.segments[0].upper == D("60500")
    assert indexed.segments[-1].upper is None
    assert [s.rate for s in indexed.segments] == [s.rate for s in TWO_STEP.segments]
    assert evaluate_tax(indexed, 90750) == D("16940.00")


def test_inflation_factor_rejects_bad_years():
    with pytest.raises(ValueError):
        inflation_factor(0.02, -1)
    with pytest.raises(TypeError):
        inflation_factor(0.02, 1.5)


def test_effective_rate():
    assert effective_rate(D("14000"), D("70000")) == D("0.2")
    assert effective_rate(D("100"), 0) == D("0")
    assert effective_rate(D("100"), float("nan")) == D("0")


def test_index_table_zero_years_with_total_deflation():
    indexed = index_table(TWO_STEP, -1, 0)
    assert indexed.segments == TWO_STEP.segments
    assert evaluate_tax(indexed, 75000) == D("14000.00")


@pytest.mark.parametrize("rate", [float("nan"), float("inf"), D("NaN"), D("-Infinity")])
def test_non_finite_inflation_rate_is_rejected(rate):
    with pytest.raises(ValueError):
        inflation_factor(rate, 1)
    with pytest.raises(ValueError):
        index_table(TWO_STEP, rate, 0)
