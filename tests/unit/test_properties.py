from decimal import Decimal as D

import hypothesis.strategies as st
from hypothesis import given

from taxca.core._progressive import apply_credit, evaluate_tax, index_table, marginal_rate
from taxca.core.abatement import apply_abatement
from taxca.core.jurisdictions import Jurisdiction
from taxca.core.tax_years import SUPPORTED_YEARS, get_bracket_table

incomes = st.decimals(min_value=0, max_value=2_000_000, places=2, allow_nan=False, allow_infinity=False)
jurisdictions = st.sampled_from(list(Jurisdiction))
years = st.sampled_from(SUPPORTED_YEARS)


@given(jurisdictions, years, incomes, incomes)
def test_tax_is_monotone_in_income(code, year, a, b):
    table = get_bracket_table(code, year)
    low, high = sorted((a, b))
    assert evaluate_tax(table, low) <= evaluate_tax(table, high)


@given(jurisdictions, years, incomes)
def test_tax_never_exceeds_income_times_top_rate(code, year, income):
    table = get_bracket_table(code, year)
    top = max(s.rate for s in table.segments)
    assert D("0") <= evaluate_tax(table, income) <= income * top + D("0.01")


@given(jurisdictions, years)
def test_tax_is_continuous_at_bracket_bounds(code, year):
    table = get_bracket_table(code, year)
    for segment in table.segments:
        if segment.upper is None:
            continue
        just_above = evaluate_tax(table, segment.upper + D("0.01"))
        at_bound = evaluate_tax(table, segment.upper)
        assert D("0") <= just_above - at_bound <= D("0.02")


@given(jurisdictions, incomes)
def test_marginal_rate_belongs_to_the_table(code, income):
    table = get_bracket_table(code)
    assert marginal_rate(table, income) in {s.rate for s in table.segments}


@given(
    jurisdictions,
    incomes,
    st.decimals(min_value=D("0"), max_value=D("0.1"), places=3),
    st.integers(min_value=0, max_value=10),
)
def test_indexation_scales_tax_with_income(code, income, rate, years_ahead):
    table = get_bracket_table(code)
    indexed = index_table(table, rate, years_ahead)
    factor = indexed.inflation_factor
    scaled = evaluate_tax(indexed, income * factor)
    expected = evaluate_tax(table, income) * factor
    assert abs(scaled - expected) <= D("0.01") * factor + D("0.01")


@given(incomes, st.sampled_from(["QC", "ON", "AB", "XX", "CA"]))
def test_abatement_never_increases_federal_tax(gross, province):
    adjusted = apply_abatement(gross, province)
    assert D("0") <= adjusted <= gross


@given(incomes, incomes)
def test_credit_is_floored_at_zero(tax, credit):
    result = apply_credit(tax, credit)
    assert result >= D("0")
    assert result <= tax


@given(
    jurisdictions,
    years,
    st.decimals(min_value=D("-2"), max_value=D("1"), places=3),
    st.integers(min_value=1, max_value=50),
)
def test_indexation_scales_every_bound(code, year, rate, years_ahead):
    table = get_bracket_table(code, year)
    indexed = index_table(table, rate, years_ahead)
    factor = (1 + rate) ** years_ahead
    for original, scaled in zip(table.segments, indexed.segments):
        assert scaled.lower == original.lower * factor
        assert scaled.upper == (None if original.upper is None else original.upper * factor)
        assert scaled.rate == original.rate
    assert indexed.base_credit == table.base_credit * factor


@given(jurisdictions, years, st.decimals(min_value=-2, max_value=1, allow_nan=False, allow_infinity=False))
def test_zero_years_is_identity_for_any_rate(code, year, rate):
    table = get_bracket_table(code, year)
    indexed = index_table(table, rate, 0)
    assert indexed.segments == table.segments
    assert indexed.base_credit == table.base_credit
    assert indexed.inflation_factor == D("1")
