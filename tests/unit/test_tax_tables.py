from decimal import Decimal as D

import pytest

from taxca.core.jurisdictions import (
    Jurisdiction,
    UnknownJurisdictionError,
    jurisdiction_name,
    list_regions,
    parse_region,
)
from taxca.core.tax_years import (
    DEFAULT_TAX_YEAR,
    SUPPORTED_YEARS,
    UnsupportedTaxYearError,
    get_bracket_table,
    tables_for_year,
)
from taxca.core._progressive import evaluate_tax


def test_supported_years():
    assert SUPPORTED_YEARS == (2024, 2025)
    assert DEFAULT_TAX_YEAR == 2025


@pytest.mark.parametrize("year", [2024, 2025])
def test_every_jurisdiction_has_a_table(year):
    assert set(tables_for_year(year)) == set(Jurisdiction)


@pytest.mark.parametrize("year", [2024, 2025])
@pytest.mark.parametrize("code", list(Jurisdiction))
def test_tables_are_contiguous_and_progressive(year, code):
    table = get_bracket_table(code, year)
    segments = table.segments
    assert table.jurisdiction is code
    assert table.tax_year == year
    assert segments[0].lower == D("0")
    assert segments[-1].upper is None
    for prev, nxt in zip(segments, segments[1:]):
        assert prev.upper == nxt.lower
        assert prev.rate <= nxt.rate
    assert table.base_credit > 0
    assert table.base_credit_rate == table.lowest_rate


def test_federal_bracket_edges_2025():
    federal = get_bracket_table("CA", 2025)
    assert evaluate_tax(federal, D("57375")) == D("8319.38")
    assert evaluate_tax(federal, D("57376")) > D("8319.38")
    assert evaluate_tax(federal, D("114750")) > evaluate_tax(federal, D("114749"))
    assert evaluate_tax(federal, D("253414")) > evaluate_tax(federal, D("253413"))


def test_ontario_bracket_edges_2025():
    ontario = get_bracket_table(Jurisdiction.ON, 2025)
    first = evaluate_tax(ontario, D("52886"))
    assert first == (D("52886") * D("0.0505")).quantize(D("0.01"))
    assert evaluate_tax(ontario, D("52887")) > first
    assert ontario.base_credit_amount == D("643.72")


def test_default_year_lookup():
    assert get_bracket_table("qc") is get_bracket_table(Jurisdiction.QC, DEFAULT_TAX_YEAR)


def test_unknown_lookups_raise_key_errors():
    with pytest.raises(UnsupportedTaxYearError):
        get_bracket_table("CA", 1999)
    with pytest.raises(UnknownJurisdictionError):
        get_bracket_table("XX", 2025)
    with pytest.raises(KeyError):
        tables_for_year(2031)


def test_regions_exclude_federal():
    regions = list_regions()
    assert len(regions) == 13
    assert Jurisdiction.CA not in regions
    assert [r.value for r in regions] == sorted(r.value for r in regions)
    assert jurisdiction_name("nl") == "Newfoundland and Labrador"
    with pytest.raises(UnknownJurisdictionError):
        parse_region("CA")
