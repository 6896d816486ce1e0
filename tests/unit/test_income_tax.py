from decimal import Decimal as D

import pytest

from taxca.core.jurisdictions import Jurisdiction, UnknownJurisdictionError
from taxca.core.tax_years import UnsupportedTaxYearError
from taxca.tax import (
    compute_income_tax,
    federal_tax_amount,
    provincial_tax_amount,
    tax_amount,
    total_tax_amount,
)
from taxca.tax.income import incremental_tax


def test_federal_tax_without_abatement():
    assert tax_amount("CA", 100000) == D("14718.79")
    assert federal_tax_amount("ON", 100000) == D("14718.79")


def test_federal_tax_abated_for_quebec():
    assert federal_tax_amount("QC", 100000) == D("11904.30")


def test_unknown_residence_gets_no_abatement():
    assert federal_tax_amount("XX", 100000) == D("14718.79")


def test_caller_credit_reduces_tax():
    assert federal_tax_amount("ON", 100000, credit=1000) == D("13718.79")
    assert federal_tax_amount("ON", 100000, credit=10**6) == D("0.00")


def test_provincial_lookup_rejects_unknown_codes():
    with pytest.raises(UnknownJurisdictionError):
        provincial_tax_amount("XX", 50000)
    with pytest.raises(UnknownJurisdictionError):
        provincial_tax_amount("CA", 50000)
    with pytest.raises(UnsupportedTaxYearError):
        provincial_tax_amount("ON", 50000, year=2019)


def test_ontario_summary():
    summary = compute_income_tax("on", 50000)
    assert summary.province is Jurisdiction.ON
    assert summary.tax_year == 2025
    assert summary.federal.gross_tax_before_credit == D("7250.00")
    assert summary.federal.credit == D("2338.71")
    assert summary.federal.abatement == D("0.00")
    assert summary.federal.final_tax == D("4911.29")
    assert summary.provincial.final_tax == D("1881.28")
    assert summary.total_tax == D("6792.57")
    assert summary.after_tax_income == D("43207.43")
    assert summary.marginal_rate == D("0.1955")
    assert total_tax_amount("ON", 50000) == summary.total_tax


def test_quebec_summary():
    summary = compute_income_tax(Jurisdiction.QC, 50000)
    assert summary.federal.abatement == D("1196.25")
    assert summary.federal.final_tax == D("3715.04")
    assert summary.provincial.final_tax == D("4400.06")
    assert summary.marginal_rate == D("0.261075")


def test_low_income_owes_nothing():
    summary = compute_income_tax("ON", 10000)
    assert summary.total_tax == D("0.00")
    assert summary.effective_rate == D("0")
    assert summary.after_tax_income == D("10000")


def test_zero_and_negative_income():
    assert compute_income_tax("AB", 0).total_tax == D("0.00")
    assert compute_income_tax("AB", -5000).gross_income == D("0")


def test_prior_year_tables():
    current = compute_income_tax("ON", 80000, year=2025)
    previous = compute_income_tax("ON", 80000, year=2024)
    assert previous.tax_year == 2024
    assert previous.total_tax != current.total_tax


def test_indexation_lowers_tax_on_fixed_income():
    today = total_tax_amount("BC", 90000)
    later = total_tax_amount("BC", 90000, 0.02, 5)
    assert later < today


def test_incremental_tax_prices_slice_at_taxpayer_brackets():
    assert incremental_tax("ON", 0, 50000) == D("9775.00")
    assert incremental_tax("ON", 57375, 10000) == D("2965.00")
    assert incremental_tax("ON", 57375, 0) == D("0.00")
