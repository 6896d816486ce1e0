from decimal import Decimal as D

import pytest

from taxca.core.tax_years import UnsupportedTaxYearError
from taxca.payroll import ei_premium, pension_contributions, plan_for, qpip_premium
from taxca.payroll.pension import SPP, CPP_2025, QPP_2025, bridge_benefit_years, get_plan, request_date_factor


@pytest.mark.parametrize(
    "income,base,enhancement",
    [
        (60000, "3361.75", "0.00"),
        (75000, "4034.10", "148.00"),
        (80000, "4034.10", "348.00"),
        (90000, "4034.10", "396.00"),
        (3000, "0.00", "0.00"),
    ],
)
def test_cpp_contribution_edges(income, base, enhancement):
    result = pension_contributions(income, CPP_2025)
    assert result.base_contribution == D(base)
    assert result.enhancement_contribution == D(enhancement)
    assert result.total_contribution == D(base) + D(enhancement)


def test_plan_maxima():
    assert CPP_2025.max_base_contribution == D("4034.10")
    assert CPP_2025.max_enhancement_contribution == D("396.00")


def test_quebec_workers_use_qpp():
    assert plan_for("QC") is QPP_2025
    assert plan_for("ON") is CPP_2025
    assert plan_for(None) is CPP_2025
    assert pension_contributions(60000, plan_for("qc")).base_contribution == D("3616.00")


def test_prior_year_plan_and_unknown_year():
    assert get_plan("CPP", 2024).earnings.ympe == D("68500")
    with pytest.raises(UnsupportedTaxYearError):
        get_plan("CPP", 2010)


def test_request_date_factor():
    assert request_date_factor(CPP_2025, 65 * 12) == D("1")
    assert request_date_factor(CPP_2025, 60 * 12) == D("0.640")
    assert request_date_factor(CPP_2025, 55 * 12) == D("0.640")
    assert request_date_factor(CPP_2025, 70 * 12) == D("1.420")
    assert request_date_factor(CPP_2025, 75 * 12) == D("1.420")
    assert request_date_factor(QPP_2025, 72 * 12) == D("1.588")


def test_ei_premiums():
    assert ei_premium(60000, "ON").premium == D("984.00")
    assert ei_premium(75000).premium == D("1077.48")
    quebec = ei_premium(75000, "QC")
    assert quebec.premium_rate == D("0.0131")
    assert quebec.premium == D("860.67")
    assert ei_premium(75000, year=2024).premium == D("1049.12")


def test_qpip_premiums():
    assert qpip_premium(50000).premium == D("247.00")
    capped = qpip_premium(120000, self_employed=True)
    assert capped.insurable_earnings == D("98000")
    assert capped.premium == D("860.44")


def test_supplemental_plan_bridge_benefit():
    assert (SPP.min_age, SPP.max_bridge_benefit_age) == (55, 65)
    assert bridge_benefit_years(55) == 10
    assert bridge_benefit_years(62) == 3
    assert bridge_benefit_years(67) == 0
    with pytest.raises(ValueError):
        bridge_benefit_years(50)
