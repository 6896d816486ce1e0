from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from taxca.core._progressive import ONE, ZERO, Amount, money, normalize_income
from taxca.core.jurisdictions import Jurisdiction, UnknownJurisdictionError, parse_jurisdiction
from taxca.core.tax_years import DEFAULT_TAX_YEAR, UnsupportedTaxYearError

D = Decimal

PlanCode = Literal["CPP", "QPP"]


@dataclass(frozen=True)
class PensionableEarnings:
    basic_exemption: D
    ympe: D
    yampe: D


@dataclass(frozen=True)
class PublicPensionPlan:
    code: PlanCode
    tax_year: int
    earnings: PensionableEarnings
    base_rate: D
    enhancement_rate: D
    min_request_age: int = 60
    max_request_age: int = 70
    default_reference_age: int = 65
    early_monthly_reduction: D = D("0.006")
    late_monthly_increase: D = D("0.007")

    @property
    def max_base_contribution(self) -> D:
        return money((self.earnings.ympe - self.earnings.basic_exemption) * self.base_rate)

    @property
    def max_enhancement_contribution(self) -> D:
        return money((self.earnings.yampe - self.earnings.ympe) * self.enhancement_rate)


@dataclass(frozen=True)
class ContributionResult:
    plan: PlanCode
    tax_year: int
    income: D
    pensionable_earnings: D
    base_contribution: D
    enhancement_contribution: D

    @property
    def total_contribution(self) -> D:
        return self.base_contribution + self.enhancement_contribution


_EARNINGS_2024 = PensionableEarnings(basic_exemption=D("3500"), ympe=D("68500"), yampe=D("73200"))
_EARNINGS_2025 = PensionableEarnings(basic_exemption=D("3500"), ympe=D("71300"), yampe=D("81200"))

CPP_2024 = PublicPensionPlan("CPP", 2024, _EARNINGS_2024, base_rate=D("0.0595"), enhancement_rate=D("0.04"))
CPP_2025 = PublicPensionPlan("CPP", 2025, _EARNINGS_2025, base_rate=D("0.0595"), enhancement_rate=D("0.04"))
QPP_2024 = PublicPensionPlan(
    "QPP", 2024, _EARNINGS_2024, base_rate=D("0.064"), enhancement_rate=D("0.04"), max_request_age=72
)
QPP_2025 = PublicPensionPlan(
    "QPP", 2025, _EARNINGS_2025, base_rate=D("0.064"), enhancement_rate=D("0.04"), max_request_age=72
)

_PLANS: dict[tuple[PlanCode, int], PublicPensionPlan] = {
    (plan.code, plan.tax_year): plan for plan in (CPP_2024, CPP_2025, QPP_2024, QPP_2025)
}


def get_plan(code: PlanCode, year: int | None = None) -> PublicPensionPlan:
    resolved = DEFAULT_TAX_YEAR if year is None else year
    try:
        return _PLANS[(code, resolved)]
    except KeyError as exc:
        raise UnsupportedTaxYearError(f"No {code} parameters for tax year {resolved}") from exc


def plan_for(province: Jurisdiction | str | None, year: int | None = None) -> PublicPensionPlan:
    """Quebec workers contribute to the QPP, everyone else to the CPP."""
    try:
        code = parse_jurisdiction(province) if province is not None else None
    except UnknownJurisdictionError:
        code = None
    return get_plan("QPP" if code is Jurisdiction.QC else "CPP", year)


def pension_contributions(income: Amount, plan: PublicPensionPlan | None = None) -> ContributionResult:
    plan = plan or get_plan("CPP")
    earnings = plan.earnings
    ti = normalize_income(income)
    pensionable = max(ZERO, min(ti, earnings.ympe) - earnings.basic_exemption)
    enhanced = max(ZERO, min(ti, earnings.yampe) - earnings.ympe)
    return ContributionResult(
        plan=plan.code,
        tax_year=plan.tax_year,
        income=ti,
        pensionable_earnings=money(pensionable),
        base_contribution=money(pensionable * plan.base_rate),
        enhancement_contribution=money(enhanced * plan.enhancement_rate),
    )


def request_date_factor(plan: PublicPensionPlan, age_in_months: int) -> D:
    """Adjustment applied to the pension when it starts before or after the reference age."""
    lowest = plan.min_request_age * 12
    highest = plan.max_request_age * 12
    months = min(max(age_in_months, lowest), highest) - plan.default_reference_age * 12
    if months < 0:
        return ONE + plan.early_monthly_reduction * months
    return ONE + plan.late_monthly_increase * months


@dataclass(frozen=True)
class SupplementalPensionPlan:
    """Employer plan age rules: earliest retirement and end of the bridge benefit."""

    min_age: int = 55
    max_bridge_benefit_age: int = 65


SPP = SupplementalPensionPlan()


def bridge_benefit_years(retirement_age: int, plan: SupplementalPensionPlan = SPP) -> int:
    if retirement_age < plan.min_age:
        raise ValueError(f"Retirement age {retirement_age} is below the plan minimum of {plan.min_age}")
    return max(0, plan.max_bridge_benefit_age - retirement_age)


__all__ = [
    "CPP_2024",
    "CPP_2025",
    "ContributionResult",
    "PensionableEarnings",
    "PublicPensionPlan",
    "QPP_2024",
    "QPP_2025",
    "SPP",
    "SupplementalPensionPlan",
    "bridge_benefit_years",
    "get_plan",
    "pension_contributions",
    "plan_for",
    "request_date_factor",
]
