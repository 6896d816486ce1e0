from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Literal, Mapping

from taxca.core._progressive import ZERO, Amount, money, normalize_income

D = Decimal


@dataclass(frozen=True)
class RegisteredPlanLimits:
    tax_year: int
    rrsp_max_contribution: D
    rrsp_earned_income_rate: D
    tfsa_annual_limit: D
    resp_lifetime_contribution: D
    cesg_rate: D
    cesg_annual_eligible_contribution: D
    cesg_lifetime_max: D


LIMITS_2025 = RegisteredPlanLimits(
    tax_year=2025,
    rrsp_max_contribution=D("32490"),
    rrsp_earned_income_rate=D("0.18"),
    tfsa_annual_limit=D("7000"),
    resp_lifetime_contribution=D("50000"),
    cesg_rate=D("0.20"),
    cesg_annual_eligible_contribution=D("2500"),
    cesg_lifetime_max=D("7200"),
)


def rrsp_deduction_limit(
    prior_year_earned_income: Amount,
    *,
    pension_adjustment: Amount = 0,
    unused_room: Amount = 0,
    limits: RegisteredPlanLimits = LIMITS_2025,
) -> D:
    new_room = min(
        normalize_income(prior_year_earned_income) * limits.rrsp_earned_income_rate,
        limits.rrsp_max_contribution,
    )
    room = new_room - normalize_income(pension_adjustment) + normalize_income(unused_room)
    return money(max(ZERO, room))


def tfsa_room(
    *,
    unused_room: Amount = 0,
    prior_year_withdrawals: Amount = 0,
    limits: RegisteredPlanLimits = LIMITS_2025,
) -> D:
    return money(
        limits.tfsa_annual_limit + normalize_income(unused_room) + normalize_income(prior_year_withdrawals)
    )


def cesg_grant(
    contribution: Amount,
    *,
    grant_received: Amount = 0,
    carry_forward: Amount = 0,
    limits: RegisteredPlanLimits = LIMITS_2025,
) -> D:
    """Basic Canada Education Savings Grant earned on one year's RESP contribution.

    ``carry_forward`` is unused grant-eligible contribution room from prior
    years; at most one extra year of room can be caught up annually.
    """
    annual_eligible = limits.cesg_annual_eligible_contribution
    eligible = min(
        normalize_income(contribution),
        annual_eligible + min(normalize_income(carry_forward), annual_eligible),
    )
    remaining = max(ZERO, limits.cesg_lifetime_max - normalize_income(grant_received))
    return money(min(eligible * limits.cesg_rate, remaining))


@dataclass(frozen=True)
class QuebecEducationIncentive:
    basic_rate: D
    annual_eligible_contribution: D
    supplement_eligible_contribution: D
    supplement_rates: Mapping[str, D]
    lifetime_max: D
    max_beneficiary_age: int


QESI_2025 = QuebecEducationIncentive(
    basic_rate=D("0.10"),
    annual_eligible_contribution=D("2500"),
    supplement_eligible_contribution=D("500"),
    supplement_rates=MappingProxyType({"low": D("0.10"), "medium": D("0.05"), "high": ZERO}),
    lifetime_max=D("3600"),
    max_beneficiary_age=17,
)

IncomeTier = Literal["low", "medium", "high"]


def qesi_grant(
    contribution: Amount,
    *,
    beneficiary_age: int,
    income_tier: IncomeTier = "high",
    grant_received: Amount = 0,
    carry_forward: Amount = 0,
    incentive: QuebecEducationIncentive = QESI_2025,
) -> D:
    """Quebec Education Savings Incentive paid into the RESP for one year.

    The basic grant follows the CESG catch-up rule. The income-tested
    supplement applies to the first ``supplement_eligible_contribution``
    dollars contributed in the year.
    Beneficiaries past ``max_beneficiary_age`` earn nothing.
    """
    if beneficiary_age > incentive.max_beneficiary_age:
        return money(ZERO)
    try:
        supplement_rate = incentive.supplement_rates[income_tier]
    except KeyError as exc:
        raise ValueError(f"Unknown family income tier '{income_tier}'") from exc
    paid = normalize_income(contribution)
    annual = incentive.annual_eligible_contribution
    eligible = min(paid, annual + min(normalize_income(carry_forward), annual))
    basic = eligible * incentive.basic_rate
    supplement = min(paid, incentive.supplement_eligible_contribution) * supplement_rate
    remaining = max(ZERO, incentive.lifetime_max - normalize_income(grant_received))
    return money(min(basic + supplement, remaining))


__all__ = [
    "IncomeTier",
    "LIMITS_2025",
    "QESI_2025",
    "QuebecEducationIncentive",
    "RegisteredPlanLimits",
    "cesg_grant",
    "qesi_grant",
    "rrsp_deduction_limit",
    "tfsa_room",
]
