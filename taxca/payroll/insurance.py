from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from taxca.core._progressive import Amount, money, normalize_income
from taxca.core.jurisdictions import Jurisdiction, UnknownJurisdictionError, parse_jurisdiction
from taxca.core.tax_years import DEFAULT_TAX_YEAR, UnsupportedTaxYearError

D = Decimal


@dataclass(frozen=True)
class EmploymentInsurance:
    tax_year: int
    max_insurable_earnings: D
    rate_ca: D
    rate_qc: D

    def rate_for(self, province: Jurisdiction | str | None) -> D:
        try:
            code = parse_jurisdiction(province) if province is not None else None
        except UnknownJurisdictionError:
            code = None
        return self.rate_qc if code is Jurisdiction.QC else self.rate_ca


@dataclass(frozen=True)
class ParentalInsurance:
    tax_year: int
    max_insurable_earnings: D
    salaried_rate: D
    self_employed_rate: D


@dataclass(frozen=True)
class PremiumResult:
    income: D
    insurable_earnings: D
    premium_rate: D
    premium: D


EI_2024 = EmploymentInsurance(2024, D("63200"), rate_ca=D("0.0166"), rate_qc=D("0.0132"))
EI_2025 = EmploymentInsurance(2025, D("65700"), rate_ca=D("0.0164"), rate_qc=D("0.0131"))

QPIP_2024 = ParentalInsurance(2024, D("94000"), salaried_rate=D("0.00494"), self_employed_rate=D("0.00878"))
QPIP_2025 = ParentalInsurance(2025, D("98000"), salaried_rate=D("0.00494"), self_employed_rate=D("0.00878"))

_EI_BY_YEAR = {plan.tax_year: plan for plan in (EI_2024, EI_2025)}
_QPIP_BY_YEAR = {plan.tax_year: plan for plan in (QPIP_2024, QPIP_2025)}


def get_ei(year: int | None = None) -> EmploymentInsurance:
    resolved = DEFAULT_TAX_YEAR if year is None else year
    try:
        return _EI_BY_YEAR[resolved]
    except KeyError as exc:
        raise UnsupportedTaxYearError(f"No EI parameters for tax year {resolved}") from exc


def get_qpip(year: int | None = None) -> ParentalInsurance:
    resolved = DEFAULT_TAX_YEAR if year is None else year
    try:
        return _QPIP_BY_YEAR[resolved]
    except KeyError as exc:
        raise UnsupportedTaxYearError(f"No QPIP parameters for tax year {resolved}") from exc


def _premium(income: Amount, ceiling: D, rate: D) -> PremiumResult:
    ti = normalize_income(income)
    insurable = min(ti, ceiling)
    return PremiumResult(
        income=ti,
        insurable_earnings=insurable,
        premium_rate=rate,
        premium=money(insurable * rate),
    )


def ei_premium(income: Amount, province: Jurisdiction | str | None = None, *, year: int | None = None) -> PremiumResult:
    ei = get_ei(year)
    return _premium(income, ei.max_insurable_earnings, ei.rate_for(province))


def qpip_premium(income: Amount, *, self_employed: bool = False, year: int | None = None) -> PremiumResult:
    qpip = get_qpip(year)
    rate = qpip.self_employed_rate if self_employed else qpip.salaried_rate
    return _premium(income, qpip.max_insurable_earnings, rate)


__all__ = [
    "EI_2024",
    "EI_2025",
    "EmploymentInsurance",
    "ParentalInsurance",
    "PremiumResult",
    "QPIP_2024",
    "QPIP_2025",
    "ei_premium",
    "get_ei",
    "get_qpip",
    "qpip_premium",
]
