from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from taxca.core._progressive import Amount, effective_rate, money, normalize_income
from taxca.core.jurisdictions import Jurisdiction, parse_region
from taxca.tax.income import incremental_tax

D = Decimal

INCLUSION_RATE = D("0.5")


@dataclass(frozen=True)
class CapitalGainsResult:
    capital_gains: D
    taxable_capital_gains: D
    tax: D
    after_tax_gains: D
    effective_rate: D


def taxable_capital_gains(gains: Amount) -> D:
    return money(normalize_income(gains) * INCLUSION_RATE)


def capital_gains_tax(
    gains: Amount,
    province: Jurisdiction | str,
    *,
    other_income: Amount = 0,
    year: int | None = None,
) -> CapitalGainsResult:
    region = parse_region(province)
    amount = normalize_income(gains)
    taxable = taxable_capital_gains(amount)
    tax = incremental_tax(region, other_income, taxable, year=year)
    return CapitalGainsResult(
        capital_gains=amount,
        taxable_capital_gains=taxable,
        tax=tax,
        after_tax_gains=amount - tax,
        effective_rate=effective_rate(tax, amount),
    )


__all__ = ["CapitalGainsResult", "INCLUSION_RATE", "capital_gains_tax", "taxable_capital_gains"]
