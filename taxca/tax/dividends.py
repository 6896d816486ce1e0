from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from taxca.core._progressive import ZERO, Amount, effective_rate, money, normalize_income
from taxca.core.jurisdictions import Jurisdiction as J, parse_region
from taxca.tax.income import incremental_tax

D = Decimal


@dataclass(frozen=True)
class DividendCreditRates:
    """Gross-up factor and dividend tax credit rates, as fractions of the grossed-up dividend."""

    gross_up: D
    federal: D
    provincial: Mapping[J, D]

    def credit_rate(self, jurisdiction: J) -> D:
        if jurisdiction.is_federal:
            return self.federal
        return self.provincial[jurisdiction]


ELIGIBLE_DIVIDEND = DividendCreditRates(
    gross_up=D("1.38"),
    federal=D("0.150198"),
    provincial=MappingProxyType(
        {
            J.AB: D("0.0812"),
            J.BC: D("0.12"),
            J.MB: D("0.08"),
            J.NB: D("0.14"),
            J.NL: D("0.063"),
            J.NS: D("0.0885"),
            J.NT: D("0.115"),
            J.NU: D("0.0551"),
            J.ON: D("0.10"),
            J.PE: D("0.105"),
            J.QC: D("0.117"),
            J.SK: D("0.11"),
            J.YT: D("0.120207"),
        }
    ),
)

NON_ELIGIBLE_DIVIDEND = DividendCreditRates(
    gross_up=D("1.15"),
    federal=D("0.090301"),
    provincial=MappingProxyType(
        {
            J.AB: D("0.0218"),
            J.BC: D("0.0196"),
            J.MB: D("0.007835"),
            J.NB: D("0.0275"),
            J.NL: D("0.032"),
            J.NS: D("0.015"),
            J.NT: D("0.06"),
            J.NU: D("0.0261"),
            J.ON: D("0.029863"),
            J.PE: D("0.013"),
            J.QC: D("0.0342"),
            J.SK: D("0.02519"),
            J.YT: D("0.0067"),
        }
    ),
)


@dataclass(frozen=True)
class DividendTaxResult:
    dividend: D
    grossed_up: D
    federal_credit: D
    provincial_credit: D
    tax_on_grossed_up: D
    net_tax: D
    after_tax_dividend: D
    effective_rate: D

    @property
    def total_credit(self) -> D:
        return self.federal_credit + self.provincial_credit


def dividend_rates(eligible: bool) -> DividendCreditRates:
    return ELIGIBLE_DIVIDEND if eligible else NON_ELIGIBLE_DIVIDEND


def dividend_tax(
    dividend: Amount,
    eligible: bool,
    province: J | str,
    *,
    other_income: Amount = 0,
    year: int | None = None,
) -> DividendTaxResult:
    region = parse_region(province)
    rates = dividend_rates(eligible)
    amount = normalize_income(dividend)
    grossed_up = money(amount * rates.gross_up)
    federal_credit = money(grossed_up * rates.federal)
    provincial_credit = money(grossed_up * rates.credit_rate(region))
    tax_on_grossed_up = incremental_tax(region, other_income, grossed_up, year=year)
    net_tax = max(ZERO, tax_on_grossed_up - federal_credit - provincial_credit)
    return DividendTaxResult(
        dividend=amount,
        grossed_up=grossed_up,
        federal_credit=federal_credit,
        provincial_credit=provincial_credit,
        tax_on_grossed_up=tax_on_grossed_up,
        net_tax=net_tax,
        after_tax_dividend=amount - net_tax,
        effective_rate=effective_rate(net_tax, amount),
    )


__all__ = [
    "DividendCreditRates",
    "DividendTaxResult",
    "ELIGIBLE_DIVIDEND",
    "NON_ELIGIBLE_DIVIDEND",
    "dividend_rates",
    "dividend_tax",
]
