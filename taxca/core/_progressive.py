from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from taxca.core.jurisdictions import Jurisdiction

D = Decimal

ZERO = D("0")
ONE = D("1")
CENT = D("0.01")

Amount = Union[Decimal, int, float]

logger = logging.getLogger("taxca").getChild("brackets")


def to_decimal(value: Amount) -> D:
    """Coerce a numeric amount to ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``0.1``. Anything that is not a
    real number (strings, booleans, ``None``) is a caller bug and raises
    ``TypeError`` instead of being silently coerced.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise TypeError(f"Expected a numeric amount, got {type(value).__name__}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return D(value)
    return D(str(value))


def money(value: D) -> D:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_income(income: Amount) -> D:
    value = to_decimal(income)
    if not value.is_finite() or value < ZERO:
        logger.debug("Normalizing income %s to zero", value)
        return ZERO
    return value


@dataclass(frozen=True)
class BracketSegment:
    lower: D
    upper: D | None
    rate: D

    def contains(self, income: D) -> bool:
        return income > self.lower and (self.upper is None or income <= self.upper)


@dataclass(frozen=True)
class BracketTable:
    jurisdiction: Jurisdiction
    tax_year: int
    segments: tuple[BracketSegment, ...]
    base_credit: D
    base_credit_rate: D

    @property
    def lowest_rate(self) -> D:
        return self.segments[0].rate

    @property
    def base_credit_amount(self) -> D:
        return money(self.base_credit * self.base_credit_rate)


@dataclass(frozen=True)
class IndexedBracketTable(BracketTable):
    inflation_factor: D = ONE


def build_table(
    jurisdiction: Jurisdiction,
    tax_year: int,
    rows: Iterable[tuple[D, D | None, D]],
    *,
    base_credit: D,
    base_credit_rate: D,
) -> BracketTable:
    return BracketTable(
        jurisdiction=jurisdiction,
        tax_year=tax_year,
        segments=tuple(BracketSegment(lower, upper, rate) for lower, upper, rate in rows),
        base_credit=base_credit,
        base_credit_rate=base_credit_rate,
    )


def inflation_factor(inflation_rate: Amount, years_to_inflate: int) -> D:
    if isinstance(years_to_inflate, bool) or not isinstance(years_to_inflate, int):
        raise TypeError(f"years_to_inflate must be an int, got {type(years_to_inflate).__name__}")
    if years_to_inflate < 0:
        raise ValueError(f"years_to_inflate must be non-negative, got {years_to_inflate}")
    rate = to_decimal(inflation_rate)
    if not rate.is_finite():
        raise ValueError(f"inflation_rate must be finite, got {inflation_rate}")
    if years_to_inflate == 0:
        return ONE
    return (ONE + rate) ** years_to_inflate


def index_table(
    table: BracketTable,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
) -> IndexedBracketTable:
    factor = inflation_factor(inflation_rate, years_to_inflate)
    segments = tuple(
        BracketSegment(
            lower=segment.lower * factor,
            upper=None if segment.upper is None else segment.upper * factor,
            rate=segment.rate,
        )
        for segment in table.segments
    )
    return IndexedBracketTable(
        jurisdiction=table.jurisdiction,
        tax_year=table.tax_year,
        segments=segments,
        base_credit=table.base_credit * factor,
        base_credit_rate=table.base_credit_rate,
        inflation_factor=factor,
    )


def evaluate_tax(table: BracketTable, income: Amount) -> D:
    ti = normalize_income(income)
    tax = ZERO
    for segment in table.segments:
        if ti > segment.lower:
            top = ti if segment.upper is None else min(ti, segment.upper)
            tax += (top - segment.lower) * segment.rate
        if segment.upper is None or ti <= segment.upper:
            break
    return money(tax)


def marginal_rate(table: BracketTable, income: Amount) -> D:
    ti = normalize_income(income)
    for segment in table.segments:
        if segment.upper is None or ti <= segment.upper:
            return segment.rate
    return table.segments[-1].rate


def effective_rate(final_tax: Amount, income: Amount) -> D:
    base = to_decimal(income)
    if not base.is_finite() or base <= ZERO:
        return ZERO
    return to_decimal(final_tax) / base


def apply_credit(tax: Amount, credit: Amount) -> D:
    return money(max(ZERO, to_decimal(tax) - to_decimal(credit)))


__all__ = [
    "Amount",
    "BracketSegment",
    "BracketTable",
    "IndexedBracketTable",
    "apply_credit",
    "build_table",
    "effective_rate",
    "evaluate_tax",
    "index_table",
    "inflation_factor",
    "marginal_rate",
    "money",
    "normalize_income",
    "to_decimal",
]
