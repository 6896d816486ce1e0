from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from taxca.core._progressive import (
    ONE,
    ZERO,
    Amount,
    BracketTable,
    apply_credit,
    effective_rate,
    evaluate_tax,
    index_table,
    marginal_rate,
    money,
    normalize_income,
    to_decimal,
)
from taxca.core.abatement import abatement_rate, apply_abatement
from taxca.core.jurisdictions import Jurisdiction, parse_region
from taxca.core.tax_years import get_bracket_table

D = Decimal


@dataclass(frozen=True)
class TaxResult:
    jurisdiction: Jurisdiction
    tax_year: int
    gross_tax_before_credit: D
    abatement: D
    credit: D
    marginal_rate: D
    effective_rate: D
    final_tax: D


@dataclass(frozen=True)
class IncomeTaxSummary:
    province: Jurisdiction
    tax_year: int
    gross_income: D
    federal: TaxResult
    provincial: TaxResult
    total_tax: D
    after_tax_income: D
    effective_rate: D
    marginal_rate: D


def compute_table_tax(
    table: BracketTable,
    income: Amount,
    *,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    residence: Jurisdiction | str | None = None,
) -> TaxResult:
    """Run one bracket table through the full pipeline.

    Indexation, evaluation, abatement (federal tables only, keyed on the
    province of ``residence``), then the indexed base personal credit plus
    ``credit`` are subtracted and floored at zero.
    """
    indexed = index_table(table, inflation_rate, years_to_inflate)
    gross = evaluate_tax(indexed, income)
    adjusted = gross
    if table.jurisdiction.is_federal and residence is not None:
        adjusted = apply_abatement(gross, residence)
    total_credit = indexed.base_credit_amount + to_decimal(credit)
    final = apply_credit(adjusted, total_credit)
    return TaxResult(
        jurisdiction=table.jurisdiction,
        tax_year=table.tax_year,
        gross_tax_before_credit=gross,
        abatement=money(gross - adjusted),
        credit=total_credit,
        marginal_rate=marginal_rate(indexed, income),
        effective_rate=effective_rate(final, normalize_income(income)),
        final_tax=final,
    )


def tax_amount(
    jurisdiction: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    *,
    year: int | None = None,
) -> D:
    table = get_bracket_table(jurisdiction, year)
    return compute_table_tax(
        table,
        income,
        inflation_rate=inflation_rate,
        years_to_inflate=years_to_inflate,
        credit=credit,
    ).final_tax


def federal_tax_result(
    province: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    *,
    year: int | None = None,
) -> TaxResult:
    return compute_table_tax(
        get_bracket_table(Jurisdiction.CA, year),
        income,
        inflation_rate=inflation_rate,
        years_to_inflate=years_to_inflate,
        credit=credit,
        residence=province,
    )


def provincial_tax_result(
    province: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    *,
    year: int | None = None,
) -> TaxResult:
    return compute_table_tax(
        get_bracket_table(parse_region(province), year),
        income,
        inflation_rate=inflation_rate,
        years_to_inflate=years_to_inflate,
        credit=credit,
    )


def federal_tax_amount(
    province: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    *,
    year: int | None = None,
) -> D:
    return federal_tax_result(
        province, income, inflation_rate, years_to_inflate, credit, year=year
    ).final_tax


def provincial_tax_amount(
    province: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    credit: Amount = 0,
    *,
    year: int | None = None,
) -> D:
    return provincial_tax_result(
        province, income, inflation_rate, years_to_inflate, credit, year=year
    ).final_tax


def total_tax_amount(
    province: Jurisdiction | str,
    income: Amount,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    *,
    federal_credit: Amount = 0,
    provincial_credit: Amount = 0,
    year: int | None = None,
) -> D:
    federal = federal_tax_amount(province, income, inflation_rate, years_to_inflate, federal_credit, year=year)
    provincial = provincial_tax_amount(
        province, income, inflation_rate, years_to_inflate, provincial_credit, year=year
    )
    return federal + provincial


def compute_income_tax(
    province: Jurisdiction | str,
    gross_income: Amount,
    *,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
    federal_credit: Amount = 0,
    provincial_credit: Amount = 0,
    year: int | None = None,
) -> IncomeTaxSummary:
    region = parse_region(province)
    income = normalize_income(gross_income)
    federal = federal_tax_result(region, income, inflation_rate, years_to_inflate, federal_credit, year=year)
    provincial = provincial_tax_result(
        region, income, inflation_rate, years_to_inflate, provincial_credit, year=year
    )
    total = federal.final_tax + provincial.final_tax
    combined_marginal = federal.marginal_rate * (ONE - abatement_rate(region)) + provincial.marginal_rate
    return IncomeTaxSummary(
        province=region,
        tax_year=federal.tax_year,
        gross_income=income,
        federal=federal,
        provincial=provincial,
        total_tax=total,
        after_tax_income=income - total,
        effective_rate=effective_rate(total, income),
        marginal_rate=combined_marginal,
    )


def incremental_tax(
    province: Jurisdiction | str,
    base_income: Amount,
    extra_income: Amount,
    *,
    year: int | None = None,
) -> D:
    """Combined federal and provincial tax on ``extra_income`` stacked over ``base_income``.

    Credits are ignored; callers use this to price a slice of income at the
    taxpayer's own marginal brackets (dividends, capital gains).
    """
    region = parse_region(province)
    base = normalize_income(base_income)
    top = base + normalize_income(extra_income)
    federal_table = get_bracket_table(Jurisdiction.CA, year)
    provincial_table = get_bracket_table(region, year)
    federal = apply_abatement(evaluate_tax(federal_table, top) - evaluate_tax(federal_table, base), region)
    provincial = evaluate_tax(provincial_table, top) - evaluate_tax(provincial_table, base)
    return money(max(ZERO, federal + provincial))


__all__ = [
    "IncomeTaxSummary",
    "TaxResult",
    "compute_income_tax",
    "compute_table_tax",
    "federal_tax_amount",
    "federal_tax_result",
    "incremental_tax",
    "provincial_tax_amount",
    "provincial_tax_result",
    "tax_amount",
    "total_tax_amount",
]
