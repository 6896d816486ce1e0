import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from fastapi import APIRouter, Path, Request

from taxca.config import get_settings
from taxca.core._progressive import BracketTable
from taxca.core.abatement import abatement_rate
from taxca.core.jurisdictions import Jurisdiction, list_regions, parse_region
from taxca.core.models import (
    CapitalGainsRequest,
    CPPContributionRequest,
    DividendTaxRequest,
    EIContributionRequest,
    IncomeTaxRequest,
)
from taxca.core.tax_years import get_bracket_table
from taxca.payroll.insurance import ei_premium, get_ei
from taxca.payroll.pension import PublicPensionPlan, get_plan, pension_contributions, plan_for
from taxca.tax.capital_gains import capital_gains_tax
from taxca.tax.dividends import dividend_tax
from taxca.tax.income import compute_income_tax

logger = logging.getLogger("taxca").getChild("api")
router = APIRouter(prefix="/api")

D = Decimal


def _round(value: Decimal, places: int) -> float:
    return float(D(value).quantize(D(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _money(value: Decimal) -> float:
    return _round(value, 2)


def _rate(value: Decimal) -> float:
    return _round(value, 4)


def _ok(data: dict[str, Any], message: str) -> dict[str, Any]:
    return {"success": True, "data": data, "message": message}


def _resolve_year(request: Request, year: int | None) -> int:
    if year is not None:
        return year
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return settings.default_tax_year


def _table_payload(table: BracketTable) -> dict[str, Any]:
    return {
        "rates": [
            {
                "from": float(segment.lower),
                "to": None if segment.upper is None else float(segment.upper),
                "rate": float(segment.rate),
            }
            for segment in table.segments
        ],
        "baseTaxCredit": float(table.base_credit),
        "taxCreditRate": float(table.base_credit_rate),
    }


def _plan_payload(plan: PublicPensionPlan) -> dict[str, Any]:
    return {
        "basicExemption": float(plan.earnings.basic_exemption),
        "ympe": float(plan.earnings.ympe),
        "yampe": float(plan.earnings.yampe),
        "baseRate": float(plan.base_rate),
        "enhancementRate": float(plan.enhancement_rate),
        "maxBaseContribution": _money(plan.max_base_contribution),
        "maxEnhancementContribution": _money(plan.max_enhancement_contribution),
    }


@router.post("/calculate/income-tax")
def calculate_income_tax(payload: IncomeTaxRequest, request: Request):
    year = _resolve_year(request, payload.year)
    summary = compute_income_tax(
        payload.province,
        payload.gross_income,
        inflation_rate=payload.inflation_rate,
        years_to_inflate=payload.years_to_inflate,
        year=year,
    )
    logger.debug("income-tax province=%s year=%s", summary.province.value, year)
    return _ok(
        {
            "grossIncome": _money(summary.gross_income),
            "province": summary.province.value,
            "year": summary.tax_year,
            "federalTax": _money(summary.federal.final_tax),
            "provincialTax": _money(summary.provincial.final_tax),
            "totalTax": _money(summary.total_tax),
            "afterTaxIncome": _money(summary.after_tax_income),
            "effectiveTaxRate": _rate(summary.effective_rate),
            "marginalTaxRate": _rate(summary.marginal_rate),
            "federalAbatement": _money(summary.federal.abatement),
        },
        "Income tax calculated successfully",
    )


@router.post("/calculate/cpp-contributions")
def calculate_cpp_contributions(payload: CPPContributionRequest, request: Request):
    year = _resolve_year(request, payload.year)
    plan = plan_for(payload.province, year)
    result = pension_contributions(payload.income, plan)
    return _ok(
        {
            "plan": result.plan,
            "income": _money(result.income),
            "pensionableEarnings": _money(result.pensionable_earnings),
            "baseContribution": _money(result.base_contribution),
            "enhancementContribution": _money(result.enhancement_contribution),
            "totalContribution": _money(result.total_contribution),
            "year": result.tax_year,
        },
        "CPP contributions calculated successfully",
    )


@router.post("/calculate/ei-contributions")
def calculate_ei_contributions(payload: EIContributionRequest, request: Request):
    year = _resolve_year(request, payload.year)
    result = ei_premium(payload.income, payload.province, year=year)
    return _ok(
        {
            "income": _money(result.income),
            "province": payload.province.value,
            "insurableEarnings": _money(result.insurable_earnings),
            "premiumRate": _round(result.premium_rate, 6),
            "contribution": _money(result.premium),
            "year": year,
        },
        "EI contributions calculated successfully",
    )


@router.post("/calculate/dividend-tax")
def calculate_dividend_tax(payload: DividendTaxRequest, request: Request):
    year = _resolve_year(request, payload.year)
    result = dividend_tax(
        payload.dividend_amount,
        payload.is_eligible,
        payload.province,
        other_income=payload.other_income,
        year=year,
    )
    return _ok(
        {
            "originalDividend": _money(result.dividend),
            "grossedUpDividend": _money(result.grossed_up),
            "federalTaxCredit": _money(result.federal_credit),
            "provincialTaxCredit": _money(result.provincial_credit),
            "taxCredit": _money(result.total_credit),
            "taxOnGrossedUp": _money(result.tax_on_grossed_up),
            "netTax": _money(result.net_tax),
            "afterTaxDividend": _money(result.after_tax_dividend),
            "effectiveTaxRate": _rate(result.effective_rate),
        },
        "Dividend tax calculated successfully",
    )


@router.post("/calculate/capital-gains")
def calculate_capital_gains(payload: CapitalGainsRequest, request: Request):
    year = _resolve_year(request, payload.year)
    result = capital_gains_tax(
        payload.capital_gains,
        payload.province,
        other_income=payload.other_income,
        year=year,
    )
    return _ok(
        {
            "totalCapitalGains": _money(result.capital_gains),
            "taxableCapitalGains": _money(result.taxable_capital_gains),
            "taxOnCapitalGains": _money(result.tax),
            "afterTaxGains": _money(result.after_tax_gains),
            "effectiveTaxRate": _rate(result.effective_rate),
        },
        "Capital gains tax calculated successfully",
    )


@router.get("/data/tax-brackets/{year}/{province}")
def tax_brackets(province: str, year: int = Path(ge=2000, le=2030)):
    region = parse_region(province)
    federal = _table_payload(get_bracket_table(Jurisdiction.CA, year))
    provincial = _table_payload(get_bracket_table(region, year))
    provincial["abatement"] = float(abatement_rate(region))
    return _ok(
        {"year": year, "province": region.value, "federal": federal, "provincial": provincial},
        "Tax brackets retrieved successfully",
    )


@router.get("/data/pension-limits/{year}")
def pension_limits(year: int = Path(ge=2000, le=2030)):
    ei = get_ei(year)
    return _ok(
        {
            "year": year,
            "cpp": _plan_payload(get_plan("CPP", year)),
            "qpp": _plan_payload(get_plan("QPP", year)),
            "ei": {
                "maxInsurableEarnings": float(ei.max_insurable_earnings),
                "premiumRates": {"ca": float(ei.rate_ca), "qc": float(ei.rate_qc)},
            },
        },
        "Pension limits retrieved successfully",
    )


@router.get("/data/provinces")
def provinces():
    return _ok(
        {"provinces": [{"code": region.value, "name": region.label} for region in list_regions()]},
        "Provinces retrieved successfully",
    )


__all__ = ["router"]
