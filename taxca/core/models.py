from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxca.core.jurisdictions import Jurisdiction, parse_region

MAX_INCOME = Decimal("10000000")


def _region(value):
    if value is None or isinstance(value, Jurisdiction):
        return value
    if not isinstance(value, str):
        raise ValueError("province must be a two-letter code")
    try:
        return parse_region(value)
    except KeyError as exc:
        raise ValueError(f"Unsupported province '{value}'") from exc


class CalculationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    year: int | None = Field(default=None, ge=2000, le=2030)


class IncomeTaxRequest(CalculationRequest):
    gross_income: Decimal = Field(alias="grossIncome", ge=0, le=MAX_INCOME)
    province: Jurisdiction
    inflation_rate: Decimal = Field(default=Decimal("0"), alias="inflationRate", ge=Decimal("-0.1"), le=Decimal("0.3"))
    years_to_inflate: int = Field(default=0, alias="yearsToInflate", ge=0, le=50)

    _province = field_validator("province", mode="before")(_region)


class CPPContributionRequest(CalculationRequest):
    income: Decimal = Field(ge=0, le=MAX_INCOME)
    province: Jurisdiction | None = None

    _province = field_validator("province", mode="before")(_region)


class EIContributionRequest(CalculationRequest):
    income: Decimal = Field(ge=0, le=MAX_INCOME)
    province: Jurisdiction

    _province = field_validator("province", mode="before")(_region)


class DividendTaxRequest(CalculationRequest):
    dividend_amount: Decimal = Field(alias="dividendAmount", ge=0, le=MAX_INCOME)
    is_eligible: bool = Field(alias="isEligible")
    province: Jurisdiction
    other_income: Decimal = Field(default=Decimal("0"), alias="otherIncome", ge=0, le=MAX_INCOME)

    _province = field_validator("province", mode="before")(_region)


class CapitalGainsRequest(CalculationRequest):
    capital_gains: Decimal = Field(alias="capitalGains", ge=0, le=MAX_INCOME)
    province: Jurisdiction
    other_income: Decimal = Field(default=Decimal("0"), alias="otherIncome", ge=0, le=MAX_INCOME)

    _province = field_validator("province", mode="before")(_region)


__all__ = [
    "CPPContributionRequest",
    "CalculationRequest",
    "CapitalGainsRequest",
    "DividendTaxRequest",
    "EIContributionRequest",
    "IncomeTaxRequest",
]
