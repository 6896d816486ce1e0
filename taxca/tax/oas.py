from __future__ import annotations

from decimal import Decimal

from taxca.core._progressive import ZERO, Amount, inflation_factor, money, normalize_income, to_decimal

D = Decimal

# OAS pension recovery tax, 2025 income year.
OAS_RECOVERY_THRESHOLD_2025 = D("93454")
OAS_RECOVERY_RATIO = D("0.15")


def recovery_threshold(inflation_rate: Amount = 0, years_to_inflate: int = 0) -> D:
    return OAS_RECOVERY_THRESHOLD_2025 * inflation_factor(inflation_rate, years_to_inflate)


def oas_recovery(
    net_income: Amount,
    oas_received: Amount,
    *,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
) -> D:
    """Amount of OAS repaid through the recovery tax (the "clawback")."""
    pension = normalize_income(oas_received)
    excess = normalize_income(net_income) - recovery_threshold(inflation_rate, years_to_inflate)
    if excess <= ZERO:
        return money(ZERO)
    return money(min(pension, excess * OAS_RECOVERY_RATIO))


def full_recovery_income(
    oas_received: Amount,
    *,
    inflation_rate: Amount = 0,
    years_to_inflate: int = 0,
) -> D:
    """Net income at which the whole pension is recovered."""
    pension = to_decimal(oas_received)
    return money(recovery_threshold(inflation_rate, years_to_inflate) + pension / OAS_RECOVERY_RATIO)


__all__ = [
    "OAS_RECOVERY_RATIO",
    "OAS_RECOVERY_THRESHOLD_2025",
    "full_recovery_income",
    "oas_recovery",
    "recovery_threshold",
]
