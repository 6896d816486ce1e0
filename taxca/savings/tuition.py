from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from taxca.core.jurisdictions import Jurisdiction as J, parse_region

D = Decimal

TUITION_YEAR = "2024-2025"

# Average undergraduate tuition for full-time Canadian students. NT and NU have
# no published average and use estimates.
TUITION_FEES: Mapping[J, D] = MappingProxyType(
    {
        J.AB: D("7734"),
        J.BC: D("6607"),
        J.MB: D("5534"),
        J.NB: D("9470"),
        J.NL: D("3727"),
        J.NS: D("9762"),
        J.NT: D("6000"),
        J.NU: D("6500"),
        J.ON: D("8514"),
        J.PE: D("7728"),
        J.QC: D("3594"),
        J.SK: D("9609"),
        J.YT: D("4350"),
    }
)


def tuition_fees(province: J | str) -> D:
    return TUITION_FEES[parse_region(province)]


__all__ = ["TUITION_FEES", "TUITION_YEAR", "tuition_fees"]
