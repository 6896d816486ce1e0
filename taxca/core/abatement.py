from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from taxca.core._progressive import ONE, ZERO, Amount, to_decimal
from taxca.core.jurisdictions import Jurisdiction, UnknownJurisdictionError, parse_jurisdiction

D = Decimal

# Refundable Quebec abatement (ITA s.120(2)), applied to basic federal tax.
QUEBEC_ABATEMENT_RATE = D("0.165")

logger = logging.getLogger("taxca").getChild("abatement")


@dataclass(frozen=True)
class JurisdictionAdjustment:
    jurisdiction: Jurisdiction
    abatement_rate: D


ADJUSTMENTS: Mapping[Jurisdiction, JurisdictionAdjustment] = MappingProxyType(
    {
        code: JurisdictionAdjustment(
            jurisdiction=code,
            abatement_rate=QUEBEC_ABATEMENT_RATE if code is Jurisdiction.QC else ZERO,
        )
        for code in Jurisdiction
    }
)


def abatement_rate(jurisdiction: Jurisdiction | str) -> D:
    try:
        code = parse_jurisdiction(jurisdiction)
    except UnknownJurisdictionError:
        logger.debug("No federal abatement for unknown jurisdiction %r", jurisdiction)
        return ZERO
    return ADJUSTMENTS[code].abatement_rate


def apply_abatement(gross_federal_tax: Amount, jurisdiction: Jurisdiction | str) -> D:
    gross = to_decimal(gross_federal_tax)
    rate = abatement_rate(jurisdiction)
    if rate == ZERO:
        return gross
    return gross * (ONE - rate)


__all__ = [
    "ADJUSTMENTS",
    "JurisdictionAdjustment",
    "QUEBEC_ABATEMENT_RATE",
    "abatement_rate",
    "apply_abatement",
]
