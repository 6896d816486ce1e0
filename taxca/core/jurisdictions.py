from __future__ import annotations

from enum import Enum


class Jurisdiction(str, Enum):
    CA = "CA"
    AB = "AB"
    BC = "BC"
    MB = "MB"
    NB = "NB"
    NL = "NL"
    NS = "NS"
    NT = "NT"
    NU = "NU"
    ON = "ON"
    PE = "PE"
    QC = "QC"
    SK = "SK"
    YT = "YT"

    @property
    def is_federal(self) -> bool:
        return self is Jurisdiction.CA

    @property
    def label(self) -> str:
        return _NAMES[self]


_NAMES: dict[Jurisdiction, str] = {
    Jurisdiction.CA: "Canada",
    Jurisdiction.AB: "Alberta",
    Jurisdiction.BC: "British Columbia",
    Jurisdiction.MB: "Manitoba",
    Jurisdiction.NB: "New Brunswick",
    Jurisdiction.NL: "Newfoundland and Labrador",
    Jurisdiction.NS: "Nova Scotia",
    Jurisdiction.NT: "Northwest Territories",
    Jurisdiction.NU: "Nunavut",
    Jurisdiction.ON: "Ontario",
    Jurisdiction.PE: "Prince Edward Island",
    Jurisdiction.QC: "Quebec",
    Jurisdiction.SK: "Saskatchewan",
    Jurisdiction.YT: "Yukon",
}

REGIONS: tuple[Jurisdiction, ...] = tuple(j for j in Jurisdiction if not j.is_federal)


class UnknownJurisdictionError(KeyError):
    pass


def parse_jurisdiction(code: Jurisdiction | str) -> Jurisdiction:
    if isinstance(code, Jurisdiction):
        return code
    try:
        return Jurisdiction(str(code).strip().upper())
    except ValueError as exc:
        raise UnknownJurisdictionError(f"Unknown jurisdiction code '{code}'") from exc


def parse_region(code: Jurisdiction | str) -> Jurisdiction:
    """Resolve a province/territory code; the federal pseudo-code is rejected."""
    jurisdiction = parse_jurisdiction(code)
    if jurisdiction.is_federal:
        raise UnknownJurisdictionError(f"'{jurisdiction.value}' is not a province or territory")
    return jurisdiction


def jurisdiction_name(code: Jurisdiction | str) -> str:
    return parse_jurisdiction(code).label


def list_regions() -> list[Jurisdiction]:
    return sorted(REGIONS, key=lambda j: j.value)


__all__ = [
    "Jurisdiction",
    "REGIONS",
    "UnknownJurisdictionError",
    "jurisdiction_name",
    "list_regions",
    "parse_jurisdiction",
    "parse_region",
]
