from __future__ import annotations

import re
from functools import lru_cache
from importlib import import_module
from pathlib import Path
from typing import Mapping

from taxca.core._progressive import BracketTable
from taxca.core.jurisdictions import Jurisdiction, parse_jurisdiction

_YEAR_MODULE_PATTERN = re.compile(r"^y(\d{4})\.py$")

DEFAULT_TAX_YEAR = 2025


class UnsupportedTaxYearError(KeyError):
    pass


def _package_path() -> Path:
    return Path(__file__).resolve().parent


def _load_year_tables() -> Mapping[int, Mapping[Jurisdiction, BracketTable]]:
    mapping: dict[int, Mapping[Jurisdiction, BracketTable]] = {}
    for module_path in sorted(_package_path().glob("y20??.py")):
        match = _YEAR_MODULE_PATTERN.match(module_path.name)
        if not match:
            continue
        module = import_module(f"{__name__}.{module_path.stem}")
        tables = getattr(module, "TABLES", None)
        if tables is None:
            continue
        mapping[int(match.group(1))] = tables
    return mapping


@lru_cache(maxsize=1)
def _year_map() -> Mapping[int, Mapping[Jurisdiction, BracketTable]]:
    return _load_year_tables()


SUPPORTED_YEARS: tuple[int, ...] = tuple(sorted(_year_map().keys()))


def tables_for_year(year: int | None = None) -> Mapping[Jurisdiction, BracketTable]:
    resolved = DEFAULT_TAX_YEAR if year is None else year
    try:
        return _year_map()[resolved]
    except KeyError as exc:
        raise UnsupportedTaxYearError(f"Unsupported tax year {resolved}") from exc


def get_bracket_table(jurisdiction: Jurisdiction | str, year: int | None = None) -> BracketTable:
    code = parse_jurisdiction(jurisdiction)
    return tables_for_year(year)[code]


__all__ = [
    "DEFAULT_TAX_YEAR",
    "SUPPORTED_YEARS",
    "UnsupportedTaxYearError",
    "get_bracket_table",
    "tables_for_year",
]
