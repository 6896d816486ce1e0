from taxca.core._progressive import (
    BracketSegment,
    BracketTable,
    IndexedBracketTable,
    apply_credit,
    effective_rate,
    evaluate_tax,
    index_table,
    marginal_rate,
    to_decimal,
)
from taxca.core.abatement import JurisdictionAdjustment, apply_abatement
from taxca.core.jurisdictions import Jurisdiction, UnknownJurisdictionError
from taxca.core.tax_years import (
    DEFAULT_TAX_YEAR,
    SUPPORTED_YEARS,
    UnsupportedTaxYearError,
    get_bracket_table,
)

__all__ = [
    "BracketSegment",
    "BracketTable",
    "DEFAULT_TAX_YEAR",
    "IndexedBracketTable",
    "Jurisdiction",
    "JurisdictionAdjustment",
    "SUPPORTED_YEARS",
    "UnknownJurisdictionError",
    "UnsupportedTaxYearError",
    "apply_abatement",
    "apply_credit",
    "effective_rate",
    "evaluate_tax",
    "get_bracket_table",
    "index_table",
    "marginal_rate",
    "to_decimal",
]
