from taxca.tax.income import (
    IncomeTaxSummary,
    TaxResult,
    compute_income_tax,
    federal_tax_amount,
    provincial_tax_amount,
    tax_amount,
    total_tax_amount,
)

__all__ = [
    "IncomeTaxSummary",
    "TaxResult",
    "compute_income_tax",
    "federal_tax_amount",
    "provincial_tax_amount",
    "tax_amount",
    "total_tax_amount",
]
