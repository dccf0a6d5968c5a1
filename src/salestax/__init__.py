"""
Sales Tax - Sales tax resolution from bundled country and state rates

Resolves the tax type, rate, jurisdictional area, business/consumer
exchange status and direct/reverse charge rule for a sale from an origin
country to a destination country or state.
"""

__version__ = "0.1.0"

from . import tax_calculation
from . import utils
from .exceptions import DataLoadError, DateParseError, SalesTaxError
from .tax_calculation import (
    SalesTax,
    SalesTaxConfig,
    SalesTaxService,
    TaxArea,
    TaxCharge,
    TaxExchange,
)

__all__ = [
    "tax_calculation",
    "utils",
    "DataLoadError",
    "DateParseError",
    "SalesTaxError",
    "SalesTax",
    "SalesTaxConfig",
    "SalesTaxService",
    "TaxArea",
    "TaxCharge",
    "TaxExchange",
]
