"""Tax calculation module entry point."""

from .area import AreaClassifier
from .exchange import ExchangeClassifier
from .models import NO_TAX, RateRecord, SalesTax, TaxArea, TaxCharge, TaxExchange
from .rates import RateResolver, parse_boundary, select_effective_rate
from .repository import ReferenceDataRepository
from .service import SalesTaxConfig, SalesTaxService

__all__ = [
    "AreaClassifier",
    "ExchangeClassifier",
    "NO_TAX",
    "RateRecord",
    "RateResolver",
    "ReferenceDataRepository",
    "SalesTax",
    "SalesTaxConfig",
    "SalesTaxService",
    "TaxArea",
    "TaxCharge",
    "TaxExchange",
    "parse_boundary",
    "select_effective_rate",
]
