"""Business/consumer classification and exemption status."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from .area import AreaClassifier
from .models import TaxArea, TaxExchange
from .rates import RateResolver


class ExchangeClassifier:
    """Decide who is treated as the counterparty and whether they are exempt.

    A supplied tax number is taken as proof of business status; it is not
    validated.
    """

    def __init__(
        self,
        area_classifier: AreaClassifier,
        rate_resolver: RateResolver,
        origin_country_code: Optional[str] = None,
    ) -> None:
        self.area_classifier = area_classifier
        self.rate_resolver = rate_resolver
        self.origin_country_code = origin_country_code

    def has_total_sales_tax(
        self, country_code: str, state_code: Optional[str] = None, at: Optional[datetime] = None
    ) -> bool:
        country = self.rate_resolver.resolve(country_code, at)
        state = self.rate_resolver.resolve_state(country_code, state_code, at)
        return country.rate + state.rate > 0

    def classify(
        self,
        destination_country_code: str,
        destination_state_code: Optional[str] = None,
        tax_number: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> Tuple[TaxExchange, bool]:
        if not self.has_total_sales_tax(destination_country_code, destination_state_code, at):
            return TaxExchange.CONSUMER, True

        if tax_number:
            area = self.area_classifier.classify(self.origin_country_code, destination_country_code)
            return TaxExchange.BUSINESS, area != TaxArea.NATIONAL

        return TaxExchange.CONSUMER, False
