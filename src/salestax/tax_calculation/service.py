"""Sales tax service combining area, rate and exchange classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import DateParseError
from ..utils.config import Config
from ..utils.logging import get_logger, setup_logging
from .area import AreaClassifier
from .exchange import ExchangeClassifier
from .models import NO_TAX, SalesTax, TaxArea, TaxCharge, TaxExchange
from .rates import Clock, RateResolver
from .repository import ReferenceDataRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SalesTaxConfig:
    """Seller-side settings.

    ``origin_country_code`` is the country of tax registration; ``None``
    means no fixed domicile. With ``regional_tax_enabled`` off, sales inside
    the origin's region are taxed at the origin's rate.
    """

    origin_country_code: Optional[str] = None
    regional_tax_enabled: bool = True

    def __post_init__(self) -> None:
        if self.origin_country_code is not None:
            object.__setattr__(self, "origin_country_code", self.origin_country_code.upper() or None)


class SalesTaxService:
    """High-level service returning the tax decision for a destination."""

    def __init__(
        self,
        config: Optional[SalesTaxConfig] = None,
        repository: Optional[ReferenceDataRepository] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or SalesTaxConfig()
        self.repository = repository or ReferenceDataRepository()
        self.rate_resolver = RateResolver(self.repository, clock=clock)
        self.area_classifier = AreaClassifier(self.repository)
        self.exchange_classifier = ExchangeClassifier(
            self.area_classifier,
            self.rate_resolver,
            origin_country_code=self.config.origin_country_code,
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        repository: Optional[ReferenceDataRepository] = None,
        clock: Optional[Clock] = None,
    ) -> "SalesTaxService":
        config = config or Config()
        setup_logging(level=config["log_level"])
        return cls(config.to_sales_tax_config(), repository=repository, clock=clock)

    def get_sales_tax(
        self,
        country_code: str,
        state_code: Optional[str] = None,
        tax_number: Optional[str] = None,
    ) -> SalesTax:
        """
        Compute the sales tax decision for a destination.

        Args:
            country_code: Destination country code (case-insensitive)
            state_code: Destination state or province code (optional)
            tax_number: Buyer's tax identification number (optional, not validated)

        Returns:
            SalesTax with the nominal rate, even when the buyer is exempt
        """
        country_code = country_code.upper()
        state_code = state_code.upper() if state_code else None
        tax_number = tax_number or None
        origin = self.config.origin_country_code

        try:
            decision = self._compute(country_code, state_code, tax_number, origin)
        except DateParseError as e:
            logger.error(f"Error: {e}")
            raise

        logger.debug(
            f"Sales tax for {country_code}{'-' + state_code if state_code else ''} "
            f"from {origin or 'no origin'}: {decision.to_dict()}"
        )
        return decision

    compute_tax = get_sales_tax

    def _compute(
        self,
        country_code: str,
        state_code: Optional[str],
        tax_number: Optional[str],
        origin: Optional[str],
    ) -> SalesTax:
        now = self.rate_resolver.clock()
        area = self.area_classifier.classify(origin, country_code)

        if area == TaxArea.REGIONAL and not self.config.regional_tax_enabled and origin:
            country_tax = self.rate_resolver.resolve(origin, now)
            state_tax = NO_TAX
        else:
            country_tax = self.rate_resolver.resolve(country_code, now)
            if state_code and country_tax.states:
                state_tax = self.rate_resolver.resolve_state(country_code, state_code, now)
            else:
                state_tax = NO_TAX

        total_rate = country_tax.rate + state_tax.rate

        exchange, is_exempt = TaxExchange.CONSUMER, False
        if total_rate > 0:
            exchange, is_exempt = self.exchange_classifier.classify(
                country_code, state_code, tax_number, at=now
            )

        tax_type = country_tax.tax_type
        if state_tax.rate > 0:
            if country_tax.rate > 0:
                tax_type = f"{tax_type}+{state_tax.tax_type}"
            else:
                tax_type = state_tax.tax_type

        charge = TaxCharge()
        if tax_type != "none":
            charge = TaxCharge(direct=not is_exempt, reverse=is_exempt and total_rate > 0)

        return SalesTax(
            tax_type=tax_type,
            rate=total_rate,
            area=area,
            exchange=exchange,
            charge=charge,
        )
