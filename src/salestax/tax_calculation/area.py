"""Jurisdictional area classification."""

from __future__ import annotations

from typing import List, Optional

from ..utils.logging import get_logger
from .models import TaxArea
from .repository import ReferenceDataRepository

logger = get_logger(__name__)


class AreaClassifier:
    """Classify a transaction as national, regional or worldwide."""

    def __init__(self, repository: ReferenceDataRepository) -> None:
        self.repository = repository

    def classify(self, origin_country_code: Optional[str], destination_country_code: str) -> TaxArea:
        if not origin_country_code:
            return TaxArea.WORLDWIDE

        origin = origin_country_code.upper()
        destination = destination_country_code.upper()
        if origin == destination:
            return TaxArea.NATIONAL

        regions = self.repository.regions()
        for region in sorted(regions):
            members = regions[region]
            if origin in members and destination in members:
                logger.debug(f"{origin} and {destination} share region {region}")
                return TaxArea.REGIONAL

        return TaxArea.WORLDWIDE

    def regions_of(self, country_code: str) -> List[str]:
        """Region codes a country belongs to, sorted."""
        code = country_code.upper()
        regions = self.repository.regions()
        return [region for region in sorted(regions) if code in regions[region]]
