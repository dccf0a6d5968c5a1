"""Repository for the bundled region and tax rate datasets."""

from __future__ import annotations

import json
import threading
from importlib import resources
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Union

from ..exceptions import DataLoadError
from ..utils.logging import get_logger
from .models import RateRecord

logger = get_logger(__name__)

REGION_DATASET = "region_countries.json"
RATE_DATASET = "sales_tax_rates.json"

RegionTable = Mapping[str, FrozenSet[str]]
RateTable = Mapping[str, RateRecord]


def _read_bundled(name: str) -> bytes:
    try:
        return (resources.files("salestax") / "data" / name).read_bytes()
    except (FileNotFoundError, OSError) as e:
        raise DataLoadError(name, f"bundled file is unavailable ({e})") from e


def _parse_json(name: str, payload: Union[str, bytes]) -> Dict[str, Any]:
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(name, f"invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise DataLoadError(name, f"expected a JSON object, got {type(data).__name__}")
    return data


def parse_regions(payload: Union[str, bytes], name: str = REGION_DATASET) -> RegionTable:
    regions: Dict[str, FrozenSet[str]] = {}
    for region, countries in _parse_json(name, payload).items():
        if not isinstance(countries, list) or not all(isinstance(c, str) for c in countries):
            raise DataLoadError(name, f"region {region!r} must list country codes")
        regions[region] = frozenset(c.upper() for c in countries)
    return MappingProxyType(regions)


def parse_rates(payload: Union[str, bytes], name: str = RATE_DATASET) -> RateTable:
    rates: Dict[str, RateRecord] = {}
    for country, entry in _parse_json(name, payload).items():
        try:
            rates[country.upper()] = RateRecord.from_dict(entry)
        except (KeyError, TypeError, ValueError) as e:
            raise DataLoadError(name, f"invalid rate entry for {country}: {e!r}") from e
    return MappingProxyType(rates)


class ReferenceDataRepository:
    """Loads the region and rate tables once and serves them read-only.

    ``region_data`` and ``rate_data`` replace the bundled payloads when given.
    Each table is parsed on first access under a lock; later calls return
    the cached table.
    """

    def __init__(
        self,
        region_data: Optional[Union[str, bytes]] = None,
        rate_data: Optional[Union[str, bytes]] = None,
    ) -> None:
        self._region_data = region_data
        self._rate_data = rate_data
        self._regions: Optional[RegionTable] = None
        self._rates: Optional[RateTable] = None
        self._lock = threading.Lock()

    def regions(self) -> RegionTable:
        if self._regions is None:
            self._load("_regions", REGION_DATASET, self._region_data, parse_regions)
        return self._regions

    def rates(self) -> RateTable:
        if self._rates is None:
            self._load("_rates", RATE_DATASET, self._rate_data, parse_rates)
        return self._rates

    def preload(self) -> None:
        """Populate both caches eagerly."""
        self.regions()
        self.rates()

    def _load(
        self,
        attr: str,
        name: str,
        payload: Optional[Union[str, bytes]],
        parser: Callable[[Union[str, bytes], str], Mapping[str, Any]],
    ) -> None:
        with self._lock:
            if getattr(self, attr) is not None:
                return
            try:
                if payload is None:
                    payload = _read_bundled(name)
                table = parser(payload, name)
            except DataLoadError as e:
                logger.error(f"Error: {e}")
                raise
            logger.info(f"Loaded {len(table)} entries from {name}")
            setattr(self, attr, table)
