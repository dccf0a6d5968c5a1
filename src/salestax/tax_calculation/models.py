"""Data model for rate records and tax decisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class TaxArea(str, Enum):
    NATIONAL = "national"
    REGIONAL = "regional"
    WORLDWIDE = "worldwide"


class TaxExchange(str, Enum):
    BUSINESS = "business"
    CONSUMER = "consumer"


_EMPTY: Mapping[str, "RateRecord"] = MappingProxyType({})


def _nested(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise TypeError(f"{key} must be an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class RateRecord:
    """A tax rate in force for a country or state.

    ``before`` maps a boundary timestamp to the record that applied until
    that instant. ``states`` maps a state/province code to its own record.
    """

    tax_type: str
    rate: float
    states: Mapping[str, RateRecord] = field(default_factory=lambda: _EMPTY, compare=False)
    before: Mapping[str, RateRecord] = field(default_factory=lambda: _EMPTY, compare=False)
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        if self.rate < 0:
            raise ValueError(f"rate must be non-negative, got {self.rate}")
        if self.tax_type == "none" and self.rate != 0:
            raise ValueError(f"'none' tax type cannot carry a rate ({self.rate})")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RateRecord:
        """Build a record (and its nested history/states) from the JSON shape."""
        if not isinstance(data, dict):
            raise TypeError(f"rate entry must be an object, got {type(data).__name__}")
        rate = data["rate"]
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise TypeError(f"rate must be a number, got {rate!r}")
        states = {code.upper(): cls.from_dict(sub) for code, sub in _nested(data, "states").items()}
        before = {stamp: cls.from_dict(sub) for stamp, sub in _nested(data, "before").items()}
        return cls(
            tax_type=str(data["type"]),
            rate=float(rate),
            states=MappingProxyType(states) if states else _EMPTY,
            before=MappingProxyType(before) if before else _EMPTY,
            currency=data.get("currency"),
        )


NO_TAX = RateRecord(tax_type="none", rate=0.0)


@dataclass(frozen=True)
class TaxCharge:
    direct: bool = False
    reverse: bool = False


@dataclass(frozen=True)
class SalesTax:
    """Final tax decision for a transaction."""

    tax_type: str
    rate: float
    area: TaxArea
    exchange: TaxExchange
    charge: TaxCharge

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.tax_type,
            "rate": self.rate,
            "area": self.area.value,
            "exchange": self.exchange.value,
            "charge": {"direct": self.charge.direct, "reverse": self.charge.reverse},
        }
