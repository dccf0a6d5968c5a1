"""Exceptions raised by the sales tax resolver."""

from typing import Optional


class SalesTaxError(Exception):
    """Base class for all sales tax resolution errors."""


class DataLoadError(SalesTaxError):
    """A bundled dataset is missing or malformed.

    The datasets ship with the package, so this is never retried.
    """

    def __init__(self, dataset: str, message: str) -> None:
        self.dataset = dataset
        super().__init__(f"Failed to load {dataset}: {message}")


class DateParseError(SalesTaxError, ValueError):
    """A historical rate boundary could not be parsed as a timestamp."""

    def __init__(self, value: str, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message or f"Failed to parse date {value!r}")
