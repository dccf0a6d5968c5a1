"""
Configuration utilities for the sales tax resolver.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from dotenv import load_dotenv

if TYPE_CHECKING:
    from ..tax_calculation.service import SalesTaxConfig


class Config:
    """Configuration manager for the sales tax resolver."""

    def __init__(self, env_file: Optional[str] = None) -> None:
        """Initialize configuration.

        If an env_file path is provided, load environment variables from it.
        Otherwise, do not auto-load a .env file to keep defaults predictable.
        """
        self.env_file = env_file
        self._load_environment()
        self._config = self._load_config()

    def _load_environment(self) -> None:
        """Load environment variables from explicit .env file if provided."""
        if not self.env_file:
            return
        env_path = Path(self.env_file)
        if env_path.exists():
            load_dotenv(env_path)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        return {
            "log_level": self._get_str("LOG_LEVEL", default="INFO"),
            # Seller's tax domicile
            "origin_country_code": self._get_str("SALESTAX_ORIGIN_COUNTRY", default="").upper() or None,
            "regional_tax_enabled": self._get_bool("SALESTAX_REGIONAL_TAX_ENABLED", default=True),
        }

    def _get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        if self.env_file is None:
            return default
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        if self.env_file is None:
            return default
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using bracket notation."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    def to_sales_tax_config(self) -> "SalesTaxConfig":
        """Build the seller-side settings used by SalesTaxService."""
        from ..tax_calculation.service import SalesTaxConfig

        return SalesTaxConfig(
            origin_country_code=self["origin_country_code"],
            regional_tax_enabled=self["regional_tax_enabled"],
        )
