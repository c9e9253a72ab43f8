"""Shippo API configuration."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from shippo_checkout.exceptions import ConfigError

load_dotenv()

API_VERSION = "2018-02-08"
BASE_URL = "https://api.goshippo.com"


@dataclass(frozen=True)
class ShippoConfig:
    """Credentials and defaults handed to the Shippo client."""

    api_key: str
    api_version: str = API_VERSION
    base_url: str = BASE_URL
    timeout: float = 30.0
    currency: str = "USD"
    parcel_length: float = 10.0
    parcel_width: float = 8.0
    parcel_height: float = 4.0
    distance_unit: str = "in"
    mass_unit: str = "lb"

    def __post_init__(self):
        if not self.api_key:
            raise ConfigError(
                "SHIPPO_API_KEY must be set either as an argument or in a .env file."
            )

    @classmethod
    def from_env(cls, api_key: str | None = None, currency: str | None = None) -> "ShippoConfig":
        """Build a config from environment variables.

        Args:
            api_key: Overrides SHIPPO_API_KEY.
            currency: Overrides SHIPPO_CURRENCY.

        Returns:
            A populated ShippoConfig.
        """
        return cls(
            api_key=api_key or os.getenv("SHIPPO_API_KEY", ""),
            api_version=os.getenv("SHIPPO_API_VERSION", API_VERSION),
            base_url=os.getenv("SHIPPO_BASE_URL", BASE_URL).rstrip("/"),
            timeout=float(os.getenv("SHIPPO_TIMEOUT", "30")),
            currency=currency or os.getenv("SHIPPO_CURRENCY", "USD"),
            parcel_length=float(os.getenv("SHIPPO_PARCEL_LENGTH", "10")),
            parcel_width=float(os.getenv("SHIPPO_PARCEL_WIDTH", "8")),
            parcel_height=float(os.getenv("SHIPPO_PARCEL_HEIGHT", "4")),
            distance_unit=os.getenv("SHIPPO_DISTANCE_UNIT", "in"),
            mass_unit=os.getenv("SHIPPO_MASS_UNIT", "lb"),
        )
