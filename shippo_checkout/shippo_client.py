"""Shippo REST API client for addresses, shipments, rates and transactions."""

import logging

import requests

from shippo_checkout.config import ShippoConfig
from shippo_checkout.exceptions import (
    APIConnectionError,
    AuthenticationError,
    InvalidRequestError,
    ShippoAPIError,
)

logger = logging.getLogger(__name__)


class ShippoClient:
    """Client for the Shippo REST API.

    Credentials come from the ShippoConfig passed in; nothing is read from
    process-wide state at call time.
    """

    def __init__(self, config: ShippoConfig, session: requests.Session | None = None):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"ShippoToken {config.api_key}",
                "Shippo-API-Version": config.api_version,
                "Content-Type": "application/json",
            }
        )

    def _request(self, method: str, endpoint: str, payload: dict | None = None) -> dict:
        url = f"{self.base_url}/{endpoint}"
        try:
            resp = self.session.request(
                method, url, json=payload, timeout=self.config.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise APIConnectionError(f"Could not reach Shippo at {url}: {exc}") from exc

        if resp.status_code in (401, 403):
            raise AuthenticationError(
                "Shippo rejected the API key", resp.status_code, resp.text
            )
        if resp.status_code in (400, 404, 422):
            raise InvalidRequestError(
                f"Shippo rejected {method} {endpoint}: {resp.text}",
                resp.status_code,
                resp.text,
            )
        if resp.status_code >= 400:
            raise ShippoAPIError(
                f"Shippo API error {resp.status_code} on {method} {endpoint}",
                resp.status_code,
                resp.text,
            )
        return resp.json()

    def _get(self, endpoint: str) -> dict:
        return self._request("GET", endpoint)

    def _post(self, endpoint: str, payload: dict) -> dict:
        return self._request("POST", endpoint, payload)

    def create_address(self, payload: dict) -> dict:
        """Create (and, with ``validate`` set, verify) an address object."""
        return self._post("addresses/", payload)

    def create_shipment(self, payload: dict) -> dict:
        """Create a shipment and return it with its rates."""
        shipment = self._post("shipments/", payload)
        logger.info("Created Shippo shipment %s", shipment.get("object_id"))
        return shipment

    def get_shipping_rates(self, shipment_id: str, currency: str) -> list[dict]:
        """Fetch the rates of a shipment in the given currency.

        Args:
            shipment_id: Shippo shipment object id.
            currency: ISO 4217 currency code for ``amount_local``.

        Returns:
            List of Shippo rate objects.
        """
        data = self._get(f"shipments/{shipment_id}/rates/{currency}")
        return data.get("results", [])

    def create_transaction(self, rate_id: str) -> dict:
        """Purchase a label for the given rate synchronously."""
        return self._post("transactions/", {"rate": rate_id, "async": False})
