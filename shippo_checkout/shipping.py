"""Shipping rate quotes and label purchases on top of the Shippo client."""

import logging

from shippo_checkout.exceptions import (
    InvalidAddressError,
    NoRatesError,
    RateNotFoundError,
    TransactionFailedError,
)
from shippo_checkout.models import (
    Address,
    ParcelInfo,
    Rate,
    Shipment,
    ShippingLabelResult,
    build_label_result,
)
from shippo_checkout.payload_builder import (
    build_address_payload,
    build_parcels,
    build_shipment_payload,
)
from shippo_checkout.shippo_client import ShippoClient

logger = logging.getLogger(__name__)

SUCCESS_TRANSACTION_STATUS = "SUCCESS"


def select_cheapest_rate(rates: list[Rate]) -> Rate:
    """Return the lowest-priced rate.

    The sort is stable, so among equal amounts the rate Shippo listed
    first wins.
    """
    return sorted(rates, key=lambda r: r.amount)[0]


def validate_address(address: dict) -> dict:
    """Raise InvalidAddressError unless Shippo marked the address valid."""
    results = address.get("validation_results") or {}
    if not results.get("is_valid"):
        logger.warning(
            "Shippo rejected address with zip %s: %s",
            address.get("zip"), results.get("messages", []),
        )
        raise InvalidAddressError(address.get("zip", ""))
    return address


class ShippingService:
    """Quotes shipping rates and purchases labels through Shippo."""

    def __init__(self, client: ShippoClient):
        self.client = client

    def create_address(self, address: Address, include_company: bool = False) -> dict:
        return self.client.create_address(
            build_address_payload(address, include_company=include_company)
        )

    def _create_addresses(self, from_address: Address, to_address: Address,
                          validate: bool) -> tuple[dict, dict]:
        to_shippo = self.create_address(to_address)
        if validate:
            validate_address(to_shippo)
        from_shippo = self.create_address(from_address, include_company=True)
        if validate:
            validate_address(from_shippo)
        return from_shippo, to_shippo

    def create_shipment(self, from_shippo: dict, to_shippo: dict,
                        parcels: list[ParcelInfo]) -> Shipment:
        payload = build_shipment_payload(
            from_shippo.get("object_id") or from_shippo,
            to_shippo.get("object_id") or to_shippo,
            build_parcels(parcels),
        )
        return Shipment.from_api(self.client.create_shipment(payload))

    def get_rates(self, shipment_id: str, currency: str) -> list[Rate]:
        return [
            Rate.from_api(r)
            for r in self.client.get_shipping_rates(shipment_id, currency)
        ]

    def quote(self, from_address: Address, to_address: Address,
              parcels: list[ParcelInfo], currency: str) -> Rate:
        """Quote the cheapest shipping rate.

        Both addresses are validated by Shippo before the shipment is
        created. A new remote shipment is created on every call.

        Args:
            from_address: Origin (company) address.
            to_address: Destination (customer) address.
            parcels: Parcels to ship.
            currency: Currency the rates are priced in.

        Returns:
            The lowest-priced Rate.

        Raises:
            InvalidAddressError: Shippo flagged either address as invalid.
            NoRatesError: Shippo returned no rates.
            ShippoAPIError: Any remote failure, unchanged.
        """
        from_shippo, to_shippo = self._create_addresses(
            from_address, to_address, validate=True
        )
        shipment = self.create_shipment(from_shippo, to_shippo, parcels)
        rates = self.get_rates(shipment.object_id, currency)
        if not rates:
            raise NoRatesError(shipment.object_id)

        rate = select_cheapest_rate(rates)
        logger.info(
            "Selected %s rate %s at %s %s from %d rate(s)",
            rate.provider, rate.object_id, rate.amount, rate.currency, len(rates),
        )
        return rate

    @staticmethod
    def get_rate(shipment: Shipment, rate_id: str) -> Rate:
        """Look up a rate by object id in the shipment's rate list."""
        for rate in shipment.rates:
            if rate.object_id == rate_id:
                return rate
        raise RateNotFoundError(rate_id)

    def purchase(self, from_address: Address, to_address: Address,
                 parcels: list[ParcelInfo], rate: Rate | str) -> ShippingLabelResult:
        """Purchase a shipping label for a previously quoted rate.

        The shipment is rebuilt rather than reused from the quote. A rate
        given by id is resolved against the rebuilt shipment's rates.

        Raises:
            RateNotFoundError: ``rate`` is an id the shipment does not list.
            TransactionFailedError: Shippo did not report SUCCESS.
            ShippoAPIError: Any remote failure, unchanged.
        """
        from_shippo, to_shippo = self._create_addresses(
            from_address, to_address, validate=False
        )
        shipment = self.create_shipment(from_shippo, to_shippo, parcels)
        if isinstance(rate, str):
            rate = self.get_rate(shipment, rate)

        return self.create_transaction(rate)

    def create_transaction(self, rate: Rate) -> ShippingLabelResult:
        transaction = self.client.create_transaction(rate.object_id)
        status = transaction.get("status")
        if status != SUCCESS_TRANSACTION_STATUS:
            messages = transaction.get("messages", [])
            logger.warning(
                "Shippo transaction for rate %s failed with status %s: %s",
                rate.object_id, status, messages,
            )
            raise TransactionFailedError(messages)

        result = build_label_result(transaction, rate)
        logger.info(
            "Purchased %s label, tracking number %s",
            result.carrier, result.tracking_number,
        )
        return result
