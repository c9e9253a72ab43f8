# tests/conftest.py
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from shippo_checkout.config import ShippoConfig
from shippo_checkout.models import Address, AddressType, ParcelInfo


@pytest.fixture
def config():
    """Provide a test config with fixed parcel defaults"""
    return ShippoConfig(api_key="shippo_test_key")


@pytest.fixture
def company_address():
    return Address(
        name="Duo Cart Warehouse",
        company="Duo Cart Ltd",
        street1="215 Clayton St.",
        city="San Francisco",
        state="CA",
        zip_code="94117",
        country="US",
        email="shipping@example.com",
        phone="+1 555 341 9393",
    )


@pytest.fixture
def customer_address():
    return Address(
        name="Jane Receiver",
        street1="965 Mission St",
        street2="Apt 4",
        city="San Francisco",
        state="CA",
        zip_code="94103",
        country="US",
        email="jane@example.com",
        phone="+1 555 123 4567",
        address_type=AddressType.SHIPPING,
        is_primary=True,
    )


@pytest.fixture
def parcels():
    return [ParcelInfo(10, 8, 4, "in", 2, "lb")]


def shippo_address(object_id, zip_code, is_valid=True, messages=None):
    """Build a Shippo address response."""
    return {
        "object_id": object_id,
        "zip": zip_code,
        "validation_results": {"is_valid": is_valid, "messages": messages or []},
    }


def shippo_rate(object_id, amount, provider="USPS", currency="USD", shipment="shp_1"):
    """Build a Shippo rate object."""
    return {
        "object_id": object_id,
        "amount": str(amount),
        "currency": currency,
        "amount_local": str(amount),
        "currency_local": currency,
        "provider": provider,
        "servicelevel": {"name": "Ground", "token": f"{provider.lower()}_ground"},
        "estimated_days": 3,
        "shipment": shipment,
    }


@pytest.fixture
def mock_client():
    """A ShippoClient double that accepts both addresses"""
    client = MagicMock()
    client.create_address.side_effect = lambda payload: shippo_address(
        f"adr_{payload['zip']}", payload["zip"]
    )
    client.create_shipment.return_value = {
        "object_id": "shp_1",
        "status": "SUCCESS",
        "rates": [shippo_rate("rate_a", Decimal("8.20"))],
    }
    return client
