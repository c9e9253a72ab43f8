"""Shared data models for shipping quotes, labels and the checkout boundary."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class AddressType(str, Enum):
    SHIPPING = "shipping"
    BILLING = "billing"


@dataclass(frozen=True)
class Address:
    """A postal address as supplied by the checkout domain."""

    name: str
    street1: str
    city: str
    state: str
    zip_code: str
    country: str
    street2: str = ""
    email: str = ""
    phone: str = ""
    company: str | None = None
    address_type: AddressType = AddressType.SHIPPING
    is_primary: bool = False

    @property
    def full_address(self) -> str:
        parts = [self.street1]
        if self.street2:
            parts.append(self.street2)
        parts.extend([self.city, self.state, self.zip_code, self.country])
        return ", ".join(p for p in parts if p)


@dataclass(frozen=True)
class ParcelInfo:
    """Physical dimensions and weight of one parcel."""

    length: float
    width: float
    height: float
    distance_unit: str
    weight: float
    mass_unit: str


@dataclass(frozen=True)
class Rate:
    """A priced shipping option returned for a shipment."""

    object_id: str
    amount: Decimal
    currency: str
    provider: str
    service_name: str = ""
    service_token: str = ""
    estimated_days: int | None = None
    shipment_id: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Rate":
        """Build a Rate from a Shippo rate object.

        The local amount (in the currency the rates were requested in) is
        preferred over the carrier's billing amount.
        """
        servicelevel = data.get("servicelevel") or {}
        amount = data.get("amount_local") or data.get("amount") or "0"
        currency = data.get("currency_local") or data.get("currency") or ""
        return cls(
            object_id=data.get("object_id", ""),
            amount=Decimal(str(amount)),
            currency=currency,
            provider=data.get("provider", ""),
            service_name=servicelevel.get("name", ""),
            service_token=servicelevel.get("token", ""),
            estimated_days=data.get("estimated_days"),
            shipment_id=data.get("shipment", ""),
        )


@dataclass
class Shipment:
    """A Shippo shipment and the rates it was quoted."""

    object_id: str
    status: str = ""
    rates: list[Rate] = field(default_factory=list)
    messages: list = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Shipment":
        return cls(
            object_id=data.get("object_id", ""),
            status=data.get("status", ""),
            rates=[Rate.from_api(r) for r in data.get("rates", [])],
            messages=data.get("messages", []),
        )


@dataclass(frozen=True)
class ShippingLabelResult:
    """Carrier and tracking details of a purchased label."""

    carrier: str
    tracking_number: str
    tracking_url: str
    label_url: str


def build_label_result(transaction: dict, rate: Rate) -> ShippingLabelResult:
    """Build a ShippingLabelResult from a successful Shippo transaction."""
    return ShippingLabelResult(
        carrier=rate.provider,
        tracking_number=str(transaction.get("tracking_number") or ""),
        tracking_url=str(transaction.get("tracking_url_provider") or ""),
        label_url=str(transaction.get("label_url") or ""),
    )


# Checkout boundary types. These are owned by the checkout domain and only
# carry the fields the shipping pipeline reads or writes.


@dataclass
class CartItem:
    product_id: int
    quantity: int
    weight: float


@dataclass
class Cart:
    items: list[CartItem] = field(default_factory=list)

    @property
    def weight(self) -> float:
        return sum(item.weight * item.quantity for item in self.items)


@dataclass
class Customer:
    id: int
    addresses: list[Address] = field(default_factory=list)

    def primary_shipping_address(self) -> Address | None:
        return next(
            (
                a for a in self.addresses
                if a.address_type == AddressType.SHIPPING and a.is_primary
            ),
            None,
        )


@dataclass
class Checkout:
    id: int
    customer: Customer
    cart: Cart
    shipping_address: Address | None = None
    delivery_cost: Decimal | None = None
    delivery_rate: Rate | None = None


@dataclass
class Order:
    id: int | None
    checkout_id: int
    items: list[CartItem]
    shipping_address: Address | None
    delivery_cost: Decimal | None = None
    delivery_rate: Rate | None = None
    delivery_carrier: str | None = None
    tracking_number: str | None = None
    tracking_url: str | None = None
    label_url: str | None = None
