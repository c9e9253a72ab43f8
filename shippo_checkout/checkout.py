"""Checkout orchestration: delivery quotes and label purchase on submit."""

import logging
from dataclasses import replace

from shippo_checkout.base_store import CheckoutStore
from shippo_checkout.config import ShippoConfig
from shippo_checkout.models import Checkout, Order
from shippo_checkout.parcels import get_parcel_info
from shippo_checkout.shipping import ShippingService

logger = logging.getLogger(__name__)


class CheckoutOrchestrator:
    """Applies shipping quotes and labels to checkout and order records.

    Records are only changed after the Shippo call succeeds; any shipping
    error propagates to the caller unchanged.
    """

    def __init__(self, store: CheckoutStore, shipping: ShippingService, config: ShippoConfig):
        self.store = store
        self.shipping = shipping
        self.config = config

    def get_quote(self, customer_id: int) -> Checkout:
        """Quote delivery for a customer's checkout and store the cost.

        The customer's primary shipping address, when there is one,
        becomes the checkout's shipping address.
        """
        checkout = self.store.find_checkout_by_customer(customer_id)
        shipping_address = (
            checkout.customer.primary_shipping_address() or checkout.shipping_address
        )
        if shipping_address is None:
            raise ValueError(f"Customer {customer_id} has no shipping address")

        rate = self.shipping.quote(
            self.store.get_company_address(),
            shipping_address,
            get_parcel_info(checkout.cart.weight, self.config),
            self.config.currency,
        )

        checkout = replace(
            checkout,
            shipping_address=shipping_address,
            delivery_cost=rate.amount,
            delivery_rate=rate,
        )
        logger.info(
            "Checkout %s quoted %s %s via %s",
            checkout.id, rate.amount, rate.currency, rate.provider,
        )
        return self.store.save_checkout(checkout)

    def submit_order(self, checkout_id: int) -> Order:
        """Turn a quoted checkout into an order with a purchased label."""
        checkout = self.store.find_checkout(checkout_id)
        if checkout.delivery_rate is None:
            raise ValueError(f"Checkout {checkout_id} has no quoted delivery rate")

        order = self.store.create_order(checkout)
        label = self.shipping.purchase(
            self.store.get_company_address(),
            order.shipping_address,
            get_parcel_info(checkout.cart.weight, self.config),
            checkout.delivery_rate,
        )

        self.store.decrease_inventory(order)
        order = replace(
            order,
            delivery_cost=checkout.delivery_cost,
            delivery_rate=checkout.delivery_rate,
            delivery_carrier=label.carrier,
            tracking_number=label.tracking_number,
            tracking_url=label.tracking_url,
            label_url=label.label_url,
        )
        logger.info(
            "Order for checkout %s ships with %s, tracking %s",
            checkout_id, label.carrier, label.tracking_number,
        )
        return self.store.save_order(order)
