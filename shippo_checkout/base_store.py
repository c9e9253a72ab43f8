"""Abstract base class for the checkout domain's persistence layer."""

from abc import ABC, abstractmethod

from shippo_checkout.models import Address, Checkout, Order


class CheckoutStore(ABC):
    """Storage and domain hooks the checkout orchestrator depends on."""

    @abstractmethod
    def find_checkout_by_customer(self, customer_id: int) -> Checkout:
        """Load the open checkout of a customer."""

    @abstractmethod
    def find_checkout(self, checkout_id: int) -> Checkout:
        """Load a checkout by id."""

    @abstractmethod
    def save_checkout(self, checkout: Checkout) -> Checkout:
        """Persist a checkout and return the stored record."""

    @abstractmethod
    def get_company_address(self) -> Address:
        """Return the address parcels ship from."""

    @abstractmethod
    def create_order(self, checkout: Checkout) -> Order:
        """Convert a checkout into an unsaved order."""

    @abstractmethod
    def decrease_inventory(self, order: Order) -> None:
        """Decrement product stock for the order's items."""

    @abstractmethod
    def save_order(self, order: Order) -> Order:
        """Persist an order and return the stored record."""
