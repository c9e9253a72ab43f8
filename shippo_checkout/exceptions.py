"""Exception hierarchy for the Shippo shipping integration."""


class ConfigError(ValueError):
    """Raised when required Shippo configuration is missing."""
    pass


class ShippingError(Exception):
    """Base exception for all shipping-related errors."""
    pass


class ShippoAPIError(ShippingError):
    """Raised when a Shippo API call fails."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class APIConnectionError(ShippoAPIError):
    """Raised when the Shippo API cannot be reached."""
    pass


class AuthenticationError(ShippoAPIError):
    """Raised when Shippo rejects the API key."""
    pass


class InvalidRequestError(ShippoAPIError):
    """Raised when Shippo rejects the request parameters."""
    pass


class ShippingRequestError(ShippingError):
    """Base exception for failures detected on our side of the call."""
    pass


class InvalidAddressError(ShippingRequestError):
    """Raised when Shippo address validation reports an undeliverable address."""

    def __init__(self, zip_code: str):
        super().__init__(
            "The provided address is invalid. Please enter correct value. "
            f"Info address zip {zip_code}"
        )
        self.zip_code = zip_code


class RateNotFoundError(ShippingRequestError):
    """Raised when a rate id has no match in the shipment's rate list."""

    def __init__(self, rate_id: str):
        super().__init__(
            f"Shippo rate with id {rate_id} not found. "
            "Please try again and request another rate."
        )
        self.rate_id = rate_id


class NoRatesError(ShippingRequestError):
    """Raised when Shippo returns no rates for a shipment."""

    def __init__(self, shipment_id: str):
        super().__init__(f"Shippo returned no rates for shipment {shipment_id}")
        self.shipment_id = shipment_id


class TransactionFailedError(ShippingRequestError):
    """Raised when a label purchase does not report SUCCESS."""

    def __init__(self, messages: list):
        super().__init__(
            "The creating of transaction with the delivery company failed. "
            f"Please try again. Info: {messages}"
        )
        self.messages = messages
