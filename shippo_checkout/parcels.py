"""Parcel sizing from aggregate cart weight."""

from shippo_checkout.config import ShippoConfig
from shippo_checkout.models import ParcelInfo


def get_parcel_info(cart_weight: float, config: ShippoConfig) -> list[ParcelInfo]:
    """Return the parcels for a cart of the given weight.

    The whole cart ships as a single parcel in the configured default box.

    Args:
        cart_weight: Total cart weight in the configured mass unit.
        config: Supplies box dimensions and units.

    Returns:
        A one-element list of ParcelInfo.
    """
    if cart_weight <= 0:
        raise ValueError(f"cart weight must be positive, got {cart_weight}")

    return [
        ParcelInfo(
            length=config.parcel_length,
            width=config.parcel_width,
            height=config.parcel_height,
            distance_unit=config.distance_unit,
            weight=cart_weight,
            mass_unit=config.mass_unit,
        )
    ]
