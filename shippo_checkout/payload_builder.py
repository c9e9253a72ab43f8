"""Builds Shippo request payloads from domain addresses and parcels."""

from typing import Any

from shippo_checkout.models import Address, ParcelInfo


def build_address_payload(address: Address, include_company: bool = False) -> dict[str, Any]:
    """Build a Shippo address payload.

    Every address is sent with ``validate`` set so Shippo verifies it
    synchronously; nothing is checked locally.

    Args:
        address: Domain address.
        include_company: Send the company name. Only the origin address
            carries one.

    Returns:
        Address payload dict for ``POST /addresses/``.
    """
    payload: dict[str, Any] = {"name": address.name}
    if include_company:
        payload["company"] = address.company
    payload.update(
        {
            "street1": address.street1,
            "street2": address.street2,
            "city": address.city,
            "state": address.state,
            "zip": address.zip_code,
            "country": address.country,
            "email": address.email,
            "phone": address.phone,
            "validate": True,
        }
    )
    return payload


def build_parcels(parcels: list[ParcelInfo]) -> list[dict[str, Any]]:
    """Build one Shippo parcel payload per ParcelInfo, in input order."""
    return [
        {
            "length": p.length,
            "width": p.width,
            "height": p.height,
            "distance_unit": p.distance_unit,
            "weight": p.weight,
            "mass_unit": p.mass_unit,
        }
        for p in parcels
    ]


def build_shipment_payload(
    address_from: dict | str,
    address_to: dict | str,
    parcels: list[dict[str, Any]],
) -> dict[str, Any]:
    """Build a synchronous shipment payload.

    Addresses may be full address objects or Shippo address object ids.
    """
    return {
        "address_from": address_from,
        "address_to": address_to,
        "parcels": parcels,
        "async": False,
    }
