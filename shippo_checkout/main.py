#!/usr/bin/env python3
"""CLI entry point for quoting Shippo rates and buying labels."""

import argparse
import csv
import logging
import sys

from shippo_checkout.config import ShippoConfig
from shippo_checkout.exceptions import ConfigError, ShippingError
from shippo_checkout.models import Address, ParcelInfo, Rate
from shippo_checkout.parcels import get_parcel_info
from shippo_checkout.shipping import ShippingService, select_cheapest_rate
from shippo_checkout.shippo_client import ShippoClient

_ADDRESS_FIELDS = [
    ("name", "Contact name"),
    ("company", "Company name"),
    ("street1", "Street line 1"),
    ("street2", "Street line 2"),
    ("city", "City"),
    ("state", "State or province code"),
    ("zip", "Postal code"),
    ("country", "ISO country code"),
    ("email", "Email address"),
    ("phone", "Phone number"),
]


def _print_rates(rates, cheapest):
    """Print quoted rates to stdout, cheapest first."""
    print(f"\n{'=' * 70}")
    print("  SHIPPING RATES")
    print(f"  {len(rates)} rate(s) | cheapest {cheapest.amount} {cheapest.currency}")
    print(f"{'=' * 70}\n")

    for i, rate in enumerate(sorted(rates, key=lambda r: r.amount), 1):
        marker = " *" if rate.object_id == cheapest.object_id else ""
        print(f"  Rate {i}: {rate.provider} {rate.service_name}{marker}")
        print(f"    Amount:  {rate.amount} {rate.currency}")
        if rate.estimated_days is not None:
            print(f"    Days:    {rate.estimated_days}")
        print(f"    Rate ID: {rate.object_id}")
        print()


def _export_csv(rates, path):
    """Export quoted rates to a CSV file."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "rate_id", "provider", "service", "amount", "currency",
            "estimated_days", "shipment_id",
        ])
        for rate in sorted(rates, key=lambda r: r.amount):
            writer.writerow([
                rate.object_id, rate.provider, rate.service_name, rate.amount,
                rate.currency, rate.estimated_days or "", rate.shipment_id,
            ])
    print(f"Rates exported to {path}")


def _address_from_args(args, prefix: str) -> Address:
    """Build an Address from ``--<prefix>-*`` arguments."""
    def value(name):
        return getattr(args, f"{prefix}_{name}") or ""

    return Address(
        name=value("name"),
        company=value("company") or None,
        street1=value("street1"),
        street2=value("street2"),
        city=value("city"),
        state=value("state"),
        zip_code=value("zip"),
        country=value("country"),
        email=value("email"),
        phone=value("phone"),
    )


def _parcels_from_args(args, config: ShippoConfig) -> list[ParcelInfo]:
    parcels = get_parcel_info(args.weight, config)
    if args.length or args.width or args.height:
        parcels = [
            ParcelInfo(
                length=args.length or p.length,
                width=args.width or p.width,
                height=args.height or p.height,
                distance_unit=p.distance_unit,
                weight=p.weight,
                mass_unit=p.mass_unit,
            )
            for p in parcels
        ]
    return parcels


def _quote(service: ShippingService, args, config: ShippoConfig) -> Rate:
    from_address = _address_from_args(args, "from")
    to_address = _address_from_args(args, "to")
    parcels = _parcels_from_args(args, config)

    rate = service.quote(from_address, to_address, parcels, config.currency)
    if args.csv or args.all_rates:
        shipment_rates = service.get_rates(rate.shipment_id, config.currency) or [rate]
        if args.all_rates:
            _print_rates(shipment_rates, select_cheapest_rate(shipment_rates))
        if args.csv:
            _export_csv(shipment_rates, args.csv)
    if not args.all_rates:
        _print_rates([rate], rate)
    return rate


def _buy(service: ShippingService, args, config: ShippoConfig):
    from_address = _address_from_args(args, "from")
    to_address = _address_from_args(args, "to")
    parcels = _parcels_from_args(args, config)

    if args.rate_id:
        label = service.purchase(from_address, to_address, parcels, args.rate_id)
    else:
        rate = service.quote(from_address, to_address, parcels, config.currency)
        print(f"Buying cheapest rate: {rate.provider} {rate.amount} {rate.currency}")
        label = service.create_transaction(rate)

    print(f"\n{'=' * 70}")
    print("  SHIPPING LABEL")
    print(f"{'=' * 70}\n")
    print(f"  Carrier:   {label.carrier}")
    print(f"  Tracking:  {label.tracking_number}")
    if label.tracking_url:
        print(f"  Track at:  {label.tracking_url}")
    print(f"  Label:     {label.label_url}")
    print()
    return label


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Quote Shippo shipping rates and purchase shipping labels.",
    )
    parser.add_argument(
        "command",
        choices=["quote", "buy"],
        help='"quote" prints the cheapest rate; "buy" purchases a label.',
    )
    parser.add_argument(
        "--api-key",
        help="Shippo API key (overrides SHIPPO_API_KEY env var).",
    )
    parser.add_argument(
        "--currency",
        help='Currency to price rates in (overrides SHIPPO_CURRENCY, default "USD").',
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log API activity to stderr.",
    )

    for prefix, label in (("from", "Origin"), ("to", "Destination")):
        group = parser.add_argument_group(f"{label} address")
        for name, help_text in _ADDRESS_FIELDS:
            group.add_argument(f"--{prefix}-{name}", help=f"{label} {help_text.lower()}.")

    parcel_group = parser.add_argument_group("Parcel options")
    parcel_group.add_argument(
        "--weight",
        type=float,
        required=True,
        help="Total parcel weight in SHIPPO_MASS_UNIT (default lb).",
    )
    parcel_group.add_argument("--length", type=float, help="Box length (overrides SHIPPO_PARCEL_LENGTH).")
    parcel_group.add_argument("--width", type=float, help="Box width (overrides SHIPPO_PARCEL_WIDTH).")
    parcel_group.add_argument("--height", type=float, help="Box height (overrides SHIPPO_PARCEL_HEIGHT).")

    quote_group = parser.add_argument_group("Quote options")
    quote_group.add_argument(
        "--all-rates",
        action="store_true",
        help="Print every quoted rate, not only the cheapest.",
    )
    quote_group.add_argument(
        "--csv",
        metavar="FILE",
        help="Export the quoted rates to a CSV file.",
    )

    buy_group = parser.add_argument_group("Buy options")
    buy_group.add_argument(
        "--rate-id",
        help="Rate object id to buy. Defaults to a fresh quote's cheapest rate.",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ShippoConfig.from_env(api_key=args.api_key, currency=args.currency)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    service = ShippingService(ShippoClient(config))

    try:
        if args.command == "quote":
            _quote(service, args, config)
        else:
            _buy(service, args, config)
    except (ShippingError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
