"""Tests for the command-line entry point."""

import csv
from unittest.mock import patch

import pytest

from conftest import shippo_rate
from shippo_checkout.exceptions import AuthenticationError
from shippo_checkout.main import main

ADDRESS_ARGS = [
    "--from-name", "Duo Cart Warehouse", "--from-company", "Duo Cart Ltd",
    "--from-street1", "215 Clayton St.", "--from-city", "San Francisco",
    "--from-state", "CA", "--from-zip", "94117", "--from-country", "US",
    "--to-name", "Jane Receiver", "--to-street1", "965 Mission St",
    "--to-city", "San Francisco", "--to-state", "CA", "--to-zip", "94103",
    "--to-country", "US",
]


@pytest.fixture
def cli_client(mock_client):
    mock_client.get_shipping_rates.return_value = [
        shippo_rate("rate_a", "8.20"),
        shippo_rate("rate_b", "5.10", provider="UPS"),
        shippo_rate("rate_c", "6.00", provider="FedEx"),
    ]
    with patch("shippo_checkout.main.ShippoClient", return_value=mock_client):
        yield mock_client


def _run(argv):
    main(["--api-key", "shippo_test_key", "--weight", "2", *ADDRESS_ARGS, *argv])


def test_quote_prints_cheapest(cli_client, capsys):
    _run(["quote"])

    out = capsys.readouterr().out
    assert "cheapest 5.10 USD" in out
    assert "rate_b" in out
    assert "rate_a" not in out


def test_quote_all_rates_to_csv(cli_client, tmp_path, capsys):
    path = tmp_path / "rates.csv"

    _run(["quote", "--all-rates", "--csv", str(path)])

    out = capsys.readouterr().out
    assert "3 rate(s)" in out
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["rate_id"] for r in rows] == ["rate_b", "rate_c", "rate_a"]


def test_buy_by_rate_id(cli_client, capsys):
    cli_client.create_transaction.return_value = {
        "status": "SUCCESS",
        "tracking_number": "9205590164917312751089",
        "tracking_url_provider": "https://tools.usps.com/track",
        "label_url": "https://shippo-delivery.s3.amazonaws.com/label.pdf",
    }

    _run(["buy", "--rate-id", "rate_a"])

    out = capsys.readouterr().out
    assert "9205590164917312751089" in out
    cli_client.create_transaction.assert_called_once_with("rate_a")


def test_buy_unknown_rate_exits(cli_client, capsys):
    with pytest.raises(SystemExit) as exc_info:
        _run(["buy", "--rate-id", "rate_zzz"])

    assert exc_info.value.code == 1
    assert "rate_zzz" in capsys.readouterr().err


def test_remote_error_exits(cli_client, capsys):
    cli_client.create_address.side_effect = AuthenticationError("Shippo rejected the API key", 401)

    with pytest.raises(SystemExit) as exc_info:
        _run(["quote"])

    assert exc_info.value.code == 1
    assert "Error: Shippo rejected the API key" in capsys.readouterr().err


def test_missing_api_key_exits(monkeypatch, capsys):
    monkeypatch.delenv("SHIPPO_API_KEY", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main(["quote", "--weight", "2", *ADDRESS_ARGS])

    assert exc_info.value.code == 1
    assert "SHIPPO_API_KEY" in capsys.readouterr().err
