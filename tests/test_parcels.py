"""Tests for parcel sizing."""

import pytest

from shippo_checkout.parcels import get_parcel_info


def test_single_parcel_in_default_box(config):
    parcels = get_parcel_info(2.0, config)

    assert len(parcels) == 1
    parcel = parcels[0]
    assert (parcel.length, parcel.width, parcel.height) == (10.0, 8.0, 4.0)
    assert parcel.distance_unit == "in"
    assert parcel.weight == 2.0
    assert parcel.mass_unit == "lb"


def test_heavy_cart_is_not_split(config):
    assert len(get_parcel_info(500.0, config)) == 1


@pytest.mark.parametrize("weight", [0, -1.5])
def test_rejects_non_positive_weight(config, weight):
    with pytest.raises(ValueError):
        get_parcel_info(weight, config)
