from __future__ import annotations

import pytest

from seatmap.models.normalized_venue import NormalizeOptions
from seatmap.services.normalizer import normalize_venue


@pytest.mark.parametrize(("tier", "price"), [(1, 120), (2, 90), (3, 60)])
def test_configured_tiers(sample_venue, price_by_tier, tier, price):
    result = normalize_venue(sample_venue, NormalizeOptions(price_by_tier=price_by_tier))

    assert result.get_price(tier) == price


@pytest.mark.parametrize("tier", [0, 4, "1", None])
def test_unknown_tiers_return_none(sample_venue, price_by_tier, tier):
    result = normalize_venue(sample_venue, NormalizeOptions(price_by_tier=price_by_tier))

    assert result.get_price(tier) is None


def test_no_price_table(sample_venue):
    result = normalize_venue(sample_venue)

    assert result.price_by_tier == {}
    assert result.get_price(1) is None


def test_lookup_ignores_seat_data(sample_venue):
    # tier 7 is not used by any seat but is priced; tier 3 is used but unpriced
    result = normalize_venue(sample_venue, NormalizeOptions(price_by_tier={7: 15.5}))

    assert result.get_price(7) == 15.5
    assert result.get_price(3) is None
