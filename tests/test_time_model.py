"""Tests for engine/time_model.py — hand-calculated expected values."""

from __future__ import annotations

import pytest

from paycalc.config import DriverSettings, OfferInput
from paycalc.engine.time_model import (
    compute_maxima,
    compute_pay_requirement,
    max_minutes_for_pay,
    time_profile,
    travel_minutes,
)


# ═══════════════════════════════════════════════════════════════════════════
# compute_pay_requirement
# ═══════════════════════════════════════════════════════════════════════════

def test_long_offer_breakdown(long_offer: OfferInput, settings: DriverSettings):
    r = compute_pay_requirement(long_offer, settings)
    # 35 mi / 35 mph = 60 min; single drop → 100% return = 60 min
    assert r.travel_time == 60.0
    assert r.return_delta == 60.0
    assert r.pickup_time == 5.0
    assert r.drop_time == 2.0
    assert r.shopping_time == 0.0
    # 5 + 60 + 2 + 0 + 60 = 127
    assert r.total_minutes == 127.0
    # 127 × 21 / 60 = 44.45
    assert r.required_pay == pytest.approx(44.45)


def test_short_offer_breakdown(short_offer: OfferInput, settings: DriverSettings):
    r = compute_pay_requirement(short_offer, settings)
    # 3 / 35 × 60 = 5.142857...
    assert r.travel_time == 5.14
    assert r.return_delta == 5.14
    # 7 + 2 × 5.142857 = 17.2857
    assert r.total_minutes == 17.29
    # 17.2857 × 21 / 60 = 6.05
    assert r.required_pay == pytest.approx(6.05)


def test_two_drops_use_second_return_percent(settings: DriverSettings):
    offer = OfferInput(pay=20, pickups=1, drops=2, miles=35)
    r = compute_pay_requirement(offer, settings)
    # 60 min travel × 50% = 30 min
    assert r.return_delta == 30.0
    # 5 + 60 + 4 + 30 = 99
    assert r.total_minutes == 99.0


def test_shopping_time(shop_offer: OfferInput, settings: DriverSettings):
    r = compute_pay_requirement(shop_offer, settings)
    # 44 items × 1.5 min = 66
    assert r.shopping_time == 66.0
    # 34.1 / 35 × 60 = 58.457...
    assert r.travel_time == 58.46
    # 58.457 × 50% = 29.229
    assert r.return_delta == 29.23
    expected_total = 5 + 4 + 66 + 58.457142857 * 1.5
    assert r.total_minutes == pytest.approx(expected_total, abs=0.01)


def test_more_pickups_cost_more_time(settings: DriverSettings):
    one = compute_pay_requirement(OfferInput(pay=10, pickups=1, miles=2), settings)
    two = compute_pay_requirement(OfferInput(pay=10, pickups=2, miles=2), settings)
    assert two.total_minutes - one.total_minutes == pytest.approx(settings.per_pickup)


def test_profile_is_unrounded(short_offer: OfferInput, settings: DriverSettings):
    p = time_profile(short_offer, settings)
    assert p.travel_time == pytest.approx(3 / 35 * 60, rel=1e-12)
    assert p.total_minutes == pytest.approx(7 + 2 * 3 / 35 * 60, rel=1e-12)
    assert p.travel_multiplier == 2.0


# ═══════════════════════════════════════════════════════════════════════════
# compute_maxima
# ═══════════════════════════════════════════════════════════════════════════

def test_maxima_for_hour_of_pay(settings: DriverSettings):
    m = compute_maxima(OfferInput(pay=21), settings)
    # $21 at $21/hr = 60 min
    assert m.max_minutes == 60.0
    assert m.fixed_time == 7.0
    # (60 − 7) / 2 = 26.5 min one-way → 26.5 × 35 / 60 = 15.458
    assert m.max_miles == 15.46
    # 53 / 1.5 = 35.33 → 35
    assert m.max_items == 35


def test_maxima_ignores_route_and_items(settings: DriverSettings):
    bare = compute_maxima(OfferInput(pay=21), settings)
    loaded = compute_maxima(OfferInput(pay=21, miles=40, items=30), settings)
    assert bare == loaded


def test_maxima_short_offer(short_offer: OfferInput, settings: DriverSettings):
    m = compute_maxima(short_offer, settings)
    # 8.5 / 21 × 60 = 24.2857
    assert m.max_minutes == 24.29
    # (24.2857 − 7) / 2 × 35 / 60 = 5.0417
    assert m.max_miles == 5.04
    # 17.2857 / 1.5 = 11.52 → 11
    assert m.max_items == 11


def test_maxima_two_drops(settings: DriverSettings):
    m = compute_maxima(OfferInput(pay=21, drops=2), settings)
    # remaining = 60 − 5 − 4 = 51; multiplier 1.5 → 34 min → 19.833 mi
    assert m.fixed_time == 9.0
    assert m.max_miles == pytest.approx(19.83)


def test_maxima_pay_below_fixed_time_clamps_to_zero(settings: DriverSettings):
    # $1 buys 2.86 min, less than the 7 min of stops
    m = compute_maxima(OfferInput(pay=1), settings)
    assert m.max_miles == 0.0
    assert m.max_items == 0


# ═══════════════════════════════════════════════════════════════════════════
# Zero guards
# ═══════════════════════════════════════════════════════════════════════════

def test_zero_expected_pay_gives_zero_minutes():
    s = DriverSettings(expected_pay=0)
    assert max_minutes_for_pay(10, s) == 0.0
    m = compute_maxima(OfferInput(pay=10), s)
    assert m.max_minutes == 0.0
    assert m.max_miles == 0.0
    r = compute_pay_requirement(OfferInput(pay=10, miles=5), s)
    assert r.required_pay == 0.0


def test_zero_per_item_gives_zero_item_ceiling():
    m = compute_maxima(OfferInput(pay=21), DriverSettings(per_item=0))
    assert m.max_items == 0


def test_zero_speed_does_not_divide():
    s = DriverSettings.model_construct(avg_speed=0.0)
    assert travel_minutes(10, s) == 0.0
    r = compute_pay_requirement(OfferInput(pay=10, miles=10), s)
    assert r.travel_time == 0.0
