"""Tests for the verdict rules — floor test, GOOD line, throughput cap."""

from __future__ import annotations

import pytest

from paycalc.config import DriverSettings, OfferInput
from paycalc.engine.evaluator import evaluate_offer
from paycalc.engine.time_model import compute_pay_requirement, time_profile
from paycalc.engine.verdict import classify, effective_hourly, meets_floor, orders_per_hour
from paycalc.models.results import VERDICT_RANK


# ═══════════════════════════════════════════════════════════════════════════
# Effective hourly
# ═══════════════════════════════════════════════════════════════════════════

class TestEffectiveHourly:

    def test_uncapped(self, settings: DriverSettings):
        # 127 min → 60/127 orders/hr
        assert orders_per_hour(127, settings) == pytest.approx(60 / 127)
        assert effective_hourly(21, 127, settings) == pytest.approx(21 * 60 / 127)

    def test_capped_short_order(self, settings: DriverSettings):
        # 60 / 10 = 6 orders/hr, capped at 3
        assert orders_per_hour(10, settings) == 3.0
        # $5 three-minute order is $15/hr, not $100/hr
        assert effective_hourly(5, 3, settings) == 15.0

    def test_zero_minutes(self, settings: DriverSettings):
        assert orders_per_hour(0, settings) == 0.0
        assert effective_hourly(10, 0, settings) == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════════

class TestClassify:

    def test_floor_not_met_is_bad(self, settings: DriverSettings):
        assert classify(False, 100.0, settings) == "bad"

    def test_floor_met_and_target_met_is_good(self, settings: DriverSettings):
        assert classify(True, 21.0, settings) == "good"

    def test_floor_met_below_target_is_decent(self, settings: DriverSettings):
        assert classify(True, 20.99, settings) == "decent"

    def test_floor_uses_required_pay_without_hourly_floor(self, settings: DriverSettings):
        assert meets_floor(10.0, 9.999, 0.0, settings)
        assert not meets_floor(10.0, 10.01, 50.0, settings)

    def test_floor_uses_hourly_when_set(self, floor_settings: DriverSettings):
        # pay/required pay ignored once min_hourly_pay > 0
        assert meets_floor(1.0, 100.0, 25.0, floor_settings)
        assert not meets_floor(100.0, 1.0, 24.99, floor_settings)


# ═══════════════════════════════════════════════════════════════════════════
# Reference scenarios
# ═══════════════════════════════════════════════════════════════════════════

def test_long_offer_is_bad(long_offer: OfferInput, settings: DriverSettings):
    e = evaluate_offer(long_offer, settings)
    # $21 < $44.45 required
    assert e.verdict == "bad"
    assert e.required_pay == pytest.approx(44.45)
    assert e.difference == pytest.approx(-23.45)
    # 21 × 60 / 127 = 9.92
    assert e.effective_hourly == pytest.approx(9.92)


def test_short_offer_is_good(short_offer: OfferInput, settings: DriverSettings):
    e = evaluate_offer(short_offer, settings)
    # 17.29 min → capped at 3 orders/hr → 8.5 × 3 = 25.5 ≥ 21
    assert e.effective_hourly == 25.5
    assert e.required_pay == pytest.approx(6.05)
    assert e.verdict == "good"
    assert e.verdict_text == "GOOD"
    assert e.verdict_emoji == "🟢"


def test_capped_order_under_target_is_decent(settings: DriverSettings):
    # 0.875 mi → 1.5 min each way, total 10 min, required $3.50
    # capped: 3 orders/hr × $5 = $15/hr < $21 → DECENT
    e = evaluate_offer(OfferInput(pay=5, miles=0.875), settings)
    assert e.total_minutes == pytest.approx(10.0)
    assert e.effective_hourly == pytest.approx(15.0)
    assert e.verdict == "decent"
    assert e.verdict_emoji == "🟡"


def test_just_over_target_is_good(settings: DriverSettings):
    # 12 mi: total 48.14 min, required $16.85 → $17 is 21.19/hr
    assert evaluate_offer(OfferInput(pay=17, miles=12), settings).verdict == "good"
    # a $22 target needs $17.65 for the same minutes
    assert evaluate_offer(OfferInput(pay=17, miles=12), DriverSettings(expected_pay=22)).verdict == "bad"


def test_decent_needs_hourly_floor_below_target():
    # With a $15 floor and a $21 target, 18/hr sits between them.
    s = DriverSettings(min_hourly_pay=15)
    # 7.5 mi: travel 12.86, total 32.71 min → 10 × 60 / 32.71 = 18.34/hr
    e = evaluate_offer(OfferInput(pay=10, miles=7.5), s)
    assert e.effective_hourly == pytest.approx(18.34, abs=0.01)
    assert e.verdict == "decent"


class TestHourlyFloor:
    """min_hourly_pay > 0 swaps the floor test for an hourly test."""

    def test_covers_required_pay_but_under_floor(self, settings: DriverSettings, floor_settings: DriverSettings):
        # 5.5 mi: travel 9.43, total 25.86 min, required 9.05 → $10 covers it
        # effective = 10 × 60 / 25.86 = 23.20/hr
        offer = OfferInput(pay=10, miles=5.5)
        assert evaluate_offer(offer, settings).verdict == "good"
        bad = evaluate_offer(offer, floor_settings)
        assert bad.effective_hourly < 25
        assert bad.verdict == "bad"

    def test_under_required_pay_but_over_floor(self, settings: DriverSettings):
        # required 11.45 > $10, yet 18.34/hr clears a $15 floor
        offer = OfferInput(pay=10, miles=7.5)
        assert evaluate_offer(offer, settings).verdict == "bad"
        assert evaluate_offer(offer, DriverSettings(min_hourly_pay=15)).verdict == "decent"

    def test_capped_order_passes_floor(self, short_offer: OfferInput, floor_settings: DriverSettings):
        # 25.5 ≥ 25
        assert evaluate_offer(short_offer, floor_settings).verdict == "good"


# ═══════════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════════

def test_evaluation_is_deterministic(shop_offer: OfferInput, settings: DriverSettings):
    assert evaluate_offer(shop_offer, settings) == evaluate_offer(shop_offer, settings)


@pytest.mark.parametrize("min_hourly", [0.0, 15.0, 25.0])
def test_verdict_matches_rules(min_hourly: float):
    s = DriverSettings(min_hourly_pay=min_hourly)
    for pay in (3, 6.5, 9, 14, 21, 30):
        for miles in (0.5, 2, 5, 9, 15, 30):
            offer = OfferInput(pay=pay, miles=miles, items=3)
            e = evaluate_offer(offer, s)
            req = compute_pay_requirement(offer, s)
            hourly = effective_hourly(pay, time_profile(offer, s).total_minutes, s)
            floor = hourly >= min_hourly if min_hourly > 0 else pay >= req.required_pay
            if not floor:
                expected = "bad"
            elif hourly >= s.expected_pay:
                expected = "good"
            else:
                expected = "decent"
            assert e.verdict == expected, (pay, miles)


@pytest.mark.parametrize("min_hourly", [0.0, 25.0])
def test_more_miles_never_improves_verdict(min_hourly: float):
    s = DriverSettings(min_hourly_pay=min_hourly)
    for pay in (5, 8.5, 12, 21):
        ranks = [
            VERDICT_RANK[evaluate_offer(OfferInput(pay=pay, miles=m / 2), s).verdict]
            for m in range(0, 121)
        ]
        assert ranks == sorted(ranks, reverse=True), pay


@pytest.mark.parametrize("min_hourly", [0.0, 25.0])
def test_more_pay_never_worsens_verdict(min_hourly: float):
    s = DriverSettings(min_hourly_pay=min_hourly)
    for miles in (1, 3, 8, 20):
        ranks = [
            VERDICT_RANK[evaluate_offer(OfferInput(pay=p / 4, miles=miles, items=2), s).verdict]
            for p in range(1, 200)
        ]
        assert ranks == sorted(ranks), miles


def test_required_pay_reproduces_bad_boundary(settings: DriverSettings):
    """Without an hourly floor, pay ≥ published required pay ⇔ not BAD."""
    for pay in (4, 6.05, 6.06, 10, 21, 44.45, 44.44):
        for miles in (0, 3, 10, 35):
            offer = OfferInput(pay=pay, miles=miles)
            req = compute_pay_requirement(offer, settings)
            not_bad = evaluate_offer(offer, settings).verdict != "bad"
            assert (pay >= req.required_pay) == not_bad, (pay, miles)
