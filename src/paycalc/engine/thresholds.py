"""Threshold table — how close an offer is to changing verdict.

Each threshold moves ONE offer dimension while the others stay fixed:

  max_time_*     minutes the pay covers at the target rate
  max_miles_*    route length that still fits, given stops and items
  max_items_*    shopping items that still fit, given stops and route
  min_pay_*      pay that keeps the current time profile at the line

GOOD-side limits are only defined when the pay can reach the target rate
at all, i.e. at the throughput cap: pay × max_orders_per_hour ≥ expected_pay.

Before-BAD limits with an hourly floor (``min_hourly_pay > 0``) have to
respect the cap: while an order is short enough to be capped
(total_minutes ≤ 60 / max_orders_per_hour) its effective hourly is flat, so
the order only drops toward the floor once it grows past the cap boundary.
"""

from __future__ import annotations

import math

from paycalc.config.offer import OfferInput
from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings
from paycalc.engine.time_model import (
    TimeProfile,
    max_minutes_for_pay,
    miles_for_minutes,
    required_pay_for_minutes,
    time_profile,
)
from paycalc.engine.verdict import orders_per_hour
from paycalc.models.results import OfferThresholds


def _miles_within(minutes: float, profile: TimeProfile, settings: DriverSettings) -> float:
    """Longest route that fits in ``minutes`` next to the non-driving time."""
    fixed_time = profile.pickup_time + profile.drop_time + profile.shopping_time
    travel_time = (minutes - fixed_time) / profile.travel_multiplier
    return max(0.0, miles_for_minutes(travel_time, settings))


def _items_within(minutes: float, profile: TimeProfile, settings: DriverSettings) -> int:
    """Most shopping items that fit in ``minutes`` next to stops and driving."""
    if settings.per_item <= 0:
        return 0
    fixed_time = profile.pickup_time + profile.drop_time + profile.travel_time + profile.return_delta
    return max(0, math.floor((minutes - fixed_time) / settings.per_item))


def cap_boundary_minutes(settings: DriverSettings) -> float:
    """Order length below which orders-per-hour sits at the throughput cap."""
    cap = settings.max_orders_per_hour
    return 60 / cap if cap > 0 else 0.0


def is_capped(total_minutes: float, settings: DriverSettings) -> bool:
    """Whether an order this long is limited by ``max_orders_per_hour``.

    The boundary itself counts as capped: at exactly 60 / cap minutes both
    sides of the min() agree.
    """
    if settings.max_orders_per_hour <= 0:
        return False
    return total_minutes <= cap_boundary_minutes(settings)


def time_before_bad(pay: float, total_minutes: float, settings: DriverSettings) -> float:
    """Longest order (minutes) before the verdict flips to BAD.

    Without an hourly floor, BAD means "pay below required pay", which is
    the same boundary as the DECENT time limit.
    """
    if settings.min_hourly_pay <= 0:
        return max_minutes_for_pay(pay, settings)

    if is_capped(total_minutes, settings) and pay * settings.max_orders_per_hour < settings.min_hourly_pay:
        # Already below the floor at full throughput; any growth past the
        # cap boundary only lowers the rate further.
        return cap_boundary_minutes(settings)

    # Uncapped region: pay × 60 / total_minutes = min_hourly_pay
    return pay * 60 / settings.min_hourly_pay


def compute_thresholds(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
) -> OfferThresholds:
    """Build the full threshold table for one offer."""
    profile = time_profile(offer, settings)
    total_minutes = profile.total_minutes
    rate = orders_per_hour(total_minutes, settings)
    max_minutes = max_minutes_for_pay(offer.pay, settings)

    can_be_good = offer.pay * settings.max_orders_per_hour >= settings.expected_pay

    # ── DECENT / GOOD ──────────────────────────────────────────────────
    max_time_for_decent = round(max_minutes, 1)
    max_miles_for_decent = round(_miles_within(max_minutes, profile, settings), 1)
    max_items_for_decent = _items_within(max_minutes, profile, settings)
    min_pay_for_good = settings.expected_pay / rate if rate > 0 else 0.0

    # ── Before BAD ─────────────────────────────────────────────────────
    if settings.min_hourly_pay > 0:
        minutes_before_bad = time_before_bad(offer.pay, total_minutes, settings)
        max_time_before_bad = round(minutes_before_bad, 1)
        max_miles_before_bad = round(_miles_within(minutes_before_bad, profile, settings), 1)
        max_items_before_bad = _items_within(minutes_before_bad, profile, settings)
        min_pay_before_bad = settings.min_hourly_pay / rate if rate > 0 else 0.0
    else:
        max_time_before_bad = max_time_for_decent
        max_miles_before_bad = max_miles_for_decent
        max_items_before_bad = max_items_for_decent
        min_pay_before_bad = required_pay_for_minutes(total_minutes, settings)

    return OfferThresholds(
        max_miles_for_decent=max_miles_for_decent,
        max_miles_for_good=max_miles_for_decent if can_be_good else None,
        max_time_for_decent=max_time_for_decent,
        max_time_for_good=max_time_for_decent if can_be_good else None,
        max_items_for_decent=max_items_for_decent,
        max_items_for_good=max_items_for_decent if can_be_good else None,
        min_pay_for_good=round(min_pay_for_good, 2),
        can_be_good=can_be_good,
        max_miles_before_bad=max_miles_before_bad,
        max_time_before_bad=max_time_before_bad,
        max_items_before_bad=max_items_before_bad,
        min_pay_before_bad=round(min_pay_before_bad, 2),
    )
