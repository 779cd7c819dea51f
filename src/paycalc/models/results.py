"""Result types — the contract between the engine and its callers.

Every value here is computed fresh for each evaluation and never mutated.
Money is rounded to cents and minutes to hundredths at this boundary; the
engine works on unrounded numbers internally.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


Verdict = Literal["good", "decent", "bad"]
"""Tri-state offer classification."""

VERDICT_EMOJI: dict[str, str] = {"good": "🟢", "decent": "🟡", "bad": "🔴"}

VERDICT_RANK: dict[str, int] = {"bad": 0, "decent": 1, "good": 2}
"""Ordering of verdicts from worst to best."""


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Time & pay model
# ═══════════════════════════════════════════════════════════════════════════

class Maxima(_Result):
    """Theoretical ceilings for a pay amount, with no shopping.

    Miles and items are independent single-dimension ceilings: max miles
    assumes zero items, max items assumes zero miles.
    """

    max_minutes: float
    """Minutes this pay buys at the target hourly rate = pay ÷ expected_pay × 60."""

    fixed_time: float
    """Pickup + drop minutes, spent regardless of distance."""

    max_miles: float
    """Furthest route (miles) that still fits in max_minutes, return leg included."""

    max_items: int
    """Most shopping items that fit in max_minutes with no driving."""


class PayRequirement(_Result):
    """Minutes an offer costs and the pay that would cover them at the target rate."""

    pickup_time: float
    travel_time: float
    """One-way driving minutes = miles ÷ avg_speed × 60."""
    drop_time: float
    shopping_time: float
    return_delta: float
    """Extra minutes for the unpaid return leg = travel_time × return%."""
    total_minutes: float
    required_pay: float
    """total_minutes × expected_pay ÷ 60."""


# ═══════════════════════════════════════════════════════════════════════════
# Evaluation
# ═══════════════════════════════════════════════════════════════════════════

class TimeBreakdown(_Result):
    """Per-component minutes, for display."""

    pickup: float
    travel: float
    drop: float
    shopping: float
    return_leg: float


class OfferThresholds(_Result):
    """How far each offer dimension can move before the verdict changes.

    Each value holds the other offer dimensions fixed.  GOOD-side values are
    ``None`` when the pay can never reach the target rate (``can_be_good`` is
    False) — unreachable, which is not the same thing as a limit of zero.
    """

    max_miles_for_decent: float
    max_miles_for_good: float | None
    max_time_for_decent: float
    max_time_for_good: float | None
    max_items_for_decent: int
    max_items_for_good: int | None

    min_pay_for_good: float
    """Pay that would make the current time profile hit the target rate exactly."""

    can_be_good: bool
    """pay × max_orders_per_hour ≥ expected_pay — GOOD is possible at all."""

    # --- Before BAD ---
    max_miles_before_bad: float
    max_time_before_bad: float
    max_items_before_bad: int
    min_pay_before_bad: float


class OfferEvaluation(_Result):
    """Full evaluation of one offer."""

    verdict: Verdict
    verdict_emoji: str
    verdict_text: str
    """Upper-case verdict label: GOOD / DECENT / BAD."""

    effective_hourly: float
    """pay × min(max_orders_per_hour, 60 ÷ total_minutes)."""

    required_pay: float
    difference: float
    """pay − required_pay.  Negative means the offer underpays the target rate."""

    total_minutes: float
    has_route: bool
    """False when no miles were entered — callers show the maxima instead of
    the hourly/time figures."""

    # --- Maxima (no-route view) ---
    max_miles: float
    max_items: int
    max_minutes: float

    thresholds: OfferThresholds
    breakdown: TimeBreakdown
    summary: str
