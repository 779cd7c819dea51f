"""Time & pay model — offer → minutes → pay required at the target rate.

Pure arithmetic.  ``time_profile`` keeps every component unrounded so the
threshold engine can build on it; the public functions round once, at the
result boundary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from paycalc.config.offer import OfferInput
from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings
from paycalc.models.results import Maxima, PayRequirement


@dataclass(frozen=True)
class TimeProfile:
    """Unrounded minute components of one offer."""

    pickup_time: float
    travel_time: float
    drop_time: float
    shopping_time: float
    return_delta: float
    return_percent: float

    @property
    def total_minutes(self) -> float:
        return (
            self.pickup_time + self.travel_time + self.drop_time
            + self.shopping_time + self.return_delta
        )

    @property
    def travel_multiplier(self) -> float:
        """Driving minutes per one-way minute, return leg included."""
        return 1.0 + self.return_percent / 100.0


def travel_minutes(miles: float, settings: DriverSettings) -> float:
    """One-way driving minutes for ``miles`` at the average speed."""
    return miles / settings.avg_speed * 60 if settings.avg_speed > 0 else 0.0


def miles_for_minutes(minutes: float, settings: DriverSettings) -> float:
    """Inverse of :func:`travel_minutes`."""
    return minutes * settings.avg_speed / 60


def max_minutes_for_pay(pay: float, settings: DriverSettings) -> float:
    """Minutes ``pay`` buys at the target hourly rate."""
    return pay / settings.expected_pay * 60 if settings.expected_pay > 0 else 0.0


def required_pay_for_minutes(minutes: float, settings: DriverSettings) -> float:
    """Pay that covers ``minutes`` at the target hourly rate."""
    return minutes * settings.expected_pay / 60


def time_profile(offer: OfferInput, settings: DriverSettings) -> TimeProfile:
    """Break an offer down into unrounded minute components."""
    return_percent = settings.return_percent(offer.drops)
    travel_time = travel_minutes(offer.miles, settings)
    return TimeProfile(
        pickup_time=offer.pickups * settings.per_pickup,
        travel_time=travel_time,
        drop_time=offer.drops * settings.per_drop,
        shopping_time=offer.items * settings.per_item,
        return_delta=travel_time * return_percent / 100.0,
        return_percent=return_percent,
    )


def compute_maxima(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
) -> Maxima:
    """Theoretical ceilings for the offer's pay, pickups and drops.

    Miles and items on the offer are ignored: this answers "how far could I
    go for this pay" (no shopping) and "how many items could I shop" (no
    driving), each on its own.
    """
    profile = time_profile(offer.model_copy(update={"miles": 0.0, "items": 0}), settings)

    max_minutes = max_minutes_for_pay(offer.pay, settings)
    fixed_time = profile.pickup_time + profile.drop_time
    remaining_time = max_minutes - fixed_time

    max_travel_time = remaining_time / profile.travel_multiplier
    max_miles = miles_for_minutes(max_travel_time, settings)
    max_items = math.floor(remaining_time / settings.per_item) if settings.per_item > 0 else 0

    return Maxima(
        max_minutes=round(max_minutes, 2),
        fixed_time=round(fixed_time, 2),
        max_miles=max(0.0, round(max_miles, 2)),
        max_items=max(0, max_items),
    )


def compute_pay_requirement(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
) -> PayRequirement:
    """Minutes the offer costs and the pay needed to cover them at the target rate."""
    profile = time_profile(offer, settings)
    total_minutes = profile.total_minutes
    required_pay = required_pay_for_minutes(total_minutes, settings)

    return PayRequirement(
        pickup_time=round(profile.pickup_time, 2),
        travel_time=round(profile.travel_time, 2),
        drop_time=round(profile.drop_time, 2),
        shopping_time=round(profile.shopping_time, 2),
        return_delta=round(profile.return_delta, 2),
        total_minutes=round(total_minutes, 2),
        required_pay=round(required_pay, 2),
    )
