"""Offer evaluation — time model + verdict + thresholds + summary."""

from __future__ import annotations

from paycalc.config.offer import OfferInput
from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings
from paycalc.engine.thresholds import compute_thresholds
from paycalc.engine.time_model import (
    compute_maxima,
    required_pay_for_minutes,
    time_profile,
)
from paycalc.engine.verdict import classify, effective_hourly, meets_floor
from paycalc.models.results import (
    VERDICT_EMOJI,
    Maxima,
    OfferEvaluation,
    TimeBreakdown,
    Verdict,
)


def _summary(
    offer: OfferInput,
    verdict: Verdict,
    hourly: float,
    total_minutes: float,
    maxima: Maxima,
) -> str:
    emoji = VERDICT_EMOJI[verdict]
    if offer.has_route:
        return f"{emoji} {verdict.upper()}: ${hourly:.2f}/hr | {total_minutes:.0f} min"
    return f"{emoji} ${offer.pay:.2f} = Max {maxima.max_miles:.1f} mi in {maxima.max_minutes:.0f} min"


def evaluate_offer(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
) -> OfferEvaluation:
    """Evaluate one offer against the driver's settings.

    Never raises for non-negative input.  Offers with no pay or no drops
    still evaluate (as BAD or with zero ceilings); callers that should not
    show them check ``offer.is_evaluable`` first.
    """
    maxima = compute_maxima(offer, settings)
    profile = time_profile(offer, settings)
    total_minutes = profile.total_minutes
    required_pay = required_pay_for_minutes(total_minutes, settings)

    hourly = effective_hourly(offer.pay, total_minutes, settings)
    verdict = classify(meets_floor(offer.pay, required_pay, hourly, settings), hourly, settings)

    return OfferEvaluation(
        verdict=verdict,
        verdict_emoji=VERDICT_EMOJI[verdict],
        verdict_text=verdict.upper(),
        effective_hourly=round(hourly, 2),
        required_pay=round(required_pay, 2),
        difference=round(offer.pay - round(required_pay, 2), 2),
        total_minutes=round(total_minutes, 2),
        has_route=offer.has_route,
        max_miles=maxima.max_miles,
        max_items=maxima.max_items,
        max_minutes=maxima.max_minutes,
        thresholds=compute_thresholds(offer, settings),
        breakdown=TimeBreakdown(
            pickup=round(profile.pickup_time, 2),
            travel=round(profile.travel_time, 2),
            drop=round(profile.drop_time, 2),
            shopping=round(profile.shopping_time, 2),
            return_leg=round(profile.return_delta, 2),
        ),
        summary=_summary(offer, verdict, hourly, total_minutes, maxima),
    )
