"""What-if exploration — re-evaluate an offer with one input changed.

Two questions a driver asks while an offer card is on screen:

  * "What if the restaurant makes me wait?"  — ``evaluate_with_wait`` adds an
    assumed wait to every pickup (``extra_wait_time`` by default).
  * "Which input matters most?"  — ``run_what_if`` sweeps one dimension at a
    time to a low and a high value and measures the effective-hourly swing.

Default sweep set (absolute deltas):
  - pay ± $2
  - miles ± 2
  - items ± 5
  - drops ± 1
  - pickup wait +0 / +10 min
"""

from __future__ import annotations

from dataclasses import dataclass, field

from paycalc.config.offer import OfferInput
from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings
from paycalc.engine.evaluator import evaluate_offer
from paycalc.models.results import OfferEvaluation, Verdict


WAIT = "wait"
"""Sweep key for the assumed pickup wait (a setting, not an offer field)."""


@dataclass(frozen=True)
class WaitImpact:
    """Same offer evaluated without and with an assumed pickup wait."""

    wait_minutes: float
    """Assumed wait per pickup."""

    base: OfferEvaluation
    with_wait: OfferEvaluation

    hourly_delta: float
    """with_wait.effective_hourly − base.effective_hourly (≤ 0)."""

    verdict_changed: bool


@dataclass(frozen=True)
class WhatIfBar:
    """One swept dimension."""

    name: str
    """Human-readable dimension name."""

    dimension: str
    """Offer field (or ``"wait"``) that was varied."""

    base_value: float
    low_value: float
    high_value: float

    hourly_at_low: float
    hourly_at_high: float
    verdict_at_low: Verdict
    verdict_at_high: Verdict

    delta_hourly: float
    """abs(hourly_at_high − hourly_at_low) — total swing width."""


@dataclass
class WhatIfResult:
    """Complete what-if output for one offer."""

    base_hourly: float
    base_verdict: Verdict

    bars: list[WhatIfBar] = field(default_factory=list)
    """Sorted by delta_hourly (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Pay", "pay", -2.0, 2.0),
    ("Route miles", "miles", -2.0, 2.0),
    ("Shopping items", "items", -5.0, 5.0),
    ("Drops", "drops", -1.0, 1.0),
    ("Pickup wait", WAIT, 0.0, 10.0),
]

# Sweeps never go below these; everything else stops at zero.
_FLOORS: dict[str, float] = {"pickups": 1, "drops": 1}


def apply_wait_time(
    settings: DriverSettings,
    wait_minutes: float | None = None,
) -> DriverSettings:
    """Settings with an assumed wait folded into the per-pickup time."""
    wait = settings.extra_wait_time if wait_minutes is None else wait_minutes
    return settings.model_copy(update={"per_pickup": settings.per_pickup + max(0.0, wait)})


def evaluate_with_wait(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
    wait_minutes: float | None = None,
) -> WaitImpact:
    """Evaluate ``offer`` as-is and with ``wait_minutes`` extra at each pickup."""
    wait = settings.extra_wait_time if wait_minutes is None else max(0.0, wait_minutes)
    base = evaluate_offer(offer, settings)
    with_wait = evaluate_offer(offer, apply_wait_time(settings, wait))
    return WaitImpact(
        wait_minutes=wait,
        base=base,
        with_wait=with_wait,
        hourly_delta=round(with_wait.effective_hourly - base.effective_hourly, 2),
        verdict_changed=with_wait.verdict != base.verdict,
    )


def _base_value(offer: OfferInput, settings: DriverSettings, key: str) -> float:
    if key == WAIT:
        return settings.extra_wait_time
    if key not in OfferInput.model_fields:
        raise ValueError(f"Cannot sweep unknown offer field {key!r}")
    return float(getattr(offer, key))


def _evaluate_at(
    offer: OfferInput,
    settings: DriverSettings,
    key: str,
    value: float,
) -> OfferEvaluation:
    """Evaluate with one dimension set to ``value``.

    Integer offer fields (stop and item counts) are rounded first.
    """
    if key == WAIT:
        return evaluate_offer(offer, apply_wait_time(settings, value))
    if OfferInput.model_fields[key].annotation is int:
        value = round(value)
    return evaluate_offer(offer.model_copy(update={key: value}), settings)


def run_what_if(
    offer: OfferInput,
    settings: DriverSettings = DEFAULT_SETTINGS,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> WhatIfResult:
    """Sweep each dimension to its low and high value and rank by hourly swing.

    Parameters
    ----------
    offer : OfferInput
        Offer to explore.
    settings : DriverSettings
        Driver settings.  The wait sweep starts from ``extra_wait_time``; the
        base evaluation itself never includes a wait.
    sweeps : list[tuple[name, field, low_delta, high_delta]] | None
        Absolute deltas per dimension.  None = use DEFAULT_SWEEPS.

    Raises
    ------
    ValueError
        If a sweep names a field that is neither an offer field nor ``"wait"``.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = evaluate_offer(offer, settings)
    bars: list[WhatIfBar] = []

    for name, key, low_delta, high_delta in sweeps:
        base_val = _base_value(offer, settings, key)
        floor = _FLOORS.get(key, 0.0)
        low_val = max(floor, base_val + low_delta)
        high_val = max(floor, base_val + high_delta)

        low_eval = _evaluate_at(offer, settings, key, low_val)
        high_eval = _evaluate_at(offer, settings, key, high_val)

        bars.append(WhatIfBar(
            name=name,
            dimension=key,
            base_value=round(base_val, 2),
            low_value=round(low_val, 2),
            high_value=round(high_val, 2),
            hourly_at_low=low_eval.effective_hourly,
            hourly_at_high=high_eval.effective_hourly,
            verdict_at_low=low_eval.verdict,
            verdict_at_high=high_eval.verdict,
            delta_hourly=round(abs(high_eval.effective_hourly - low_eval.effective_hourly), 2),
        ))

    bars.sort(key=lambda b: b.delta_hourly, reverse=True)

    return WhatIfResult(
        base_hourly=base.effective_hourly,
        base_verdict=base.verdict,
        bars=bars,
    )
