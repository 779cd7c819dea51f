"""Effective hourly rate and the GOOD / DECENT / BAD classification.

  orders_per_hour  = min(max_orders_per_hour, 60 / total_minutes)
  effective_hourly = pay × orders_per_hour

  BAD     floor not met
  GOOD    floor met and effective_hourly ≥ expected_pay
  DECENT  otherwise

The floor is the hourly minimum when ``min_hourly_pay`` is set, otherwise
"pay covers the required pay at the target rate".
"""

from __future__ import annotations

from paycalc.config.settings import DriverSettings
from paycalc.models.results import Verdict


def orders_per_hour(total_minutes: float, settings: DriverSettings) -> float:
    """Orders per hour implied by an order's length, capped by throughput."""
    if total_minutes <= 0:
        return 0.0
    return min(settings.max_orders_per_hour, 60 / total_minutes)


def effective_hourly(pay: float, total_minutes: float, settings: DriverSettings) -> float:
    return pay * orders_per_hour(total_minutes, settings)


def meets_floor(
    pay: float,
    required_pay: float,
    hourly: float,
    settings: DriverSettings,
) -> bool:
    """Whether an offer clears the BAD line.

    ``required_pay`` is compared at cent precision, the same figure
    :func:`~paycalc.engine.time_model.compute_pay_requirement` reports.
    """
    if settings.min_hourly_pay > 0:
        return hourly >= settings.min_hourly_pay
    return pay >= round(required_pay, 2)


def classify(floor_met: bool, hourly: float, settings: DriverSettings) -> Verdict:
    if not floor_met:
        return "bad"
    if hourly >= settings.expected_pay:
        return "good"
    return "decent"
