"""Shared test fixtures — stock settings and the reference offers."""

from __future__ import annotations

import pytest

from paycalc.config import DEFAULT_SETTINGS, DriverSettings, OfferInput


@pytest.fixture
def settings() -> DriverSettings:
    return DEFAULT_SETTINGS


@pytest.fixture
def floor_settings() -> DriverSettings:
    """Stock settings with a $25/hr hourly floor."""
    return DriverSettings(min_hourly_pay=25.0)


@pytest.fixture
def long_offer() -> OfferInput:
    """$21 for 35 miles — an hour of driving each way."""
    return OfferInput(pay=21.0, pickups=1, drops=1, miles=35.0)


@pytest.fixture
def short_offer() -> OfferInput:
    """$8.50 for 3 miles — short enough to hit the throughput cap."""
    return OfferInput(pay=8.5, pickups=1, drops=1, miles=3.0)


@pytest.fixture
def no_route_offer() -> OfferInput:
    """$15 with no miles entered yet."""
    return OfferInput(pay=15.0)


@pytest.fixture
def shop_offer() -> OfferInput:
    """Two-drop shop-and-deliver batch."""
    return OfferInput(pay=48.55, pickups=1, drops=2, miles=34.1, items=44)
