"""Configuration models — driver settings and offer input."""

from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings
from paycalc.config.offer import OfferInput
from paycalc.config.loader import (
    dump_settings,
    load_settings,
    settings_from_env,
    settings_from_mapping,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "DriverSettings",
    "OfferInput",
    "dump_settings",
    "load_settings",
    "settings_from_env",
    "settings_from_mapping",
]
