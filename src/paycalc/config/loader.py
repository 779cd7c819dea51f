"""Settings loading — profiles on disk, partial overrides, environment.

Profiles are YAML or JSON mappings of setting name → value.  Both the
snake_case field names and the camelCase keys the PayCalc web app stored in
``localStorage`` are accepted, so an exported browser profile loads as-is.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "PAYCALC_SETTINGS_FILE"

_CAMEL_KEYS: dict[str, str] = {
    "perPickup": "per_pickup",
    "perDrop": "per_drop",
    "perItem": "per_item",
    "avgSpeed": "avg_speed",
    "expectedPay": "expected_pay",
    "minHourlyPay": "min_hourly_pay",
    "maxOrdersPerHour": "max_orders_per_hour",
    "return1Drop": "return_1_drop",
    "return2Drop": "return_2_drop",
    "extraWaitTime": "extra_wait_time",
}

_YAML_SUFFIXES = (".yaml", ".yml")


def _normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase keys onto field names and reject anything unknown."""
    known = set(DriverSettings.model_fields)
    normalized: dict[str, Any] = {}
    for key, val in data.items():
        name = _CAMEL_KEYS.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown setting {key!r}")
        normalized[name] = val
    return normalized


def settings_from_mapping(
    data: Mapping[str, Any] | None,
    base: DriverSettings | None = None,
) -> DriverSettings:
    """Merge a partial settings mapping onto ``base`` (defaults when None).

    Missing keys keep the base value.  Values are validated by the model, so
    a negative or non-finite number raises ``pydantic.ValidationError``.
    """
    base = base or DEFAULT_SETTINGS
    if not data:
        return base
    merged = base.model_dump()
    merged.update(_normalize_keys(data))
    return DriverSettings(**merged)


def load_settings(path: str | Path, base: DriverSettings | None = None) -> DriverSettings:
    """Load a settings profile from a YAML or JSON file.

    An empty file yields ``base`` (or the defaults).
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES and suffix != ".json":
        raise ValueError(f"Unsupported settings file type: {path.name} (use .yaml, .yml or .json)")

    with path.open(encoding="utf-8") as f:
        if suffix == ".json":
            text = f.read()
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(f)

    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")

    logger.info("Loaded driver settings from %s", path)
    return settings_from_mapping(data, base)


def settings_from_env(environ: Mapping[str, str] | None = None) -> DriverSettings:
    """Settings from the profile named by ``PAYCALC_SETTINGS_FILE``, else defaults."""
    environ = os.environ if environ is None else environ
    path = environ.get(SETTINGS_FILE_ENV)
    if not path:
        return DEFAULT_SETTINGS
    return load_settings(path)


def dump_settings(settings: DriverSettings, path: str | Path) -> Path:
    """Write ``settings`` to a YAML or JSON profile (chosen by suffix)."""
    path = Path(path)
    data = settings.model_dump()
    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    elif suffix in _YAML_SUFFIXES:
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    else:
        raise ValueError(f"Unsupported settings file type: {path.name} (use .yaml, .yml or .json)")
    logger.info("Saved driver settings to %s", path)
    return path
