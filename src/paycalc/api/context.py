"""Context manifest — makes the evaluator self-describing for API clients.

Two detail levels:
  - ``compact``: settings parameters with defaults and constraints
  - ``full``:    adds the formulas and verdict rules

Parsers that turn a screenshot or a voice note into an offer read
``GET /context`` once and then know which fields to send.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from paycalc.config.offer import OfferInput
from paycalc.config.settings import DEFAULT_SETTINGS, DriverSettings


class ParameterInfo(BaseModel):
    """One input field, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class EvaluatorContext(BaseModel):
    """Self-describing manifest for API clients."""
    name: str
    version: str
    description: str
    settings: list[ParameterInfo]
    offer: list[ParameterInfo]
    formulas: list[dict[str, str]]
    verdict_rules: list[str]
    endpoints: list[EndpointInfo]


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Pull one constraint (``ge``, ``gt``, ...) out of pydantic field metadata."""
    for m in getattr(field_info, "metadata", ()):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        default = None if field_info.is_required() else field_info.default
        type_str = getattr(field_info.annotation, "__name__", str(field_info.annotation))

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


_FORMULAS: list[dict[str, str]] = [
    {"name": "travel_time", "formula": "miles / avg_speed * 60"},
    {"name": "return_delta", "formula": "travel_time * (return_2_drop if drops >= 2 else return_1_drop) / 100"},
    {"name": "total_minutes", "formula": "pickups*per_pickup + travel_time + drops*per_drop + items*per_item + return_delta"},
    {"name": "required_pay", "formula": "total_minutes * expected_pay / 60"},
    {"name": "orders_per_hour", "formula": "min(max_orders_per_hour, 60 / total_minutes)"},
    {"name": "effective_hourly", "formula": "pay * orders_per_hour"},
    {"name": "max_minutes", "formula": "pay / expected_pay * 60"},
]

_VERDICT_RULES: list[str] = [
    "BAD when the floor is not met: effective_hourly < min_hourly_pay if min_hourly_pay > 0, "
    "otherwise pay < required_pay.",
    "GOOD when the floor is met and effective_hourly >= expected_pay.",
    "DECENT otherwise.",
    "GOOD-side thresholds are null when pay * max_orders_per_hour < expected_pay.",
]

_ENDPOINTS: list[EndpointInfo] = [
    EndpointInfo(method="GET", path="/context", description="This manifest"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema for driver settings"),
    EndpointInfo(method="GET", path="/settings/defaults", description="Settings the server evaluates with"),
    EndpointInfo(method="POST", path="/evaluate", description="Evaluate an offer with optional settings overrides"),
    EndpointInfo(method="GET", path="/evaluate", description="Evaluate an offer from query parameters"),
    EndpointInfo(method="POST", path="/maxima", description="Theoretical max miles/items/minutes for a pay"),
    EndpointInfo(method="POST", path="/pay-requirement", description="Minutes and required pay for an offer"),
    EndpointInfo(method="POST", path="/what-if", description="Pickup-wait impact and one-at-a-time sweeps"),
]


def build_context(
    detail_level: Literal["compact", "full"] = "full",
    settings: DriverSettings = DEFAULT_SETTINGS,
) -> EvaluatorContext:
    """Build the manifest; ``settings`` supplies the defaults shown."""
    params = _extract_params(DriverSettings)
    current = settings.model_dump()
    for p in params:
        p.default = current[p.name]

    full = detail_level == "full"
    return EvaluatorContext(
        name="PayCalc Offer Evaluator",
        version="1.0",
        description=(
            "Decides whether a gig-delivery offer is worth accepting: verdict, effective "
            "hourly rate, time breakdown and the thresholds at which the verdict changes."
        ),
        settings=params,
        offer=_extract_params(OfferInput),
        formulas=_FORMULAS if full else [],
        verdict_rules=_VERDICT_RULES if full else [],
        endpoints=_ENDPOINTS,
    )


def get_settings_schema() -> dict:
    """Full JSON Schema for DriverSettings."""
    return DriverSettings.model_json_schema()
