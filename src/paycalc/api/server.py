"""FastAPI server — HTTP access to the offer evaluator.

Run with:
    uvicorn paycalc.api.server:app --reload --port 8000

Or:
    python -m paycalc.api.server

The server evaluates with the driver profile named by
``PAYCALC_SETTINGS_FILE`` (defaults when unset); every request may override
individual settings.

Endpoints:
    GET  /context            — self-describing manifest (fields + formulas)
    GET  /schema             — JSON Schema for driver settings
    GET  /settings/defaults  — settings the server evaluates with
    POST /evaluate           — evaluate an offer (+ optional settings overrides)
    GET  /evaluate           — evaluate an offer from query parameters
    POST /maxima             — theoretical ceilings for a pay amount
    POST /pay-requirement    — minutes + required pay for an offer
    POST /what-if            — pickup-wait impact + one-at-a-time sweeps
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import Any, Literal

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from paycalc.config.loader import settings_from_env, settings_from_mapping
from paycalc.config.offer import OfferInput
from paycalc.config.settings import DriverSettings
from paycalc.engine.evaluator import evaluate_offer
from paycalc.engine.time_model import compute_maxima, compute_pay_requirement
from paycalc.engine.what_if import evaluate_with_wait, run_what_if
from paycalc.models.results import Maxima, OfferEvaluation, PayRequirement
from paycalc.api.context import build_context, get_settings_schema
from paycalc.api.narrative import generate_narrative, generate_what_if_narrative

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="PayCalc Offer Evaluator API",
    version="1.0",
    description=(
        "Evaluate gig-delivery offers: GOOD / DECENT / BAD verdict, effective hourly "
        "rate, time breakdown, and how far each input can move before the verdict "
        "changes. Offer parsers (screenshot, voice, text) post their structured "
        "result to /evaluate."
    ),
)

# Offer parsers and share links call in from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_base_settings() -> DriverSettings:
    """Server-wide settings, loaded once from ``PAYCALC_SETTINGS_FILE``."""
    settings = settings_from_env()
    logger.info("Evaluating with settings: %s", settings.model_dump())
    return settings


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EvaluateRequest(BaseModel):
    """Request body for /evaluate, /maxima and /pay-requirement."""
    offer: OfferInput
    settings: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial settings overrides (snake_case or camelCase keys). "
                    "Missing fields use the server settings. "
                    "Example: {'expected_pay': 25, 'minHourlyPay': 18}",
    )


class EvaluateResponse(BaseModel):
    """Response from /evaluate.  ``evaluation`` is null for offers with no pay or no drops."""
    evaluation: OfferEvaluation | None
    summary: str
    narrative: str = ""


class WhatIfRequest(BaseModel):
    """Request body for /what-if."""
    offer: OfferInput
    settings: dict[str, Any] = Field(default_factory=dict)
    wait_minutes: float | None = Field(
        default=None,
        ge=0,
        description="Assumed wait per pickup. Default: the extra_wait_time setting.",
    )
    sweeps: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of the sweeps. "
                    "Default: pay ±$2, miles ±2, items ±5, drops ±1, pickup wait +10 min. "
                    "Format: [{'name': 'Route miles', 'field': 'miles', 'low': -2, 'high': 2}]",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _merge_settings(overrides: dict[str, Any], base: DriverSettings) -> DriverSettings:
    """Apply request overrides; bad keys or values become a 422."""
    try:
        return settings_from_mapping(overrides, base)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _evaluate_response(offer: OfferInput, settings: DriverSettings) -> EvaluateResponse:
    if not offer.is_evaluable:
        logger.debug("Skipping evaluation of %s: needs pay > 0 and drops > 0", offer)
        return EvaluateResponse(evaluation=None, summary="Could not evaluate offer")
    evaluation = evaluate_offer(offer, settings)
    return EvaluateResponse(
        evaluation=evaluation,
        summary=evaluation.summary,
        narrative=generate_narrative(offer, evaluation),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "PayCalc Offer Evaluator API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
        "example": "GET /evaluate?pay=8.5&miles=3",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for fields only, 'full' adds formulas and verdict rules",
    ),
    base: DriverSettings = Depends(get_base_settings),
):
    """Self-describing manifest: settings, offer fields, formulas, endpoints."""
    return build_context(detail_level, base)


@app.get("/schema")
def get_schema():
    """JSON Schema for DriverSettings — types, defaults, constraints."""
    return get_settings_schema()


@app.get("/settings/defaults")
def get_defaults(base: DriverSettings = Depends(get_base_settings)):
    """Settings the server evaluates with when a request overrides nothing."""
    return base.model_dump()


@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest, base: DriverSettings = Depends(get_base_settings)):
    """Evaluate one offer.

    Example minimal request:
    ```json
    {"offer": {"pay": 8.5, "miles": 3}}
    ```
    """
    settings = _merge_settings(req.settings, base)
    return _evaluate_response(req.offer, settings)


@app.get("/evaluate", response_model=EvaluateResponse)
def evaluate_from_query(
    pay: float = Query(ge=0, description="Total pay ($)"),
    pickups: int = Query(default=1, ge=0),
    drops: int = Query(default=1, ge=0),
    miles: float = Query(default=0.0, ge=0),
    items: int = Query(default=0, ge=0),
    base: DriverSettings = Depends(get_base_settings),
):
    """Evaluate an offer given as URL parameters, e.g. from a shared link."""
    offer = OfferInput(pay=pay, pickups=pickups, drops=drops, miles=miles, items=items)
    return _evaluate_response(offer, base)


@app.post("/maxima", response_model=Maxima)
def maxima(req: EvaluateRequest, base: DriverSettings = Depends(get_base_settings)):
    """Max minutes, miles (no shopping) and items (no driving) for the offer's pay."""
    return compute_maxima(req.offer, _merge_settings(req.settings, base))


@app.post("/pay-requirement", response_model=PayRequirement)
def pay_requirement(req: EvaluateRequest, base: DriverSettings = Depends(get_base_settings)):
    """Minute breakdown and the pay that covers it at the target rate."""
    return compute_pay_requirement(req.offer, _merge_settings(req.settings, base))


@app.post("/what-if")
def what_if(req: WhatIfRequest, base: DriverSettings = Depends(get_base_settings)):
    """How a pickup wait and small changes to each input move the hourly rate."""
    settings = _merge_settings(req.settings, base)

    sweep_config = None
    if req.sweeps:
        try:
            sweep_config = [
                (sw.get("name", sw["field"]), sw["field"], float(sw.get("low", 0.0)), float(sw.get("high", 0.0)))
                for sw in req.sweeps
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise HTTPException(status_code=422, detail=f"Bad sweep definition: {exc}") from exc

    impact = evaluate_with_wait(req.offer, settings, req.wait_minutes)
    try:
        result = run_what_if(req.offer, settings, sweep_config)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "wait_impact": {
            "wait_minutes": impact.wait_minutes,
            "base": impact.base.model_dump(),
            "with_wait": impact.with_wait.model_dump(),
            "hourly_delta": impact.hourly_delta,
            "verdict_changed": impact.verdict_changed,
        },
        "base_hourly": result.base_hourly,
        "base_verdict": result.base_verdict,
        "bars": [asdict(bar) for bar in result.bars],
        "narrative": generate_what_if_narrative(result),
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "paycalc.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
