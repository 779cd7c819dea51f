"""Result models — evaluation output contracts."""

from paycalc.models.results import (
    Maxima,
    OfferEvaluation,
    OfferThresholds,
    PayRequirement,
    TimeBreakdown,
    Verdict,
)

__all__ = [
    "Maxima",
    "OfferEvaluation",
    "OfferThresholds",
    "PayRequirement",
    "TimeBreakdown",
    "Verdict",
]
