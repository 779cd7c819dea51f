"""Engine — pure offer-evaluation logic."""

from paycalc.engine.time_model import compute_maxima, compute_pay_requirement
from paycalc.engine.thresholds import compute_thresholds
from paycalc.engine.evaluator import evaluate_offer
from paycalc.engine.what_if import evaluate_with_wait, run_what_if, WaitImpact, WhatIfResult

__all__ = [
    "compute_maxima",
    "compute_pay_requirement",
    "compute_thresholds",
    "evaluate_offer",
    # What-if
    "evaluate_with_wait",
    "run_what_if",
    "WaitImpact",
    "WhatIfResult",
]
