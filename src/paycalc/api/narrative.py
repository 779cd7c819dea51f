"""Narrative generator — plain-English read-out of an offer evaluation.

Turns an ``OfferEvaluation`` into the text a driver (or a voice assistant
reading it aloud) needs: the verdict, where the minutes go, and how much
room is left before the verdict changes.
"""

from __future__ import annotations

from paycalc.config.offer import OfferInput
from paycalc.engine.what_if import WhatIfResult
from paycalc.models.results import OfferEvaluation


def _limit(value: float | int | None, unit: str) -> str:
    if value is None:
        return "unreachable"
    return f"{value} {unit}"


def generate_narrative(offer: OfferInput, evaluation: OfferEvaluation) -> str:
    """Generate a plain-English narrative from an evaluation.

    Returns a text block covering:
      1. Verdict and headline numbers
      2. Time breakdown (only when a route was entered)
      3. Thresholds
      4. Advice
    """
    e = evaluation
    t = e.thresholds
    b = e.breakdown

    sections: list[str] = []

    # ── 1. Verdict ──
    sections.append("=" * 48)
    sections.append(f"{e.verdict_emoji} {e.verdict_text}")
    sections.append("=" * 48)
    if e.has_route:
        sections.append(
            f"Pay: ${offer.pay:.2f} for {offer.miles:g} mi, "
            f"{offer.pickups} pickup(s), {offer.drops} drop(s), {offer.items} item(s)\n"
            f"Effective hourly: ${e.effective_hourly:.2f}/hr\n"
            f"Required pay at target rate: ${e.required_pay:.2f} "
            f"({'+' if e.difference >= 0 else '-'}${abs(e.difference):.2f})"
        )
    else:
        sections.append(
            f"Pay: ${offer.pay:.2f} (no route entered)\n"
            f"Worth up to {e.max_minutes:.0f} min at your target rate\n"
            f"Max {e.max_miles:.1f} mi with no shopping, or {e.max_items} items with no driving"
        )

    # ── 2. Time breakdown ──
    if e.has_route:
        sections.append("")
        sections.append("TIME BREAKDOWN")
        sections.append("-" * 48)
        for name, minutes in (
            ("Pickup", b.pickup),
            ("Travel", b.travel),
            ("Drop-off", b.drop),
            ("Shopping", b.shopping),
            ("Return trip", b.return_leg),
        ):
            sections.append(f"  {name:12s} {minutes:7.1f} min")
        sections.append(f"  {'Total':12s} {e.total_minutes:7.1f} min")

    # ── 3. Thresholds ──
    sections.append("")
    sections.append("THRESHOLDS")
    sections.append("-" * 48)
    sections.append(
        f"GOOD up to {_limit(t.max_miles_for_good, 'mi')}, "
        f"{_limit(t.max_time_for_good, 'min')}, "
        f"{_limit(t.max_items_for_good, 'items')}\n"
        f"DECENT up to {t.max_miles_for_decent} mi, {t.max_time_for_decent} min, "
        f"{t.max_items_for_decent} items\n"
        f"BAD beyond {t.max_miles_before_bad} mi, {t.max_time_before_bad} min, "
        f"{t.max_items_before_bad} items, or below ${t.min_pay_before_bad:.2f}"
    )
    if e.has_route:
        sections.append(f"Pay needed for GOOD at this length: ${t.min_pay_for_good:.2f}")

    # ── 4. Advice ──
    sections.append("")
    if not t.can_be_good:
        sections.append(
            "This pay can never reach your target rate, even at "
            "your max order rate. Decline unless it fills a gap."
        )
    elif e.verdict == "bad":
        sections.append("Below your floor. Decline unless the route is shorter than shown.")
    elif e.verdict == "decent":
        sections.append("Covers your costs but under your target rate.")
    else:
        sections.append("Meets your target rate.")

    return "\n".join(sections)


def generate_what_if_narrative(result: WhatIfResult) -> str:
    """Table of what-if bars, largest hourly swing first."""
    if not result.bars:
        return "No what-if sweeps requested."

    sections: list[str] = []
    sections.append(f"Base: ${result.base_hourly:.2f}/hr ({result.base_verdict.upper()})")
    header = f"{'Input':16s}  {'Low':>8s}  {'$/hr':>8s}  {'High':>8s}  {'$/hr':>8s}  {'Swing':>7s}"
    sections.append(header)
    sections.append("-" * len(header))
    for bar in result.bars:
        sections.append(
            f"{bar.name:16s}  {bar.low_value:8g}  {bar.hourly_at_low:8.2f}  "
            f"{bar.high_value:8g}  {bar.hourly_at_high:8.2f}  {bar.delta_hourly:7.2f}"
        )
    return "\n".join(sections)
