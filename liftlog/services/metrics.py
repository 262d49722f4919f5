"""Derived metrics: top set selection, Epley 1RM estimate, history stats.

Metrics are computed once when a workout entry is created and stored with it;
they are never recomputed from the sets afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from liftlog.core.constants import EPLEY_DIVISOR
from liftlog.schemas.workout import DerivedMetrics, HistorySummary, SetEntry

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """Round half away from zero to 2 decimals (on the float's shortest repr)."""
    return float(Decimal(repr(float(value))).quantize(_CENTS, rounding=ROUND_HALF_UP))


def get_top_set(sets: Iterable[SetEntry]) -> SetEntry:
    """Heaviest set, ties broken by more reps; the first set wins a full tie."""
    best = None
    for current in sets:
        if best is None:
            best = current
        elif current.weight > best.weight:
            best = current
        elif current.weight == best.weight and current.reps > best.reps:
            best = current
    if best is None:
        raise ValueError("cannot pick a top set from an empty set list")
    return best


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Epley: weight * (1 + reps / 30), rounded to 2 decimals."""
    return round2(weight * (1 + reps / EPLEY_DIVISOR))


def compute_derived(sets: Sequence[SetEntry]) -> DerivedMetrics:
    top = get_top_set(sets)
    return DerivedMetrics(
        top_set_weight=top.weight,
        top_set_reps=top.reps,
        est1rm=estimate_one_rep_max(top.weight, top.reps),
    )


def summarize_history(derived: Sequence[DerivedMetrics]) -> HistorySummary | None:
    """
    Stats over a newest-first list of derived metrics:
    best top-set weight / est1rm across the list, latest values from index 0.
    Returns None for an empty history.
    """
    if not derived:
        return None
    latest = derived[0]
    return HistorySummary(
        sessions=len(derived),
        best_top_set_weight=max(d.top_set_weight for d in derived),
        latest_top_set_weight=latest.top_set_weight,
        latest_est1rm=latest.est1rm,
        best_est1rm=max(d.est1rm for d in derived),
    )
