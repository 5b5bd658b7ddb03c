"""
Risk factor evaluation — one metric per catalog factor.

Every factor is evaluated in two steps:

1. **Metric** — a pure function of the assessment window (at most the
   7 most recent samples) returning a number.  Metrics live in a
   strategy map keyed by factor id, so adding a factor means adding an
   entry, not a branch.
2. **Tier** — one generic comparison driven by the factor's polarity
   and thresholds.  Comparisons are strict: a value equal to a
   threshold stays in the lower tier.

Metric definitions
------------------

=====================  ==============================================
asymmetry              mean ``symmetry``
low_cadence            mean ``cadence``
high_weekly_distance   **sum** of ``weekly_distance`` over the window
insufficient_rest      samples with ``weekly_intensity < 30``
consecutive_days       samples with ``consecutive_days > 0``
high_intensity         mean ``weekly_intensity``
high_fatigue           mean ``fatigue``
poor_sleep             mean ``sleep_quality``
low_hrv                mean ``hrv``
high_stress            mean ``stress``
hard_surface           fraction of samples run on ``road``
elevation_change       mean ``elevation``
=====================  ==============================================

``high_impact`` and ``overstriding`` have no sensor derivation yet.
They are injectable estimators; the defaults report an unmeasured
value of 0.0 so the assessment stays deterministic.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence

from app.risk.catalog import RISK_FACTORS, get_risk_factor
from app.schemas.risk_factor import Polarity, RiskFactor, Tier
from app.schemas.sample import DailySample, Surface

MetricEstimator = Callable[[Sequence[DailySample]], float]

# Samples below this intensity count as rest days.
_REST_INTENSITY = 30.0


# ======================================================================
# Metrics
# ======================================================================


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def unmeasured(window: Sequence[DailySample]) -> float:
    """Placeholder for metrics no sensor provides yet."""
    return 0.0


def mean_asymmetry(window: Sequence[DailySample]) -> float:
    return _mean([s.biomechanical.symmetry for s in window])


def mean_cadence(window: Sequence[DailySample]) -> float:
    return _mean([s.biomechanical.cadence for s in window])


def total_weekly_distance(window: Sequence[DailySample]) -> float:
    return float(sum(s.training.weekly_distance for s in window))


def rest_day_count(window: Sequence[DailySample]) -> float:
    return float(sum(1 for s in window if s.training.weekly_intensity < _REST_INTENSITY))


def training_day_count(window: Sequence[DailySample]) -> float:
    return float(sum(1 for s in window if s.training.consecutive_days > 0))


def mean_intensity(window: Sequence[DailySample]) -> float:
    return _mean([s.training.weekly_intensity for s in window])


def mean_fatigue(window: Sequence[DailySample]) -> float:
    return _mean([s.physiological.fatigue for s in window])


def mean_sleep_quality(window: Sequence[DailySample]) -> float:
    return _mean([s.physiological.sleep_quality for s in window])


def mean_hrv(window: Sequence[DailySample]) -> float:
    return _mean([s.physiological.hrv for s in window])


def mean_stress(window: Sequence[DailySample]) -> float:
    return _mean([s.physiological.stress for s in window])


def road_fraction(window: Sequence[DailySample]) -> float:
    if not window:
        return 0.0
    road = sum(1 for s in window if s.environmental.surface == Surface.ROAD)
    return road / len(window)


def mean_elevation(window: Sequence[DailySample]) -> float:
    return _mean([s.environmental.elevation for s in window])


DEFAULT_METRICS: dict[str, MetricEstimator] = {
    "high_impact": unmeasured,
    "asymmetry": mean_asymmetry,
    "overstriding": unmeasured,
    "low_cadence": mean_cadence,
    "high_weekly_distance": total_weekly_distance,
    "insufficient_rest": rest_day_count,
    "consecutive_days": training_day_count,
    "high_intensity": mean_intensity,
    "high_fatigue": mean_fatigue,
    "poor_sleep": mean_sleep_quality,
    "low_hrv": mean_hrv,
    "high_stress": mean_stress,
    "hard_surface": road_fraction,
    "elevation_change": mean_elevation,
}


# ======================================================================
# Tier classification
# ======================================================================


def classify_tier(value: float, factor: RiskFactor) -> Tier:
    """Map a metric value to its tier using the factor's polarity."""
    # Flip the sign so that "bigger is riskier" holds for both polarities.
    sign = 1.0 if factor.polarity == Polarity.HIGHER_IS_WORSE else -1.0

    if sign * value > sign * factor.high_threshold:
        return Tier.HIGH
    if sign * value > sign * factor.medium_threshold:
        return Tier.MEDIUM
    return Tier.LOW


# ======================================================================
# Evaluator
# ======================================================================


class RiskFactorEvaluator:
    """Evaluates catalog factors over an assessment window.

    Args:
        overrides: Metric estimators replacing the defaults, keyed by
            factor id.  This is how real ``high_impact`` /
            ``overstriding`` sources (or deterministic fakes in tests)
            are plugged in.
    """

    def __init__(self, overrides: Optional[Mapping[str, MetricEstimator]] = None):
        self.metrics: dict[str, MetricEstimator] = dict(DEFAULT_METRICS)
        if overrides:
            self.metrics.update(overrides)

    def evaluate(
        self, factor_id: str, window: Sequence[DailySample],
    ) -> tuple[float, Tier]:
        """Return ``(user_value, tier)`` for one factor.

        Unknown factor ids evaluate to ``(0.0, low)``.
        """
        factor = get_risk_factor(factor_id)
        estimator = self.metrics.get(factor_id)
        if factor is None or estimator is None:
            return 0.0, Tier.LOW

        value = float(estimator(window))
        return value, classify_tier(value, factor)

    def evaluate_all(
        self, window: Sequence[DailySample],
    ) -> list[tuple[RiskFactor, float, Tier]]:
        """Evaluate every catalog factor, in catalog order."""
        results = []
        for factor in RISK_FACTORS:
            value, tier = self.evaluate(factor.id, window)
            results.append((factor, value, tier))
        return results
