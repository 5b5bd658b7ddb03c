"""Tests for per-factor metric evaluation and tier classification.

The window is built from in-memory samples; ``high_impact`` and
``overstriding`` are fed through deterministic fake estimators.
"""

import datetime

import pytest

from app.risk.catalog import RISK_FACTORS, get_risk_factor
from app.risk.evaluator import (
    DEFAULT_METRICS,
    RiskFactorEvaluator,
    classify_tier,
    mean_cadence,
    road_fraction,
    total_weekly_distance,
    unmeasured,
)
from app.schemas.risk_factor import Tier
from app.schemas.sample import DailySample

NOW = datetime.datetime(2026, 3, 1, 8, 0, tzinfo=datetime.timezone.utc)


# ======================================================================
# Helpers
# ======================================================================


def _make_sample(days_ago: int = 0, **overrides) -> DailySample:
    """Build a sample whose metrics are all in the low tier by default."""
    values = {
        "cadence": 180.0,
        "ground_contact_time": 240.0,
        "vertical_oscillation": 8.0,
        "pronation": "neutral",
        "symmetry": 2.0,
        "weekly_distance": 5.0,
        "weekly_intensity": 20.0,
        "rest_days": 2,
        "consecutive_days": 0,
        "fatigue": 30.0,
        "sleep_quality": 85.0,
        "hrv": 70.0,
        "stress": 30.0,
        "surface": "trail",
        "weather": "dry",
        "elevation": 50.0,
    }
    values.update(overrides)
    return DailySample(
        user_id="u1",
        timestamp=NOW - datetime.timedelta(days=days_ago),
        biomechanical={k: values[k] for k in (
            "cadence", "ground_contact_time", "vertical_oscillation", "pronation", "symmetry",
        )},
        training={k: values[k] for k in (
            "weekly_distance", "weekly_intensity", "rest_days", "consecutive_days",
        )},
        physiological={k: values[k] for k in ("fatigue", "sleep_quality", "hrv", "stress")},
        environmental={k: values[k] for k in ("surface", "weather", "elevation")},
    )


def _window(n: int = 7, **overrides) -> list[DailySample]:
    return [_make_sample(days_ago=i, **overrides) for i in range(n)]


# ======================================================================
# classify_tier
# ======================================================================


class TestClassifyTier:
    """Generic polarity-driven comparison."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, Tier.LOW),
            (50.0, Tier.LOW),      # equal to medium threshold stays low
            (50.1, Tier.MEDIUM),
            (70.0, Tier.MEDIUM),   # equal to high threshold stays medium
            (70.1, Tier.HIGH),
            (100.0, Tier.HIGH),
        ],
    )
    def test_higher_is_worse(self, value, expected):
        assert classify_tier(value, get_risk_factor("high_fatigue")) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (180.0, Tier.LOW),
            (170.0, Tier.LOW),
            (169.9, Tier.MEDIUM),
            (160.0, Tier.MEDIUM),
            (159.9, Tier.HIGH),
            (0.0, Tier.HIGH),
        ],
    )
    def test_lower_is_worse(self, value, expected):
        assert classify_tier(value, get_risk_factor("low_cadence")) == expected


# ======================================================================
# Metrics
# ======================================================================


class TestMetrics:
    """Metric definitions over the window."""

    def test_strategy_map_covers_catalog(self):
        assert set(DEFAULT_METRICS) == {f.id for f in RISK_FACTORS}

    def test_placeholders_default_to_unmeasured(self):
        assert DEFAULT_METRICS["high_impact"] is unmeasured
        assert DEFAULT_METRICS["overstriding"] is unmeasured

    def test_weekly_distance_is_summed(self):
        assert total_weekly_distance(_window(7, weekly_distance=12.0)) == pytest.approx(84.0)

    def test_mean_cadence(self):
        window = [_make_sample(0, cadence=150.0), _make_sample(1, cadence=170.0)]
        assert mean_cadence(window) == pytest.approx(160.0)

    def test_road_fraction(self):
        window = [
            _make_sample(0, surface="road"),
            _make_sample(1, surface="road"),
            _make_sample(2, surface="trail"),
            _make_sample(3, surface="treadmill"),
        ]
        assert road_fraction(window) == pytest.approx(0.5)

    def test_empty_window_is_zero(self):
        for metric in DEFAULT_METRICS.values():
            assert metric([]) == 0.0


# ======================================================================
# RiskFactorEvaluator
# ======================================================================


class TestEvaluator:
    """End-to-end factor evaluation."""

    @pytest.fixture
    def evaluator(self):
        return RiskFactorEvaluator()

    def test_baseline_window_is_all_low(self, evaluator):
        results = evaluator.evaluate_all(_window())
        assert [f.id for f, _, _ in results] == [f.id for f in RISK_FACTORS]
        assert all(tier == Tier.LOW for _, _, tier in results)

    def test_low_cadence_high(self, evaluator):
        value, tier = evaluator.evaluate("low_cadence", _window(cadence=150.0))
        assert value == pytest.approx(150.0)
        assert tier == Tier.HIGH

    def test_asymmetry_medium(self, evaluator):
        value, tier = evaluator.evaluate("asymmetry", _window(symmetry=10.0))
        assert value == pytest.approx(10.0)
        assert tier == Tier.MEDIUM

    def test_insufficient_rest_counts_light_days(self, evaluator):
        window = _window(weekly_intensity=50.0)
        window[0] = _make_sample(0, weekly_intensity=20.0)
        value, tier = evaluator.evaluate("insufficient_rest", window)
        assert value == 1.0
        assert tier == Tier.HIGH

    def test_insufficient_rest_medium_at_two(self, evaluator):
        window = _window(weekly_intensity=50.0)
        window[0] = _make_sample(0, weekly_intensity=10.0)
        window[1] = _make_sample(1, weekly_intensity=29.9)
        _, tier = evaluator.evaluate("insufficient_rest", window)
        assert tier == Tier.MEDIUM

    def test_consecutive_days_counts_training_days(self, evaluator):
        window = _window(consecutive_days=1)
        window[6] = _make_sample(6, consecutive_days=0)
        value, tier = evaluator.evaluate("consecutive_days", window)
        assert value == 6.0
        assert tier == Tier.HIGH

    def test_hard_surface_high(self, evaluator):
        value, tier = evaluator.evaluate("hard_surface", _window(surface="road"))
        assert value == pytest.approx(1.0)
        assert tier == Tier.HIGH

    def test_poor_sleep_and_low_hrv(self, evaluator):
        window = _window(sleep_quality=59.0, hrv=50.0)
        assert evaluator.evaluate("poor_sleep", window)[1] == Tier.HIGH
        assert evaluator.evaluate("low_hrv", window)[1] == Tier.MEDIUM

    def test_unknown_factor_defaults_to_low(self, evaluator):
        assert evaluator.evaluate("trail_surface", _window()) == (0.0, Tier.LOW)

    def test_injected_estimators(self):
        evaluator = RiskFactorEvaluator(overrides={
            "high_impact": lambda window: 1.9,
            "overstriding": lambda window: 0.6,
        })
        assert evaluator.evaluate("high_impact", _window()) == (1.9, Tier.HIGH)
        assert evaluator.evaluate("overstriding", _window()) == (0.6, Tier.MEDIUM)

    def test_overrides_do_not_leak_between_instances(self):
        RiskFactorEvaluator(overrides={"high_impact": lambda window: 5.0})
        assert RiskFactorEvaluator().evaluate("high_impact", _window())[1] == Tier.LOW

    def test_deterministic(self, evaluator):
        window = _window(fatigue=65.0)
        assert evaluator.evaluate_all(window) == evaluator.evaluate_all(window)
