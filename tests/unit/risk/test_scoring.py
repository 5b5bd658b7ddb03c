"""Tests for contribution aggregation and overall risk classification.

These are pure unit tests over synthetic :class:`RiskFactorResult`
lists; no samples are involved.
"""

import pytest

from app.risk.catalog import RISK_FACTORS, get_risk_factor
from app.risk.scoring import (
    TIER_MULTIPLIERS,
    classify_overall_risk,
    compute_contribution,
    compute_risk_score,
    count_tiers,
    total_contribution,
)
from app.schemas.risk_factor import RiskFactor, RiskFactorResult, Tier


# ======================================================================
# Helpers
# ======================================================================


def _make_result(factor: RiskFactor, tier: Tier) -> RiskFactorResult:
    return RiskFactorResult(
        factor=factor,
        user_value=0.0,
        tier=tier,
        contribution=compute_contribution(factor.weight, tier),
    )


def _make_results(**tiers: Tier) -> list[RiskFactorResult]:
    """One result per catalog factor, low unless overridden by id."""
    return [_make_result(f, tiers.get(f.id, Tier.LOW)) for f in RISK_FACTORS]


def _synthetic(weight: float, tier: Tier, idx: int = 0) -> RiskFactorResult:
    factor = RiskFactor(
        id=f"f{idx}", name="f", description="", weight=weight,
        category="training", polarity="higher_is_worse",
        medium_threshold=1, high_threshold=2,
    )
    return _make_result(factor, tier)


# ======================================================================
# compute_contribution
# ======================================================================


class TestContribution:
    def test_multipliers_exact(self):
        assert TIER_MULTIPLIERS == {Tier.LOW: 0.2, Tier.MEDIUM: 0.6, Tier.HIGH: 1.0}

    @pytest.mark.parametrize("factor", RISK_FACTORS, ids=lambda f: f.id)
    @pytest.mark.parametrize("tier", list(Tier))
    def test_every_factor_and_tier(self, factor, tier):
        expected = factor.weight * {"low": 0.2, "medium": 0.6, "high": 1.0}[tier.value] * 100
        assert compute_contribution(factor.weight, tier) == pytest.approx(expected)

    def test_low_cadence_high_is_fifteen(self):
        factor = get_risk_factor("low_cadence")
        assert compute_contribution(factor.weight, Tier.HIGH) == pytest.approx(15.0)


# ======================================================================
# compute_risk_score
# ======================================================================


class TestRiskScore:
    def test_all_low_floor(self):
        # 0.2 x sum(weights) x 100, sum(weights) = 2.59
        results = _make_results()
        assert total_contribution(results) == pytest.approx(51.8)
        assert compute_risk_score(results) == 52

    def test_all_high_is_clamped(self):
        results = _make_results(**{f.id: Tier.HIGH for f in RISK_FACTORS})
        assert total_contribution(results) > 100
        assert compute_risk_score(results) == 100

    def test_empty_is_zero(self):
        assert compute_risk_score([]) == 0

    def test_rounds_half_up(self):
        # 0.125 x 0.2 x 100 = 2.5
        assert compute_risk_score([_synthetic(0.125, Tier.LOW)]) == 3

    def test_score_is_int(self):
        assert isinstance(compute_risk_score(_make_results()), int)


# ======================================================================
# classify_overall_risk
# ======================================================================


class TestOverallRisk:
    """Threshold table over synthetic (weight, tier) pairs."""

    def test_three_high_is_high_even_with_small_total(self):
        results = [_synthetic(0.01, Tier.HIGH, i) for i in range(3)]
        assert total_contribution(results) == pytest.approx(3.0)
        assert classify_overall_risk(results) == Tier.HIGH

    def test_total_above_sixty_is_high(self):
        results = [_synthetic(0.61, Tier.HIGH)]
        assert classify_overall_risk(results) == Tier.HIGH

    def test_total_exactly_sixty_is_not_high(self):
        results = [_synthetic(0.6, Tier.HIGH)]
        assert classify_overall_risk(results) == Tier.MEDIUM

    def test_one_high_is_medium(self):
        results = [_synthetic(0.01, Tier.HIGH)]
        assert classify_overall_risk(results) == Tier.MEDIUM

    def test_two_high_small_total_is_medium(self):
        results = [_synthetic(0.01, Tier.HIGH, i) for i in range(2)]
        assert classify_overall_risk(results) == Tier.MEDIUM

    def test_three_medium_is_medium(self):
        results = [_synthetic(0.01, Tier.MEDIUM, i) for i in range(3)]
        assert classify_overall_risk(results) == Tier.MEDIUM

    def test_two_medium_small_total_is_low(self):
        results = [_synthetic(0.01, Tier.MEDIUM, i) for i in range(2)]
        assert classify_overall_risk(results) == Tier.LOW

    def test_total_above_thirty_five_is_medium(self):
        # 0.6 x 0.6 x 100 = 36
        results = [_synthetic(0.6, Tier.MEDIUM)]
        assert classify_overall_risk(results) == Tier.MEDIUM

    def test_total_exactly_thirty_five_is_low(self):
        # 15 + 15 + 5
        results = [
            _synthetic(0.25, Tier.MEDIUM, 0),
            _synthetic(0.25, Tier.MEDIUM, 1),
            _synthetic(0.25, Tier.LOW, 2),
        ]
        assert total_contribution(results) == pytest.approx(35.0)
        assert classify_overall_risk(results) == Tier.LOW

    def test_empty_is_low(self):
        assert classify_overall_risk([]) == Tier.LOW

    def test_full_catalog_all_low_is_medium(self):
        """The low-tier floor alone (51.8) exceeds the medium threshold."""
        assert classify_overall_risk(_make_results()) == Tier.MEDIUM

    def test_count_tiers(self):
        results = _make_results(low_cadence=Tier.HIGH, poor_sleep=Tier.MEDIUM)
        counts = count_tiers(results)
        assert counts == {Tier.LOW: 12, Tier.MEDIUM: 1, Tier.HIGH: 1}
