"""
Injury risk assessment — orchestrates the rule engine for one user.

Pipeline (pure, recomputed on every call):

    1. **Window**       — the 7 most recent retained samples
    2. **Evaluate**     — metric + tier for each of the 14 factors
    3. **Aggregate**    — contribution per factor, clamped 0-100 score
    4. **Classify**     — overall low / medium / high
    5. **Match**        — injury patterns with 2+ high factors
    6. **Recommend**    — at most 5 advice strings

A user without retained samples is not an error: the default
assessment is returned.  The next assessment is always due 24 hours
after the current one; scheduling it is the caller's job.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

import structlog
from pydantic import BaseModel, Field

from app.risk.evaluator import RiskFactorEvaluator
from app.risk.patterns import match_patterns
from app.risk.recommendations import FALLBACK_RECOMMENDATIONS, generate_recommendations
from app.risk.scoring import classify_overall_risk, compute_contribution, compute_risk_score
from app.risk.store import Clock, SampleStore, utc_now
from app.schemas.assessment import Assessment
from app.schemas.risk_factor import RiskFactorResult, Tier
from app.schemas.sample import DailySample

logger = structlog.get_logger(__name__)


class AssessmentConfig(BaseModel):
    """Configuration for the assessment pipeline.

    Injected so tests and callers can change the window without
    touching the computation.
    """

    window_size: int = Field(7, ge=1, le=30)
    next_assessment_hours: int = Field(24, ge=1)
    max_recommendations: int = Field(5, ge=1, le=5)


# Singleton default config
DEFAULT_CONFIG = AssessmentConfig()


# ======================================================================
# Steps
# ======================================================================


def build_results(
    evaluator: RiskFactorEvaluator, window: Sequence[DailySample],
) -> list[RiskFactorResult]:
    """Evaluate every catalog factor and attach its contribution."""
    return [
        RiskFactorResult(
            factor=factor,
            user_value=value,
            tier=tier,
            contribution=compute_contribution(factor.weight, tier),
        )
        for factor, value, tier in evaluator.evaluate_all(window)
    ]


def default_assessment(next_assessment_at: datetime.datetime) -> Assessment:
    """Assessment returned for a user with no retained samples."""
    return Assessment(
        overall_risk=Tier.LOW,
        risk_score=0,
        risk_factors=[],
        recommendations=[FALLBACK_RECOMMENDATIONS[0]],
        next_assessment_at=next_assessment_at,
        matched_patterns=[],
    )


def compute_assessment(
    window: Sequence[DailySample],
    now: datetime.datetime,
    evaluator: Optional[RiskFactorEvaluator] = None,
    config: Optional[AssessmentConfig] = None,
) -> Assessment:
    """Run the full pipeline over an already selected window.

    Args:
        window: Samples to assess, newest first.  Empty means default.
        now: Reference time for ``next_assessment_at``.
        evaluator: Optional evaluator (custom metric estimators).
        config: Optional config override.

    Returns:
        :class:`Assessment` for the window.
    """
    cfg = config or DEFAULT_CONFIG
    next_at = now + datetime.timedelta(hours=cfg.next_assessment_hours)

    if not window:
        return default_assessment(next_at)

    results = build_results(evaluator or RiskFactorEvaluator(), window)

    return Assessment(
        overall_risk=classify_overall_risk(results),
        risk_score=compute_risk_score(results),
        risk_factors=results,
        recommendations=generate_recommendations(results, cfg.max_recommendations),
        next_assessment_at=next_at,
        matched_patterns=match_patterns(results),
    )


# ======================================================================
# Orchestrator
# ======================================================================


class InjuryRiskAssessor:
    """Assesses users from the samples held in a :class:`SampleStore`."""

    def __init__(
        self,
        store: SampleStore,
        evaluator: Optional[RiskFactorEvaluator] = None,
        config: Optional[AssessmentConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.store = store
        self.evaluator = evaluator or RiskFactorEvaluator()
        self.config = config or DEFAULT_CONFIG
        self.clock: Clock = clock or utc_now

    def assess(self, user_id: str) -> Assessment:
        window = self.store.latest(user_id, self.config.window_size)
        assessment = compute_assessment(
            window, self.clock(), self.evaluator, self.config,
        )

        logger.info(
            "assessment_computed",
            user_id=user_id,
            samples=len(window),
            overall_risk=assessment.overall_risk.value,
            risk_score=assessment.risk_score,
            patterns=[p.id for p in assessment.matched_patterns],
        )
        return assessment
