"""
Injury pattern matching.

A pattern is active when at least two of its associated factors are
high.  Associated ids that are not in the factor catalog are never high,
so they never count.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from app.risk.catalog import INJURY_PATTERNS
from app.schemas.injury_pattern import InjuryPattern
from app.schemas.risk_factor import RiskFactorResult, Tier

MIN_HIGH_FACTORS = 2


def high_factor_ids(results: Iterable[RiskFactorResult]) -> set[str]:
    return {r.factor.id for r in results if r.tier == Tier.HIGH}


def match_patterns(
    results: Sequence[RiskFactorResult],
    patterns: Sequence[InjuryPattern] = INJURY_PATTERNS,
) -> list[InjuryPattern]:
    """Return the active patterns, in catalog order."""
    high = high_factor_ids(results)
    return [
        p for p in patterns
        if len(high.intersection(p.associated_factor_ids)) >= MIN_HIGH_FACTORS
    ]
