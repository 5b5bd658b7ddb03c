"""
Contribution aggregation and overall risk classification.

Each factor contributes ``weight x multiplier(tier) x 100`` points,
where the multipliers are fixed (low 0.2, medium 0.6, high 1.0).  Note
that a low factor still contributes: the floor of the full catalog is
``0.2 x sum(weights) x 100``.

The overall classification looks at both the tier counts and the
summed contribution:

- ``high``   — 3+ high factors, or total > 60
- ``medium`` — 1+ high factor, 3+ medium factors, or total > 35
- ``low``    — otherwise

All functions are pure and total.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from app.schemas.risk_factor import RiskFactorResult, Tier

TIER_MULTIPLIERS: dict[Tier, float] = {
    Tier.LOW: 0.2,
    Tier.MEDIUM: 0.6,
    Tier.HIGH: 1.0,
}

_HIGH_COUNT = 3
_HIGH_TOTAL = 60.0
_MEDIUM_HIGH_COUNT = 1
_MEDIUM_MEDIUM_COUNT = 3
_MEDIUM_TOTAL = 35.0


def compute_contribution(weight: float, tier: Tier) -> float:
    """Points a single factor adds towards the risk score."""
    return weight * TIER_MULTIPLIERS[tier] * 100


def total_contribution(results: Iterable[RiskFactorResult]) -> float:
    return sum(r.contribution for r in results)


def compute_risk_score(results: Iterable[RiskFactorResult]) -> int:
    """Summed contribution clamped to 0-100, rounded half up."""
    total = total_contribution(results)
    return int(math.floor(min(max(total, 0.0), 100.0) + 0.5))


def count_tiers(results: Iterable[RiskFactorResult]) -> dict[Tier, int]:
    counts = {tier: 0 for tier in Tier}
    for r in results:
        counts[r.tier] += 1
    return counts


def classify_overall_risk(results: Sequence[RiskFactorResult]) -> Tier:
    """Map tier counts and summed contribution to the overall level."""
    counts = count_tiers(results)
    total = total_contribution(results)

    if counts[Tier.HIGH] >= _HIGH_COUNT or total > _HIGH_TOTAL:
        return Tier.HIGH
    if (
        counts[Tier.HIGH] >= _MEDIUM_HIGH_COUNT
        or counts[Tier.MEDIUM] >= _MEDIUM_MEDIUM_COUNT
        or total > _MEDIUM_TOTAL
    ):
        return Tier.MEDIUM
    return Tier.LOW
