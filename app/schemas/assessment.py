"""
Injury risk assessment schemas.

Overall classification:

- ``high``   — 3+ high factors, or total contribution > 60
- ``medium`` — 1+ high factor, 3+ medium factors, or total > 35
- ``low``    — otherwise
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.injury_pattern import InjuryPattern
from app.schemas.risk_factor import RiskFactorResult, Tier


class Assessment(BaseModel):
    """Complete injury risk assessment for one user."""

    model_config = ConfigDict(frozen=True)

    overall_risk: Tier
    risk_score: int = Field(..., ge=0, le=100)
    risk_factors: list[RiskFactorResult] = Field(
        ...,
        description="One result per catalog factor, in catalog order",
    )
    recommendations: list[str] = Field(..., max_length=5)
    next_assessment_at: datetime.datetime
    matched_patterns: list[InjuryPattern]
