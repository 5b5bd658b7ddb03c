"""
Risk factor schemas.

A risk factor is one auditable rule of the engine: a metric computed
from the assessment window, two thresholds and a polarity that say in
which direction the metric becomes dangerous.

Tiers and their contribution multipliers:

- ``low``    — 0.2
- ``medium`` — 0.6
- ``high``   — 1.0
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FactorCategory(str, Enum):
    """Family a risk factor belongs to."""
    BIOMECHANICAL = "biomechanical"
    TRAINING = "training"
    PHYSIOLOGICAL = "physiological"
    ENVIRONMENTAL = "environmental"


class Polarity(str, Enum):
    """Direction in which a metric becomes risky."""
    HIGHER_IS_WORSE = "higher_is_worse"
    LOWER_IS_WORSE = "lower_is_worse"


class Tier(str, Enum):
    """Classification of a single factor's current value."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskFactor(BaseModel):
    """Catalog definition of a weighted risk factor."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable factor identifier")
    name: str
    description: str
    weight: float = Field(..., ge=0.0, le=1.0, description="Relative importance of the factor")
    category: FactorCategory
    polarity: Polarity
    medium_threshold: float = Field(
        ..., description="Value past which the factor is at least medium",
    )
    high_threshold: float = Field(
        ..., description="Value past which the factor is high",
    )


class RiskFactorResult(BaseModel):
    """Evaluation of one risk factor over the assessment window."""

    model_config = ConfigDict(frozen=True)

    factor: RiskFactor
    user_value: float = Field(..., description="Metric computed from the window")
    tier: Tier
    contribution: float = Field(
        ..., ge=0.0, le=100.0,
        description="weight x tier multiplier x 100",
    )
