"""Pydantic schemas for request/response validation."""

from app.schemas.assessment import Assessment
from app.schemas.injury_pattern import BodyPart, InjuryPattern, Severity
from app.schemas.risk_factor import (
    FactorCategory,
    Polarity,
    RiskFactor,
    RiskFactorResult,
    Tier,
)
from app.schemas.sample import (
    BiomechanicalData,
    DailySample,
    EnvironmentalData,
    PhysiologicalData,
    Pronation,
    Surface,
    TrainingData,
    Weather,
)

__all__ = [
    "Assessment",
    "BodyPart",
    "InjuryPattern",
    "Severity",
    "FactorCategory",
    "Polarity",
    "RiskFactor",
    "RiskFactorResult",
    "Tier",
    "BiomechanicalData",
    "DailySample",
    "EnvironmentalData",
    "PhysiologicalData",
    "Pronation",
    "Surface",
    "TrainingData",
    "Weather",
]
