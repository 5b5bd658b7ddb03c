"""
Daily sample schemas.

One ``DailySample`` is what the capture pipeline produces per user per
day.  It is grouped into four value objects mirroring the four risk
factor categories.  Samples are frozen: once ingested they are never
mutated, only evicted by age.
"""

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Pronation(str, Enum):
    SUPINATION = "supination"
    NEUTRAL = "neutral"
    PRONATION = "pronation"


class Surface(str, Enum):
    ROAD = "road"
    TRAIL = "trail"
    TREADMILL = "treadmill"


class Weather(str, Enum):
    DRY = "dry"
    WET = "wet"
    HOT = "hot"
    COLD = "cold"


_FROZEN = ConfigDict(frozen=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Nested value-object schemas
# ---------------------------------------------------------------------------

class BiomechanicalData(BaseModel):
    """Running gait metrics."""

    model_config = _FROZEN

    cadence: float = Field(..., ge=0.0, description="Steps per minute")
    ground_contact_time: float = Field(..., ge=0.0, description="Ground contact time (ms)")
    vertical_oscillation: float = Field(..., ge=0.0, description="Vertical oscillation (cm)")
    pronation: Pronation
    symmetry: float = Field(
        ..., ge=0.0,
        description="Left/right imbalance (%); 0 means perfectly symmetric",
    )


class TrainingData(BaseModel):
    """Training load metrics."""

    model_config = _FROZEN

    weekly_distance: float = Field(..., ge=0.0, description="Distance (km)")
    weekly_intensity: float = Field(..., ge=0.0, description="Session intensity score")
    rest_days: int = Field(..., ge=0, description="Rest days in the last week")
    consecutive_days: int = Field(..., ge=0, description="Consecutive training days")


class PhysiologicalData(BaseModel):
    """Recovery and wellbeing metrics."""

    model_config = _FROZEN

    fatigue: float = Field(..., ge=0.0, le=100.0)
    sleep_quality: float = Field(..., ge=0.0, le=100.0)
    hrv: float = Field(..., ge=0.0, description="Heart rate variability (ms)")
    stress: float = Field(..., ge=0.0, le=100.0)


class EnvironmentalData(BaseModel):
    """Running conditions."""

    model_config = _FROZEN

    surface: Surface
    weather: Weather
    elevation: float = Field(..., description="Elevation change over the run (m)")


# ---------------------------------------------------------------------------
# Sample
# ---------------------------------------------------------------------------

class DailySample(BaseModel):
    """A single day of measurements for one user."""

    model_config = _FROZEN

    user_id: str = Field(..., min_length=1)
    timestamp: datetime.datetime = Field(
        ..., description="Sample time; naive values are interpreted as UTC",
    )
    biomechanical: BiomechanicalData
    training: TrainingData
    physiological: PhysiologicalData
    environmental: EnvironmentalData

    @field_validator("user_id")
    @classmethod
    def _user_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("user_id must not be empty")
        return value

    @field_validator("timestamp")
    @classmethod
    def _timestamp_aware(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value
