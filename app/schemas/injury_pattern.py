"""
Injury pattern schemas.

A pattern links a named injury to the risk factors that predispose to
it.  It becomes active when at least two of those factors are high.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BodyPart(str, Enum):
    KNEE = "knee"
    ANKLE = "ankle"
    HIP = "hip"
    SHIN = "shin"
    FOOT = "foot"
    BACK = "back"


class InjuryPattern(BaseModel):
    """Catalog definition of a named injury pattern."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    associated_factor_ids: tuple[str, ...] = Field(
        ..., description="Risk factor ids that predispose to this injury",
    )
    symptoms: tuple[str, ...] = ()
    prevention_tips: tuple[str, ...] = ()
    severity: Severity
    body_part: BodyPart
