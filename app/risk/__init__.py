"""Injury-risk rule engine — catalogs, evaluation, scoring, patterns."""

from app.risk.assessment import AssessmentConfig, InjuryRiskAssessor, compute_assessment
from app.risk.errors import CatalogIntegrityError, ValidationError
from app.risk.store import SampleStore

__all__ = [
    "AssessmentConfig",
    "CatalogIntegrityError",
    "InjuryRiskAssessor",
    "SampleStore",
    "ValidationError",
    "compute_assessment",
]
