"""Business logic services."""

from app.services.injury_risk_service import InjuryRiskService

__all__ = [
    "InjuryRiskService",
]
