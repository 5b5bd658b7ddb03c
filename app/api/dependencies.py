"""
Shared API dependencies.

Reusable FastAPI dependencies for access to the injury risk service.
"""

from functools import lru_cache

from app.services.injury_risk_service import InjuryRiskService


@lru_cache
def get_service() -> InjuryRiskService:
    """Process-wide service instance; the sample store lives in memory."""
    return InjuryRiskService()
