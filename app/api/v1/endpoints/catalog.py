"""
Catalog endpoints — risk factors and injury patterns.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_service
from app.schemas.injury_pattern import InjuryPattern
from app.schemas.risk_factor import RiskFactor
from app.services.injury_risk_service import InjuryRiskService

router = APIRouter()


@router.get(
    "/risk-factors",
    summary="List all risk factors with weights and thresholds.",
    response_model=list[RiskFactor],
)
def list_risk_factors(service: InjuryRiskService = Depends(get_service)):
    return service.list_risk_factors()


@router.get(
    "/injury-patterns",
    summary="List all injury patterns.",
    response_model=list[InjuryPattern],
)
def list_injury_patterns(service: InjuryRiskService = Depends(get_service)):
    return service.list_injury_patterns()
