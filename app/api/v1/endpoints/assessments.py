"""
Assessment endpoints — injury risk for a user.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_service
from app.schemas.assessment import Assessment
from app.services.injury_risk_service import InjuryRiskService

router = APIRouter()


@router.get(
    "/{user_id}",
    summary="Assess injury risk from the user's most recent samples.",
    response_model=Assessment,
)
def assess_user(
    user_id: str,
    service: InjuryRiskService = Depends(get_service),
):
    return service.assess(user_id)
