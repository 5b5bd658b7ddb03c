"""
Daily sample endpoints.

Ingestion and retained history per user.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.api.dependencies import get_service
from app.risk.errors import ValidationError
from app.schemas.sample import DailySample
from app.services.injury_risk_service import InjuryRiskService

router = APIRouter()


@router.post("", summary="Ingest a daily sample.", response_model=DailySample, status_code=status.HTTP_201_CREATED, )
def ingest_sample(payload: dict = Body(...), service: InjuryRiskService = Depends(get_service), ):
    """Stores the sample and evicts everything older than the retention window."""
    try:
        return service.ingest(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors or str(exc), )


@router.get("/{user_id}", summary="List retained samples for a user.", response_model=list[DailySample], )
def get_history(user_id: str, service: InjuryRiskService = Depends(get_service), ):
    return service.get_history(user_id)
