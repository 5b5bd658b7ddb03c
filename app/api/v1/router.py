"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import assessments, catalog, samples

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    samples.router, prefix="/samples", tags=["Daily samples"]
)
api_router.include_router(
    assessments.router, prefix="/assessments", tags=["Assessments"]
)
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Catalog"]
)
