"""
Injury risk service.

The public face of the engine: ingest samples, assess users, read the
catalogs and a user's retained history.  Framework-free, so it can be
embedded behind the HTTP layer or called directly.
"""

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.risk.assessment import AssessmentConfig, InjuryRiskAssessor
from app.risk.catalog import list_injury_patterns, list_risk_factors, verify_catalog_integrity
from app.risk.errors import ValidationError
from app.risk.evaluator import RiskFactorEvaluator
from app.risk.store import Clock, SampleStore
from app.schemas.assessment import Assessment
from app.schemas.injury_pattern import InjuryPattern
from app.schemas.risk_factor import RiskFactor
from app.schemas.sample import DailySample


class InjuryRiskService:
    """Service for injury risk business logic."""

    def __init__(
        self,
        store: Optional[SampleStore] = None,
        evaluator: Optional[RiskFactorEvaluator] = None,
        config: Optional[AssessmentConfig] = None,
        clock: Optional[Clock] = None,
        strict_catalog: Optional[bool] = None,
    ):
        strict = settings.CATALOG_STRICT if strict_catalog is None else strict_catalog
        verify_catalog_integrity(strict=strict)

        self.store = store or SampleStore(retention_days=settings.RETENTION_DAYS, clock=clock)
        self.assessor = InjuryRiskAssessor(
            self.store,
            evaluator=evaluator,
            config=config or AssessmentConfig(
                window_size=settings.ASSESSMENT_WINDOW,
                next_assessment_hours=settings.NEXT_ASSESSMENT_HOURS,
                max_recommendations=settings.MAX_RECOMMENDATIONS,
            ),
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ingest(self, sample: DailySample | Mapping[str, Any]) -> DailySample:
        """Validate and store a daily sample.

        Raises:
            ValidationError: the sample is incomplete or malformed.
        """
        parsed = self._parse_sample(sample)
        self.store.ingest(parsed)
        return parsed

    def assess(self, user_id: str) -> Assessment:
        return self.assessor.assess(user_id)

    def list_risk_factors(self) -> list[RiskFactor]:
        return list_risk_factors()

    def list_injury_patterns(self) -> list[InjuryPattern]:
        return list_injury_patterns()

    def get_history(self, user_id: str) -> list[DailySample]:
        """All retained samples for the user, oldest first."""
        return self.store.history(user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_sample(sample: DailySample | Mapping[str, Any]) -> DailySample:
        if isinstance(sample, DailySample):
            return sample
        try:
            return DailySample.model_validate(sample)
        except PydanticValidationError as exc:
            raise ValidationError(
                f"Invalid daily sample: {exc.error_count()} error(s)",
                errors=[
                    {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                    for e in exc.errors()
                ],
            ) from exc
