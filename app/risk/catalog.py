"""
Built-in risk factor and injury pattern catalogs.

Both catalogs are fixed for the lifetime of the process: 14 weighted
risk factors and 5 injury patterns.  They are exposed as tuples of
frozen models so they can be shared across threads without locking.

Each factor carries its own polarity and thresholds; a value strictly
past ``high_threshold`` is high, strictly past ``medium_threshold`` is
medium, anything else is low.

Pattern associations are checked against the factor catalog by
:func:`verify_catalog_integrity`.  ``ankle_sprain`` references
``trail_surface`` and ``fatigue``, which have no evaluator; by default
they are reported and treated as never high.
"""

from __future__ import annotations

import structlog

from app.risk.errors import CatalogIntegrityError
from app.schemas.injury_pattern import BodyPart, InjuryPattern, Severity
from app.schemas.risk_factor import FactorCategory, Polarity, RiskFactor

logger = structlog.get_logger(__name__)

# Aliases for brevity in the tables below
BIO = FactorCategory.BIOMECHANICAL
TRN = FactorCategory.TRAINING
PHY = FactorCategory.PHYSIOLOGICAL
ENV = FactorCategory.ENVIRONMENTAL
UP = Polarity.HIGHER_IS_WORSE
DOWN = Polarity.LOWER_IS_WORSE


# ======================================================================
# Risk factors
# ======================================================================

RISK_FACTORS: tuple[RiskFactor, ...] = (
    # ── Biomechanical ─────────────────────────────────────────────
    RiskFactor(
        id="high_impact", name="Alto Impacto",
        description="Força de impacto excessiva durante a corrida",
        weight=0.25, category=BIO, polarity=UP,
        medium_threshold=1.5, high_threshold=1.8,
    ),
    RiskFactor(
        id="asymmetry", name="Assimetria",
        description="Diferença significativa entre lado esquerdo e direito",
        weight=0.20, category=BIO, polarity=UP,
        medium_threshold=8, high_threshold=15,
    ),
    RiskFactor(
        id="overstriding", name="Passada Muito Longa",
        description="Passada excessivamente longa que aumenta o impacto",
        weight=0.18, category=BIO, polarity=UP,
        medium_threshold=0.5, high_threshold=0.7,
    ),
    RiskFactor(
        id="low_cadence", name="Baixa Cadência",
        description="Cadência abaixo de 160 passos/minuto",
        weight=0.15, category=BIO, polarity=DOWN,
        medium_threshold=170, high_threshold=160,
    ),

    # ── Training ──────────────────────────────────────────────────
    RiskFactor(
        id="high_weekly_distance", name="Distância Semanal Alta",
        description="Aumento muito rápido na distância semanal",
        weight=0.22, category=TRN, polarity=UP,
        medium_threshold=50, high_threshold=80,
    ),
    RiskFactor(
        id="insufficient_rest", name="Descanso Insuficiente",
        description="Poucos dias de descanso entre treinos",
        weight=0.20, category=TRN, polarity=DOWN,
        medium_threshold=3, high_threshold=2,
    ),
    RiskFactor(
        id="consecutive_days", name="Dias Consecutivos",
        description="Muitos dias consecutivos de treino",
        weight=0.18, category=TRN, polarity=UP,
        medium_threshold=3, high_threshold=5,
    ),
    RiskFactor(
        id="high_intensity", name="Alta Intensidade",
        description="Treinos de alta intensidade muito frequentes",
        weight=0.16, category=TRN, polarity=UP,
        medium_threshold=65, high_threshold=80,
    ),

    # ── Physiological ─────────────────────────────────────────────
    RiskFactor(
        id="high_fatigue", name="Fadiga Elevada",
        description="Níveis de fadiga consistentemente altos",
        weight=0.24, category=PHY, polarity=UP,
        medium_threshold=50, high_threshold=70,
    ),
    RiskFactor(
        id="poor_sleep", name="Sono de Baixa Qualidade",
        description="Qualidade do sono consistentemente baixa",
        weight=0.20, category=PHY, polarity=DOWN,
        medium_threshold=75, high_threshold=60,
    ),
    RiskFactor(
        id="low_hrv", name="HRV Baixo",
        description="Variabilidade da frequência cardíaca baixa",
        weight=0.18, category=PHY, polarity=DOWN,
        medium_threshold=55, high_threshold=40,
    ),
    RiskFactor(
        id="high_stress", name="Estresse Elevado",
        description="Níveis de estresse consistentemente altos",
        weight=0.16, category=PHY, polarity=UP,
        medium_threshold=50, high_threshold=70,
    ),

    # ── Environmental ─────────────────────────────────────────────
    RiskFactor(
        id="hard_surface", name="Superfície Dura",
        description="Corrida frequente em superfícies duras",
        weight=0.15, category=ENV, polarity=UP,
        medium_threshold=0.4, high_threshold=0.7,
    ),
    RiskFactor(
        id="elevation_change", name="Mudanças de Elevação",
        description="Mudanças bruscas de elevação",
        weight=0.12, category=ENV, polarity=UP,
        medium_threshold=100, high_threshold=200,
    ),
)

RISK_FACTOR_INDEX: dict[str, RiskFactor] = {f.id: f for f in RISK_FACTORS}


# ======================================================================
# Injury patterns
# ======================================================================

INJURY_PATTERNS: tuple[InjuryPattern, ...] = (
    # ── Knee ──────────────────────────────────────────────────────
    InjuryPattern(
        id="runner_knee", name="Joelho do Corredor",
        description="Síndrome da banda iliotibial ou condromalácia patelar",
        associated_factor_ids=(
            "high_impact", "overstriding", "high_weekly_distance", "insufficient_rest",
        ),
        symptoms=(
            "Dor na lateral do joelho",
            "Dor ao subir/descer escadas",
            "Dor após longas distâncias",
        ),
        prevention_tips=(
            "Fortaleça quadríceps e glúteos",
            "Alongue a banda iliotibial",
            "Reduza gradualmente a distância",
            "Use calçados adequados",
        ),
        severity=Severity.MEDIUM, body_part=BodyPart.KNEE,
    ),
    InjuryPattern(
        id="patellar_tendonitis", name="Tendinite Patelar",
        description="Inflamação do tendão patelar",
        associated_factor_ids=(
            "high_impact", "high_intensity", "consecutive_days", "hard_surface",
        ),
        symptoms=("Dor abaixo da patela", "Dor ao agachar", "Rigidez matinal"),
        prevention_tips=(
            "Fortaleça quadríceps",
            "Alongue isquiotibiais",
            "Evite superfícies duras",
            "Reduza intensidade gradualmente",
        ),
        severity=Severity.MEDIUM, body_part=BodyPart.KNEE,
    ),

    # ── Shin ──────────────────────────────────────────────────────
    InjuryPattern(
        id="shin_splints", name="Canelite",
        description="Dor na tíbia por sobrecarga",
        associated_factor_ids=(
            "high_weekly_distance", "insufficient_rest", "hard_surface", "overstriding",
        ),
        symptoms=(
            "Dor na parte interna da canela",
            "Dor ao tocar a tíbia",
            "Dor que piora com exercício",
        ),
        prevention_tips=(
            "Aumente distância gradualmente",
            "Fortaleça panturrilhas",
            "Use calçados com amortecimento",
            "Evite superfícies duras",
        ),
        severity=Severity.MEDIUM, body_part=BodyPart.SHIN,
    ),

    # ── Ankle ─────────────────────────────────────────────────────
    InjuryPattern(
        id="ankle_sprain", name="Entorse de Tornozelo",
        description="Lesão ligamentar do tornozelo",
        associated_factor_ids=("asymmetry", "trail_surface", "elevation_change", "fatigue"),
        symptoms=(
            "Dor no tornozelo",
            "Inchaço",
            "Instabilidade",
            "Dificuldade para caminhar",
        ),
        prevention_tips=(
            "Fortaleça tornozelos",
            "Use calçados adequados para o terreno",
            "Mantenha atenção ao terreno",
            "Evite correr quando muito cansado",
        ),
        severity=Severity.HIGH, body_part=BodyPart.ANKLE,
    ),

    # ── Foot ──────────────────────────────────────────────────────
    InjuryPattern(
        id="plantar_fasciitis", name="Fascite Plantar",
        description="Inflamação da fáscia plantar",
        associated_factor_ids=(
            "high_impact", "hard_surface", "overstriding", "insufficient_rest",
        ),
        symptoms=("Dor no calcanhar", "Dor matinal", "Dor após longas distâncias"),
        prevention_tips=(
            "Alongue panturrilhas e pés",
            "Use calçados com suporte",
            "Evite superfícies duras",
            "Reduza gradualmente a distância",
        ),
        severity=Severity.MEDIUM, body_part=BodyPart.FOOT,
    ),
)


# ======================================================================
# Lookup
# ======================================================================


def get_risk_factor(factor_id: str) -> RiskFactor | None:
    """Look up a risk factor by its id.  Returns ``None`` if not found."""
    return RISK_FACTOR_INDEX.get(factor_id)


def list_risk_factors() -> list[RiskFactor]:
    """Return every risk factor in catalog order."""
    return list(RISK_FACTORS)


def list_injury_patterns() -> list[InjuryPattern]:
    """Return every injury pattern in catalog order."""
    return list(INJURY_PATTERNS)


# ======================================================================
# Integrity
# ======================================================================


def find_unresolved_factor_ids(
    factors: tuple[RiskFactor, ...] = RISK_FACTORS,
    patterns: tuple[InjuryPattern, ...] = INJURY_PATTERNS,
) -> dict[str, list[str]]:
    """Map pattern id -> associated factor ids absent from *factors*."""
    known = {f.id for f in factors}
    unresolved: dict[str, list[str]] = {}
    for pattern in patterns:
        missing = [fid for fid in pattern.associated_factor_ids if fid not in known]
        if missing:
            unresolved[pattern.id] = missing
    return unresolved


def verify_catalog_integrity(
    strict: bool = False,
    factors: tuple[RiskFactor, ...] = RISK_FACTORS,
    patterns: tuple[InjuryPattern, ...] = INJURY_PATTERNS,
) -> dict[str, list[str]]:
    """Check that every pattern only references known risk factors.

    Args:
        strict: Raise instead of warning when references are unresolved.
        factors: Factor catalog to check against.
        patterns: Pattern catalog to check.

    Returns:
        The unresolved references (empty when the catalog is consistent).
        Unresolved ids can never be high, so they never count towards a
        pattern match.

    Raises:
        CatalogIntegrityError: if *strict* and any reference is unresolved.
    """
    unresolved = find_unresolved_factor_ids(factors, patterns)
    if unresolved and strict:
        raise CatalogIntegrityError(unresolved)
    for pattern_id, missing in unresolved.items():
        logger.warning(
            "catalog_unresolved_factor",
            pattern_id=pattern_id,
            factor_ids=missing,
        )
    return unresolved
