"""
Recommendation generation.

Walks the high factors in catalog order and collects two fixed advice
strings for each of the handled factors.  Other high factors add
nothing.  When nothing was collected the generic fallback is used.  The
list is cut to the first ``limit`` entries.
"""

from __future__ import annotations

from typing import Sequence

from app.schemas.risk_factor import RiskFactorResult, Tier

MAX_RECOMMENDATIONS = 5

FACTOR_RECOMMENDATIONS: dict[str, tuple[str, str]] = {
    "high_impact": (
        "Reduza a intensidade dos treinos para diminuir o impacto",
        "Foque em técnica de corrida com passada mais suave",
    ),
    "asymmetry": (
        "Faça exercícios de fortalecimento unilateral",
        "Considere consultar um fisioterapeuta",
    ),
    "high_weekly_distance": (
        "Reduza a distância semanal em 20-30%",
        "Aumente gradualmente, não mais que 10% por semana",
    ),
    "insufficient_rest": (
        "Adicione mais dias de descanso na semana",
        "Considere treinos alternados (corrida/descanso)",
    ),
    "high_fatigue": (
        "Priorize recuperação e sono",
        "Reduza a intensidade dos treinos",
    ),
}

FALLBACK_RECOMMENDATIONS: tuple[str, str] = (
    "Continue monitorando seus padrões de corrida",
    "Mantenha uma rotina de alongamento e fortalecimento",
)


def generate_recommendations(
    results: Sequence[RiskFactorResult],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[str]:
    """Build the prioritized recommendation list for a set of results."""
    recommendations: list[str] = []
    for r in results:
        if r.tier != Tier.HIGH:
            continue
        recommendations.extend(FACTOR_RECOMMENDATIONS.get(r.factor.id, ()))

    if not recommendations:
        recommendations = list(FALLBACK_RECOMMENDATIONS)

    return recommendations[:limit]
