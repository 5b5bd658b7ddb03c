"""What would the engine tell a runner after a heavy week?

Feeds a week of daily samples through the service and prints the
resulting assessment.
"""

import datetime

from app.core.logging import configure_logging
from app.services.injury_risk_service import InjuryRiskService

NOW = datetime.datetime(2026, 2, 8, 7, 0, tzinfo=datetime.timezone.utc)
USER = "runner-1"

# ─── One row per day: (days ago, cadence, distance, intensity, consecutive, fatigue, sleep, hrv, surface) ──
RAW_DATA = [
    (7, 164, 12.0, 70, 1, 55, 72, 52, "road"),
    (6, 162, 14.0, 75, 2, 60, 70, 50, "road"),
    (5, 161, 10.0, 25, 0, 58, 74, 54, "trail"),
    (4, 158, 16.0, 82, 1, 68, 62, 45, "road"),
    (3, 157, 18.0, 85, 2, 74, 58, 41, "road"),
    (2, 159, 15.0, 80, 3, 76, 55, 38, "road"),
    (1, 156, 20.0, 88, 4, 80, 52, 36, "road"),
]


def build_sample(row) -> dict:
    days_ago, cadence, distance, intensity, consecutive, fatigue, sleep, hrv, surface = row
    return {
        "user_id": USER,
        "timestamp": (NOW - datetime.timedelta(days=days_ago)).isoformat(),
        "biomechanical": {
            "cadence": cadence,
            "ground_contact_time": 250,
            "vertical_oscillation": 8.5,
            "pronation": "neutral",
            "symmetry": 6.0,
        },
        "training": {
            "weekly_distance": distance,
            "weekly_intensity": intensity,
            "rest_days": 1,
            "consecutive_days": consecutive,
        },
        "physiological": {
            "fatigue": fatigue,
            "sleep_quality": sleep,
            "hrv": hrv,
            "stress": 45,
        },
        "environmental": {
            "surface": surface,
            "weather": "dry",
            "elevation": 60,
        },
    }


def main():
    configure_logging()
    service = InjuryRiskService(clock=lambda: NOW)
    for row in RAW_DATA:
        service.ingest(build_sample(row))

    assessment = service.assess(USER)

    print()
    print("=" * 65)
    print(f"  Injury risk — {USER} — {NOW.strftime('%A %d %B %Y')}")
    print("=" * 65)
    print()
    print(f"  Risco geral: {assessment.overall_risk.value}  (score {assessment.risk_score}/100)")
    print()
    print(f"  {'Fator':<22} {'Valor':>8} {'Nível':<8} {'Contrib.':>8}")
    print("  " + "-" * 50)
    for r in assessment.risk_factors:
        print(f"  {r.factor.id:<22} {r.user_value:>8.2f} {r.tier.value:<8} {r.contribution:>8.1f}")
    print()

    if assessment.matched_patterns:
        print("  Padrões de lesão:")
        for p in assessment.matched_patterns:
            print(f"    - {p.name} ({p.body_part.value}, severidade {p.severity.value})")
        print()

    print("  Recomendações:")
    for rec in assessment.recommendations:
        print(f"    - {rec}")
    print()
    print(f"  Próxima avaliação: {assessment.next_assessment_at.isoformat()}")
    print()


if __name__ == "__main__":
    main()
