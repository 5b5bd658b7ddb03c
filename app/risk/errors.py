"""
Injury-risk engine exceptions.

Only two things can fail: a malformed sample at the ingestion boundary,
and an inconsistent catalog at process start.  Scoring itself is total.
"""

from __future__ import annotations

from typing import Any


class InjuryRiskError(Exception):
    """Base class for all injury-risk engine errors."""


class ValidationError(InjuryRiskError, ValueError):
    """A daily sample was rejected at ingestion; nothing was stored."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class CatalogIntegrityError(InjuryRiskError):
    """An injury pattern references a risk factor id missing from the catalog."""

    def __init__(self, unresolved: dict[str, list[str]]):
        self.unresolved = unresolved
        details = "; ".join(
            f"{pattern_id} -> {', '.join(ids)}" for pattern_id, ids in unresolved.items()
        )
        super().__init__(f"Unknown risk factor ids referenced by patterns: {details}")
