"""
In-memory sample store.

Holds each user's daily samples as an append-only series kept in
timestamp order.  Retention is enforced eagerly: every ingest call
evicts, for every user, the samples whose timestamp is not newer than
``now - retention_days``, where ``now`` is the wall-clock time of that
ingest call (not the timestamp of the sample being ingested).

Concurrency
-----------
Each user key has its own lock.  Append + evict for the ingesting user
happen under that lock, and reads take it too, so an assessment never
sees a half-applied ingest.  Expired samples of other users are swept
one user at a time; no two user locks are ever held together.  A user
whose samples have all expired is dropped from the registry, so the
store only grows with users that still hold retained data.
"""

from __future__ import annotations

import bisect
import datetime
import threading
from typing import Callable, Optional

import structlog

from app.schemas.sample import DailySample

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime.datetime]

DEFAULT_RETENTION_DAYS = 30


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class _UserSeries:
    """One user's samples, oldest first, with its own lock."""

    __slots__ = ("lock", "samples", "retired")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.samples: list[DailySample] = []
        # Set once the series is dropped from the registry; writers retry.
        self.retired = False

    def evict_before(self, cutoff: datetime.datetime) -> int:
        # Samples are ordered, so everything expired sits at the front.
        keep_from = 0
        while keep_from < len(self.samples) and self.samples[keep_from].timestamp <= cutoff:
            keep_from += 1
        if keep_from:
            del self.samples[:keep_from]
        return keep_from


class SampleStore:
    """Per-user time series of daily samples with rolling retention."""

    def __init__(
        self,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        clock: Optional[Clock] = None,
    ):
        if retention_days <= 0:
            raise ValueError("retention_days must be positive")
        self.retention = datetime.timedelta(days=retention_days)
        self.clock: Clock = clock or utc_now
        self._series: dict[str, _UserSeries] = {}
        self._registry_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def ingest(self, sample: DailySample) -> int:
        """Append *sample* and evict expired samples.

        Users left without samples are dropped from the store.

        Returns:
            Number of samples evicted across all users.
        """
        now = self.clock()
        cutoff = now - self.retention

        while True:
            series = self._get_or_create(sample.user_id)
            with series.lock:
                if series.retired:
                    continue
                bisect.insort(series.samples, sample, key=lambda s: s.timestamp)
                evicted = series.evict_before(cutoff)
                emptied = not series.samples
            break

        if emptied:
            self._drop_if_empty(sample.user_id, series)
        evicted += self._sweep(cutoff, skip=sample.user_id)

        logger.debug(
            "sample_ingested",
            user_id=sample.user_id,
            timestamp=sample.timestamp.isoformat(),
        )
        if evicted:
            logger.info("samples_evicted", count=evicted, cutoff=cutoff.isoformat())
        return evicted

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def latest(self, user_id: str, limit: int) -> list[DailySample]:
        """Most recent samples for *user_id*, newest first."""
        series = self._series.get(user_id)
        if series is None:
            return []
        with series.lock:
            return list(reversed(series.samples[-limit:])) if limit > 0 else []

    def history(self, user_id: str) -> list[DailySample]:
        """Every retained sample for *user_id*, oldest first."""
        series = self._series.get(user_id)
        if series is None:
            return []
        with series.lock:
            return list(series.samples)

    def count(self, user_id: str) -> int:
        series = self._series.get(user_id)
        if series is None:
            return 0
        with series.lock:
            return len(series.samples)

    def user_ids(self) -> list[str]:
        """Users with at least one retained sample, sorted."""
        with self._registry_lock:
            items = list(self._series.items())
        return sorted(uid for uid, series in items if series.samples)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_create(self, user_id: str) -> _UserSeries:
        with self._registry_lock:
            series = self._series.get(user_id)
            if series is None:
                series = _UserSeries()
                self._series[user_id] = series
            return series

    def _drop_if_empty(self, user_id: str, series: _UserSeries) -> bool:
        # Lock order is registry, then series.  Nothing takes the registry
        # lock while holding a series lock.
        with self._registry_lock:
            if self._series.get(user_id) is not series:
                return False
            with series.lock:
                if series.samples:
                    return False
                series.retired = True
                del self._series[user_id]
        return True

    def _sweep(self, cutoff: datetime.datetime, skip: str) -> int:
        with self._registry_lock:
            others = [(uid, s) for uid, s in self._series.items() if uid != skip]
        evicted = 0
        emptied = []
        for uid, series in others:
            with series.lock:
                evicted += series.evict_before(cutoff)
                if not series.samples:
                    emptied.append((uid, series))
        dropped = sum(self._drop_if_empty(uid, series) for uid, series in emptied)
        if dropped:
            logger.debug("users_dropped", count=dropped)
        return evicted
