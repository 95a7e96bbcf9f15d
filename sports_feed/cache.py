from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .config import CONFIG
from .core import AggregationResult, Aggregator
from .logging_config import create_logger
from .models import FeedSnapshot

logger = create_logger("cache")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedCache:
    """
    Holds the last aggregation snapshot and refreshes it when stale.

    States: STALE (never refreshed, or the refresh interval has elapsed) and
    FRESH. Reads on a FRESH cache return the current snapshot untouched. Reads
    on a STALE cache run one aggregation cycle; concurrent stale readers queue
    on the same lock and pick up that cycle's snapshot instead of starting
    their own.

    When every source fails in a cycle and a non-empty snapshot already
    exists, the old items are kept and the refresh clock still advances, so
    the next attempt waits a full interval.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        *,
        refresh_interval: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.aggregator = aggregator
        if refresh_interval is None:
            refresh_interval = CONFIG.REFRESH_INTERVAL
        self.refresh_interval = refresh_interval
        self._clock = clock
        self._snapshot = FeedSnapshot()
        self._refreshed_at: Optional[datetime] = None
        self._lock = asyncio.Lock()
        self.refresh_count = 0

    @property
    def snapshot(self) -> FeedSnapshot:
        return self._snapshot

    def is_stale(self) -> bool:
        if self._refreshed_at is None:
            return True
        return self._clock() - self._refreshed_at >= self.refresh_interval

    async def get(self) -> FeedSnapshot:
        if not self.is_stale():
            return self._snapshot
        async with self._lock:
            # another caller may have refreshed while we waited
            if self.is_stale():
                await self._run_cycle()
            return self._snapshot

    async def refresh(self) -> FeedSnapshot:
        """Run a cycle now regardless of staleness."""
        async with self._lock:
            await self._run_cycle()
            return self._snapshot

    async def _run_cycle(self) -> None:
        result = await self.aggregator.aggregate()
        self.refresh_count += 1
        self._refreshed_at = self._clock()
        self._commit(result)

    def _commit(self, result: AggregationResult) -> None:
        if result.all_failed and self._snapshot.items:
            logger.warning(
                f"All {len(result.results)} sources failed; "
                f"keeping {self._snapshot.count} cached items from {self._snapshot.fetched_at}"
            )
            return
        # single reference swap, readers never see a half-built snapshot
        self._snapshot = FeedSnapshot(
            items=tuple(result.items),
            fetched_at=result.fetched_at,
            source_count=len(result.results),
            failed_count=result.failed_count,
        )
