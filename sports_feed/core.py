from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Sequence

import aiohttp

from .config import CONFIG
from .dedup import deduplicate
from .fetcher import fetch_source
from .logging_config import create_logger
from .models import FetchResult, NewsItem, SourceDescriptor

logger = create_logger("core")

FetchFn = Callable[..., Awaitable[FetchResult]]


@dataclass
class AggregationResult:
    items: List[NewsItem]
    fetched_at: datetime
    results: List[FetchResult] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.is_success)

    @property
    def all_failed(self) -> bool:
        return bool(self.results) and self.failed_count == len(self.results)


def merge_items(results: Sequence[FetchResult], limit: Optional[int]) -> List[NewsItem]:
    """
    Concatenate per-source items, drop exact repeats, sort newest first, truncate.

    list.sort is stable, so equal timestamps keep registry order.
    """
    items: List[NewsItem] = []
    for r in results:
        items.extend(r.items)
    items = deduplicate(items)
    items.sort(key=lambda x: x.published_at, reverse=True)
    if limit is not None and limit >= 0:
        items = items[:limit]
    return items


class Aggregator:
    """
    Fan-out fetch across all registered sources, fan-in, merge.

    Pipeline per source: fetch → parse → normalize → keyword filter.
    Then: merge → deduplicate → sort (newest first) → truncate.
    """

    def __init__(
        self,
        sources: Sequence[SourceDescriptor],
        *,
        max_items: Optional[int] = None,
        timeout: Optional[float] = None,
        fetch: FetchFn = fetch_source,
    ) -> None:
        self.sources = list(sources)
        self.max_items = CONFIG.MAX_ITEMS if max_items is None else max_items
        self.timeout = CONFIG.FETCH_TIMEOUT_SEC if timeout is None else timeout
        self._fetch = fetch

    async def aggregate(self) -> AggregationResult:
        now = datetime.now(timezone.utc)
        async with aiohttp.ClientSession() as session:
            outcomes = await asyncio.gather(
                *(self._fetch(session, s, timeout=self.timeout, now=now) for s in self.sources),
                return_exceptions=True,
            )

        results: List[FetchResult] = []
        for source, outcome in zip(self.sources, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    # CancelledError / KeyboardInterrupt are not ours to swallow
                    raise outcome
                logger.error(f"Unexpected error fetching {source.url}: {outcome!r}")
                outcome = FetchResult.failed(source, repr(outcome))
            results.append(outcome)

        items = merge_items(results, self.max_items)
        result = AggregationResult(
            items=items,
            fetched_at=datetime.now(timezone.utc),
            results=results,
        )
        logger.info(
            f"Fetched {len(items)} items from {len(self.sources)} sources "
            f"({result.failed_count} failed)"
        )
        return result
