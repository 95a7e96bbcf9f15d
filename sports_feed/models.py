from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SourceDescriptor:
    """
    One upstream feed in the registry.

    keywords=None means every item from this feed is kept.
    """
    url: str
    team: str
    keywords: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class NewsItem:
    """
    Stable public model representing a normalized news item.

    WARNING: Do not change fields lightly. Both encoders depend on them.
    """
    title: str
    link: str
    description: str
    published_at: datetime
    team: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "date": format_iso(self.published_at),
            "team": self.team,
            "source": self.source,
        }


class FetchStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"  # fetched fine, nothing (left) to keep
    FAILED = "failed"


@dataclass
class FetchResult:
    """Outcome of fetching a single source."""

    source: SourceDescriptor
    status: FetchStatus
    items: List[NewsItem] = field(default_factory=list)
    error_message: Optional[str] = None
    duration_ms: int = 0

    @property
    def is_success(self) -> bool:
        return self.status in (FetchStatus.SUCCESS, FetchStatus.EMPTY)

    @classmethod
    def success(
        cls,
        source: SourceDescriptor,
        items: List[NewsItem],
        duration_ms: int = 0,
    ) -> "FetchResult":
        status = FetchStatus.SUCCESS if items else FetchStatus.EMPTY
        return cls(source=source, status=status, items=items, duration_ms=duration_ms)

    @classmethod
    def failed(
        cls,
        source: SourceDescriptor,
        error_message: str,
        duration_ms: int = 0,
    ) -> "FetchResult":
        return cls(
            source=source,
            status=FetchStatus.FAILED,
            error_message=error_message,
            duration_ms=duration_ms,
        )


@dataclass(frozen=True)
class FeedSnapshot:
    """An immutable view of the cache contents handed to readers."""
    items: Tuple[NewsItem, ...] = ()
    fetched_at: Optional[datetime] = None
    source_count: int = 0
    failed_count: int = 0

    @property
    def count(self) -> int:
        return len(self.items)


def format_iso(dt: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z, millisecond precision."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
