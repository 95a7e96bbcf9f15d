from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from .exceptions import ParseError
from .models import NewsItem, SourceDescriptor


def to_news_item(
    entry: Dict[str, Any],
    *,
    source: SourceDescriptor,
    source_name: str,
    fetched_at: datetime,
) -> NewsItem:
    """
    Convert a parsed entry dict into a NewsItem owned by `source`.
    Requires:
    - title or link (an entry with neither is not a story)
    Falls back:
    - description -> ""
    - published_at -> fetched_at
    """
    title = entry.get("title") or ""
    link = entry.get("link") or ""
    if not title and not link:
        raise ParseError(f"Entry from {source.url} has neither title nor link")

    published_at = entry.get("published_at") or fetched_at

    return NewsItem(
        title=title,
        link=link,
        description=entry.get("description") or "",
        published_at=published_at,
        team=source.team,
        source=source_name,
    )
