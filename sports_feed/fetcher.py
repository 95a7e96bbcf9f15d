from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, List, Optional

import aiohttp
import feedparser

from .config import CONFIG
from .exceptions import FeedFetchError, ParseError
from .filters import filter_by_keywords
from .logging_config import create_logger
from .models import FetchResult, NewsItem, SourceDescriptor
from .normalizer import to_news_item
from .parser import feed_title, parse_entry

logger = create_logger("fetcher")

_ACCEPT = "application/rss+xml, application/atom+xml, application/xml, text/xml, */*"


async def fetch_feed_document(
    session: aiohttp.ClientSession,
    url: str,
    timeout: Optional[float] = None,
) -> Any:
    """
    Fetch a single feed URL and return the parsed feedparser document.

    Raises FeedFetchError on HTTP errors or when the document is malformed.
    Transport errors (aiohttp.ClientError, asyncio.TimeoutError) propagate.
    """
    if timeout is None:
        timeout = CONFIG.FETCH_TIMEOUT_SEC
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    headers = {"User-Agent": CONFIG.USER_AGENT, "Accept": _ACCEPT}
    async with session.get(url, timeout=client_timeout, headers=headers) as response:
        if response.status >= 400:
            raise FeedFetchError(f"HTTP {response.status}")
        body = await response.read()

    feed = feedparser.parse(body)
    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise FeedFetchError("Feed has no entries list")

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        if not entries:
            msg = "Invalid RSS/Atom feed"
            if exc:
                msg += f" ({exc})"
            raise FeedFetchError(msg)
        # feedparser flags recoverable issues (e.g. charset mismatch) as bozo too
        logger.debug(f"Tolerating bozo feed {url}: {exc}")

    # HTML error pages and foreign XML parse cleanly but carry no feed version
    if not feed.get("version") and not entries:
        raise FeedFetchError("Not an RSS/Atom feed")
    return feed


def normalize_entries(
    feed: Any,
    source: SourceDescriptor,
    fetched_at: datetime,
) -> List[NewsItem]:
    """Turn every usable entry of a parsed feed into a NewsItem."""
    source_name = feed_title(feed) or source.url
    items: List[NewsItem] = []
    for entry in feed.entries:
        try:
            items.append(to_news_item(
                parse_entry(entry),
                source=source,
                source_name=source_name,
                fetched_at=fetched_at,
            ))
        except ParseError as e:
            logger.debug(f"Skipping entry: {e}")
    return items


async def fetch_source(
    session: aiohttp.ClientSession,
    source: SourceDescriptor,
    *,
    timeout: Optional[float] = None,
    now: Optional[datetime] = None,
) -> FetchResult:
    """
    Fetch, normalize and keyword-filter one source.

    Never raises for upstream problems: the failure is logged and reported as
    a failed FetchResult so sibling sources are unaffected.
    """
    start = time.monotonic()
    fetched_at = now or datetime.now(timezone.utc)
    try:
        feed = await fetch_feed_document(session, source.url, timeout=timeout)
    except asyncio.TimeoutError:
        reason = "Timeout"
    except (FeedFetchError, aiohttp.ClientError) as e:
        reason = str(e) or e.__class__.__name__
    else:
        items = normalize_entries(feed, source, fetched_at)
        items = filter_by_keywords(items, source.keywords)
        duration_ms = int((time.monotonic() - start) * 1000)
        return FetchResult.success(source, items, duration_ms=duration_ms)

    duration_ms = int((time.monotonic() - start) * 1000)
    logger.warning(f"Failed to fetch {source.url}: {reason}")
    return FetchResult.failed(source, reason, duration_ms=duration_ms)
