"""
sports_feed

Aggregates Chicago Cubs, Bulls and Bears news from several RSS/Atom feeds into
one time-ordered, team-filterable feed served as RSS and JSON.

Core ideas:
- Input: a registry of feed URLs, each tagged with a team and optional keywords
- Process: fetch (concurrently) → parse → normalize → keyword filter → merge →
  deduplicate → sort (newest first) → truncate
- Output: an immutable FeedSnapshot, cached for a refresh interval

Example
-------
import asyncio
from sports_feed import Aggregator, FeedCache, all_sources, filter_by_team

cache = FeedCache(Aggregator(all_sources()))
snapshot = asyncio.run(cache.get())

for item in filter_by_team(snapshot.items, {"cubs"}):
    print(item.published_at, item.source, item.title)
"""
from .models import FeedSnapshot, FetchResult, NewsItem, SourceDescriptor
from .core import Aggregator
from .cache import FeedCache
from .filters import filter_by_keywords, filter_by_team, parse_team_filter
from .registry import TEAMS, all_sources

__all__ = [
    "Aggregator",
    "FeedCache",
    "FeedSnapshot",
    "FetchResult",
    "NewsItem",
    "SourceDescriptor",
    "TEAMS",
    "all_sources",
    "filter_by_keywords",
    "filter_by_team",
    "parse_team_filter",
]
