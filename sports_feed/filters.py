from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional

from .models import NewsItem


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def matches_keywords(item: NewsItem, keywords: Iterable[str]) -> bool:
    return _contains_any(f"{item.title} {item.description}", keywords)


def filter_by_keywords(
    items: Iterable[NewsItem],
    keywords: Optional[Iterable[str]] = None,
) -> List[NewsItem]:
    """
    Keep items whose title + description contain at least one keyword.

    Matching is case-insensitive substring matching. keywords=None keeps
    every item; an empty allow-list keeps none.
    """
    if keywords is None:
        return list(items)
    kws = list(keywords)
    return [it for it in items if matches_keywords(it, kws)]


def parse_team_filter(raw: Optional[str]) -> Optional[FrozenSet[str]]:
    """
    Turn a ``team=cubs,bears`` query value into a set of lower-cased labels.

    Absent or blank means no filter. A value with no labels in it (``team=,``)
    is still a filter, and matches nothing.
    """
    if raw is None or not raw.strip():
        return None
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


def filter_by_team(
    items: Iterable[NewsItem],
    teams: Optional[Iterable[str]] = None,
) -> List[NewsItem]:
    """Items belonging to any of `teams` (case-insensitive), order preserved."""
    if teams is None:
        return list(items)
    wanted = {t.lower() for t in teams}
    return [it for it in items if it.team.lower() in wanted]
