from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .models import NewsItem


def deduplicate(items: Iterable[NewsItem]) -> List[NewsItem]:
    """
    Remove exact repeats of the same story under the same team.

    Key: (team, link), falling back to (team, title) for link-less entries.
    Keeps the first occurrence and preserves original order.
    """
    seen: Set[Tuple[str, str]] = set()
    out: List[NewsItem] = []

    def make_key(it: NewsItem) -> Tuple[str, str]:
        if it.link:
            return (it.team, f"link::{it.link}")
        return (it.team, f"title::{it.title}")

    for it in items:
        key = make_key(it)
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out
