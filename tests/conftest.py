from datetime import timedelta

import pytest

from sports_feed.models import NewsItem

from support import NOW


@pytest.fixture
def make_item():
    def _make(
        title="Story",
        *,
        team="Cubs",
        minutes_ago=0,
        link=None,
        description="",
        source="Test Feed",
    ):
        return NewsItem(
            title=title,
            link=link if link is not None else f"https://example.com/{team.lower()}/{title}",
            description=description,
            published_at=NOW - timedelta(minutes=minutes_ago),
            team=team,
            source=source,
        )
    return _make
