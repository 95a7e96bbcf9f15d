from datetime import datetime, timezone

import feedparser
import pytest

from sports_feed.exceptions import ParseError
from sports_feed.models import SourceDescriptor
from sports_feed.normalizer import to_news_item
from sports_feed.parser import feed_title, parse_entry, strip_html

from support import ATOM_FEED, CUBS_RSS, NOW


class TestParseEntry:

    @pytest.fixture
    def cubs_feed(self):
        return feedparser.parse(CUBS_RSS)

    def test_rss_fields_are_normalized(self, cubs_feed):
        parsed = parse_entry(cubs_feed.entries[0])

        assert parsed["title"] == "Cubs clinch wild card at Wrigley"
        assert parsed["link"] == "https://example.com/cubs/1"
        assert parsed["description"] == "A big night & a party."
        assert parsed["published_at"] == datetime(2025, 10, 6, 14, 30, tzinfo=timezone.utc)

    def test_offset_dates_are_converted_to_utc(self, cubs_feed):
        parsed = parse_entry(cubs_feed.entries[1])

        assert parsed["published_at"] == datetime(2025, 10, 5, 14, 0, tzinfo=timezone.utc)
        assert parsed["published_at"].tzinfo is not None

    def test_missing_date_is_none(self, cubs_feed):
        parsed = parse_entry(cubs_feed.entries[2])

        assert parsed["published_at"] is None
        assert parsed["description"] == ""

    def test_atom_updated_is_used(self):
        feed = feedparser.parse(ATOM_FEED)
        parsed = parse_entry(feed.entries[0])

        assert parsed["link"] == "https://example.com/bears/1"
        assert parsed["description"] == "Breaking down the tape."
        assert parsed["published_at"] == datetime(2025, 10, 6, 15, 0, tzinfo=timezone.utc)

    def test_raw_date_strings_are_parsed(self):
        iso = parse_entry({"title": "t", "published": "2025-10-06T08:00:00Z"})
        rfc = parse_entry({"title": "t", "updated": "Mon, 06 Oct 2025 08:00:00 GMT"})
        naive = parse_entry({"title": "t", "published": "2025-10-06T08:00:00"})

        expected = datetime(2025, 10, 6, 8, 0, tzinfo=timezone.utc)
        assert iso["published_at"] == expected
        assert rfc["published_at"] == expected
        assert naive["published_at"] == expected

    def test_unparseable_date_is_none(self):
        parsed = parse_entry({"title": "t", "published": "sometime last week"})
        assert parsed["published_at"] is None

    def test_description_falls_back_to_raw_content(self):
        parsed = parse_entry({
            "title": "t",
            "summary": "   ",
            "content": [{"value": "<p>Full body</p>"}],
        })
        assert parsed["description"] == "<p>Full body</p>"

    def test_feed_title(self):
        assert feed_title(feedparser.parse(CUBS_RSS)) == "Bleed Cubbie Blue"
        assert feed_title(feedparser.parse("<rss><channel></channel></rss>")) is None


def test_strip_html_collapses_whitespace():
    assert strip_html("<div>One<br/>two &quot;three&quot;</div>\n") == 'One two "three"'


class TestToNewsItem:

    source = SourceDescriptor("https://cubs.example/rss", "Cubs")

    def test_fallbacks(self):
        item = to_news_item(
            {"title": "Hello", "link": "", "description": None, "published_at": None},
            source=self.source,
            source_name="Cubs Feed",
            fetched_at=NOW,
        )

        assert item.published_at == NOW
        assert item.description == ""
        assert item.team == "Cubs"
        assert item.source == "Cubs Feed"

    def test_entry_without_title_or_link_is_rejected(self):
        with pytest.raises(ParseError):
            to_news_item({}, source=self.source, source_name="x", fetched_at=NOW)
