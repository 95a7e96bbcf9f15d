import asyncio
from datetime import datetime, timezone

from sports_feed.core import AggregationResult
from sports_feed.models import FetchResult, SourceDescriptor


NOW = datetime(2025, 10, 6, 18, 0, tzinfo=timezone.utc)

CUBS_SOURCE = SourceDescriptor("https://cubs.example/rss", "Cubs")
BULLS_SOURCE = SourceDescriptor("https://bulls.example/rss", "Bulls", keywords=("bulls",))

CUBS_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Bleed Cubbie Blue</title>
    <link>https://www.bleedcubbieblue.com</link>
    <description>Cubs news</description>
    <item>
      <title>Cubs clinch wild card at Wrigley</title>
      <link>https://example.com/cubs/1</link>
      <description>&lt;p&gt;A &lt;b&gt;big&lt;/b&gt; night &amp;amp; a party.&lt;/p&gt;</description>
      <pubDate>Mon, 06 Oct 2025 14:30:00 GMT</pubDate>
    </item>
    <item>
      <title>Offseason questions for the North Siders</title>
      <link>https://example.com/cubs/2</link>
      <description>Roster notes</description>
      <pubDate>Sun, 05 Oct 2025 09:00:00 -0500</pubDate>
    </item>
    <item>
      <title>Undated notebook</title>
      <link>https://example.com/cubs/3</link>
    </item>
  </channel>
</rss>
"""

ESPN_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>ESPN NBA</title>
    <link>https://www.espn.com</link>
    <description>NBA</description>
    <item>
      <title>Bulls sign guard</title>
      <link>https://example.com/nba/1</link>
      <description>Chicago adds depth.</description>
      <pubDate>Mon, 06 Oct 2025 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Lakers win opener</title>
      <link>https://example.com/nba/2</link>
      <description>Los Angeles rolls.</description>
      <pubDate>Mon, 06 Oct 2025 11:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Preview: Knicks at home</title>
      <link>https://example.com/nba/3</link>
      <description>Game night at the United Center is next.</description>
      <pubDate>Mon, 06 Oct 2025 12:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Windy City Gridiron</title>
  <id>urn:uuid:wcg</id>
  <updated>2025-10-06T15:00:00Z</updated>
  <entry>
    <title>Bears film review</title>
    <link href="https://example.com/bears/1" rel="alternate"/>
    <id>urn:uuid:bears-1</id>
    <updated>2025-10-06T15:00:00Z</updated>
    <summary>Breaking down the tape.</summary>
  </entry>
</feed>
"""


class FakeAggregator:
    """Stand-in for Aggregator that counts cycles and returns canned results.

    Results are handed out in order; the last one repeats.
    """

    def __init__(self, results=None, delay=0.0):
        self.results = list(results or [])
        self.delay = delay
        self.calls = 0

    async def aggregate(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if not self.results:
            return AggregationResult(items=[], fetched_at=NOW, results=[])
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


def ok_result(source, items):
    return FetchResult.success(source, list(items))


def failed_result(source, reason="Timeout"):
    return FetchResult.failed(source, reason)
