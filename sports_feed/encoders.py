from __future__ import annotations

import html
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Dict, Optional, Sequence

from .models import NewsItem, format_iso

FEED_TITLE = "Chicago Sports Feed — Cubs, Bulls, Bears"
FEED_DESCRIPTION = "Aggregated news feed for the Chicago Cubs, Bulls, and Bears"
JSON_TITLE = "Chicago Sports Feed"
DESCRIPTION_LIMIT = 500

_ATOM_NS = "http://www.w3.org/2005/Atom"


def _rfc822(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def _text(parent: ET.Element, tag: str, value: str, **attrib: str) -> ET.Element:
    el = ET.SubElement(parent, tag, attrib)
    el.text = value
    return el


def render_rss(
    items: Sequence[NewsItem],
    *,
    site_url: str,
    feed_url: str,
    ttl_minutes: int,
    built_at: Optional[datetime] = None,
) -> str:
    """Render items as an RSS 2.0 document."""
    ET.register_namespace("atom", _ATOM_NS)
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", FEED_TITLE)
    _text(channel, "link", site_url)
    _text(channel, "description", FEED_DESCRIPTION)
    _text(channel, "language", "en")
    _text(channel, "ttl", str(ttl_minutes))
    _text(channel, "lastBuildDate", _rfc822(built_at or datetime.now(timezone.utc)))
    ET.SubElement(channel, f"{{{_ATOM_NS}}}link", {
        "href": feed_url,
        "rel": "self",
        "type": "application/rss+xml",
    })

    for item in items:
        node = ET.SubElement(channel, "item")
        _text(node, "title", f"[{item.team}] {item.title}")
        _text(node, "description", item.description[:DESCRIPTION_LIMIT])
        if item.link:
            _text(node, "link", item.link)
            _text(node, "guid", item.link, isPermaLink="true")
        _text(node, "pubDate", _rfc822(item.published_at))
        _text(node, "category", item.team)
        _text(node, "source", item.source, url=feed_url)

    ET.indent(rss)
    body = ET.tostring(rss, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body


def render_json(
    items: Sequence[NewsItem],
    *,
    updated: Optional[datetime],
) -> Dict[str, Any]:
    return {
        "title": JSON_TITLE,
        "updated": format_iso(updated or datetime.now(timezone.utc)),
        "count": len(items),
        "items": [it.to_dict() for it in items],
    }


LANDING_PAGE = """\
<html>
<head>
  <title>Chicago Sports Feed</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <style>
    body { font-family: -apple-system, system-ui, sans-serif; max-width: 600px; margin: 40px auto; padding: 0 20px; background: #111; color: #eee; }
    h1 { color: #fff; }
    a { color: #4da6ff; }
    code { background: #222; padding: 2px 6px; border-radius: 4px; }
    .team { display: inline-block; padding: 2px 8px; border-radius: 12px; font-size: 12px; font-weight: 600; margin-right: 4px; }
    .cubs { background: #0e3386; color: #cc3433; }
    .bulls { background: #ce1141; color: #fff; }
    .bears { background: #0b162a; color: #c83803; }
  </style>
</head>
<body>
  <h1>Chicago Sports Feed</h1>
  <p>Aggregated RSS for the
    <span class="team cubs">Cubs</span>
    <span class="team bulls">Bulls</span>
    <span class="team bears">Bears</span>
  </p>
  <h3>Subscribe</h3>
  <p>Add this URL to your RSS reader:</p>
  <p><code>{feed_url}</code></p>
  <h3>Filter by team</h3>
  <ul>
    <li><a href="/feed?team=cubs">/feed?team=cubs</a></li>
    <li><a href="/feed?team=bulls">/feed?team=bulls</a></li>
    <li><a href="/feed?team=bears">/feed?team=bears</a></li>
    <li><a href="/feed?team=cubs,bears">/feed?team=cubs,bears</a></li>
  </ul>
  <h3>JSON API</h3>
  <p><a href="/feed.json">/feed.json</a>: same data as JSON</p>
</body>
</html>
"""


def render_landing_page(feed_url: str) -> str:
    # str.replace: the stylesheet braces rule out str.format
    return LANDING_PAGE.replace("{feed_url}", html.escape(feed_url))
