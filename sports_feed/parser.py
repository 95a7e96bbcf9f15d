from __future__ import annotations

import calendar
import html
import re
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional


_TAG_RE = re.compile(r"<[^>]+>")


def strip_html(text: str) -> str:
    """Plain-text rendition of a lightly marked-up summary."""
    text = _TAG_RE.sub(" ", text)
    text = html.unescape(text)
    return " ".join(text.split())


def _parse_date_string(s: str) -> Optional[datetime]:
    # ISO-8601 first (Atom), then RFC 2822 (RSS pubDate)
    try:
        dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    except ValueError:
        try:
            dt = parsedate_to_datetime(s)
        except (TypeError, ValueError, IndexError):
            return None
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _to_datetime(entry: Dict[str, Any]) -> Optional[datetime]:
    """
    Convert feed entry date fields to timezone-aware UTC datetime.
    Priority: published_parsed -> updated_parsed -> published -> updated -> None.
    """
    # feedparser normalizes *_parsed to UTC struct_time
    for key in ("published_parsed", "updated_parsed"):
        val = entry.get(key)
        if isinstance(val, time.struct_time):
            try:
                return datetime.fromtimestamp(calendar.timegm(val), tz=timezone.utc)
            except (OverflowError, ValueError, OSError):
                continue
    for key in ("published", "updated"):
        s = entry.get(key)
        if isinstance(s, str) and s.strip():
            parsed = _parse_date_string(s)
            if parsed is not None:
                return parsed
    return None


def _get_description(entry: Dict[str, Any]) -> str:
    summary = entry.get("summary") or entry.get("description") or ""
    if isinstance(summary, str):
        plain = strip_html(summary)
        if plain:
            return plain
    content = entry.get("content")
    if isinstance(content, list) and content:
        first = content[0]
        if isinstance(first, dict):
            value = first.get("value")
            if isinstance(value, str) and value.strip():
                return value.strip()
    return ""


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a normalized dict with common fields.
    Fields: title, link, description, published_at (datetime|None)
    """
    title = (entry.get("title") or "").strip()
    link = (entry.get("link") or "").strip()

    return {
        "title": title,
        "link": link,
        "description": _get_description(entry),
        "published_at": _to_datetime(entry),
    }


def feed_title(feed: Any) -> Optional[str]:
    """Title of the parsed feed document, if it declares one."""
    meta = getattr(feed, "feed", None) or {}
    title = meta.get("title") if isinstance(meta, dict) else None
    if isinstance(title, str) and title.strip():
        return title.strip()
    return None
