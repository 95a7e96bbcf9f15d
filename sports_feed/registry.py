from __future__ import annotations

from typing import Dict, List, Tuple

from .models import SourceDescriptor


TEAMS: Tuple[str, ...] = ("Cubs", "Bulls", "Bears")

# keywords narrow league-wide feeds (ESPN) down to Chicago stories
FEEDS: Dict[str, Tuple[SourceDescriptor, ...]] = {
    "cubs": (
        SourceDescriptor("https://www.bleedcubbieblue.com/rss/index.xml", "Cubs"),
        SourceDescriptor("https://www.bleachernation.com/cubs/feed/", "Cubs"),
        SourceDescriptor("https://chicago.suntimes.com/rss/cubs/index.xml", "Cubs"),
        SourceDescriptor(
            "https://www.espn.com/espn/rss/mlb/news",
            "Cubs",
            keywords=("cubs", "wrigley"),
        ),
    ),
    "bulls": (
        SourceDescriptor(
            "https://www.espn.com/espn/rss/nba/news",
            "Bulls",
            keywords=("bulls", "chicago bulls", "united center"),
        ),
        SourceDescriptor("https://www.bleachernation.com/bulls/feed/", "Bulls"),
        SourceDescriptor("https://chicago.suntimes.com/rss/bulls/index.xml", "Bulls"),
    ),
    "bears": (
        SourceDescriptor(
            "https://www.espn.com/espn/rss/nfl/news",
            "Bears",
            keywords=("bears", "chicago bears", "soldier field", "caleb williams"),
        ),
        SourceDescriptor("https://www.bleachernation.com/bears/feed/", "Bears"),
        SourceDescriptor("https://chicago.suntimes.com/rss/bears/index.xml", "Bears"),
        SourceDescriptor("https://www.windycitygridiron.com/rss/index.xml", "Bears"),
    ),
}


def all_sources() -> List[SourceDescriptor]:
    """Every registered source, in team order (cubs, bulls, bears)."""
    out: List[SourceDescriptor] = []
    for team_sources in FEEDS.values():
        out.extend(team_sources)
    return out


def team_labels(sources: List[SourceDescriptor]) -> Tuple[str, ...]:
    """Distinct team labels of the given sources, in first-seen order."""
    seen: List[str] = []
    for s in sources:
        if s.team not in seen:
            seen.append(s.team)
    return tuple(seen)
