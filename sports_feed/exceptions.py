class FeedFetchError(Exception):
    """Raised when an upstream RSS/Atom feed cannot be fetched or parsed."""


class ParseError(Exception):
    """Raised when a feed entry cannot be turned into a NewsItem."""
