"""Concurrent RSS aggregation for a fixed set of blogs."""

from .errors import FeedError, NetworkError, ParseError, TaskFailure
from .ingestion import FeedAggregator, feed, feed_sync
from .models import Article, RSSMap, Source

__version__ = "0.1.0"

__all__ = [
    "Article",
    "FeedAggregator",
    "FeedError",
    "NetworkError",
    "ParseError",
    "RSSMap",
    "Source",
    "TaskFailure",
    "feed",
    "feed_sync",
]
