"""Feed fetching, parsing and aggregation."""

from .aggregator import FeedAggregator, feed, feed_sync
from .channel import fetch_channel, parse_channel
from .filters import SOURCE_FILTERS, by_creator, filter_for, keep_all
from .models import Channel, FeedItem

__all__ = [
    "FeedAggregator",
    "Channel",
    "FeedItem",
    "SOURCE_FILTERS",
    "by_creator",
    "feed",
    "feed_sync",
    "fetch_channel",
    "filter_for",
    "keep_all",
    "parse_channel",
]
