"""Data models for the blog feed aggregator."""

from .article import Article
from .rss_map import RSSMap, rss_map_to_dict
from .source import SOURCE_NAMES, SOURCE_URLS, Source

__all__ = ["Article", "RSSMap", "Source", "SOURCE_NAMES", "SOURCE_URLS", "rss_map_to_dict"]
