"""Result mapping returned by the aggregator."""

from typing import Any, Dict, List

from .article import Article
from .source import Source

RSSMap = Dict[Source, List[Article]]


def rss_map_to_dict(rss_map: RSSMap) -> Dict[str, List[Dict[str, Any]]]:
    """JSON-ready form keyed by source value."""
    return {
        source.value: [article.model_dump() for article in articles]
        for source, articles in rss_map.items()
    }
