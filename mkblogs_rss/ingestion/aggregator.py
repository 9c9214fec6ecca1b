"""Concurrent aggregation of every configured feed."""

import asyncio
import logging
from typing import Dict, Optional

import httpx

from ..config import FetchConfig
from ..errors import FeedError, TaskFailure
from ..models import SOURCE_URLS, Article, RSSMap, Source
from .channel import fetch_channel
from .filters import filter_for
from .models import Channel

logger = logging.getLogger(__name__)


class FeedAggregator:
    """Fetch every Source in parallel and build the article mapping."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize aggregator.

        Args:
            config: HTTP client settings, defaults to FetchConfig()
            transport: Optional httpx transport, used to serve feeds without the network
        """
        self.config = config or FetchConfig()
        self.transport = transport

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            transport=self.transport,
        )

    async def _fetch_source(self, client: httpx.AsyncClient, source: Source) -> Channel:
        url = SOURCE_URLS[source]
        try:
            return await fetch_channel(client, url)
        except FeedError as e:
            e.source = source
            raise
        except Exception as e:
            raise TaskFailure(f"Fetch task for {source.value} failed: {e}", source=source, url=url) from e

    async def fetch_all(self) -> Dict[Source, Channel]:
        """Fetch every source, failing on the first error.

        Sibling fetches still running when one fails are cancelled before the
        error is raised.
        """
        async with self._build_client() as client:
            tasks = {
                source: asyncio.create_task(
                    self._fetch_source(client, source), name=f"fetch-{source.value}"
                )
                for source in Source
            }
            try:
                channels = await asyncio.gather(*tasks.values())
            except FeedError as e:
                logger.warning("Aggregation failed on %s: %s", e.source, e)
                for task in tasks.values():
                    task.cancel()
                await asyncio.gather(*tasks.values(), return_exceptions=True)
                raise

        return dict(zip(tasks.keys(), channels))

    def build_map(self, channels: Dict[Source, Channel]) -> RSSMap:
        """Convert and filter each source's items."""
        rss_map: RSSMap = {}
        for source, channel in channels.items():
            keep = filter_for(source)
            articles = [Article.from_item(item) for item in channel.items if keep(item)]
            dropped = len(channel.items) - len(articles)
            if dropped:
                logger.debug("Dropped %d unattributed items from %s", dropped, source.value)
            rss_map[source] = articles
        return rss_map

    async def feed(self) -> RSSMap:
        """Fetch, convert and filter every configured source."""
        channels = await self.fetch_all()
        return self.build_map(channels)


async def feed(
    config: Optional[FetchConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RSSMap:
    """Fetch all blogs and return their articles keyed by Source."""
    return await FeedAggregator(config, transport=transport).feed()


def feed_sync(
    config: Optional[FetchConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RSSMap:
    """Synchronous wrapper for feed."""
    return asyncio.run(feed(config, transport=transport))
