"""Fetch a single feed and parse it into a Channel."""

import io
import logging
from typing import List, Optional

import feedparser
import httpx

from ..errors import NetworkError, ParseError
from .models import Channel, FeedItem

logger = logging.getLogger(__name__)

# Bozo reasons that do not make the document unusable.
_BENIGN_BOZO = (feedparser.CharacterEncodingOverride, feedparser.NonXMLContentType)


def _creators(entry: feedparser.FeedParserDict) -> List[str]:
    # dc:creator and <author> both end up in entry.authors, one dict per element
    names = [a.get("name") for a in entry.get("authors", []) if a.get("name")]
    if not names and entry.get("author"):
        names = [entry.get("author")]
    return names


def _link(entry: feedparser.FeedParserDict) -> Optional[str]:
    # feedparser copies a permalink <guid> into entry.link when no <link> element exists
    if any(link.get("rel") == "alternate" for link in entry.get("links", [])):
        return entry.get("link")
    return None


def parse_channel(body: bytes, url: str) -> Channel:
    """Parse a feed document.

    Raises ParseError when feedparser does not recognise a feed or reports
    the XML as malformed.
    """
    # Wrapped so feedparser never treats the body as a filename. Item text is
    # kept as the feed wrote it.
    parsed = feedparser.parse(
        io.BytesIO(body), sanitize_html=False, resolve_relative_uris=False
    )

    if parsed.bozo and not isinstance(parsed.get("bozo_exception"), _BENIGN_BOZO):
        raise ParseError(f"Invalid feed: {parsed.get('bozo_exception')}", url=url)
    if not parsed.get("version"):
        raise ParseError("Response is not a feed document", url=url)

    items = [
        FeedItem(
            title=entry.get("title"),
            description=entry.get("summary"),
            link=_link(entry),
            pub_date=entry.get("published"),
            creators=_creators(entry),
        )
        for entry in parsed.entries
    ]

    return Channel(
        url=url,
        title=parsed.feed.get("title"),
        link=parsed.feed.get("link"),
        items=items,
    )


async def fetch_channel(client: httpx.AsyncClient, url: str) -> Channel:
    """Fetch and parse one feed with a shared client."""
    logger.debug("Fetching feed %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
        body = await response.aread()
    except httpx.HTTPStatusError as e:
        raise NetworkError(f"HTTP {e.response.status_code} from {url}", url=url) from e
    except httpx.TimeoutException as e:
        raise NetworkError(f"Request to {url} timed out", url=url) from e
    except httpx.HTTPError as e:
        raise NetworkError(f"HTTP error: {e}", url=url) from e

    channel = parse_channel(body, url)
    logger.info("Fetched %d items from %s", len(channel.items), url)
    return channel
