"""Shared fixtures: canned feed documents served through httpx.MockTransport."""

from typing import Callable, Dict, Optional

import httpx
import pytest

from mkblogs_rss import consts

DEVTO_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>DEV Community: Mustafif</title>
    <link>https://dev.to/mustafif</link>
    <description>Posts</description>
    <item>
      <title>First post</title>
      <description>About the first post</description>
      <link>https://dev.to/mustafif/first-post</link>
      <pubDate>Mon, 02 Jan 2023 10:00:00 +0000</pubDate>
    </item>
    <item>
      <title>Second post</title>
      <description>About the second post</description>
      <link>https://dev.to/mustafif/second-post</link>
      <pubDate>Tue, 03 Jan 2023 10:00:00 +0000</pubDate>
    </item>
  </channel>
</rss>
"""

MOKA_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>MoKa Reads</title>
    <link>https://mokareads.org</link>
    <description>Articles</description>
    <item>
      <title>Designated post</title>
      <description>Written by Mustafif</description>
      <link>https://mokareads.org/designated</link>
      <pubDate>Wed, 04 Jan 2023 10:00:00 +0000</pubDate>
      <dc:creator>Mustafif Khan</dc:creator>
    </item>
    <item>
      <title>Guest post</title>
      <description>Written by a guest</description>
      <link>https://mokareads.org/guest</link>
      <pubDate>Thu, 05 Jan 2023 10:00:00 +0000</pubDate>
      <dc:creator>Someone Else</dc:creator>
    </item>
    <item>
      <title>Anonymous post</title>
      <link>https://mokareads.org/anonymous</link>
    </item>
  </channel>
</rss>
"""

MUFIZ_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Mufiz</title>
    <link>https://mustafif.com</link>
    <description>Blog</description>
    <item>
      <description>An item without a title</description>
      <link>https://mustafif.com/untitled</link>
      <pubDate>Fri, 06 Jan 2023 10:00:00 +0000</pubDate>
    </item>
    <item>
      <title>Guid only</title>
      <guid isPermaLink="true">https://mustafif.com/guid-only</guid>
    </item>
  </channel>
</rss>
"""

EMPTY_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Empty</title>
    <link>https://example.com</link>
    <description>Nothing here</description>
  </channel>
</rss>
"""


def serve(bodies: Dict[str, bytes], requests: Optional[list] = None) -> httpx.MockTransport:
    """Transport answering each URL with its body, 404 for anything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        body = bodies.get(str(request.url))
        if body is None:
            return httpx.Response(404, content=b"not found")
        return httpx.Response(200, content=body, headers={"Content-Type": "application/rss+xml"})

    return httpx.MockTransport(handler)


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for transports serving canned bodies."""
    return serve


@pytest.fixture
def empty_feed() -> bytes:
    """Valid feed with no items."""
    return EMPTY_FEED


@pytest.fixture
def feed_bodies() -> Dict[str, bytes]:
    """One canned document per configured source."""
    return {
        consts.DEVTO: DEVTO_FEED,
        consts.BLOG_MOKA: MOKA_FEED,
        consts.BLOG_MUFIZ: MUFIZ_FEED,
    }
