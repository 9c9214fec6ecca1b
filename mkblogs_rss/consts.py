"""Static configuration shared by the fetchers."""

DEVTO = "https://dev.to/feed/mustafif"
BLOG_MOKA = "https://mokareads.org/rss.xml"
BLOG_MUFIZ = "https://mustafif.com/rss.xml"

# Sent as the User-Agent on every request so the blogs can attribute traffic.
USER_AGENT = "MK-RSS"

# MoKa Reads hosts several writers, only these posts are kept.
MOKA_AUTHOR = "Mustafif Khan"

DEFAULT_TIMEOUT = 30.0
