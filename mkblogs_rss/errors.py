"""Errors raised while aggregating feeds."""

from typing import Optional


class FeedError(Exception):
    """Base class for every aggregation failure."""

    def __init__(
        self,
        message: str,
        source: Optional[object] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.url = url


class NetworkError(FeedError):
    """The request could not be sent, timed out, or the server answered with an error."""


class ParseError(FeedError):
    """The response body is not a well-formed feed document."""


class TaskFailure(FeedError):
    """A fetch task failed for a reason other than network or parsing."""
