"""Data models for ingestion."""

from typing import List, Optional

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """Parsed RSS feed item."""

    title: Optional[str] = Field(None, description="Item title")
    description: Optional[str] = Field(None, description="Item description/summary")
    link: Optional[str] = Field(None, description="Item URL")
    pub_date: Optional[str] = Field(None, description="Publication date, unparsed")
    creators: List[str] = Field(default_factory=list, description="Author/creator names")


class Channel(BaseModel):
    """Parsed feed document."""

    url: str = Field(..., description="URL the feed was fetched from")
    title: Optional[str] = Field(None, description="Channel title")
    link: Optional[str] = Field(None, description="Channel homepage")
    items: List[FeedItem] = Field(default_factory=list, description="Items in document order")
