"""Article model for normalized feed items."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..ingestion.models import FeedItem


class Article(BaseModel):
    """One feed item with every field present."""

    title: str = Field("", description="Item title")
    description: str = Field("", description="Item summary or body")
    link: str = Field("", description="Item URL")
    pub_date: str = Field("", description="Publication date as written in the feed")

    class Config:
        """Pydantic config."""

        frozen = True

    @classmethod
    def from_item(cls, item: "FeedItem") -> "Article":
        """Convert a parsed feed item, using empty strings for missing fields."""
        return cls(
            title=item.title or "",
            description=item.description or "",
            link=item.link or "",
            pub_date=item.pub_date or "",
        )
