"""Per-source article filters."""

from typing import Callable, Dict

from .. import consts
from ..models import Source
from .models import FeedItem

ItemFilter = Callable[[FeedItem], bool]


def keep_all(item: FeedItem) -> bool:
    """Default policy."""
    return True


def by_creator(name: str) -> ItemFilter:
    """Keep only items whose creators include ``name``."""

    def _filter(item: FeedItem) -> bool:
        return name in item.creators

    _filter.__name__ = f"by_creator({name!r})"
    return _filter


SOURCE_FILTERS: Dict[Source, ItemFilter] = {
    Source.MOKA: by_creator(consts.MOKA_AUTHOR),
}


def filter_for(source: Source) -> ItemFilter:
    """Filter applied to a source's items."""
    return SOURCE_FILTERS.get(source, keep_all)
