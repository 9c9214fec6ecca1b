"""Source enumeration for the configured blogs."""

from enum import Enum
from typing import Dict

from .. import consts


class Source(Enum):
    """Logical identifier of a configured feed."""

    DEVTO = "devto"
    MOKA = "moka"
    MUFIZ = "mufiz"

    @property
    def url(self) -> str:
        """Feed URL for this source."""
        return SOURCE_URLS[self]

    @property
    def display_name(self) -> str:
        """Human readable name."""
        return SOURCE_NAMES[self]


SOURCE_URLS: Dict[Source, str] = {
    Source.DEVTO: consts.DEVTO,
    Source.MOKA: consts.BLOG_MOKA,
    Source.MUFIZ: consts.BLOG_MUFIZ,
}

SOURCE_NAMES: Dict[Source, str] = {
    Source.DEVTO: "Devto",
    Source.MOKA: "MoKa Reads",
    Source.MUFIZ: "Mufiz",
}
