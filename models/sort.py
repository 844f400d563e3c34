from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

from utils.utils import strip_protocol
from .bookmark import Bookmark
from .errors import InputError

class SortBy(Enum):
    NAME = "name"
    URL = "url"
    GROUP = "group"

    @classmethod
    def parse(cls, value: str) -> 'SortBy':
        """Parse a sort column name, case-insensitive"""
        try:
            return cls(value.lower())
        except ValueError:
            raise InputError("invalid sort column, must be one of: [name, url, group]") from None

class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: str) -> 'SortOrder':
        value = value.lower()
        if value in ("asc", "ascending"):
            return cls.ASCENDING
        if value in ("desc", "descending"):
            return cls.DESCENDING
        raise InputError("invalid sort order, must be one of: [asc, desc]")

_SORT_KEYS: Dict[SortBy, Callable[[Bookmark], str]] = {
    SortBy.NAME: lambda r: r.name.lower(),
    SortBy.URL: lambda r: strip_protocol(r.url.lower()),
    SortBy.GROUP: lambda r: r.group.lower(),
}

@dataclass(frozen=True)
class SortConfig:
    sort_by: SortBy
    order: SortOrder = SortOrder.ASCENDING

def sort_urls(urls: List[Bookmark], config: SortConfig) -> List[Bookmark]:
    """
    Sort bookmarks by the configured column, ignoring case.
    Descending order is the reversed ascending order.
    """
    result = sorted(urls, key=_SORT_KEYS[config.sort_by])
    if config.order == SortOrder.DESCENDING:
        result.reverse()
    return result
