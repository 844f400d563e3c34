from enum import Enum
from typing import Iterable, List, Optional

from .bookmark import Bookmark

class Filter:
    """Base class for predicates over a single bookmark"""

    def matches(self, record: Bookmark) -> bool:
        raise NotImplementedError

    def apply(self, records: Iterable[Bookmark]) -> List[Bookmark]:
        """Return the records matching the filter, order preserved"""
        return [r for r in records if self.matches(r)]

class NoopFilter(Filter):
    """Matches every bookmark"""

    def matches(self, record: Bookmark) -> bool:
        return True

class SearchElement(Enum):
    NAME = "name"
    URL = "url"
    GROUP = "group"
    TAG = "tag"

class URLFilter(Filter):
    """Case-insensitive 'contains' match of a phrase against one bookmark field"""

    def __init__(self, phrase: str, element: SearchElement):
        self.phrase = phrase.lower()
        self.element = element

    @classmethod
    def name_filter(cls, phrase: str) -> 'URLFilter':
        return cls(phrase, SearchElement.NAME)

    @classmethod
    def url_filter(cls, phrase: str) -> 'URLFilter':
        return cls(phrase, SearchElement.URL)

    @classmethod
    def group_filter(cls, phrase: str) -> 'URLFilter':
        return cls(phrase, SearchElement.GROUP)

    @classmethod
    def tag_filter(cls, phrase: str) -> 'URLFilter':
        return cls(phrase, SearchElement.TAG)

    def matches(self, record: Bookmark) -> bool:
        if self.element == SearchElement.NAME:
            return self.phrase in record.name.lower()
        if self.element == SearchElement.URL:
            return self.phrase in record.url.lower()
        if self.element == SearchElement.GROUP:
            return self.phrase in record.group.lower()
        return any(self.phrase in tag.lower() for tag in record.tags)

    def __repr__(self) -> str:
        return f"URLFilter({self.element.value} contains {self.phrase!r})"

class GroupFilter(Filter):
    """Exact match on the bookmark group"""

    def __init__(self, group: str):
        self.group = group

    def matches(self, record: Bookmark) -> bool:
        return record.group == self.group

class TagsFilter(Filter):
    """Matches bookmarks having any of the given tags"""

    def __init__(self, tags: Iterable[str]):
        self.tags = list(tags)

    def matches(self, record: Bookmark) -> bool:
        return any(tag in record.tags for tag in self.tags)

class FilterSet(Filter):
    """
    Group of filters with OR semantics: a bookmark matches the set if any of
    its filters matches.
    """

    def __init__(self, filters: Optional[List[Filter]] = None):
        self.filters: List[Filter] = list(filters or [])

    @classmethod
    def combined(cls, phrase: str) -> 'FilterSet':
        """Filter used by search: phrase contained in name, URL, group or any tag"""
        return cls([
            URLFilter.name_filter(phrase),
            URLFilter.url_filter(phrase),
            URLFilter.group_filter(phrase),
            URLFilter.tag_filter(phrase),
        ])

    def chain(self, other: Filter) -> 'FilterSet':
        """Fold another filter (or set of filters) into this set"""
        if isinstance(other, FilterSet):
            self.filters.extend(other.filters)
        else:
            self.filters.append(other)
        return self

    def matches(self, record: Bookmark) -> bool:
        for f in self.filters:
            if f.matches(record):
                return True
        return False
