from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union
import hashlib

DEFAULT_GROUP = "default"

class BookmarkType(Enum):
    FOLDER = "folder"
    BOOKMARK = "bookmark"

class BrowserType(Enum):
    """Browsers whose bookmarks can be imported, all of them use the Chromium format"""
    BRAVE = "brave"
    CHROME = "chrome"
    CHROMIUM = "chromium"
    EDGE = "edge"
    VIVALDI = "vivaldi"

def make_id(name: str, group: str) -> str:
    """Derive the bookmark id from its (name, group) pair, 16 hex chars"""
    digest = hashlib.blake2b(digest_size=8)
    digest.update(name.encode("utf-8"))
    digest.update(b"\x00")
    digest.update(group.encode("utf-8"))
    return digest.hexdigest()

@dataclass
class Bookmark:
    """Represents a single bookmark entry"""
    name: str
    url: str
    group: str = DEFAULT_GROUP
    tags: Set[str] = field(default_factory=set)
    id: str = field(init=False)  # Computed from name and group

    def __post_init__(self):
        """Initialize computed fields after instance creation"""
        if not self.group:
            self.group = DEFAULT_GROUP
        self.tags = {t for t in self.tags if t}
        self.id = make_id(self.name, self.group)

    def tags_as_string(self) -> str:
        return ", ".join(sorted(self.tags))

    def with_changes(self, name: Optional[str] = None, url: Optional[str] = None,
                     group: Optional[str] = None, tags: Optional[Set[str]] = None) -> 'Bookmark':
        """Copy of the bookmark with some fields replaced, the id is derived again"""
        return Bookmark(
            name=self.name if name is None else name,
            url=self.url if url is None else url,
            group=self.group if group is None else group,
            tags=set(self.tags) if tags is None else set(tags),
        )

    def to_dict(self) -> Dict:
        """Convert a Bookmark object to a dictionary for the registry file."""
        return {
            'id': self.id,
            'url': self.url,
            'name': self.name,
            'group': self.group,
            'tags': {tag: True for tag in sorted(self.tags)},
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Bookmark':
        """Convert a dictionary to a Bookmark object."""
        tags = data.get('tags') or {}
        if isinstance(tags, dict):
            tags = [t for t, enabled in tags.items() if enabled]
        return cls(
            name=data['name'],
            url=data['url'],
            group=data.get('group') or DEFAULT_GROUP,
            tags=set(tags),
        )

    def __str__(self) -> str:
        return f"Name: {self.name}, URL: {self.url}, Group: {self.group}, Tags: {self.tags_as_string()}"

@dataclass
class ImportURLItem:
    """A bookmark found in a browser bookmarks file, candidate for import"""
    id: str
    name: str
    url: str
    type: BookmarkType = BookmarkType.BOOKMARK

@dataclass
class ImportFolderItem:
    """A folder found in a browser bookmarks file"""
    id: str
    name: str
    children: List[Union['ImportURLItem', 'ImportFolderItem']] = field(default_factory=list)
    type: BookmarkType = BookmarkType.FOLDER

    def add_child(self, child: Union['ImportURLItem', 'ImportFolderItem']) -> None:
        """Add a child bookmark or folder to this folder"""
        self.children.append(child)

    def walk(self) -> Iterator[Tuple['ImportFolderItem', Union['ImportURLItem', 'ImportFolderItem']]]:
        """Yield (parent folder, item) for every item below this folder, depth first"""
        for child in self.children:
            yield self, child
            if isinstance(child, ImportFolderItem):
                yield from child.walk()

    def count_urls(self) -> int:
        return sum(1 for _, item in self.walk() if isinstance(item, ImportURLItem))

ImportItem = Union[ImportURLItem, ImportFolderItem]
