from typing import List

from models.bookmark import Bookmark
from models.record_filter import Filter
from ui.table import TableItem

class URLItem(TableItem):
    """Bookmark shown as a table row: [Id,] Name, URL, Group, Tags"""

    def __init__(self, url: Bookmark, show_id: bool = False):
        super().__init__()
        self.url = url
        self.show_id = show_id
        self._row = self._build_row()

    @classmethod
    def from_list(cls, urls: List[Bookmark], show_id: bool = False) -> List['URLItem']:
        return [cls(url, show_id) for url in urls]

    @property
    def id(self) -> str:
        return self.url.id

    def row(self) -> List[str]:
        return self._row

    def filter(self, f: Filter) -> None:
        self.visible = f.matches(self.url)

    def update(self, url: Bookmark) -> None:
        """Replace the wrapped bookmark, e.g. after it was changed in storage"""
        self.url = url
        self._row = self._build_row()

    def set_show_id(self, show_id: bool) -> None:
        self.show_id = show_id
        self._row = self._build_row()

    def clone(self) -> 'URLItem':
        item = URLItem(self.url, self.show_id)
        item.visible = self.visible
        return item

    def _build_row(self) -> List[str]:
        row = [self.url.name, self.url.url, self.url.group, self.url.tags_as_string()]
        if self.show_id:
            row.insert(0, self.url.id)
        return row
