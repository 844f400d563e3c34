from typing import List

from models.bookmark import ImportFolderItem, ImportItem
from ui.table import TableItem

class ImportTableItem(TableItem):
    """Import candidate shown as a table row: Type, Name, URL, Selected"""

    def __init__(self, inner: ImportItem, selected: bool = False):
        super().__init__()
        self.inner = inner
        self.selected = selected
        self._row = self._build_row()

    @property
    def id(self) -> str:
        return self.inner.id

    @property
    def is_folder(self) -> bool:
        return isinstance(self.inner, ImportFolderItem)

    def row(self) -> List[str]:
        return self._row

    def set_selected(self, selected: bool) -> None:
        self.selected = selected
        self._row = self._build_row()

    def refresh(self) -> None:
        """Rebuild the row after the wrapped item was edited"""
        self._row = self._build_row()

    def clone(self) -> 'ImportTableItem':
        item = ImportTableItem(self.inner, self.selected)
        item.visible = self.visible
        return item

    def _build_row(self) -> List[str]:
        if self.is_folder:
            kind, url = "Folder", "-"
        else:
            kind, url = "URL", self.inner.url
        return [kind, self.inner.name, url, "[x]" if self.selected else "[ ]"]
