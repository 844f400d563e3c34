from typing import Dict, List, Optional, Set, Tuple

from models.bookmark import Bookmark, ImportFolderItem, ImportItem, ImportURLItem
from models.bookmark_manager import BookmarkManager
from models.errors import InputError, NotUniqueError
from ui.event import Events
from ui.import_table_item import ImportTableItem
from ui.table import InteractiveTable, StatefulTable
from utils.logger import get_logger

logger = get_logger("import")

IMPORT_COLUMNS = ["Type", "Name", "URL", "Selected"]

# Failures listed one by one in the import summary, the rest are counted
MAX_LISTED_FAILURES = 10

class ImportsTable(InteractiveTable):
    """
    Browser bookmarks tree browsed folder by folder.

    Items are indexed by id, parents are tracked as an id -> parent id map and
    the selection is a set of ids, so the tree itself is never mutated apart
    from edits of URL names and addresses.
    """

    title = "Import - Press 'h' to show help"

    def __init__(self, events: Events, manager: BookmarkManager, root: ImportFolderItem):
        super().__init__(events)
        self.manager = manager
        self.root = root
        self.items_by_id: Dict[str, ImportItem] = {root.id: root}
        self.parents: Dict[str, str] = {}
        for parent, item in root.walk():
            self.items_by_id[item.id] = item
            self.parents[item.id] = parent.id
        self.selected_ids: Set[str] = set()

        self.folder_id = root.id
        self._stack: List[Tuple[StatefulTable[ImportTableItem], str]] = []
        self.table: StatefulTable[ImportTableItem] = self._table_for(root)

    def columns(self) -> List[str]:
        return list(IMPORT_COLUMNS)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def open(self) -> None:
        """Descend into the selected folder"""
        item = self.table.selected_item()
        if item is None or not item.is_folder:
            return
        self._stack.append((self.table, self.folder_id))
        self.folder_id = item.id
        self.table = self._table_for(item.inner)
        logger.debug(f"Opened folder '{item.inner.name}'", context=item.id)

    def back(self) -> None:
        """Go back to the parent folder, keeping its selection cursor"""
        if not self._stack:
            return
        self.table, self.folder_id = self._stack.pop()
        for item in self.table.items:
            item.set_selected(item.id in self.selected_ids)

    def toggle_selected(self) -> None:
        item = self.table.selected_item()
        if item is None:
            return
        if item.id in self.selected_ids:
            self.selected_ids.discard(item.id)
        else:
            self.selected_ids.add(item.id)
        item.set_selected(item.id in self.selected_ids)

    def editable_fields(self) -> Optional[List[Tuple[str, str]]]:
        item = self.table.selected_item()
        if item is None or item.is_folder:
            return None
        return [("Name", item.inner.name), ("URL", item.inner.url)]

    def commit_edit(self, values: List[str]) -> None:
        item = self.table.selected_item()
        if item is None or item.is_folder:
            raise InputError("URL not selected")
        name, url = values
        if not name.strip():
            raise InputError("name cannot be empty")
        item.inner.name = name
        item.inner.url = url
        item.refresh()

    def selected_records(self) -> List[Bookmark]:
        """
        Bookmarks to create from the selection. The group is the name of the
        folder the URL sits in, a selected folder brings every URL below it.
        """
        records: List[Bookmark] = []
        seen: Set[str] = set()

        def add(url: ImportURLItem, folder: ImportFolderItem):
            if url.id in seen:
                return
            seen.add(url.id)
            records.append(Bookmark(name=url.name, url=url.url, group=folder.name))

        # Walk in tree order so the import is independent of selection order
        for item_id, item in self.items_by_id.items():
            if item_id not in self.selected_ids:
                continue
            if isinstance(item, ImportURLItem):
                add(item, self.items_by_id[self.parents[item_id]])
            else:
                for parent, child in item.walk():
                    if isinstance(child, ImportURLItem):
                        add(child, parent)
        return records

    def import_selected(self) -> Tuple[List[Bookmark], List[NotUniqueError]]:
        """Import the selection into the registry and queue a summary for the info popup"""
        records = self.selected_records()
        if not records:
            self.notify("Nothing selected. Press 'Space' to select bookmarks or folders to import.")
            return [], []

        imported, failures = self.manager.import_records(records)
        self.notify(self._summary(imported, failures))

        self.selected_ids.clear()
        for item in self.table.items:
            item.set_selected(False)
        return imported, failures

    @staticmethod
    def _summary(imported: List[Bookmark], failures: List[NotUniqueError]) -> str:
        lines = [f"Imported {len(imported)} bookmarks."]
        if failures:
            lines.append(f"Skipped {len(failures)} bookmarks:")
            lines.extend(f"  {e}" for e in failures[:MAX_LISTED_FAILURES])
            if len(failures) > MAX_LISTED_FAILURES:
                lines.append(f"  ... and {len(failures) - MAX_LISTED_FAILURES} more")
        return "\n".join(lines)

    def _table_for(self, folder: ImportFolderItem) -> StatefulTable[ImportTableItem]:
        return StatefulTable.with_items(
            [ImportTableItem(child, child.id in self.selected_ids) for child in folder.children])
