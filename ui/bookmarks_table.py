import webbrowser
from typing import Callable, List, Optional, Tuple

from models.bookmark import Bookmark
from models.bookmark_manager import BookmarkManager
from models.errors import BrowserOpenError, InputError
from models.record_filter import Filter, FilterSet
from models.sort import SortBy, SortConfig, SortOrder
from ui.event import Events, QUIT
from ui.table import InteractiveTable, StatefulTable
from ui.url_table_item import URLItem
from utils.logger import get_logger

logger = get_logger("table")

DEFAULT_COLUMNS = ["Name", "URL", "Group", "Tags"]
ID_COLUMN = "Id"

class BookmarksTable(InteractiveTable):
    """Bookmarks of the registry as shown in the interactive session"""

    title = "URLs - Press 'h' to show help"

    def __init__(self, events: Events, manager: BookmarkManager,
                 opener: Optional[Callable[[str], bool]] = None):
        super().__init__(events)
        self.manager = manager
        self.opener = opener
        self.filter: Optional[Filter] = None
        self.sort_config: Optional[SortConfig] = None
        self.show_ids = False
        self.table: StatefulTable[URLItem] = StatefulTable.with_items(
            URLItem.from_list(manager.list_urls()))

    def columns(self) -> List[str]:
        if self.show_ids:
            return [ID_COLUMN] + DEFAULT_COLUMNS
        return list(DEFAULT_COLUMNS)

    def toggle_ids(self) -> None:
        self.show_ids = not self.show_ids
        for item in self.table.items:
            item.set_show_id(self.show_ids)

    def search(self, phrase: str) -> None:
        """Show only the bookmarks matching the phrase, an empty phrase shows all"""
        self.filter = FilterSet.combined(phrase) if phrase else None
        self._apply_filter()

    def open(self) -> None:
        """Open the selected URL in the web browser, no-op without selection"""
        item = self.table.selected_item()
        if item is None:
            return

        url = item.url.url
        try:
            opened = (self.opener or webbrowser.open)(url)
        except webbrowser.Error as e:
            raise BrowserOpenError(f"failed to open URL in the browser: {e}") from e
        if not opened:
            raise BrowserOpenError(f"failed to open URL in the browser: {url}")
        logger.info(f"Opened {url}", context=item.id)

    def get_selected(self) -> Optional[Bookmark]:
        """Selected bookmark as currently stored, None if nothing is selected or it is gone"""
        item = self.table.selected_item()
        if item is None:
            return None
        return self.manager.get_url(item.id)

    def delete(self, record: Bookmark) -> bool:
        deleted = self.manager.delete(record.id)
        self.table.items = [item for item in self.table.items if item.id != record.id]
        self.table.refresh_visible()
        self.table.fix_selection()
        return deleted

    def exec(self, action: str, args: List[str]) -> None:
        """
        Execute a command on the selected bookmark.
        Raises InputError for unknown commands, missing arguments or no selection.
        """
        logger.debug(f"Executing '{action}' with {args}")
        if action in ("q", "quit"):
            self.events.send(QUIT)
            return
        if action == "sort":
            self._sort(args)
            return

        if action in ("tag", "t"):
            self._change_selected(args, "tag", lambda rid, tag: self.manager.tag(rid, tag), all_args=True)
        elif action in ("untag", "t-"):
            self._change_selected(args, "tag", lambda rid, tag: self.manager.untag(rid, tag), all_args=True)
        elif action in ("chgroup", "chg"):
            self._change_selected(args, "group", self.manager.change_group)
        elif action in ("chname", "chn"):
            self._change_selected(args, "name", self.manager.change_name)
        elif action in ("churl", "chu"):
            self._change_selected(args, "URL", self.manager.change_url)
        else:
            raise InputError(f"invalid command: '{action}'")

    def editable_fields(self) -> Optional[List[Tuple[str, str]]]:
        record = self.get_selected()
        if record is None:
            return None
        return [("Name", record.name), ("URL", record.url), ("Group", record.group)]

    def commit_edit(self, values: List[str]) -> None:
        name, url, group = values
        if not name.strip():
            raise InputError("name cannot be empty")
        record_id = self._selected_id()
        updated = self.manager.update(record_id, name, url, group)
        if updated is None:
            raise InputError("item no longer exists")
        self._patch_item(record_id, updated)

    def _selected_id(self) -> str:
        item = self.table.selected_item()
        if item is None:
            raise InputError("item not selected")
        return item.id

    def _change_selected(self, args: List[str], argument: str,
                         change: Callable[[str, str], Optional[Bookmark]], all_args: bool = False) -> None:
        if not args:
            raise InputError(f"missing argument: {argument}")
        selected_id = record_id = self._selected_id()

        updated = None
        for arg in args if all_args else args[:1]:
            updated = change(record_id, arg)
            if updated is None:
                raise InputError("item no longer exists")
            record_id = updated.id
        self._patch_item(selected_id, updated)

    def _patch_item(self, old_id: str, record: Bookmark) -> None:
        """Replace the item in place, the id changes when name or group did"""
        for item in self.table.items:
            if item.id == old_id:
                item.update(record)
                if self.filter is not None:
                    item.filter(self.filter)
                break
        self.table.refresh_visible()
        self.table.fix_selection()

    def _sort(self, args: List[str]) -> None:
        if not args:
            self.sort_config = None
        else:
            order = SortOrder.parse(args[1]) if len(args) > 1 else SortOrder.ASCENDING
            self.sort_config = SortConfig(SortBy.parse(args[0]), order)
        self._reload()

    def _reload(self) -> None:
        """Fetch all bookmarks again, keeping the filter and the selection index"""
        items = URLItem.from_list(self.manager.list_urls(sort=self.sort_config), self.show_ids)
        self.table.items = items
        self._apply_filter()

    def _apply_filter(self) -> None:
        for item in self.table.items:
            if self.filter is None:
                item.visible = True
            else:
                item.filter(self.filter)
        self.table.refresh_visible()
        self.table.fix_selection()
