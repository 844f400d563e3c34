from typing import List

from models.bookmark import ImportFolderItem
from models.bookmark_manager import BookmarkManager
from ui.event import Events
from ui.import_table import ImportsTable
from ui.interface import BaseInterface
from ui.keys import BACKSPACE, ENTER, SPACE
from ui.modules import Module
from ui.modules.edit_modal import EditModal
from ui.modules.help import IMPORT_HELP, Help
from ui.modules.info_popup import InfoPopup

class ImportInterface(BaseInterface):
    """Interactive session choosing browser bookmarks to import"""

    def __init__(self, table: ImportsTable):
        info_popup = InfoPopup()
        modules: List[Module] = [
            Help(IMPORT_HELP),
            EditModal(),
            info_popup,
        ]
        super().__init__(table, modules, info_popup)

    @classmethod
    def new(cls, events: Events, manager: BookmarkManager, root: ImportFolderItem) -> 'ImportInterface':
        return cls(ImportsTable(events, manager, root))

    def handle_normal_key(self, key: str) -> bool:
        if key == ENTER:
            self.table.open()
        elif key == BACKSPACE:
            self.table.back()
        elif key == SPACE:
            self.table.toggle_selected()
        elif key == "s":
            self.table.import_selected()
        else:
            return super().handle_normal_key(key)
        return False
