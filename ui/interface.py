from typing import Dict, List, Optional

from models.bookmark_manager import BookmarkManager
from ui.bookmarks_table import BookmarksTable
from ui.event import Event, Events, Input, Signal, SignalType
from ui.frame import Frame, TableView
from ui.input_mode import InputMode, Mode, NORMAL, SuppressedAction
from ui.keys import DOWN, ENTER, LEFT, UP
from ui.modules import Module
from ui.modules.command import Command
from ui.modules.delete import Delete
from ui.modules.edit_modal import EditModal
from ui.modules.help import BOOKMARKS_HELP, Help
from ui.modules.info_popup import InfoPopup
from ui.modules.search import Search
from utils.logger import get_logger

logger = get_logger("interface")

__all__ = ["BaseInterface", "Interface", "InputMode", "Mode", "SuppressedAction"]

class BaseInterface:
    """
    Input mode state machine of an interactive session.

    Normal mode keys go to handle_normal_key; keys it does not handle are
    offered to the modules in registration order. In any other mode the key
    goes to the module owning that mode only.
    """

    def __init__(self, table, modules: List[Module], info_popup: Optional[InfoPopup] = None):
        self.table = table
        self.mode: InputMode = NORMAL
        self.modules = modules
        self.info_popup = info_popup
        self._mode_modules: Dict[InputMode, Module] = {}
        for module in modules:
            for mode in module.modes:
                self._mode_modules[mode] = module

    def handle_input(self, event: Event) -> bool:
        """Handle a single event, returns True when the session should quit"""
        if isinstance(event, Signal):
            return event.signal == SignalType.QUIT
        if not isinstance(event, Input):
            return False

        key = event.key
        if self.mode == NORMAL:
            if self.handle_normal_key(key):
                return True
        else:
            module = self._mode_modules.get(self.mode)
            if module is None:
                self._set_mode(NORMAL)
            else:
                self._set_mode(module.handle_input(key, self.table))

        if self.mode == NORMAL and self.info_popup is not None and self.table.has_message():
            self._set_mode(self.info_popup.show(self.table))
        return False

    def handle_normal_key(self, key: str) -> bool:
        """Built-in Normal mode keys, returns True to quit"""
        if key == "q":
            return True
        if key == UP:
            self.table.previous()
        elif key == DOWN:
            self.table.next()
        elif key == LEFT:
            self.table.unselect()
        else:
            self.offer_to_modules(key)
        return False

    def offer_to_modules(self, key: str) -> None:
        for module in self.modules:
            mode = module.try_activate(key, self.table)
            if mode is not None:
                self._set_mode(mode)
                return

    def draw(self, frame: Frame) -> None:
        frame.table = TableView(
            title=self.table.title,
            header=self.table.columns(),
            rows=self.table.table.rows(),
            selected=self.table.table.selected,
        )
        for module in self.modules:
            module.draw(self.mode, frame)

    def _set_mode(self, mode: Optional[InputMode]) -> None:
        if mode is None or mode == self.mode:
            return
        logger.debug(f"Input mode {self.mode} -> {mode}")
        self.mode = mode

class Interface(BaseInterface):
    """Interactive session over the bookmarks registry"""

    def __init__(self, table: BookmarksTable):
        info_popup = InfoPopup()
        modules: List[Module] = [
            Search(),
            Help(BOOKMARKS_HELP),
            Delete(),
            Command(),
            EditModal(),
            info_popup,
        ]
        super().__init__(table, modules, info_popup)

    @classmethod
    def new(cls, events: Events, manager: BookmarkManager) -> 'Interface':
        return cls(BookmarksTable(events, manager))

    def handle_normal_key(self, key: str) -> bool:
        if key == ENTER:
            self.table.open()
        elif key == "i":
            self.table.toggle_ids()
        else:
            return super().handle_normal_key(key)
        return False
