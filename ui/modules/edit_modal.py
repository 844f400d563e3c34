from typing import List, Optional

from models.errors import InputError
from ui.frame import Frame, InputBox, Popup
from ui.input_mode import EDIT, InputMode, NORMAL
from ui.keys import BACKSPACE, ENTER, ESC, TAB, is_printable
from utils.logger import get_logger
from . import Module

logger = get_logger("edit")

EDIT_TITLE = "Edit - Tab to switch field, Enter to save, Esc to discard"

class EditModal(Module):
    """
    Modal editing the fields the table exposes for the selected item.
    Changes are only written when Enter commits them.
    """

    modes = (EDIT,)

    def __init__(self):
        self.labels: List[str] = []
        self.edits: List[str] = []
        self.active_edit = 0
        self.error = ""

    @property
    def editing(self) -> bool:
        return bool(self.edits)

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        if key != "e":
            return None
        fields = table.editable_fields()
        if not fields:
            return None
        self.labels = [label for label, _ in fields]
        self.edits = [value for _, value in fields]
        self.active_edit = 0
        self.error = ""
        logger.debug(f"Editing {dict(fields)}")
        return EDIT

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key == ESC:
            self.reset()
            return NORMAL
        if key == ENTER:
            try:
                table.commit_edit(list(self.edits))
            except InputError as e:
                self.error = str(e)
                return None
            self.reset()
            return NORMAL
        if key == TAB:
            self.active_edit = (self.active_edit + 1) % len(self.edits)
        elif key == BACKSPACE:
            self.edits[self.active_edit] = self.edits[self.active_edit][:-1]
        elif is_printable(key):
            self.edits[self.active_edit] += key
        return None

    def reset(self) -> None:
        self.labels = []
        self.edits = []
        self.active_edit = 0
        self.error = ""

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode != EDIT or not self.editing:
            return
        fields = [
            InputBox(label, value, active=i == self.active_edit)
            for i, (label, value) in enumerate(zip(self.labels, self.edits))
        ]
        lines = [f"error: {self.error}"] if self.error else []
        frame.popups.append(Popup(EDIT_TITLE, lines=lines, fields=fields,
                                  style="error" if self.error else "normal"))
