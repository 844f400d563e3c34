from typing import Optional

from models.bookmark import Bookmark
from ui.frame import Frame, Popup
from ui.input_mode import DELETE, InputMode, NORMAL
from ui.keys import ENTER, ESC
from . import Module

class Delete(Module):
    """Confirmation popup for deleting the selected bookmark"""

    modes = (DELETE,)

    def __init__(self):
        self.record: Optional[Bookmark] = None

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        if key != "d":
            return None
        record = table.get_selected()
        if record is None:
            return NORMAL
        self.record = record
        return DELETE

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key == ENTER:
            if self.record is not None:
                table.delete(self.record)
            self.record = None
            return NORMAL
        if key in (ESC, "q"):
            self.record = None
            return NORMAL
        return None

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode != DELETE:
            return
        if self.record is None:
            raise RuntimeError("delete confirmation drawn without a bookmark to delete")
        frame.popups.append(Popup(
            "Delete URL",
            lines=[
                f"Delete '{self.record.name}' from '{self.record.group}' group?",
                "",
                "Yes (Enter)   ---   No (ESC)",
            ],
            style="error",
        ))
