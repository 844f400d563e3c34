from typing import Optional

from ui.frame import Frame, Popup
from ui.input_mode import INFO_POPUP, InputMode, NORMAL
from ui.keys import ENTER, ESC
from . import Module

class InfoPopup(Module):
    """
    Shows messages queued by the table. There is no key opening it, the
    interface calls show() when returning to Normal mode with a message pending.
    """

    modes = (INFO_POPUP,)

    def __init__(self):
        self.message = ""

    def show(self, table) -> Optional[InputMode]:
        message = table.take_message()
        if message is None:
            return None
        self.message = message
        return INFO_POPUP

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key in (ESC, ENTER, "q"):
            self.message = ""
            return NORMAL
        return None

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode == INFO_POPUP:
            frame.popups.append(Popup("Info - press ESC to close", lines=self.message.splitlines()))
