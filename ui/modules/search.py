from typing import Optional

from ui.frame import Frame, InputBox
from ui.input_mode import InputMode, NORMAL, SEARCH
from ui.keys import BACKSPACE, DOWN, ENTER, ESC, UP, ctrl, is_printable
from . import Module

SEARCH_TITLE = "Press '/' or 'CTRL + f' to search for URLs"

class Search(Module):
    """
    Live filtering of the bookmarks table. The phrase is kept when leaving
    the mode, so the filtered view stays until the phrase is cleared.
    """

    modes = (SEARCH,)

    def __init__(self):
        self.phrase = ""

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        if key not in ("/", ctrl("f")):
            return None
        table.unselect()
        return SEARCH

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key in (ESC, UP, DOWN, ENTER):
            table.unselect()
            return NORMAL
        if key == BACKSPACE:
            self.phrase = self.phrase[:-1]
        elif is_printable(key):
            self.phrase += key
        else:
            return None
        table.search(self.phrase)
        return None

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode == SEARCH or self.phrase:
            frame.inputs.append(InputBox(SEARCH_TITLE, self.phrase, active=mode == SEARCH))
