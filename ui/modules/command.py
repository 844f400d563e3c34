from typing import Optional

from models.errors import InputError
from ui.frame import Frame, InputBox
from ui.input_mode import COMMAND, InputMode, NORMAL
from ui.keys import BACKSPACE, ENTER, ESC, is_printable
from utils.logger import get_logger
from utils.utils import split_command
from . import Module

logger = get_logger("command")

DEFAULT_INFO_MESSAGE = "Press 'Enter' to execute command on selected Bookmark. Press 'Esc' to discard."

class Command(Module):
    """Vim-like command line executing actions on the selected bookmark"""

    modes = (COMMAND,)

    def __init__(self):
        self.command_input = ""
        self.info_display = DEFAULT_INFO_MESSAGE
        self.error = False

    @property
    def command_display(self) -> str:
        return f":{self.command_input}"

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        if key != ":":
            return None
        return COMMAND

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key == ESC:
            self.reset_input()
            return NORMAL
        if key == ENTER:
            if not self.command_input:
                return None
            action, args = split_command(self.command_input)
            try:
                table.exec(action, args)
            except InputError as e:
                logger.debug(f"Command '{self.command_input}' failed: {e}")
                self.info_display = f"error: {e}"
                self.error = True
                return None
            self.reset_input()
            return NORMAL
        if key == BACKSPACE:
            self.command_input = self.command_input[:-1]
        elif is_printable(key):
            self.command_input += key
        return None

    def reset_input(self) -> None:
        self.command_input = ""
        self.info_display = DEFAULT_INFO_MESSAGE
        self.error = False

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode == COMMAND or self.command_input:
            frame.inputs.append(InputBox(
                "Command", self.command_display,
                info=self.info_display, error=self.error, active=mode == COMMAND,
            ))
