from dataclasses import dataclass
from enum import Enum
from typing import Optional

class Mode(Enum):
    NORMAL = "normal"
    SEARCH = "search"
    COMMAND = "command"
    SUPPRESSED = "suppressed"

class SuppressedAction(Enum):
    """What suppresses normal input, usually a popup owned by a module"""
    SHOW_HELP = "show_help"
    DELETE = "delete"
    EDIT = "edit"
    INFO_POPUP = "info_popup"

@dataclass(frozen=True)
class InputMode:
    mode: Mode
    action: Optional[SuppressedAction] = None

    @classmethod
    def suppressed(cls, action: SuppressedAction) -> 'InputMode':
        return cls(Mode.SUPPRESSED, action)

    def __str__(self) -> str:
        if self.action is not None:
            return f"{self.mode.value}({self.action.value})"
        return self.mode.value

NORMAL = InputMode(Mode.NORMAL)
SEARCH = InputMode(Mode.SEARCH)
COMMAND = InputMode(Mode.COMMAND)
SHOW_HELP = InputMode.suppressed(SuppressedAction.SHOW_HELP)
DELETE = InputMode.suppressed(SuppressedAction.DELETE)
EDIT = InputMode.suppressed(SuppressedAction.EDIT)
INFO_POPUP = InputMode.suppressed(SuppressedAction.INFO_POPUP)
