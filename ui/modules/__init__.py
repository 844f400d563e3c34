"""
Interactive session modules.

A module owns one or more input modes. In Normal mode every key not handled
by the interface is offered to the modules through try_activate, the first
one returning a mode wins. While in a mode it owns, a module receives all
keys through handle_input. Returning None keeps the current mode.
"""

from typing import Optional, Tuple

from ui.frame import Frame
from ui.input_mode import InputMode

class Module:
    """Base class for interactive session modules"""

    modes: Tuple[InputMode, ...] = ()

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        return None

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        return None

    def draw(self, mode: InputMode, frame: Frame) -> None:
        pass
