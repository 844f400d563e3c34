import curses
import os
from typing import Callable

from models.bookmark import ImportFolderItem
from models.bookmark_manager import BookmarkManager
from ui.app_style import AppStyle
from ui.event import Events
from ui.import_interface import ImportInterface
from ui.interface import BaseInterface, Interface
from ui.terminal import READ_TIMEOUT, Terminal
from utils.logger import get_logger

logger = get_logger("session")

# Escape is also the prefix of terminal key sequences, do not wait long for the rest
ESC_DELAY_MS = "25"

def enter_interactive_mode(manager: BookmarkManager, style: AppStyle) -> None:
    """Browse, search and edit the bookmarks in the terminal"""
    _run(lambda events: Interface.new(events, manager), style)

def enter_interactive_import(manager: BookmarkManager, root: ImportFolderItem, style: AppStyle) -> None:
    """Pick browser bookmarks to import in the terminal"""
    _run(lambda events: ImportInterface.new(events, manager, root), style)

def run_loop(interface: BaseInterface, events: Events, render: Callable[[BaseInterface], None]) -> None:
    """
    Draw, then handle one event and redraw until the interface asks to quit.
    Errors raised by the interface end the session.
    """
    render(interface)
    while True:
        event = events.next()
        if interface.handle_input(event):
            logger.info("Session finished")
            return
        render(interface)

def _run(build: Callable[[Events], BaseInterface], style: AppStyle) -> None:
    os.environ.setdefault("ESCDELAY", ESC_DELAY_MS)
    # The terminal is restored by curses.wrapper, also when the session fails
    curses.wrapper(_session, build, style)

def _session(stdscr, build: Callable[[Events], BaseInterface], style: AppStyle) -> None:
    terminal = Terminal(stdscr, style)
    events = Events()
    interface = build(events)
    logger.info(f"Session started with {type(interface).__name__}")

    events.start(terminal.read_key)
    try:
        run_loop(interface, events, terminal.draw)
    finally:
        # Wait out the pending key read before curses restores the terminal
        events.stop(timeout=2 * READ_TIMEOUT / 1000)
