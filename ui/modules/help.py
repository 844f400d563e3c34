from typing import Optional

from ui.frame import Frame, Popup
from ui.input_mode import InputMode, NORMAL, SHOW_HELP
from ui.keys import ENTER, ESC
from . import Module

BOOKMARKS_HELP = """\
Actions:
    Up, Down          - move selection
    Left              - unselect
    Enter             - open selected URL in the browser
    / or CTRL + f     - search URLs
    :                 - enter command mode
    d                 - delete selected URL
    e                 - edit selected URL
    i                 - show or hide ids
    h                 - show help
    q                 - quit

Commands (executed on the selected URL):
    tag, t <TAG>...                     - add tags
    untag, t- <TAG>...                  - remove tags
    chgroup, chg <GROUP>                - change group
    chname, chn <NAME>                  - change name
    churl, chu <URL>                    - change URL
    sort [name|url|group] [asc|desc]    - sort URLs, no column restores
                                          the original order
    quit, q                             - quit

Arguments with spaces can be put in double quotes: chn "My bookmark"
"""

IMPORT_HELP = """\
Actions:
    Up, Down          - move selection
    Left              - unselect
    Enter             - open selected folder
    Backspace         - go back to the parent folder
    Space             - select or unselect URL or folder for import
    e                 - edit selected URL before importing it
    s                 - import selected URLs and folders
    h                 - show help
    q                 - quit

Imported URLs are assigned to a group named after their folder.
"""

class Help(Module):
    """Help popup, with a different text for each view"""

    modes = (SHOW_HELP,)

    def __init__(self, help_text: str = BOOKMARKS_HELP):
        self.help_lines = help_text.splitlines()

    def try_activate(self, key: str, table) -> Optional[InputMode]:
        if key != "h":
            return None
        return SHOW_HELP

    def handle_input(self, key: str, table) -> Optional[InputMode]:
        if key in (ESC, ENTER, "h", "q"):
            return NORMAL
        return None

    def draw(self, mode: InputMode, frame: Frame) -> None:
        if mode == SHOW_HELP:
            frame.popups.append(Popup("Help - press ESC to close", lines=list(self.help_lines)))
