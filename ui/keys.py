import curses
import curses.ascii
from typing import List, Optional, Union

# Keys are plain strings: a printable character is itself, special keys are
# spelled out in angle brackets.
UP = "<up>"
DOWN = "<down>"
LEFT = "<left>"
RIGHT = "<right>"
ESC = "<esc>"
BACKSPACE = "<backspace>"
ENTER = "\n"
TAB = "\t"
SPACE = " "
# Terminal size changed, nothing handles it but it triggers a redraw
RESIZE = "<resize>"

def ctrl(char: str) -> str:
    """Key produced by holding Ctrl with the given letter, e.g. ctrl('f') -> '<ctrl-f>'"""
    return f"<ctrl-{char.lower()}>"

def is_printable(key: str) -> bool:
    """Single printable character that can be typed into an input box"""
    return len(key) == 1 and key.isprintable()

def to_keys(text: str) -> List[str]:
    """Keys typing the given text"""
    return list(text)

_SPECIAL_CODES = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_BACKSPACE: BACKSPACE,
    curses.KEY_ENTER: ENTER,
}

def from_curses(code: Union[int, str]) -> Optional[str]:
    """
    Translate a value returned by curses get_wch into a key.
    Returns None for keys the application does not handle (resize, function keys...).
    """
    if isinstance(code, int):
        return _SPECIAL_CODES.get(code)

    value = ord(code)
    if code in ("\n", "\r"):
        return ENTER
    if code == "\t":
        return TAB
    if value == curses.ascii.ESC:
        return ESC
    if value in (curses.ascii.BS, curses.ascii.DEL):
        return BACKSPACE
    if 1 <= value <= 26:
        return ctrl(chr(value + ord('a') - 1))
    if code.isprintable():
        return code
    return None
