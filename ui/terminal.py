import curses
from typing import Dict, List, Optional

from ui.app_style import AppStyle
from ui.frame import Frame, InputBox, Popup, TableView
from ui.keys import RESIZE, from_curses
from utils.logger import get_logger

logger = get_logger("terminal")

HIGHLIGHT_SYMBOL = "> "
# Input box height: top border with title, text line, bottom border
INPUT_HEIGHT = 3
MIN_COLUMN_WIDTH = 6
# Milliseconds a key read waits before giving the reader a chance to stop
READ_TIMEOUT = 200

class Terminal:
    """Paints frames on a curses screen and reads keys from it"""

    def __init__(self, stdscr, style: AppStyle):
        self.stdscr = stdscr
        self.style = style
        self._attrs: Dict[str, int] = {}
        self._offset = 0

        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self._init_colors()

        # Keys are read on a window of their own, so the reader thread never
        # touches the screen being painted
        self._input = curses.newwin(1, 1, 0, 0)
        self._input.keypad(True)
        self._input.timeout(READ_TIMEOUT)

    def _init_colors(self) -> None:
        pairs = self.style.get_color_pairs()
        if not curses.has_colors():
            self._attrs = {role: curses.A_NORMAL for role in pairs}
            self._attrs["selected"] = curses.A_REVERSE
            return

        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        for i, (role, (fg, bg)) in enumerate(pairs.items(), start=1):
            try:
                curses.init_pair(i, self._color(fg), self._color(bg))
                self._attrs[role] = curses.color_pair(i)
            except curses.error:
                self._attrs[role] = curses.A_NORMAL
        self._attrs["header"] |= curses.A_BOLD
        self._attrs["title"] |= curses.A_BOLD
        self._attrs["selected"] |= curses.A_BOLD

    @staticmethod
    def _color(name: str) -> int:
        if name == "default":
            return -1
        return getattr(curses, f"COLOR_{name.upper()}")

    def read_key(self) -> Optional[str]:
        """Blocking key read, None on timeout or for keys without meaning"""
        try:
            code = self._input.get_wch()
        except curses.error:
            return None
        if code == curses.KEY_RESIZE:
            return RESIZE
        return from_curses(code)

    def draw(self, interface) -> None:
        height, width = self.stdscr.getmaxyx()
        frame = Frame(width=width, height=height)
        interface.draw(frame)
        self.paint(frame)

    def paint(self, frame: Frame) -> None:
        self.stdscr.erase()
        inputs_height = INPUT_HEIGHT * len(frame.inputs) + sum(1 for box in frame.inputs if box.info)
        table_height = max(frame.height - inputs_height, 3)

        if frame.table is not None:
            self._paint_table(frame.table, 0, table_height, frame.width)

        y = table_height
        for box in frame.inputs:
            y = self._paint_input(box, y, 0, frame.width)

        for popup in frame.popups:
            self._paint_popup(popup, frame.width, frame.height)

        self.stdscr.noutrefresh()
        curses.doupdate()

    def _paint_table(self, table: TableView, top: int, height: int, width: int) -> None:
        self._box(top, 0, height, width, self._attrs["border"], table.title)

        inner_width = width - 2 - len(HIGHLIGHT_SYMBOL)
        widths = self._column_widths(table.header, table.rows, inner_width)
        x = 1 + len(HIGHLIGHT_SYMBOL)
        self._put(top + 1, x, self._format_row(table.header, widths), self._attrs["header"])

        rows_height = height - 3
        if rows_height <= 0:
            return
        if table.selected is None:
            self._offset = min(self._offset, max(len(table.rows) - rows_height, 0))
        elif table.selected < self._offset:
            self._offset = table.selected
        elif table.selected >= self._offset + rows_height:
            self._offset = table.selected - rows_height + 1

        visible_rows = table.rows[self._offset:self._offset + rows_height]
        for i, row in enumerate(visible_rows):
            index = self._offset + i
            y = top + 2 + i
            if index == table.selected:
                text = HIGHLIGHT_SYMBOL + self._format_row(row, widths)
                self._put(y, 1, text.ljust(width - 2), self._attrs["selected"])
            else:
                self._put(y, x, self._format_row(row, widths), self._attrs["normal"])

    @staticmethod
    def _column_widths(header: List[str], rows: List[List[str]], available: int) -> List[int]:
        widths = [len(h) for h in header]
        for row in rows:
            for i, cell in enumerate(row[:len(widths)]):
                widths[i] = max(widths[i], len(cell))

        spacing = len(widths) - 1
        # Shrink the widest column until the table fits
        while sum(widths) + spacing > available:
            widest = max(range(len(widths)), key=lambda i: widths[i])
            if widths[widest] <= MIN_COLUMN_WIDTH:
                break
            widths[widest] -= 1
        return widths

    @staticmethod
    def _format_row(cells: List[str], widths: List[int]) -> str:
        parts = []
        for cell, width in zip(cells, widths):
            if len(cell) > width:
                cell = cell[:max(width - 1, 0)] + "~"
            parts.append(cell.ljust(width))
        return " ".join(parts)

    def _paint_input(self, box: InputBox, top: int, left: int, width: int) -> int:
        y = top
        if box.info:
            self._put(y, left + 1, box.info, self._attrs["error" if box.error else "info"])
            y += 1
        self._box(y, left, INPUT_HEIGHT, width, self._attrs["input" if box.active else "border"], box.title)
        self._put(y + 1, left + 1, box.text, self._attrs["normal"])
        if box.active:
            # Block cursor at the end of the text
            self._put(y + 1, left + 1 + len(box.text), " ", curses.A_REVERSE)
        return y + INPUT_HEIGHT

    def _paint_popup(self, popup: Popup, screen_width: int, screen_height: int) -> None:
        content_width = max([len(popup.title) + 2] + [len(line) for line in popup.lines] + [40])
        if popup.fields:
            content_width = max(content_width, 80)
        width = min(content_width + 4, screen_width - 2)
        height = min(len(popup.lines) + INPUT_HEIGHT * len(popup.fields) + 2, screen_height - 2)
        top = max((screen_height - height) // 2, 0)
        left = max((screen_width - width) // 2, 0)

        attr = self._attrs["error" if popup.style == "error" else "border"]
        for y in range(top, top + height):
            self._put(y, left, " " * width, self._attrs["normal"])
        self._box(top, left, height, width, attr, popup.title)

        y = top + 1
        for line in popup.lines:
            self._put(y, left + 2, line[:width - 4], self._attrs["normal"])
            y += 1
        for box in popup.fields:
            self._paint_input(box, y, left + 1, width - 2)
            y += INPUT_HEIGHT

    def _box(self, top: int, left: int, height: int, width: int, attr: int, title: str = "") -> None:
        if height < 2 or width < 2:
            return
        bottom = top + height - 1
        right = left + width - 1
        try:
            self.stdscr.attron(attr)
            self.stdscr.hline(top, left + 1, curses.ACS_HLINE, width - 2)
            self.stdscr.hline(bottom, left + 1, curses.ACS_HLINE, width - 2)
            self.stdscr.vline(top + 1, left, curses.ACS_VLINE, height - 2)
            self.stdscr.vline(top + 1, right, curses.ACS_VLINE, height - 2)
            self.stdscr.addch(top, left, curses.ACS_ULCORNER)
            self.stdscr.addch(top, right, curses.ACS_URCORNER)
            self.stdscr.addch(bottom, left, curses.ACS_LLCORNER)
            # Writing the bottom right cell of the screen moves the cursor off screen
            self.stdscr.insch(bottom, right, curses.ACS_LRCORNER)
        except curses.error:
            pass
        finally:
            self.stdscr.attroff(attr)
        if title:
            self._put(top, left + 2, f" {title} "[:max(width - 4, 0)], self._attrs["title"])

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        height, width = self.stdscr.getmaxyx()
        if not 0 <= y < height or not 0 <= x < width:
            return
        try:
            self.stdscr.addnstr(y, x, text, width - x, attr)
        except curses.error:
            pass
