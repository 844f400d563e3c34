from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

class TableItem:
    """Base class for a table row wrapping a record"""

    def __init__(self):
        self.visible = True

    @property
    def id(self) -> str:
        raise NotImplementedError

    def row(self) -> List[str]:
        raise NotImplementedError

    def clone(self) -> 'TableItem':
        raise NotImplementedError

T = TypeVar('T', bound=TableItem)

class StatefulTable(Generic[T]):
    """
    Ordered items with a derived visible subset and a selection cursor.

    The cursor indexes `visible`, never `items`. Navigation on an empty
    visible list is a no-op.
    """

    def __init__(self, items: Optional[List[T]] = None):
        self.items: List[T] = list(items or [])
        self.visible: List[T] = [item for item in self.items if item.visible]
        self.selected: Optional[int] = None

    @classmethod
    def with_items(cls, items: Sequence[T]) -> 'StatefulTable[T]':
        """Table over copies of the given items, all of them shown"""
        copies = [item.clone() for item in items]
        table = cls(copies)
        table.visible = list(copies)
        return table

    def refresh_visible(self) -> None:
        """Rebuild the visible list from the items' visibility flags, order preserved"""
        self.visible = [item for item in self.items if item.visible]

    def next(self) -> None:
        if not self.visible:
            return
        if self.selected is None or self.selected >= len(self.visible) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        if not self.visible:
            return
        # From no selection the first row is selected, same as next()
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.visible) - 1
        else:
            self.selected -= 1

    def unselect(self) -> None:
        self.selected = None

    def select(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.visible):
            return
        self.selected = index

    def selected_item(self) -> Optional[T]:
        if self.selected is None or self.selected >= len(self.visible):
            return None
        return self.visible[self.selected]

    def fix_selection(self) -> None:
        """Keep the cursor within the visible list after it changed size"""
        if not self.visible:
            self.selected = None
        elif self.selected is not None and self.selected >= len(self.visible):
            self.selected = len(self.visible) - 1

    def rows(self) -> List[List[str]]:
        return [item.row() for item in self.visible]

class InteractiveTable:
    """
    State shared by the tables driven by an interactive session: the table
    itself, the event sender and messages waiting for the info popup.
    """

    title = ""

    def __init__(self, events):
        self.events = events
        self.table: StatefulTable = StatefulTable()
        self._messages: List[str] = []

    def columns(self) -> List[str]:
        raise NotImplementedError

    def next(self) -> None:
        self.table.next()

    def previous(self) -> None:
        self.table.previous()

    def unselect(self) -> None:
        self.table.unselect()

    def notify(self, message: str) -> None:
        """Queue a message for the info popup"""
        self._messages.append(message)

    def has_message(self) -> bool:
        return bool(self._messages)

    def take_message(self) -> Optional[str]:
        if not self._messages:
            return None
        return self._messages.pop(0)

    def editable_fields(self) -> Optional[List[Tuple[str, str]]]:
        """(label, value) pairs the edit modal shows for the selected item, None if not editable"""
        return None

    def commit_edit(self, values: List[str]) -> None:
        raise NotImplementedError
