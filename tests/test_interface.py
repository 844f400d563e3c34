"""
End to end tests for the bookmarks interactive session, driven with key events
"""

from unittest.mock import MagicMock, patch

import pytest

from models.errors import BrowserOpenError
from ui.bookmarks_table import BookmarksTable
from ui.event import Input, QUIT
from ui.frame import Frame
from ui.input_mode import COMMAND, DELETE, EDIT, INFO_POPUP, NORMAL, SEARCH, SHOW_HELP
from ui.interface import BaseInterface, Interface
from ui.keys import BACKSPACE, DOWN, ENTER, ESC, LEFT, TAB, UP, ctrl, to_keys
from ui.modules import Module


def press(interface, *keys):
    """Send keys one by one, returns whether the last one asked to quit"""
    quit = False
    for key in keys:
        quit = interface.handle_input(Input(key))
    return quit


def type_command(interface, command):
    press(interface, ":", *to_keys(command), ENTER)


def visible_names(interface):
    return [item.url.name for item in interface.table.table.visible]


def drawn(interface):
    frame = Frame()
    interface.draw(frame)
    return frame


@pytest.fixture
def interface(events, seeded_manager):
    return Interface(BookmarksTable(events, seeded_manager))


class TestModes:
    """Test cases for input mode transitions"""

    def test_initial_mode(self, interface):
        assert interface.mode == NORMAL

    @pytest.mark.parametrize("keys,expected", [
        ([":"], COMMAND),
        ([":", ESC], NORMAL),
        (["/"], SEARCH),
        ([ctrl("f")], SEARCH),
        (["/", ENTER], NORMAL),
        (["h"], SHOW_HELP),
        (["h", "q"], NORMAL),
        (["h", "h"], NORMAL),
        (["d"], NORMAL),
        ([DOWN, "d"], DELETE),
        ([DOWN, "d", "q"], NORMAL),
        (["e"], NORMAL),
        ([DOWN, "e"], EDIT),
        ([DOWN, "e", ESC], NORMAL),
        (["x"], NORMAL),
    ])
    def test_switch_modes(self, interface, keys, expected):
        press(interface, *keys)
        assert interface.mode == expected

    def test_mode_keys_go_to_owning_module(self, interface):
        # 'q' is typed into the search box instead of quitting
        assert not press(interface, "/", "q")
        assert interface.mode == SEARCH
        assert interface.modules[0].phrase == "q"

    def test_first_registered_module_wins(self):
        def claiming(mode):
            module = Module()
            module.modes = (mode,)
            module.try_activate = MagicMock(return_value=mode)
            return module

        first, second = claiming(SEARCH), claiming(COMMAND)
        interface = BaseInterface(MagicMock(), [first, second])
        press(interface, "x")
        assert interface.mode == SEARCH
        first.try_activate.assert_called_once_with("x", interface.table)
        second.try_activate.assert_not_called()

    def test_quit(self, interface):
        assert press(interface, "q")

    def test_quit_signal_in_any_mode(self, interface):
        press(interface, "/")
        assert interface.handle_input(QUIT)


class TestSelection:
    """Test cases for Normal mode navigation"""

    @pytest.mark.parametrize("keys,expected", [
        ([DOWN] * 7 + [UP] * 2, 4),
        ([UP], 0),
        ([DOWN, DOWN, LEFT], None),
        ([DOWN, DOWN, "/"], None),
        ([DOWN, DOWN, "/", UP], None),
        ([DOWN, DOWN, "/", DOWN], None),
        ([DOWN, DOWN, "/", ESC], None),
    ])
    def test_selection(self, interface, keys, expected):
        press(interface, *keys)
        assert interface.table.table.selected == expected

    def test_toggle_ids(self, interface):
        assert len(interface.table.columns()) == 4
        press(interface, "i")
        assert interface.table.columns() == ["Id", "Name", "URL", "Group", "Tags"]
        item = interface.table.table.visible[0]
        assert drawn(interface).table.rows[0] == [item.id, "one", "one", "one", "tag"]
        press(interface, "i")
        assert len(drawn(interface).table.header) == 4


class TestSearch:
    """Test cases for live search"""

    def test_filter_on_input(self, interface):
        press(interface, "/", "t", "a", "g")
        assert visible_names(interface) == ["one", "four"]

    def test_backspace_widens(self, interface):
        press(interface, "/", "t", "a", "g", BACKSPACE, BACKSPACE)
        assert visible_names(interface) == ["one", "two", "three", "four"]

    def test_search_preserved_outside_mode(self, interface):
        press(interface, "/", "t", "a", "g", ESC)
        assert interface.mode == NORMAL
        assert len(interface.table.table.visible) == 2
        box = drawn(interface).inputs[0]
        assert box.text == "tag"
        assert not box.active

        press(interface, "/", BACKSPACE, BACKSPACE, BACKSPACE)
        assert len(interface.table.table.visible) == 5
        press(interface, ESC)
        assert drawn(interface).inputs == []

    def test_navigation_within_results(self, interface):
        press(interface, "/", *to_keys("tag"), ENTER, DOWN, DOWN)
        assert interface.table.table.selected_item().url.name == "four"


class TestDelete:
    """Test cases for delete confirmation"""

    def test_delete_selected(self, interface, seeded_manager):
        press(interface, DOWN, "d")
        popup = drawn(interface).popups[0]
        assert popup.lines[0] == "Delete 'one' from 'one' group?"

        press(interface, ENTER)
        assert interface.mode == NORMAL
        assert visible_names(interface) == ["two", "three", "four", "five"]
        assert len(seeded_manager.list_urls()) == 4
        assert interface.table.table.selected == 0

    def test_abort(self, interface, seeded_manager):
        press(interface, DOWN, "d", ESC)
        assert len(seeded_manager.list_urls()) == 5
        assert len(interface.table.table.visible) == 5

    def test_delete_last_fixes_selection(self, interface):
        press(interface, UP, UP, "d", ENTER)
        assert interface.table.table.selected == 3

    def test_record_gone_from_storage(self, interface, seeded_manager):
        press(interface, DOWN)
        seeded_manager.delete(interface.table.table.selected_item().id)
        press(interface, "d")
        assert interface.mode == NORMAL


class TestCommands:
    """Test cases for commands executed on the selected bookmark"""

    def selected(self, interface, manager):
        return manager.get_url(interface.table.table.selected_item().id)

    def test_tag(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, "tag abcd")
        assert interface.mode == NORMAL
        assert self.selected(interface, seeded_manager).tags == {"tag", "abcd"}
        assert drawn(interface).table.rows[0][3] == "abcd, tag"

    def test_untag(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, "t- tag")
        assert self.selected(interface, seeded_manager).tags == set()

    def test_change_group(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, "chg puorg")
        record = self.selected(interface, seeded_manager)
        assert record.group == "puorg"
        assert drawn(interface).table.rows[0] == ["one", "one", "puorg", "tag"]

    def test_change_name(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, "chn new-name-123")
        assert self.selected(interface, seeded_manager).name == "new-name-123"

    def test_change_name_quoted(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, 'chn "new name"')
        assert self.selected(interface, seeded_manager).name == "new name"

    def test_change_url(self, interface, seeded_manager):
        press(interface, DOWN)
        type_command(interface, "chu https://new-url.com")
        assert self.selected(interface, seeded_manager).url == "https://new-url.com"

    def test_no_selection(self, interface):
        type_command(interface, "tag abcd")
        assert interface.mode == COMMAND
        box = drawn(interface).inputs[0]
        assert box.info == "error: item not selected"
        assert box.error
        assert box.text == ":tag abcd"

        press(interface, ESC)
        assert interface.mode == NORMAL
        assert drawn(interface).inputs == []

    def test_invalid_command(self, interface):
        press(interface, DOWN)
        type_command(interface, "fly away")
        assert interface.mode == COMMAND

    def test_missing_argument(self, interface):
        press(interface, DOWN)
        type_command(interface, "chn")
        assert interface.mode == COMMAND

    def test_name_collision(self, interface):
        press(interface, DOWN)
        type_command(interface, "chg two")
        assert interface.mode == NORMAL
        press(interface, DOWN)
        type_command(interface, "chn one")
        assert interface.mode == COMMAND
        assert "already exists" in drawn(interface).inputs[0].info

    def test_enter_on_empty_input(self, interface):
        press(interface, ":", ENTER)
        assert interface.mode == COMMAND

    def test_sort(self, interface):
        type_command(interface, "sort name desc")
        assert visible_names(interface) == ["two", "three", "one", "four", "five"]
        type_command(interface, "sort")
        assert visible_names(interface) == ["one", "two", "three", "four", "five"]

    def test_invalid_sort_column(self, interface):
        type_command(interface, "sort tags")
        assert interface.mode == COMMAND

    def test_sort_keeps_search(self, interface):
        press(interface, "/", *to_keys("tag"), ESC)
        type_command(interface, "sort name")
        assert visible_names(interface) == ["four", "one"]

    def test_quit_command(self, interface, events):
        type_command(interface, "quit")
        assert interface.handle_input(events.next(timeout=1))


class TestEdit:
    """Test cases for the edit modal"""

    def test_edit_name(self, interface, seeded_manager):
        press(interface, DOWN, "e", BACKSPACE, BACKSPACE, BACKSPACE, *to_keys("uno"), ENTER)
        assert interface.mode == NORMAL
        assert visible_names(interface)[0] == "uno"
        assert [r.name for r in seeded_manager.list_urls()][0] == "uno"

    def test_edit_fields(self, interface):
        press(interface, DOWN, "e", TAB, "x")
        fields = drawn(interface).popups[0].fields
        assert [f.title for f in fields] == ["Name", "URL", "Group"]
        assert [f.text for f in fields] == ["one", "onex", "one"]
        assert fields[1].active

    def test_discard(self, interface, seeded_manager):
        press(interface, DOWN, "e", "x", ESC)
        assert seeded_manager.list_urls()[0].name == "one"

    def test_collision_keeps_modal_open(self, interface, seeded_manager):
        press(interface, DOWN, "e", BACKSPACE, BACKSPACE, BACKSPACE, *to_keys("two"),
              TAB, TAB, BACKSPACE, BACKSPACE, BACKSPACE, *to_keys("two"), ENTER)
        assert interface.mode == EDIT
        popup = drawn(interface).popups[0]
        assert popup.lines == ["error: URL with name 'two' already exists in 'two' group"]
        assert seeded_manager.list_urls()[0].name == "one"


class TestOpenAndInfo:
    """Test cases for opening URLs and the info popup"""

    def test_open_selected(self, interface):
        with patch("webbrowser.open", return_value=True) as mock_open:
            press(interface, DOWN, DOWN, ENTER)
        mock_open.assert_called_once_with("two")

    def test_open_without_selection(self, interface):
        with patch("webbrowser.open") as mock_open:
            press(interface, ENTER)
        mock_open.assert_not_called()

    def test_open_failure_is_fatal(self, interface):
        with patch("webbrowser.open", return_value=False):
            with pytest.raises(BrowserOpenError):
                press(interface, DOWN, ENTER)

    def test_info_popup(self, interface):
        interface.table.notify("first line\nsecond line")
        press(interface, LEFT)
        assert interface.mode == INFO_POPUP
        assert drawn(interface).popups[0].lines == ["first line", "second line"]
        press(interface, ESC)
        assert interface.mode == NORMAL
        assert drawn(interface).popups == []
