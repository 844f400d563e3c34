"""
Tests for browser bookmarks parsing and the interactive import
"""

import json

import pytest

from models.bookmark import ImportFolderItem, ImportURLItem
from models.browser_parsers import ChromeParser
from models.errors import StorageError
from ui.event import Input
from ui.import_interface import ImportInterface
from ui.import_table import ImportsTable
from ui.input_mode import EDIT, INFO_POPUP, NORMAL
from ui.keys import BACKSPACE, DOWN, ENTER, ESC, SPACE, to_keys


def url_entry(id, name, url):
    return {"date_added": "0", "guid": f"guid-{id}", "id": id, "name": name, "type": "url", "url": url}


def folder_entry(id, name, children):
    return {"date_added": "0", "guid": f"guid-{id}", "id": id, "name": name, "type": "folder",
            "children": children}


@pytest.fixture
def bookmarks_file(tmp_path):
    data = {
        "checksum": "abc",
        "roots": {
            "bookmark_bar": folder_entry("1", "Bookmarks bar", [
                url_entry("10", "Python", "https://python.org"),
                folder_entry("11", "Dev", [
                    url_entry("110", "Rust", "https://rust-lang.org"),
                    url_entry("111", "Go", "https://go.dev"),
                    {"id": "112", "name": "odd", "type": "separator"},
                ]),
            ]),
            "other": folder_entry("2", "Other bookmarks", [
                url_entry("20", "News", "https://news.ycombinator.com"),
            ]),
            "synced": folder_entry("3", "Mobile bookmarks", []),
        },
        "version": 1,
    }
    path = tmp_path / "Bookmarks"
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def root(bookmarks_file):
    return ChromeParser().parse(bookmarks_file)


def press(interface, *keys):
    for key in keys:
        interface.handle_input(Input(key))


def names(interface):
    return [item.inner.name for item in interface.table.table.visible]


class TestChromeParser:
    """Test cases for ChromeParser"""

    def test_roots(self, root):
        assert [f.name for f in root.children] == ["Bookmarks Bar", "Other Bookmarks", "Mobile Bookmarks"]

    def test_tree(self, root):
        bar = root.children[0]
        assert isinstance(bar.children[0], ImportURLItem)
        assert bar.children[0].url == "https://python.org"
        dev = bar.children[1]
        assert isinstance(dev, ImportFolderItem)
        assert [c.name for c in dev.children] == ["Rust", "Go"]

    def test_unknown_types_skipped(self, root):
        assert root.count_urls() == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(StorageError):
            ChromeParser().parse(tmp_path / "missing")

    def test_not_a_bookmarks_file(self, tmp_path):
        path = tmp_path / "Bookmarks"
        path.write_text("[]")
        with pytest.raises(StorageError):
            ChromeParser().parse(path)


@pytest.fixture
def interface(events, manager, root):
    return ImportInterface(ImportsTable(events, manager, root))


class TestImportInterface:
    """Test cases for browsing and importing"""

    def test_rows(self, interface):
        press(interface, DOWN, ENTER)
        assert interface.table.table.rows() == [
            ["URL", "Python", "https://python.org", "[ ]"],
            ["Folder", "Dev", "-", "[ ]"],
        ]

    def test_descend_and_ascend(self, interface):
        assert names(interface) == ["Bookmarks Bar", "Other Bookmarks", "Mobile Bookmarks"]
        press(interface, DOWN, ENTER, DOWN, DOWN, ENTER)
        assert names(interface) == ["Rust", "Go"]
        assert interface.table.depth == 2

        press(interface, BACKSPACE)
        assert names(interface) == ["Python", "Dev"]
        assert interface.table.table.selected == 1
        press(interface, BACKSPACE, BACKSPACE)
        assert interface.table.depth == 0

    def test_enter_on_url_does_nothing(self, interface):
        press(interface, DOWN, ENTER, DOWN, ENTER)
        assert names(interface) == ["Python", "Dev"]

    def test_toggle_selection(self, interface):
        press(interface, DOWN, ENTER, DOWN, SPACE)
        assert interface.table.table.rows()[0][3] == "[x]"
        press(interface, SPACE)
        assert interface.table.table.rows()[0][3] == "[ ]"
        assert interface.table.selected_ids == set()

    def test_selection_survives_navigation(self, interface):
        press(interface, DOWN, ENTER, DOWN, DOWN, SPACE, BACKSPACE, ENTER)
        assert interface.table.table.rows()[1][3] == "[x]"

    def test_import_selected(self, interface, manager):
        # Python from the bar, the whole Dev folder and the News URL
        press(interface, DOWN, ENTER, DOWN, SPACE, DOWN, SPACE, BACKSPACE, DOWN, ENTER, DOWN, SPACE, "s")
        urls = {(r.name, r.group) for r in manager.list_urls()}
        assert urls == {("Python", "Bookmarks Bar"), ("Rust", "Dev"), ("Go", "Dev"), ("News", "Other Bookmarks")}
        assert interface.mode == INFO_POPUP
        assert interface.table.selected_ids == set()

    def test_import_reports_collisions(self, interface, manager):
        manager.create("Rust", "https://rust-lang.org", "Dev")
        press(interface, DOWN, ENTER, DOWN, DOWN, SPACE, "s")
        assert interface.mode == INFO_POPUP
        frame_lines = interface.modules[-1].message.splitlines()
        assert frame_lines[0] == "Imported 1 bookmarks."
        assert "already exists in 'Dev' group" in frame_lines[2]
        press(interface, ESC)
        assert interface.mode == NORMAL

    def test_import_nothing_selected(self, interface, manager):
        press(interface, "s")
        assert interface.mode == INFO_POPUP
        assert manager.list_urls() == []

    def test_edit_before_import(self, interface, manager):
        press(interface, DOWN, ENTER, DOWN, "e")
        assert interface.mode == EDIT
        press(interface, *to_keys(" 3"), ENTER, SPACE, "s")
        assert [r.name for r in manager.list_urls()] == ["Python 3"]

    def test_folders_not_editable(self, interface):
        press(interface, DOWN, "e")
        assert interface.mode == NORMAL

    def test_quit(self, interface):
        assert interface.handle_input(Input("q"))
