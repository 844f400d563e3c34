"""
Tests for sorting and command argument parsing
"""

import pytest

from models.bookmark import Bookmark
from models.errors import InputError
from models.sort import SortBy, SortConfig, SortOrder, sort_urls
from utils.utils import parse_args, split_command, strip_protocol


class TestSort:
    """Test cases for sort_urls"""

    @pytest.fixture
    def urls(self):
        return [
            Bookmark(name="beta", url="https://www.zeta.com", group="B"),
            Bookmark(name="Alpha", url="http://alpha.com", group="c"),
            Bookmark(name="gamma", url="mid.com", group="a"),
        ]

    def test_sort_by_name_ignores_case(self, urls):
        assert [u.name for u in sort_urls(urls, SortConfig(SortBy.NAME))] == ["Alpha", "beta", "gamma"]

    def test_sort_by_url_ignores_protocol(self, urls):
        assert [u.name for u in sort_urls(urls, SortConfig(SortBy.URL))] == ["Alpha", "gamma", "beta"]

    def test_sort_by_group_descending(self, urls):
        config = SortConfig(SortBy.GROUP, SortOrder.DESCENDING)
        assert [u.group for u in sort_urls(urls, config)] == ["c", "B", "a"]

    def test_parse(self):
        assert SortBy.parse("URL") == SortBy.URL
        assert SortOrder.parse("descending") == SortOrder.DESCENDING
        with pytest.raises(InputError):
            SortBy.parse("tags")
        with pytest.raises(InputError):
            SortOrder.parse("up")


class TestCommandParsing:
    """Test cases for command line tokenization"""

    @pytest.mark.parametrize("args,expected", [
        ("abcd", ["abcd"]),
        ("a  b   c", ["a", "b", "c"]),
        ('"new name" other', ["new name", "other"]),
        ('""', []),
        ('"', []),
        ("", []),
    ])
    def test_parse_args(self, args, expected):
        assert parse_args(args) == expected

    def test_split_command(self):
        assert split_command('chn "My bookmark"') == ("chn", ["My bookmark"])
        assert split_command("sort") == ("sort", [])

    def test_strip_protocol(self):
        assert strip_protocol("https://www.example.com") == "example.com"
        assert strip_protocol("http://example.com") == "example.com"
        assert strip_protocol("example.com") == "example.com"
