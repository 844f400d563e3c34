"""
Pytest configuration and fixtures for Bookmark tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from models.bookmark import Bookmark
from models.bookmark_manager import BookmarkManager
from ui.event import Events

# (url, name, group, tags)
SEED_URLS = [
    ("one", "one", "one", ["tag"]),
    ("two", "two", "two", []),
    ("three", "three", "three", []),
    ("four", "four", "four", ["tag"]),
    ("five", "five", "five", []),
]


@pytest.fixture
def registry_file(tmp_path):
    """Path of an empty registry file"""
    return tmp_path / "urls_v0.1.json"


@pytest.fixture
def manager(registry_file):
    """Registry without bookmarks"""
    return BookmarkManager.file_based(registry_file)


@pytest.fixture
def seeded_manager(manager):
    """Registry with the five seed bookmarks, in seed order"""
    for url, name, group, tags in SEED_URLS:
        manager.add(Bookmark(name=name, url=url, group=group, tags=set(tags)))
    return manager


@pytest.fixture
def events():
    return Events()
