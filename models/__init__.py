"""
Models package for the Bookmark application.
"""

from .bookmark import Bookmark, BookmarkType, BrowserType, ImportFolderItem, ImportURLItem
from .bookmark_manager import BookmarkManager
from .browser_parsers import BrowserParser, ChromeParser
from .errors import BookmarkError, InputError, InternalError, NotUniqueError, StorageError
from .storage import FileStorage

__all__ = [
    'Bookmark',
    'BookmarkError',
    'BookmarkManager',
    'BookmarkType',
    'BrowserParser',
    'BrowserType',
    'ChromeParser',
    'FileStorage',
    'ImportFolderItem',
    'ImportURLItem',
    'InputError',
    'InternalError',
    'NotUniqueError',
    'StorageError',
]
