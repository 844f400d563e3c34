class BookmarkError(Exception):
    """Base class for all bookmark errors"""

class InputError(BookmarkError):
    """User-correctable error: missing argument, no selection, invalid sort column..."""

class NotUniqueError(InputError):
    """Another bookmark already uses the same name in the same group"""

    def __init__(self, name: str, group: str):
        super().__init__(f"URL with name '{name}' already exists in '{group}' group")
        self.name = name
        self.group = group

class InternalError(BookmarkError):
    """Unrecoverable error, the session cannot continue"""

class StorageError(InternalError):
    """Reading or writing the bookmarks file failed"""

class BrowserOpenError(InternalError):
    """Opening a URL in the web browser failed"""
