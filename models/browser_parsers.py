import json
from pathlib import Path
from typing import Dict, Any, Optional, Union

from utils.logger import get_logger
from .bookmark import ImportFolderItem, ImportItem, ImportURLItem
from .errors import StorageError

logger = get_logger("import")

class BrowserParser:
    """Base class for browser-specific bookmark parsers"""

    def parse(self, file_path: Union[str, Path]) -> ImportFolderItem:
        """Parse the bookmarks file into a tree of import candidates"""
        raise NotImplementedError

class ChromeParser(BrowserParser):
    """Parser for Chromium-family bookmarks (Brave, Chrome, Chromium, Edge, Vivaldi)"""

    ROOT_NAMES = {
        'bookmark_bar': "Bookmarks Bar",
        'other': "Other Bookmarks",
        'synced': "Mobile Bookmarks",
    }

    def parse(self, file_path: Union[str, Path]) -> ImportFolderItem:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                json_data = json.load(f)
        except FileNotFoundError as e:
            raise StorageError(f"bookmarks file not found: {file_path}") from e
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read bookmarks file {file_path}: {e}")
            raise StorageError(f"could not read bookmarks file '{file_path}': {e}") from e

        roots = json_data.get('roots') if isinstance(json_data, dict) else None
        if not isinstance(roots, dict):
            raise StorageError(f"'{file_path}' is not a Chromium bookmarks file: missing 'roots'")

        # Roots carry no useful metadata of their own, they become the top level folders
        root_folder = ImportFolderItem(id="root", name="Bookmarks")
        for folder_key, title in self.ROOT_NAMES.items():
            folder_data = roots.get(folder_key)
            if not folder_data:
                continue
            folder = self._parse_folder(folder_data)
            folder.name = title
            root_folder.add_child(folder)

        logger.info(f"Parsed {root_folder.count_urls()} bookmarks from {file_path}")
        return root_folder

    def _parse_entry(self, data: Dict[str, Any]) -> Optional[ImportItem]:
        entry_type = data.get('type')
        if entry_type == 'folder':
            return self._parse_folder(data)
        if entry_type == 'url':
            return ImportURLItem(
                id=self._entry_id(data),
                name=data.get('name', 'Untitled'),
                url=data.get('url', ''),
            )
        logger.warning(f"Skipping entry of unexpected type '{entry_type}'", context=self._entry_id(data))
        return None

    def _parse_folder(self, data: Dict[str, Any]) -> ImportFolderItem:
        folder = ImportFolderItem(id=self._entry_id(data), name=data.get('name', 'Untitled'))
        for child in data.get('children') or []:
            item = self._parse_entry(child)
            if item is not None:
                folder.add_child(item)
        return folder

    @staticmethod
    def _entry_id(data: Dict[str, Any]) -> str:
        return str(data.get('id') or data.get('guid') or '')
