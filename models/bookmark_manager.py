import json
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from utils.logger import get_logger
from .bookmark import Bookmark, DEFAULT_GROUP
from .errors import NotUniqueError, StorageError
from .record_filter import Filter
from .sort import SortConfig, sort_urls
from .storage import FileStorage

logger = get_logger("registry")

class BookmarkManager:
    """Manages the bookmarks registry on top of the file storage"""

    def __init__(self, storage: FileStorage):
        self.storage = storage

    @classmethod
    def file_based(cls, file_path: Union[str, Path]) -> 'BookmarkManager':
        return cls(FileStorage(file_path))

    def create(self, name: str, url: str, group: Optional[str] = None,
               tags: Optional[Iterable[str]] = None) -> Bookmark:
        """Create and store a new bookmark"""
        record = Bookmark(name=name, url=url, group=group or DEFAULT_GROUP, tags=set(tags or []))
        return self.add(record)

    def add(self, record: Bookmark) -> Bookmark:
        added = self.storage.add(record)
        logger.info(f"Bookmark '{added.name}' added to '{added.group}' group", context=added.id)
        return added

    def delete(self, record_id: str) -> bool:
        deleted = self.storage.delete_by_id(record_id)
        if deleted:
            logger.info("Bookmark deleted", context=record_id)
        return deleted

    def get_url(self, record_id: str) -> Optional[Bookmark]:
        return self.storage.get(record_id)

    def list_urls(self, filter: Optional[Filter] = None,
                  sort: Optional[SortConfig] = None) -> List[Bookmark]:
        """List bookmarks in storage order, optionally filtered and sorted"""
        urls = self.storage.list()
        if filter is not None:
            urls = filter.apply(urls)
        if sort is not None:
            urls = sort_urls(urls, sort)
        return urls

    def list_groups(self) -> List[str]:
        return self.storage.list_groups()

    def tag(self, record_id: str, tag: str) -> Optional[Bookmark]:
        return self._modify(record_id, lambda r: r.with_changes(tags=r.tags | {tag}))

    def untag(self, record_id: str, tag: str) -> Optional[Bookmark]:
        return self._modify(record_id, lambda r: r.with_changes(tags=r.tags - {tag}))

    def change_group(self, record_id: str, group: str) -> Optional[Bookmark]:
        """Move the bookmark to another group, the id changes with it"""
        return self._modify(record_id, lambda r: r.with_changes(group=group))

    def change_name(self, record_id: str, name: str) -> Optional[Bookmark]:
        """Rename the bookmark, the id changes with it"""
        return self._modify(record_id, lambda r: r.with_changes(name=name))

    def change_url(self, record_id: str, url: str) -> Optional[Bookmark]:
        return self._modify(record_id, lambda r: r.with_changes(url=url))

    def update(self, record_id: str, name: str, url: str, group: str) -> Optional[Bookmark]:
        """Replace name, URL and group at once, tags are kept"""
        return self._modify(record_id, lambda r: r.with_changes(name=name, url=url, group=group))

    def import_records(self, records: Iterable[Bookmark]) -> Tuple[List[Bookmark], List[NotUniqueError]]:
        """
        Add records one by one. A name collision does not stop the import,
        the errors are returned next to the imported records.
        """
        imported: List[Bookmark] = []
        failures: List[NotUniqueError] = []
        for record in records:
            try:
                imported.append(self.storage.add(record))
            except NotUniqueError as e:
                logger.warning(f"Skipping import: {e}")
                failures.append(e)
        logger.info(f"Imported {len(imported)} bookmarks, {len(failures)} skipped")
        return imported, failures

    def import_from_v0_0_x(self, path: Union[str, Path]) -> List[Bookmark]:
        """Import every bookmark of a v0.0.x registry file (records without ids)"""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
            records = [Bookmark.from_dict(item) for item in data['urls']['items']]
        except FileNotFoundError as e:
            raise StorageError(f"v0.0.x bookmarks file not found: {path}") from e
        except (OSError, json.JSONDecodeError, KeyError, TypeError) as e:
            logger.error(f"Failed to read v0.0.x bookmarks file {path}: {e}")
            raise StorageError(f"could not read v0.0.x bookmarks file '{path}': {e}") from e

        imported = self.storage.add_batch(records)
        logger.info(f"Imported {len(imported)} bookmarks from {path}")
        return imported

    def _modify(self, record_id: str, change: Callable[[Bookmark], Bookmark]) -> Optional[Bookmark]:
        record = self.storage.get(record_id)
        if record is None:
            return None
        return self.storage.update(record_id, change(record))
