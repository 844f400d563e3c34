import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from utils.logger import get_logger
from .bookmark import Bookmark
from .errors import NotUniqueError, StorageError

logger = get_logger("storage")

class FileStorage:
    """
    Bookmarks persisted in a single JSON file.

    Every operation reads the whole file and every mutation rewrites it, so the
    file is the only state and there is nothing to invalidate between calls.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def add(self, record: Bookmark) -> Bookmark:
        """Add a bookmark, raises NotUniqueError if (name, group) is taken"""
        records = self._read()
        self._ensure_unique(records, record)
        records.append(record)
        self._write(records)
        logger.debug(f"Added bookmark '{record.name}' to '{record.group}'", context=record.id)
        return record

    def add_batch(self, batch: List[Bookmark]) -> List[Bookmark]:
        """Add several bookmarks at once, nothing is written if any of them collides"""
        records = self._read()
        for record in batch:
            self._ensure_unique(records, record)
            records.append(record)
        self._write(records)
        logger.debug(f"Added batch of {len(batch)} bookmarks")
        return batch

    def get(self, record_id: str) -> Optional[Bookmark]:
        for record in self._read():
            if record.id == record_id:
                return record
        return None

    def update(self, record_id: str, record: Bookmark) -> Optional[Bookmark]:
        """
        Replace the bookmark stored under record_id.
        Returns None when there is no such bookmark.
        """
        records = self._read()
        index = self._find_index(records, record_id)
        if index is None:
            return None

        others = records[:index] + records[index + 1:]
        self._ensure_unique(others, record)
        records[index] = record
        self._write(records)
        logger.debug(f"Updated bookmark, new id: {record.id}", context=record_id)
        return record

    def delete_by_id(self, record_id: str) -> bool:
        records = self._read()
        index = self._find_index(records, record_id)
        if index is None:
            return False

        del records[index]
        self._write(records)
        logger.debug("Deleted bookmark", context=record_id)
        return True

    def list(self) -> List[Bookmark]:
        return self._read()

    def list_groups(self) -> List[str]:
        """Distinct groups, sorted"""
        return sorted({record.group for record in self._read()})

    @staticmethod
    def _find_index(records: List[Bookmark], record_id: str) -> Optional[int]:
        for i, record in enumerate(records):
            if record.id == record_id:
                return i
        return None

    @staticmethod
    def _ensure_unique(records: List[Bookmark], record: Bookmark) -> None:
        for existing in records:
            if existing.name == record.name and existing.group == record.group:
                raise NotUniqueError(record.name, record.group)

    def _read(self) -> List[Bookmark]:
        try:
            content = self.file_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Failed to read bookmarks file {self.file_path}: {e}")
            raise StorageError(f"could not read URLs, failed to open file: {e}") from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
            return [Bookmark.from_dict(item) for item in data['urls']['items']]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.error(f"Corrupted bookmarks file {self.file_path}: {e}")
            raise StorageError(f"could not parse bookmarks file '{self.file_path}': {e}") from e

    def _write(self, records: List[Bookmark]) -> None:
        data: Dict = {'urls': {'items': [record.to_dict() for record in records]}}
        tmp_name = None
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            # Write next to the target and swap, the file is always rewritten whole
            fd, tmp_name = tempfile.mkstemp(dir=self.file_path.parent, prefix=".urls-", suffix=".tmp")
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.file_path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            logger.error(f"Failed to write bookmarks file {self.file_path}: {e}")
            raise StorageError(f"failed to save bookmarks: {e}") from e
