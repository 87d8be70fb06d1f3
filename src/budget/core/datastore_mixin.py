#!/usr/bin/env python3
"""
DataStore Mixin - file metadata shared by all file-backed stores.

Subclasses must provide:
- path attribute (backing file)
- item_count() -> int | None
- label attribute (human-readable entity name, plural)
"""

from abc import abstractmethod
from datetime import datetime
from pathlib import Path


class DataStoreMixin:
    """
    Mixin providing metadata queries about a store's backing file.

    Metadata reflects what is on disk, not unsaved in-memory changes.
    """

    path: Path
    label: str

    def file_exists(self) -> bool:
        """Check if the backing file exists."""
        return self.path.exists()

    def last_modified(self) -> datetime | None:
        """Get timestamp of the backing file, or None if it doesn't exist."""
        if not self.file_exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def size_bytes(self) -> int | None:
        """Get size of the backing file in bytes."""
        if not self.file_exists():
            return None
        return self.path.stat().st_size

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of records in the backing file."""
        ...

    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        count = self.item_count()
        if count is None:
            return f"No {self.label} file found"
        age = self.age_days()
        return f"{count} {self.label}, last saved {age} day(s) ago"
