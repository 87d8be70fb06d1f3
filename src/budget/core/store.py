#!/usr/bin/env python3
"""
Generic Record Store

In-memory ordered collection of one record type, backed by a flat text file
with one encoded record per line.

Guarantees:
- ids are assigned from a monotonic counter and never reused, even after
  removals, so an id is a durable handle for a record.
- load() is all-or-nothing: a single bad line rejects the whole file.
- save() only writes when something changed, and replaces the backing file
  atomically so a crash mid-write leaves the previous file intact.
"""

import copy
import dataclasses
import logging
import os
import tempfile
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Generic, Protocol, TypeVar

from .codec import RecordCodec
from .datastore_mixin import DataStoreMixin
from .errors import CorruptStoreError, MalformedRecordError, NotFoundError, ParseError, StoreStateError, UsageError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
HEADER_PREFIX = "#schema:"


class Record(Protocol):
    """Anything a RecordStore can hold: a dataclass with an id and a guid."""

    id: int
    guid: str


R = TypeVar("R", bound=Record)


def generate_guid() -> str:
    """Generate a globally unique record token."""
    return str(uuid.uuid4())


class RecordStore(DataStoreMixin, Generic[R]):
    """
    CRUD over the records of one entity type, persisted through a RecordCodec.

    Lifecycle:
        Unloaded --load()--> Loaded(clean) <--mutations/save()--> Loaded(dirty)
        Loaded --unload()--> Unloaded (flushes first)

    Every accessor returns copies of the stored records. Changing a record
    therefore always goes through edit() or update(), which keep the dirty flag
    accurate.
    """

    def __init__(self, kind: str, path: Path, codec: RecordCodec[R], randomize: bool = False):
        """
        Initialize a record store.

        Args:
            kind: Singular entity name used in messages ("earning")
            path: Backing file
            codec: Codec for the record type
            randomize: Replace randomizable amounts with synthetic values on load.
                A randomized store is read-only, so the real amounts on disk
                are never overwritten
        """
        self.kind = kind
        self.label = f"{kind}s"
        self.path = Path(path)
        self.codec = codec
        self.randomize = randomize

        self.data: list[R] = []
        self.next_id = 1
        self.changed = False
        self.loaded = False
        self._write_header = True

    # Lifecycle

    def load(self) -> None:
        """
        Load all records from the backing file.

        A missing file is an empty store. Blank lines are ignored.

        Raises:
            CorruptStoreError: If any line cannot be decoded; the store stays unloaded
        """
        records: list[R] = []
        seen_ids: set[int] = set()
        has_header = False

        if self.path.exists():
            with open(self.path, "rb") as f:
                for line_number, raw in enumerate(f, start=1):
                    raw = raw.rstrip(b"\r\n")
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError as e:
                        logger.error(f"Failed to load {self.path} at line {line_number}: {e}")
                        shown = raw.decode("utf-8", errors="backslashreplace")
                        raise CorruptStoreError(self.path, line_number, shown, f"invalid UTF-8: {e}") from e
                    if not line:
                        continue
                    if line_number == 1 and line.startswith(HEADER_PREFIX):
                        self._check_header(line)
                        has_header = True
                        continue
                    try:
                        record = self.codec.decode(line, randomize=self.randomize)
                    except (MalformedRecordError, ParseError) as e:
                        logger.error(f"Failed to load {self.path} at line {line_number}: {e}")
                        raise CorruptStoreError(self.path, line_number, line, str(e)) from e
                    if record.id in seen_ids:
                        raise CorruptStoreError(self.path, line_number, line, f"duplicate id {record.id}")
                    seen_ids.add(record.id)
                    records.append(record)
            self._write_header = has_header
        else:
            self._write_header = True

        self.data = records
        self.next_id = max(seen_ids, default=0) + 1
        self.changed = False
        self.loaded = True

        logger.debug(f"Loaded {len(records)} {self.label} from {self.path} (next id {self.next_id})")

    def _check_header(self, line: str) -> None:
        version = line[len(HEADER_PREFIX):]
        if version != str(SCHEMA_VERSION):
            raise CorruptStoreError(self.path, 1, line, f"unsupported schema version {version!r}")

    def save(self) -> None:
        """
        Write all records to the backing file if anything changed.

        The file is written to a temporary sibling and renamed over the
        original, so the previous version survives a crash mid-write.
        """
        self._require_loaded()

        if not self.changed:
            logger.debug(f"No changes to {self.label}, skipping save")
            return

        lines = [self.codec.encode(record) + "\n" for record in self.data]
        if self._write_header:
            lines.insert(0, f"{HEADER_PREFIX}{SCHEMA_VERSION}\n")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=self.path.parent,
            prefix=f"{self.path.name}-",
            suffix=".tmp",
            delete=False,
        ) as tf:
            temp_path = Path(tf.name)
            try:
                tf.writelines(lines)
                tf.flush()
                os.fsync(tf.fileno())
            except OSError:
                tf.close()
                temp_path.unlink(missing_ok=True)
                raise

        try:
            os.replace(temp_path, self.path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

        self.changed = False
        logger.info(f"Saved {len(self.data)} {self.label} to {self.path}")

    def unload(self) -> None:
        """Flush pending changes and discard the in-memory data."""
        if not self.loaded:
            return
        self.save()
        self.data = []
        self.loaded = False

    # CRUD

    def add(self, record: R) -> int:
        """
        Add a new record.

        Assigns the next id and, if the record has none, a fresh guid.

        Returns:
            The id assigned to the record
        """
        self._require_writable()

        stored = copy.copy(record)
        stored.id = self.next_id
        if not stored.guid:
            stored.guid = generate_guid()
        self.codec.encode(stored)

        self.next_id += 1
        self.data.append(stored)
        self.changed = True

        record.id = stored.id
        record.guid = stored.guid
        return stored.id

    def edit(self, record: R) -> bool:
        """
        Replace the editable fields of the stored record with the same id.

        The store is marked changed on every call, even when the values are
        identical.

        Returns:
            True if any editable field differed from the stored value

        Raises:
            NotFoundError: If no record has this id
        """
        self._require_writable()
        index = self._index_of(record.id)
        stored = self.data[index]

        replacement = dataclasses.replace(record, id=stored.id, guid=stored.guid)  # type: ignore[type-var]
        self.codec.encode(replacement)

        differs = any(getattr(stored, name) != getattr(record, name) for name in self.codec.editable_fields)

        self.data[index] = replacement
        self.changed = True
        return differs

    def update(self, record_id: int, mutator: Callable[[R], R | None]) -> bool:
        """
        Edit a record through a transform function.

        The mutator receives a copy of the stored record and may either modify
        it in place or return a replacement.

        Returns:
            True if any editable field changed

        Raises:
            NotFoundError: If no record has this id
        """
        record = self.get(record_id)
        result = mutator(record)
        if result is not None:
            record = result
        record.id = record_id
        return self.edit(record)

    def remove(self, record_id: int) -> None:
        """
        Remove a record. Its id is never handed out again.

        Raises:
            NotFoundError: If no record has this id
        """
        self._require_writable()
        index = self._index_of(record_id)
        del self.data[index]
        self.changed = True

    def set_changed(self) -> None:
        """
        Mark the store as modified.

        Only needed by code that changed records without going through edit()
        or update(), which mark the store themselves.
        """
        self._require_writable()
        self.changed = True

    # Queries

    def exists(self, record_id: int) -> bool:
        """Check if a record with this id exists."""
        self._require_loaded()
        return any(record.id == record_id for record in self.data)

    def get(self, record_id: int) -> R:
        """
        Get a copy of the record with this id.

        Raises:
            NotFoundError: If no record has this id
        """
        return copy.copy(self.data[self._index_of(record_id)])

    def all(self) -> list[R]:
        """Copies of all records in persisted order."""
        self._require_loaded()
        return [copy.copy(record) for record in self.data]

    def __iter__(self) -> Iterator[R]:
        """Iterate over copies of all records in persisted order."""
        return iter(self.all())

    def __len__(self) -> int:
        self._require_loaded()
        return len(self.data)

    def item_count(self) -> int | None:
        """Count the records currently saved in the backing file."""
        if not self.path.exists():
            return None
        header = HEADER_PREFIX.encode("utf-8")
        with open(self.path, "rb") as f:
            return sum(1 for line in f if line.strip() and not line.startswith(header))

    def _index_of(self, record_id: int) -> int:
        self._require_loaded()
        for index, record in enumerate(self.data):
            if record.id == record_id:
                return index
        raise NotFoundError(self.kind, record_id)

    def _require_loaded(self) -> None:
        if not self.loaded:
            raise StoreStateError(f"The {self.kind} store is not loaded")

    def _require_writable(self) -> None:
        self._require_loaded()
        if self.randomize:
            raise UsageError(f"The {self.kind} store holds random amounts and cannot be modified")
