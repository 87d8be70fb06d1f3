#!/usr/bin/env python3
"""
Entity Module Base

An entity module wraps the record store of one entity type together with the
stores it reads for validation, and adds read-only projections over the data.
Projections hold no state of their own.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from .money import Money
from .store import Record, RecordStore

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class EntityModule(Generic[R]):
    """
    Base class for the account, earning, expense and debt modules.

    Args:
        store: The store this module owns and mutates
        dependencies: Other stores the module only reads (e.g. accounts)
    """

    def __init__(self, store: RecordStore[R], *dependencies: RecordStore):
        self.store = store
        self.dependencies = dependencies

    @property
    def kind(self) -> str:
        return self.store.kind

    # Lifecycle

    def load(self) -> None:
        """Load every store the module needs that is not loaded yet."""
        for store in (self.store, *self.dependencies):
            if not store.loaded:
                store.load()

    def unload(self) -> None:
        """Flush and release every store the module loaded."""
        for store in (self.store, *self.dependencies):
            store.unload()

    @contextmanager
    def activated(self) -> Iterator["EntityModule[R]"]:
        """Load the module for the duration of a command, flushing at the end."""
        try:
            self.load()
            yield self
        finally:
            self.unload()

    # Queries

    def all(self) -> list[R]:
        return self.store.all()

    def get(self, record_id: int) -> R:
        return self.store.get(record_id)

    def exists(self, record_id: int) -> bool:
        return self.store.exists(record_id)

    def search(self, text: str) -> list[R]:
        """Records whose name contains the text, ignoring case."""
        needle = text.lower()
        return [record for record in self.store if needle in record.name.lower()]  # type: ignore[attr-defined]

    @staticmethod
    def total(records: Iterable[R]) -> Money:
        """Exact sum of the amounts of the given records."""
        return Money.sum(record.amount for record in records)  # type: ignore[attr-defined]

    # Mutations

    def delete(self, record_id: int) -> None:
        self.store.remove(record_id)
        logger.info(f"Deleted {self.kind} {record_id}")
