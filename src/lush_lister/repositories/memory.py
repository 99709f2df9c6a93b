"""In-memory collections owned by whichever front end is running.

Nothing here persists across sessions. Clearing is immediate; callers are
expected to confirm with the operator first.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from lush_lister.models import ArchiveBatch, ListingRecord
from lush_lister.services.parser import parse


T = TypeVar("T", ListingRecord, ArchiveBatch)


class _Collection(Generic[T]):
    def __init__(self) -> None:
        self._items: List[T] = []

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> List[T]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[T]:
        for it in self._items:
            if it.id == item_id:
                return it
        return None

    def remove(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [it for it in self._items if it.id != item_id]
        return len(self._items) != before

    def clear(self) -> None:
        self._items = []


class RecordCollection(_Collection[ListingRecord]):
    """Parsed records in the order they were added. Duplicates are allowed."""

    def append(self, record: ListingRecord) -> ListingRecord:
        self._items.append(record)
        return record

    def add_text(self, raw: str) -> Optional[ListingRecord]:
        record = parse(raw)
        if record is None:
            return None
        return self.append(record)


class ArchiveList(_Collection[ArchiveBatch]):
    """Renamed batches, newest first."""

    def add(self, batch: ArchiveBatch) -> ArchiveBatch:
        self._items.insert(0, batch)
        return batch
