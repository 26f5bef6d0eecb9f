"""In-memory record store.

`ResourceStore` holds the records of one resource kind in insertion
order. Every operation runs under the store's lock, and identifiers are
looked up through an `id -> position` index that is patched whenever a
delete shifts later records down.
"""

from __future__ import annotations

import threading
import uuid
from typing import Dict, Generic, Iterable, List, Optional, Set, TypeVar

from pydantic import BaseModel

from .errors import EmptyStore, NotFound
from .models import Statistics

RecordT = TypeVar("RecordT", bound=BaseModel)


def new_identifier() -> str:
    """Return a fresh 128-bit random identifier."""
    return uuid.uuid4().hex


class ResourceStore(Generic[RecordT]):
    """Ordered collection of uniquely identified records.

    `label_field` names the attribute reported by `statistics` for the
    minimum and maximum records. `name` only appears in error messages.
    """

    def __init__(self, label_field: str, records: Iterable[RecordT] = (), name: str = "store"):
        self.label_field = label_field
        self.name = name
        self._records: List[RecordT] = []
        self._index: Dict[str, int] = {}
        # deleted ids are never handed out or accepted again
        self._retired: Set[str] = set()
        self._lock = threading.Lock()
        for record in records:
            self.create(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, record: RecordT) -> RecordT:
        """Append `record`, assigning an identifier when it has none.

        A caller-supplied id is kept, but it must not belong to a live or
        deleted record of this store.
        """
        with self._lock:
            record_id = record.id
            if record_id is None:
                record_id = new_identifier()
                record = record.model_copy(update={"id": record_id})
            elif record_id in self._index or record_id in self._retired:
                raise ValueError(f"identifier already used: {record_id}")
            self._index[record_id] = len(self._records)
            self._records.append(record)
            return record

    def list(self) -> List[RecordT]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> RecordT:
        """Return the live record with `record_id` or raise `NotFound`."""
        with self._lock:
            return self._records[self._position(record_id)]

    def replace(self, record_id: str, record: RecordT) -> RecordT:
        """Overwrite the record stored under `record_id`.

        Identity comes from `record_id`; any id carried by `record` is
        discarded. Missing ids are rejected with `NotFound`, never inserted.
        """
        with self._lock:
            pos = self._position(record_id)
            stored = record.model_copy(update={"id": record_id})
            self._records[pos] = stored
            return stored

    def delete(self, record_id: str) -> RecordT:
        """Remove and return the record stored under `record_id`."""
        with self._lock:
            pos = self._position(record_id)
            removed = self._records.pop(pos)
            del self._index[record_id]
            self._retired.add(record_id)
            for i in range(pos, len(self._records)):
                self._index[self._records[i].id] = i
            return removed

    def statistics(self, field: str) -> Statistics:
        """Return count and the labels of the min/max records for `field`.

        Ties go to the record inserted first. Records whose `field` is
        `None` take no part in the min/max comparison.
        """
        with self._lock:
            if not self._records:
                raise EmptyStore(self.name)
            model = type(self._records[0])
            if field == "id" or field not in model.model_fields:
                raise ValueError(f"unknown statistics field: {field}")
            lowest: Optional[RecordT] = None
            highest: Optional[RecordT] = None
            for record in self._records:
                value = getattr(record, field)
                if value is None:
                    continue
                if lowest is None or value < getattr(lowest, field):
                    lowest = record
                if highest is None or value > getattr(highest, field):
                    highest = record
            return Statistics(
                field=field,
                count=len(self._records),
                min_record_label=self._label(lowest),
                max_record_label=self._label(highest),
            )

    def _label(self, record: Optional[RecordT]) -> Optional[str]:
        if record is None:
            return None
        return str(getattr(record, self.label_field))

    def _position(self, record_id: str) -> int:
        # caller must hold the lock
        try:
            return self._index[record_id]
        except KeyError:
            raise NotFound(record_id) from None
