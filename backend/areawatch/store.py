"""
AreaWatch Backend: In-Memory Record Store
===========================================

What:  An ordered, process-lifetime collection of Pydantic records with
       sequential integer identifiers.
How:   A plain list scanned linearly, plus an explicit `_next_id` counter.
       Every read of the counter and every mutation of the list happens
       under one threading.Lock, so two concurrent creates can never be
       handed the same identifier.
Who:   Owned by AreaService / UserService; one store per collection, built
       fresh by create_app() for every application instance.

Identifiers:
    The counter starts at 1 and only moves forward. It is independent of
    len(store), so ids stay unique even if records are ever removed.
"""

import threading
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """Lock-guarded list of records keyed by their `id` attribute."""

    def __init__(self, name: str):
        self.name = name
        self._records: List[RecordT] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> List[RecordT]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        return None

    def add(self, build: Callable[[int], RecordT]) -> RecordT:
        """
        Append a new record built around the next identifier.

        `build` receives the identifier and returns the finished record. It
        runs while the lock is held, so it must not touch the store itself.
        """
        with self._lock:
            record = build(self._next_id)
            self._next_id += 1
            self._records.append(record)
            return record

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """
        Replace the record with `record_id` by a copy carrying `changes`.

        Returns the updated record, or None when no record matches.
        """
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    updated = record.model_copy(update=changes)
                    self._records[index] = updated
                    return updated
        return None
