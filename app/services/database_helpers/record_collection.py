# /app/services/database_helpers/record_collection.py

"""
A single ID-keyed collection held in memory and written through to storage
after every mutation. Students, diaries, attendance, performance and
feedback are all instances of this class.
"""

import logging
from typing import Callable, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from app.core import clock
from app.models.storage_model import StorageWriteResult
from .collection_storage import CollectionStorage

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordCollection(Generic[ModelT]):
    def __init__(
        self,
        name: str,
        model: Type[ModelT],
        storage: CollectionStorage,
        default: Optional[Sequence[ModelT]] = None,
        id_field: str = "id",
    ):
        self.name = name
        self.model = model
        self.storage = storage
        self.id_field = id_field
        self._records: List[ModelT] = storage.load_collection(name, model, default)
        self.last_write: Optional[StorageWriteResult] = None

    def _id_of(self, record: ModelT) -> str:
        return getattr(record, self.id_field)

    def _index_of(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if self._id_of(record) == record_id:
                return i
        return -1

    def persist(self) -> StorageWriteResult:
        """Full-collection write-through. Never raises."""
        self.last_write = self.storage.save_collection(self.name, self._records)
        return self.last_write

    # --- Reads (always copies) ---

    def list(self) -> List[ModelT]:
        return [r.model_copy(deep=True) for r in self._records]

    def get(self, record_id: str) -> Optional[ModelT]:
        idx = self._index_of(record_id)
        return self._records[idx].model_copy(deep=True) if idx >= 0 else None

    def filter(self, predicate: Callable[[ModelT], bool]) -> List[ModelT]:
        return [r.model_copy(deep=True) for r in self._records if predicate(r)]

    # --- Mutations ---

    def upsert(self, record: ModelT, stamp_updates: bool = True) -> ModelT:
        """
        Inserts a new record, or merges into the existing one with the same ID.
        On merge every field the caller explicitly set overrides the stored
        value and, when `stamp_updates` is on, the record is flagged
        `updated=True` with a fresh `lastUpdated`.
        """
        record_id = self._id_of(record)
        idx = self._index_of(record_id)

        if idx >= 0:
            merged = self._records[idx].model_dump()
            merged.update(record.model_dump(exclude_unset=True))
            if stamp_updates:
                merged["updated"] = True
                merged["lastUpdated"] = clock.now_iso()
            saved = self.model.model_validate(merged)
            self._records[idx] = saved
            logger.info("Updated %s record %s", self.name, record_id)
        else:
            saved = record.model_copy(deep=True)
            self._records.append(saved)
            logger.info("Added %s record %s", self.name, record_id)

        self.persist()
        return saved.model_copy(deep=True)

    def append(self, record: ModelT) -> ModelT:
        """Appends without any ID lookup, for append-only collections."""
        saved = record.model_copy(deep=True)
        self._records.append(saved)
        self.persist()
        return saved.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        """Removes the first record with this ID and persists. Returns whether one was removed."""
        idx = self._index_of(record_id)
        if idx < 0:
            return False
        del self._records[idx]
        logger.info("Deleted %s record %s", self.name, record_id)
        self.persist()
        return True

    def __len__(self) -> int:
        return len(self._records)
