# /app/services/database_helpers/syllabus_repository.py

"""
Weekly syllabus progress, keyed by (centerId, week, className, subject).

Held as an insertion-ordered dict on that composite key, so saving a batch is
a plain keyed upsert. The collection is persisted as a flat list like every
other collection.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from app.models.syllabus_model import SyllabusProgress
from app.models.storage_model import StorageWriteResult
from .collection_storage import CollectionStorage

logger = logging.getLogger(__name__)

SYLLABUS_COLLECTION = "syllabus_progress"

CompositeKey = Tuple[str, str, str, str]


class SyllabusRepository:
    def __init__(self, storage: CollectionStorage):
        self.storage = storage
        self._entries: Dict[CompositeKey, SyllabusProgress] = {}
        for entry in storage.load_collection(SYLLABUS_COLLECTION, SyllabusProgress):
            self._entries[entry.composite_key] = entry

    def save_batch(self, batch: Sequence[SyllabusProgress]) -> StorageWriteResult:
        """
        Replaces every stored entry whose composite key appears in the batch
        and appends the batch. Replaced keys move to the end, matching
        filter-then-concat ordering.
        """
        for entry in batch:
            self._entries.pop(entry.composite_key, None)
        for entry in batch:
            self._entries[entry.composite_key] = entry.model_copy(deep=True)
        logger.info("Saved %d syllabus progress entries", len(batch))
        return self.storage.save_collection(SYLLABUS_COLLECTION, list(self._entries.values()))

    def get_progress(self, center_id: str, week: str) -> List[SyllabusProgress]:
        return [
            e.model_copy(deep=True)
            for e in self._entries.values()
            if e.centerId == center_id and e.week == week
        ]

