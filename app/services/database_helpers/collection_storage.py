# /app/services/database_helpers/collection_storage.py

"""
The single access point between the in-memory collections and the durable
key-value store.

Reads and writes are best-effort. A failed read seeds the collection from its
default, a failed write is logged and reported as an Err `StorageWriteResult`.
Neither ever raises to the business operations: the in-memory collection
stays the source of truth for the rest of the process.
"""

import json
import logging
from typing import List, Optional, Protocol, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.models.storage_model import StorageWriteResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Errors a backend or the (de)serialization step can raise.
STORAGE_ERRORS = (OSError, SQLAlchemyError, ValueError, TypeError)


class KeyValueBackend(Protocol):
    def get_value(self, key: str) -> Optional[str]: ...
    def set_value(self, key: str, value: str) -> None: ...


class CollectionStorage:
    def __init__(self, backend: KeyValueBackend, key_prefix: str = "pravah_"):
        self.backend = backend
        self.key_prefix = key_prefix

    def key_for(self, collection: str) -> str:
        return f"{self.key_prefix}{collection}"

    def load_collection(
        self,
        collection: str,
        model: Type[ModelT],
        default: Optional[Sequence[ModelT]] = None,
    ) -> List[ModelT]:
        """
        Reads one collection. Missing entries, unreadable storage and content
        that is not a JSON array all fall back to a copy of `default`. Single
        items that fail validation are skipped.
        """
        fallback = [item.model_copy(deep=True) for item in (default or [])]
        key = self.key_for(collection)

        try:
            raw = self.backend.get_value(key)
        except STORAGE_ERRORS as e:
            logger.error("Storage read failed for %s: %s", key, e)
            return fallback

        if raw is None:
            return fallback

        try:
            payload = json.loads(raw)
        except ValueError as e:
            logger.error("Corrupt storage entry %s, using defaults: %s", key, e)
            return fallback

        if not isinstance(payload, list):
            logger.error("Storage entry %s is not a list, using defaults.", key)
            return fallback

        records = []
        for item in payload:
            try:
                records.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid %s record in %s: %s", model.__name__, key, e)
        return records

    def save_collection(self, collection: str, records: Sequence[BaseModel]) -> StorageWriteResult:
        """Overwrites the whole collection entry with the given records."""
        key = self.key_for(collection)
        try:
            payload = json.dumps([r.model_dump(mode="json") for r in records])
            self.backend.set_value(key, payload)
        except STORAGE_ERRORS as e:
            logger.error("Storage write failed for %s: %s", key, e)
            return StorageWriteResult(ok=False, key=key, error=str(e))
        logger.debug("Persisted %d records to %s", len(records), key)
        return StorageWriteResult(ok=True, key=key)
