# /app/services/database_helpers/storage_repository_sql.py

"""
Raw SQLAlchemy access to the `storage_entries` table. This is the SQL
implementation of the durable key-value store; it knows nothing about what
the stored text means.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.db.models.storage_models import StorageEntry


class StorageRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_value(self, key: str) -> Optional[str]:
        """Returns the stored text for a key, or None if the key was never written."""
        entry = self.db.query(StorageEntry).filter(StorageEntry.key == key).first()
        return entry.value if entry else None

    def set_value(self, key: str, value: str) -> None:
        """Overwrites (or creates) the entry for a key."""
        entry = self.db.query(StorageEntry).filter(StorageEntry.key == key).first()
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(key=key, value=value))
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
