# /app/db/models/storage_models.py

"""
SQLAlchemy model for the durable key-value store.

Each row holds one whole collection: the key is the prefixed collection name
(e.g. `pravah_students`) and the value is the collection serialized as a JSON
array. Rows are overwritten in full on every write-through.
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from ..base_class import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
