# /app/models/storage_model.py

from typing import Optional

from pydantic import BaseModel


class StorageWriteResult(BaseModel):
    """Ok/Err outcome of a single collection write-through."""
    ok: bool
    key: str
    error: Optional[str] = None
