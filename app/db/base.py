# /app/db/base.py

# Central registry for all SQLAlchemy models, so that `Base.metadata`
# knows about them when tables are created or Alembic scans for changes.

from .base_class import Base

from .models.storage_models import StorageEntry
