# /app/services/database_helpers/user_repository.py

"""
Volunteer accounts. Volunteer IDs are normalized (trimmed, upper-cased)
before every lookup, and every outcome is returned in-band as an
`OperationResult` rather than raised.
"""

import logging
from typing import List, Optional, Sequence

from app.models.user_model import OperationResult, UserAccount, UserUpdate
from .collection_storage import CollectionStorage
from .record_collection import RecordCollection

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"

DEFAULT_USERS = [
    UserAccount(volunteerId="25MDA177", name="Preet Patil", password="password"),
]


def normalize_volunteer_id(volunteer_id: str) -> str:
    return volunteer_id.strip().upper()


class UserRepository:
    def __init__(self, storage: CollectionStorage, default: Optional[Sequence[UserAccount]] = None):
        self.users = RecordCollection(
            USERS_COLLECTION,
            UserAccount,
            storage,
            default=DEFAULT_USERS if default is None else default,
            id_field="volunteerId",
        )

    def get_all_users(self) -> List[UserAccount]:
        return self.users.list()

    def register_user(self, volunteer_id: str, name: str, password: str) -> OperationResult:
        v_id = normalize_volunteer_id(volunteer_id)
        if self.users.get(v_id):
            return OperationResult(success=False, message="Volunteer ID already registered")
        self.users.append(UserAccount(volunteerId=v_id, name=name, password=password))
        logger.info("Registered volunteer %s", v_id)
        return OperationResult(success=True)

    def authenticate(self, volunteer_id: str, password: str) -> OperationResult:
        user = self.users.get(normalize_volunteer_id(volunteer_id))
        if user and user.password == password:
            return OperationResult(success=True, user=user)
        return OperationResult(success=False, message="Invalid Volunteer ID or Password")

    def update_user(self, volunteer_id: str, updates: UserUpdate) -> OperationResult:
        v_id = normalize_volunteer_id(volunteer_id)
        current = self.users.get(v_id)
        if not current:
            return OperationResult(success=False, message="User not found")
        changes = updates.model_dump(exclude_unset=True, exclude_none=True)
        saved = self.users.upsert(current.model_copy(update=changes), stamp_updates=False)
        return OperationResult(success=True, user=saved)
