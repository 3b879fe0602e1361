# /app/services/database_service.py

"""
The Records Store: sole owner of every collection of the portal.

Collections are loaded once when the service is created and are the source
of truth for the rest of the process. Reads hand out deep copies; every
mutation writes the whole collection through to the durable key-value store
immediately. Storage failures are logged by `CollectionStorage` and never
reach the caller.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from app.core import clock, config
from app.models.attendance_model import AttendanceRecord
from app.models.diary_model import DiaryEntry
from app.models.performance_model import StudentPerformance
from app.models.student_model import Student
from app.models.syllabus_model import SyllabusProgress
from app.models.user_model import Feedback, FeedbackCreate, OperationResult, UserAccount, UserUpdate

# --- Repository Imports ---
from .database_helpers.collection_storage import CollectionStorage, KeyValueBackend
from .database_helpers.record_collection import RecordCollection
from .database_helpers.storage_repository_file import StorageRepositoryFile
from .database_helpers.storage_repository_sql import StorageRepositorySQL
from .database_helpers.syllabus_repository import SyllabusRepository
from .database_helpers.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_STUDENTS: List[Student] = []


class DatabaseService:
    def __init__(
        self,
        db_session: Optional[Session] = None,
        backend: Optional[KeyValueBackend] = None,
        key_prefix: Optional[str] = None,
    ):
        """
        Initializes the Records Store.
        An explicit `backend` wins. Otherwise USE_SQL_STORAGE picks the SQL
        table (which requires a db_session) or the JSON files under DATA_DIR.
        """
        if backend is None:
            if config.USE_SQL_STORAGE:
                if not db_session:
                    raise ValueError("A database session is required when USE_SQL_STORAGE is true.")
                backend = StorageRepositorySQL(db_session)
            else:
                backend = StorageRepositoryFile(config.DATA_DIR)

        self.storage = CollectionStorage(backend, key_prefix or config.STORAGE_KEY_PREFIX)

        # --- Initialize ALL collections from durable storage ---
        self.students = RecordCollection("students", Student, self.storage, default=DEFAULT_STUDENTS)
        self.diaries = RecordCollection("diaries", DiaryEntry, self.storage)
        self.attendance = RecordCollection("attendance", AttendanceRecord, self.storage)
        self.performance = RecordCollection("performance", StudentPerformance, self.storage)
        self.feedbacks = RecordCollection("feedbacks", Feedback, self.storage)
        self.user_repo = UserRepository(self.storage)
        self.syllabus_repo = SyllabusRepository(self.storage)
        logger.info(
            "Records store ready: %d students, %d attendance records, %d diaries",
            len(self.students), len(self.attendance), len(self.diaries),
        )

    # --- STUDENT METHODS ---
    def get_students(self) -> List[Student]: return self.students.list()
    def get_student(self, student_id: str) -> Optional[Student]: return self.students.get(student_id)
    def add_student(self, student: Student) -> Student: return self.students.upsert(student)
    def delete_student(self, student_id: str) -> bool: return self.students.delete(student_id)

    # --- DIARY METHODS ---
    def get_diaries(self) -> List[DiaryEntry]: return self.diaries.list()
    def save_diary(self, entry: DiaryEntry) -> DiaryEntry: return self.diaries.upsert(entry)
    def delete_diary(self, diary_id: str) -> bool: return self.diaries.delete(diary_id)

    # --- ATTENDANCE METHODS ---
    def get_attendance_history(self) -> List[AttendanceRecord]: return self.attendance.list()
    def save_attendance(self, record: AttendanceRecord) -> AttendanceRecord: return self.attendance.upsert(record)
    def delete_attendance(self, record_id: str) -> bool: return self.attendance.delete(record_id)

    # --- PERFORMANCE METHODS ---
    def save_performance(self, performance: StudentPerformance) -> StudentPerformance: return self.performance.upsert(performance)

    def get_performance_by_student(self, student_id: str) -> List[StudentPerformance]:
        return self.performance.filter(lambda p: p.studentId == student_id)

    # --- SYLLABUS METHODS ---
    def get_syllabus_progress(self, center_id: str, week: str) -> List[SyllabusProgress]:
        return self.syllabus_repo.get_progress(center_id, week)

    def save_syllabus_progress(self, batch: Sequence[SyllabusProgress]) -> bool:
        self.syllabus_repo.save_batch(batch)
        return True

    # --- USER METHODS (DELEGATED) ---
    def get_users(self) -> List[UserAccount]: return self.user_repo.get_all_users()
    def register_user(self, volunteer_id: str, name: str, password: str) -> OperationResult: return self.user_repo.register_user(volunteer_id, name, password)
    def authenticate(self, volunteer_id: str, password: str) -> OperationResult: return self.user_repo.authenticate(volunteer_id, password)
    def update_user(self, volunteer_id: str, updates: UserUpdate) -> OperationResult: return self.user_repo.update_user(volunteer_id, updates)

    # --- FEEDBACK METHODS ---
    def get_feedbacks(self) -> List[Feedback]: return self.feedbacks.list()

    def save_feedback(self, feedback: FeedbackCreate) -> OperationResult:
        """Feedback is append-only: it gets a timestamp ID and is never updated."""
        record = Feedback(
            id=str(clock.timestamp_ms()),
            date=clock.now_iso(),
            **feedback.model_dump(),
        )
        self.feedbacks.append(record)
        return OperationResult(success=True)


# --- PROCESS-WIDE INSTANCE ---
_db_service_instance: Optional[DatabaseService] = None


def get_db_service() -> DatabaseService:
    """
    Returns the process-wide DatabaseService, creating it on first use.
    With SQL storage the service keeps one session open for its lifetime.
    """
    global _db_service_instance
    if _db_service_instance is None:
        db_session = None
        if config.USE_SQL_STORAGE:
            from app.db.database import SessionLocal, init_db
            init_db()
            db_session = SessionLocal()
        _db_service_instance = DatabaseService(db_session=db_session)
    return _db_service_instance


def reset_db_service() -> None:
    """Drops the process-wide instance so the next call reloads from storage."""
    global _db_service_instance
    _db_service_instance = None
