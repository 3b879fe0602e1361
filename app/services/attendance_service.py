# /app/services/attendance_service.py

from typing import Iterable, List, Optional

from ..core import clock
from ..models.attendance_model import AttendanceMode, AttendanceRecord
from ..models.student_model import Student
from .database_service import DatabaseService


def new_attendance_id() -> str:
    return f"ATT-{clock.timestamp_ms()}"


def submit_attendance(
    db: DatabaseService,
    present_ids: Iterable[str],
    mode: AttendanceMode,
    total_students: int,
    record_id: Optional[str] = None,
    date: Optional[str] = None,
) -> AttendanceRecord:
    """
    Saves one attendance session for the whole center. New sessions get an
    `ATT-<timestamp>` ID and the current time; edits pass the existing ID and
    date and are flagged as updated by the store.
    """
    record = AttendanceRecord(
        id=record_id or new_attendance_id(),
        date=date or clock.now_iso(),
        presentStudentIds=list(present_ids),
        mode=mode,
        totalStudents=total_students,
    )
    return db.save_attendance(record)


def resolve_scanned_student(db: DatabaseService, payload: str) -> Optional[Student]:
    """A student's QR code encodes their ID. Returns the student, or None for unknown codes."""
    if not payload or not payload.strip():
        return None
    return db.get_student(payload.strip().upper())


def mark_present(present_ids: List[str], student_id: str) -> List[str]:
    if student_id in present_ids:
        return list(present_ids)
    return [*present_ids, student_id]


def toggle_present(present_ids: List[str], student_id: str) -> List[str]:
    if student_id in present_ids:
        return [sid for sid in present_ids if sid != student_id]
    return [*present_ids, student_id]


def search_students(students: List[Student], term: str) -> List[Student]:
    """Case-insensitive match on name or ID."""
    needle = term.lower()
    return [s for s in students if needle in s.name.lower() or needle in s.id.lower()]
