# /app/services/history_service.py

"""
The unified history view: admissions, attendance sessions and diary logs
merged into one list, newest first, so volunteers can find a record and open
it for correction or deletion.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .database_service import DatabaseService
from .analytics_helpers.dates import calendar_day, parse_record_date
from ..models.history_model import HistoryItem, HistoryType

logger = logging.getLogger(__name__)

ALL_TYPES = "ALL"


# --- HELPER FUNCTIONS ---

def _admission_items(db: DatabaseService) -> List[HistoryItem]:
    return [
        HistoryItem(
            id=s.id,
            type=HistoryType.ADMISSION,
            date=s.admissionDate,
            details=f"Student: {s.name}",
            data=s.model_dump(mode="json"),
            updated=s.updated,
        )
        for s in db.get_students()
    ]


def _attendance_items(db: DatabaseService) -> List[HistoryItem]:
    return [
        HistoryItem(
            id=a.id,
            type=HistoryType.ATTENDANCE,
            date=calendar_day(a.date),
            details=f"{a.totalStudents} Students Present ({a.mode.value})",
            data=a.model_dump(mode="json"),
            updated=a.updated,
        )
        for a in db.get_attendance_history()
    ]


def _diary_items(db: DatabaseService) -> List[HistoryItem]:
    return [
        HistoryItem(
            id=d.id,
            type=HistoryType.DIARY,
            date=d.date,
            details=f"Students: {d.studentCount}, Volunteers: {len(d.volunteers)}",
            data=d.model_dump(mode="json"),
            updated=d.updated,
        )
        for d in db.get_diaries()
    ]


def _sort_key(item: HistoryItem) -> datetime:
    # Unparsable dates sort after every real date.
    return parse_record_date(item.date) or datetime.min


# --- PUBLIC SERVICE FUNCTIONS ---

def get_all_history(db: DatabaseService) -> List[HistoryItem]:
    """
    Returns every admission, attendance session and diary entry as a
    HistoryItem, sorted newest first. The sort is stable, so items on the
    same date keep the order Admission, Attendance, Diary.
    """
    items = _admission_items(db) + _attendance_items(db) + _diary_items(db)
    # sorted() with reverse=True keeps equal keys in their original order.
    return sorted(items, key=_sort_key, reverse=True)


def filter_history(items: List[HistoryItem], history_type: Optional[str] = None) -> List[HistoryItem]:
    """Narrows a history list to one type. None or "ALL" returns it unchanged."""
    if not history_type or history_type == ALL_TYPES:
        return list(items)
    return [item for item in items if item.type == history_type]


def delete_history_item(db: DatabaseService, item_id: str, history_type: str) -> bool:
    """
    Deletes exactly one record from the collection that matches
    `history_type`. Unknown types are ignored. Always returns True.
    """
    if history_type == HistoryType.ADMISSION.value:
        db.delete_student(item_id)
    elif history_type == HistoryType.ATTENDANCE.value:
        db.delete_attendance(item_id)
    elif history_type == HistoryType.DIARY.value:
        db.delete_diary(item_id)
    else:
        logger.warning("Ignoring delete for unknown history type %r (id %s)", history_type, item_id)
    return True
