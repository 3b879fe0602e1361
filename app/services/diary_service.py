# /app/services/diary_service.py

from typing import List, Optional

from ..core import clock
from ..models.diary_model import DiaryEntry, DiaryVolunteerEntry
from .database_service import DatabaseService


def submit_diary(
    db: DatabaseService,
    volunteers: List[DiaryVolunteerEntry],
    date: Optional[str] = None,
    student_count: int = 0,
    in_time: str = "16:00",
    out_time: str = "18:00",
    thought: str = "",
    entry_id: Optional[str] = None,
) -> DiaryEntry:
    """Saves a diary log. New entries get a timestamp ID and today's date."""
    entry = DiaryEntry(
        id=entry_id or str(clock.timestamp_ms()),
        date=date or clock.today_iso(),
        studentCount=student_count,
        inTime=in_time,
        outTime=out_time,
        thought=thought,
        volunteers=volunteers,
    )
    return db.save_diary(entry)
