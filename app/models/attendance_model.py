# /app/models/attendance_model.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class AttendanceMode(str, Enum):
    QR = "QR"
    MANUAL = "MANUAL"


class AttendanceRecord(BaseModel):
    """
    One attendance session for a whole center. `presentStudentIds` behaves as
    a set: duplicates are dropped while keeping first-seen order.
    """
    id: str
    date: str = Field(..., description="ISO date or datetime of the session.")
    presentStudentIds: List[str] = Field(default_factory=list)
    mode: AttendanceMode = AttendanceMode.MANUAL
    totalStudents: int = 0

    updated: Optional[bool] = None
    lastUpdated: Optional[str] = None

    @field_validator("presentStudentIds")
    @classmethod
    def _dedupe_present_ids(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))
