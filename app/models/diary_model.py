# /app/models/diary_model.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class VolunteerStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class DiaryVolunteerEntry(BaseModel):
    volunteerId: str = ""
    name: str = ""
    inTime: str = "16:00"
    outTime: str = "18:00"
    status: VolunteerStatus = VolunteerStatus.PRESENT
    classHandled: str = ""
    subject: str = ""
    topic: str = ""


class DiaryEntry(BaseModel):
    """A volunteer diary log for one center day."""
    id: str
    date: str
    studentCount: int = 0
    inTime: str = "16:00"
    outTime: str = "18:00"
    thought: str = Field(default="", description="Thought of the day.")
    volunteers: List[DiaryVolunteerEntry] = Field(default_factory=list)

    updated: Optional[bool] = None
    lastUpdated: Optional[str] = None
