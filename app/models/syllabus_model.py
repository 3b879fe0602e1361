# /app/models/syllabus_model.py

from typing import Tuple

from pydantic import BaseModel, Field


class SyllabusProgress(BaseModel):
    id: str
    centerId: str
    week: str
    className: str
    subject: str
    percentage: float = Field(default=0, description="Completion percentage for the week.")
    lastUpdated: str = ""

    @property
    def composite_key(self) -> Tuple[str, str, str, str]:
        return (self.centerId, self.week, self.className, self.subject)
