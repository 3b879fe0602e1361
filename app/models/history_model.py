# /app/models/history_model.py

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class HistoryType(str, Enum):
    ADMISSION = "Admission"
    ATTENDANCE = "Attendance"
    DIARY = "Diary"


class HistoryItem(BaseModel):
    """
    One row of the unified history view. `data` carries the full underlying
    record so the presentation layer can open it for correction.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: str
    type: HistoryType
    date: str
    details: str
    data: Dict[str, Any]
    updated: Optional[bool] = None
