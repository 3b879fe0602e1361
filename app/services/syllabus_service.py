# /app/services/syllabus_service.py

from typing import Dict, List

from ..core import clock
from ..models.syllabus_model import SyllabusProgress
from .database_service import DatabaseService


def record_weekly_progress(
    db: DatabaseService,
    center_id: str,
    week: str,
    class_name: str,
    percentages: Dict[str, float],
) -> List[SyllabusProgress]:
    """
    Saves one class's completion percentage per subject for a week,
    replacing whatever was recorded before for the same subjects.
    """
    stamp = clock.now_iso()
    batch = [
        SyllabusProgress(
            id=f"{center_id}-{week}-{class_name}-{subject}",
            centerId=center_id,
            week=week,
            className=class_name,
            subject=subject,
            percentage=percentage,
            lastUpdated=stamp,
        )
        for subject, percentage in percentages.items()
    ]
    db.save_syllabus_progress(batch)
    return batch
