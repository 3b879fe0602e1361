# /app/services/performance_service.py

"""
Recording test results. This is the producing side of performance data:
scores are clamped and graded here, and the store saves them as given.
"""

from typing import Dict, Optional

from ..core import clock
from ..models.performance_model import StudentPerformance, SubjectScore
from .database_service import DatabaseService
from .analytics_helpers.grading import calculate_grade, clamp_score


def record_test(
    db: DatabaseService,
    student_id: str,
    test_name: str,
    scores: Dict[str, float],
    date: Optional[str] = None,
    remarks: Optional[Dict[str, str]] = None,
) -> StudentPerformance:
    """
    Builds and saves one test record. Subjects keep the order of `scores`.

    Raises:
        ValueError: if the test name is blank or no subjects were given.
    """
    if not test_name or not test_name.strip():
        raise ValueError("Please enter a Test Name.")
    if not scores:
        raise ValueError("Please add at least one subject.")

    remarks = remarks or {}
    subject_scores = []
    for subject, raw_score in scores.items():
        score = clamp_score(raw_score or 0)
        subject_scores.append(SubjectScore(
            subject=subject,
            score=score,
            grade=calculate_grade(score),
            remarks=remarks.get(subject, ""),
        ))

    performance = StudentPerformance(
        id=str(clock.timestamp_ms()),
        studentId=student_id,
        testName=test_name.strip(),
        date=date or clock.today_iso(),
        scores=subject_scores,
    )
    return db.save_performance(performance)
