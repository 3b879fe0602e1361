# /app/services/analytics_service.py

"""
The Analytics Engine. Every function reads a snapshot (copies) from the
DatabaseService and hands it to a pure helper; nothing here mutates records.
"""

from typing import List, Optional

from ..models.performance_model import PerformanceAnalytics, TrendPoint
from ..models.report_model import MonthlyReportData
from .database_service import DatabaseService
from .analytics_helpers.attendance_report import build_monthly_report
from .analytics_helpers.performance_analytics import calculate_performance_analytics, calculate_performance_trend


def get_performance_analytics(db: DatabaseService, student_id: str) -> Optional[PerformanceAnalytics]:
    """Academic summary for one student, or None if they have no performance records."""
    return calculate_performance_analytics(db.get_performance_by_student(student_id))


def get_performance_trend(db: DatabaseService, student_id: str) -> List[TrendPoint]:
    return calculate_performance_trend(db.get_performance_by_student(student_id))


def get_monthly_report(
    db: DatabaseService,
    center_id: str,
    month: int,
    year: int,
    class_name: str = "All",
) -> MonthlyReportData:
    """
    Monthly attendance report for a center. `month` is zero-based and
    `class_name` is either "All" or an exact class level.
    """
    return build_monthly_report(
        students=db.get_students(),
        attendance=db.get_attendance_history(),
        center_id=center_id,
        month=month,
        year=year,
        class_name=class_name,
    )
