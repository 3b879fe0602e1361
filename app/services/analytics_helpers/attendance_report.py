# /app/services/analytics_helpers/attendance_report.py

import calendar
from typing import List

import pandas as pd

from app.models.attendance_model import AttendanceRecord
from app.models.report_model import MonthlyReportData, StudentMonthlyStat
from app.models.student_model import Student
from .dates import parse_record_date

ALL_CLASSES = "All"


def _in_month(record: AttendanceRecord, month: int, year: int) -> bool:
    parsed = parse_record_date(record.date)
    return parsed is not None and parsed.month == month + 1 and parsed.year == year


def _presence_frame(records: List[AttendanceRecord]) -> pd.DataFrame:
    """One row per (session, present student)."""
    rows = [
        {"record_id": r.id, "student_id": student_id}
        for r in records
        for student_id in r.presentStudentIds
    ]
    return pd.DataFrame(rows, columns=["record_id", "student_id"])


def build_monthly_report(
    students: List[Student],
    attendance: List[AttendanceRecord],
    center_id: str,
    month: int,
    year: int,
    class_name: str,
) -> MonthlyReportData:
    """
    Builds the monthly attendance report for one center and class.

    `month` is zero-based. Every attendance session in the month is a working
    day whatever class filter is applied; only the student list is narrowed
    by class.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"Month index must be between 0 and 11, got {month}.")

    class_students = [
        s for s in students
        if s.centerId == center_id and (class_name == ALL_CLASSES or s.classLevel == class_name)
    ]
    month_records = [r for r in attendance if _in_month(r, month, year)]
    working_days = len(month_records)

    presence_df = _presence_frame(month_records)
    present_days = presence_df.groupby("student_id")["record_id"].nunique()

    stats_df = pd.DataFrame(
        [{"studentId": s.id, "name": s.name} for s in class_students],
        columns=["studentId", "name"],
    )
    stats_df["presentDays"] = stats_df["studentId"].map(present_days).fillna(0).astype(int)
    stats_df["percentage"] = (stats_df["presentDays"] / working_days) * 100 if working_days > 0 else 0.0

    average = float(stats_df["percentage"].mean()) if not stats_df.empty else 0.0

    # kind="stable" keeps roster order among equal percentages.
    stats_df = stats_df.sort_values("percentage", ascending=False, kind="stable")
    student_stats = [
        StudentMonthlyStat(
            studentId=str(row["studentId"]),
            name=str(row["name"]),
            presentDays=int(row["presentDays"]),
            percentage=float(row["percentage"]),
        )
        for row in stats_df.to_dict("records")
    ]

    return MonthlyReportData(
        month=calendar.month_name[month + 1],
        year=year,
        className=class_name,
        workingDays=working_days,
        averageAttendance=average,
        totalStudents=len(class_students),
        studentStats=student_stats,
    )
