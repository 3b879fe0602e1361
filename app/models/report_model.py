# /app/models/report_model.py

from typing import List

from pydantic import BaseModel, Field


class StudentMonthlyStat(BaseModel):
    studentId: str
    name: str
    presentDays: int
    percentage: float


class MonthlyReportData(BaseModel):
    """
    Defines the data contract for a class's monthly attendance report, as
    consumed by the PDF/Excel exporters.
    """
    month: str = Field(..., description="English month name, e.g. 'January'.")
    year: int
    className: str
    workingDays: int = Field(..., description="Number of attendance sessions recorded in the month.")
    averageAttendance: float
    totalStudents: int
    studentStats: List[StudentMonthlyStat]
