# /app/models/performance_model.py

from typing import List, Optional

from pydantic import BaseModel, Field


class SubjectScore(BaseModel):
    subject: str
    score: float = Field(..., description="Score out of 100.")
    grade: str
    remarks: Optional[str] = None


class StudentPerformance(BaseModel):
    """
    One test sitting for one student. Grades are expected to be consistent
    with scores when the record is saved; the store does not recompute them.
    """
    id: str
    studentId: str
    testName: str
    date: str
    scores: List[SubjectScore] = Field(default_factory=list)

    updated: Optional[bool] = None
    lastUpdated: Optional[str] = None


class SubjectAverage(BaseModel):
    subject: str
    avg: float


class PerformanceAnalytics(BaseModel):
    """Derived academic summary for a single student."""
    average: float
    strongest: Optional[SubjectAverage] = None
    weakest: Optional[SubjectAverage] = None
    needsAttention: bool = Field(..., description="Three or more tests with a score below 40.")
    lowMarkAlert: bool = Field(..., description="Any single score below 40.")


class TrendPoint(BaseModel):
    name: str
    avg: float
