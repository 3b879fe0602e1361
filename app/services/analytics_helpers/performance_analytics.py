# /app/services/analytics_helpers/performance_analytics.py

"""
Per-student academic analytics, computed with pandas over the flattened
subject scores of every test the student has taken.
"""

from typing import List, Optional

import pandas as pd

from app.models.performance_model import PerformanceAnalytics, StudentPerformance, SubjectAverage, TrendPoint
from .dates import parse_record_date
from .grading import ATTENTION_TEST_COUNT, LOW_MARK_THRESHOLD


def _scores_frame(records: List[StudentPerformance]) -> pd.DataFrame:
    """One row per subject score, tagged with the position of its test."""
    rows = [
        {"test_index": i, "subject": s.subject, "score": float(s.score)}
        for i, record in enumerate(records)
        for s in record.scores
    ]
    return pd.DataFrame(rows, columns=["test_index", "subject", "score"])


def calculate_performance_analytics(records: List[StudentPerformance]) -> Optional[PerformanceAnalytics]:
    """
    Returns None when the student has no records.

    - average: mean of every individual subject score across all tests.
    - strongest / weakest: highest / lowest per-subject mean. Ties go to the
      subject seen first.
    - needsAttention: at least ATTENTION_TEST_COUNT distinct tests containing
      a score below LOW_MARK_THRESHOLD.
    - lowMarkAlert: any score below LOW_MARK_THRESHOLD.
    """
    if not records:
        return None

    df = _scores_frame(records)
    if df.empty:
        return PerformanceAnalytics(average=0.0, needsAttention=False, lowMarkAlert=False)

    # sort=False keeps subjects in first-seen order, so idxmax/idxmin resolve ties to the earliest.
    subject_means = df.groupby("subject", sort=False)["score"].mean()
    strongest = subject_means.idxmax()
    weakest = subject_means.idxmin()

    low_marks = df[df["score"] < LOW_MARK_THRESHOLD]

    return PerformanceAnalytics(
        average=float(df["score"].mean()),
        strongest=SubjectAverage(subject=strongest, avg=float(subject_means[strongest])),
        weakest=SubjectAverage(subject=weakest, avg=float(subject_means[weakest])),
        needsAttention=int(low_marks["test_index"].nunique()) >= ATTENTION_TEST_COUNT,
        lowMarkAlert=not low_marks.empty,
    )


def calculate_performance_trend(records: List[StudentPerformance]) -> List[TrendPoint]:
    """
    Average score per test, in record order. Tests named with a date (e.g.
    "2025-03-01") are put in date order among the slots they occupy; every
    other test keeps its position. Tests without scores are left out.
    """
    points = [
        TrendPoint(name=r.testName, avg=sum(s.score for s in r.scores) / len(r.scores))
        for r in records
        if r.scores
    ]

    dated_slots = [i for i, p in enumerate(points) if parse_record_date(p.name) is not None]
    dated_points = sorted((points[i] for i in dated_slots), key=lambda p: parse_record_date(p.name))
    for slot, point in zip(dated_slots, dated_points):
        points[slot] = point
    return points
