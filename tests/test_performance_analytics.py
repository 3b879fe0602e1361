# /tests/test_performance_analytics.py

import pytest

from app.services import analytics_service
from app.services.analytics_helpers.grading import calculate_grade, clamp_score
from app.services.analytics_helpers.performance_analytics import calculate_performance_analytics
from app.models.performance_model import StudentPerformance, SubjectScore


def _test(test_id, scores, student_id="S1", name=None):
    """Builds a performance record from a {subject: score} mapping."""
    return StudentPerformance(
        id=test_id,
        studentId=student_id,
        testName=name or f"Test {test_id}",
        date="2025-02-01",
        scores=[SubjectScore(subject=s, score=v, grade=calculate_grade(v)) for s, v in scores.items()],
    )


def test_no_records_returns_none(db_service):
    assert analytics_service.get_performance_analytics(db_service, "S1") is None


def test_average_is_over_every_subject_score():
    """(80 + 60 + 100) / 3 = 80, not the mean of per-test averages (85)."""
    analytics = calculate_performance_analytics([
        _test("t1", {"Math": 80, "Science": 60}),
        _test("t2", {"Math": 100}),
    ])
    assert analytics.average == pytest.approx(80)
    assert analytics.strongest.subject == "Math"
    assert analytics.strongest.avg == pytest.approx(90)
    assert analytics.weakest.subject == "Science"
    assert analytics.weakest.avg == pytest.approx(60)


def test_ties_go_to_the_first_subject_seen():
    analytics = calculate_performance_analytics([
        _test("t1", {"English": 70, "Math": 70, "Science": 70}),
    ])
    assert analytics.strongest.subject == "English"
    assert analytics.weakest.subject == "English"


@pytest.mark.parametrize("low_tests, expected", [(2, False), (3, True), (4, True)])
def test_needs_attention_counts_tests_with_a_low_mark(low_tests, expected):
    records = [_test(f"t{i}", {"Math": 39, "Science": 75}) for i in range(low_tests)]
    records.append(_test("good", {"Math": 90}))
    analytics = calculate_performance_analytics(records)
    assert analytics.needsAttention is expected
    assert analytics.lowMarkAlert is True


def test_many_low_marks_in_one_test_is_not_three_tests():
    analytics = calculate_performance_analytics([
        _test("t1", {"Math": 10, "Science": 20, "English": 30}),
    ])
    assert analytics.needsAttention is False
    assert analytics.lowMarkAlert is True


def test_forty_is_not_a_low_mark():
    analytics = calculate_performance_analytics([_test("t1", {"Math": 40})])
    assert analytics.lowMarkAlert is False


def test_records_without_scores():
    analytics = calculate_performance_analytics([_test("t1", {})])
    assert analytics.average == 0
    assert analytics.strongest is None


def test_analytics_only_reads_the_requested_student(db_service):
    db_service.save_performance(_test("t1", {"Math": 30}, student_id="S1"))
    db_service.save_performance(_test("t2", {"Math": 95}, student_id="S2"))
    analytics = analytics_service.get_performance_analytics(db_service, "S2")
    assert analytics.average == pytest.approx(95)
    assert analytics.lowMarkAlert is False


def test_performance_trend_keeps_record_order_for_plain_names(db_service):
    """A test named "Unit Test 10" must not jump ahead of "Unit Test 2"."""
    for i in range(1, 12):
        db_service.save_performance(_test(f"t{i}", {"Math": 40 + i}, name=f"Unit Test {i}"))
    trend = analytics_service.get_performance_trend(db_service, "S1")
    assert [p.name for p in trend] == [f"Unit Test {i}" for i in range(1, 12)]
    assert trend[-1].avg == pytest.approx(51)


def test_performance_trend_orders_dated_tests_by_date(db_service):
    db_service.save_performance(_test("t1", {"Math": 50, "Science": 70}, name="2025-03-01"))
    db_service.save_performance(_test("t2", {"Math": 80}, name="Midterm"))
    db_service.save_performance(_test("t3", {"Math": 90}, name="2025-01-15"))
    trend = analytics_service.get_performance_trend(db_service, "S1")
    assert [(p.name, p.avg) for p in trend] == [("2025-01-15", 90), ("Midterm", 80), ("2025-03-01", 60)]


@pytest.mark.parametrize("score, grade", [
    (100, "A+"), (90, "A+"), (89, "A"), (80, "A"), (70, "B"),
    (69, "C"), (50, "C"), (49, "D"), (40, "D"), (39, "F"), (0, "F"),
])
def test_calculate_grade_thresholds(score, grade):
    assert calculate_grade(score) == grade


def test_clamp_score():
    assert clamp_score(120) == 100
    assert clamp_score(-5) == 0
    assert clamp_score(55) == 55
