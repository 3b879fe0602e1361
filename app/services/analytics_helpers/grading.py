# /app/services/analytics_helpers/grading.py

# (minimum score, grade), checked top-down.
GRADE_THRESHOLDS = [
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (50, "C"),
    (40, "D"),
]
FAILING_GRADE = "F"

# Scores strictly below this raise a low-mark alert.
LOW_MARK_THRESHOLD = 40

# Number of tests with a low mark after which a student needs attention.
ATTENTION_TEST_COUNT = 3


def calculate_grade(score: float) -> str:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


def clamp_score(score: float) -> float:
    return min(100, max(0, score))
