"""
Achievement Tracker - Grading Rules
Percentage rounding and the performance-level decision table
"""
from achievement_tracker.models.assessment import PerformanceLevel


# Inclusive lower bound of each tier, checked from the top down
PERFORMANCE_THRESHOLDS: list[tuple[int, PerformanceLevel]] = [
    (90, PerformanceLevel.EXCELLENT),
    (70, PerformanceLevel.GOOD),
    (50, PerformanceLevel.SATISFACTORY),
]


def score_percentage(correct: int, total: int) -> int:
    """
    Whole-number percentage of `correct` out of `total`.

    Halves round up (1 of 8 is 13%). No questions at all is 0%.
    """
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)


def performance_level_for(percentage: int) -> PerformanceLevel:
    """Map a percentage onto its performance tier."""
    for threshold, level in PERFORMANCE_THRESHOLDS:
        if percentage >= threshold:
            return level
    return PerformanceLevel.NEEDS_IMPROVEMENT
