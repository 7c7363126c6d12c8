"""
Achievement Tracker - Score Aggregator
Reduces a student's attempts of one kind to a score summary
"""
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.core.grading import performance_level_for, score_percentage
from achievement_tracker.models.assessment import AttemptType
from achievement_tracker.schemas.assessment import ScoreSummary
from achievement_tracker.services.attempts import AttemptStore


class ScoreAggregator:
    """Read-only scoring over the attempt store. Nothing is cached."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def compute_score(self, student_id: int, attempt_type: AttemptType) -> ScoreSummary:
        """
        Score every attempt of `attempt_type` the student has made.

        A student with no attempts of that kind scores 0% (needs_improvement);
        that is a valid result, not an error.
        """
        attempts = await AttemptStore(self.db).list_attempts(student_id, attempt_type)

        total = len(attempts)
        correct = sum(1 for attempt in attempts if attempt.is_correct)
        percentage = score_percentage(correct, total)

        return ScoreSummary(
            total_questions=total,
            correct_answers=correct,
            score_percentage=percentage,
            performance_level=performance_level_for(percentage),
        )
