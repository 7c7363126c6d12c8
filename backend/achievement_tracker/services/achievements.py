"""
Achievement Tracker - Achievement Recorder
Persists achievement snapshots at the end of a run-through
"""
import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.core.grading import performance_level_for, score_percentage
from achievement_tracker.models.assessment import PerformanceLevel, StudentAchievement
from achievement_tracker.schemas.assessment import AchievementCreate
from achievement_tracker.services.students import StudentService

logger = logging.getLogger(__name__)


def overall_performance_level(achievement_data: AchievementCreate) -> PerformanceLevel:
    """Tier for the quiz and assessment questions taken together."""
    correct = achievement_data.correct_quiz_answers + achievement_data.correct_assessment_answers
    total = achievement_data.total_quiz_questions + achievement_data.total_assessment_questions
    return performance_level_for(score_percentage(correct, total))


class AchievementService:
    """Service for recording and listing achievement snapshots."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record_achievement(self, achievement_data: AchievementCreate) -> StudentAchievement:
        """
        Store one achievement snapshot, completed now.

        A caller-supplied performance level is stored as given; otherwise it is
        derived from the combined quiz and assessment totals.

        Raises:
            NotFoundError: If the student does not exist
        """
        performance_level = achievement_data.performance_level or overall_performance_level(
            achievement_data
        )

        try:
            await StudentService(self.db).require_student(achievement_data.student_id)

            achievement = StudentAchievement(
                **achievement_data.model_dump(exclude={"performance_level"}),
                performance_level=performance_level.value,
                completion_date=datetime.now(timezone.utc),
            )
            self.db.add(achievement)
            await self.db.flush()
            await self.db.refresh(achievement)
        except SQLAlchemyError as e:
            logger.error(
                f"Achievement creation failed for student {achievement_data.student_id}: {e}"
            )
            raise

        logger.info(
            f"Recorded achievement {achievement.id} for student {achievement.student_id} "
            f"({achievement.performance_level})"
        )
        return achievement

    async def list_achievements(self, student_id: int) -> list[StudentAchievement]:
        """A student's achievements, most recent completion first."""
        try:
            result = await self.db.execute(
                select(StudentAchievement)
                .where(StudentAchievement.student_id == student_id)
                .order_by(StudentAchievement.completion_date.desc(), StudentAchievement.id.desc())
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing achievements failed for student {student_id}: {e}")
            raise
        return list(result.scalars().all())

    async def get_achievement(self, student_id: int, achievement_id: int) -> StudentAchievement | None:
        """One achievement, only if it belongs to `student_id`."""
        try:
            result = await self.db.execute(
                select(StudentAchievement).where(
                    StudentAchievement.id == achievement_id,
                    StudentAchievement.student_id == student_id,
                )
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Achievement lookup failed for achievement {achievement_id} "
                f"of student {student_id}: {e}"
            )
            raise
        return result.scalar_one_or_none()

    async def get_latest_achievement(self, student_id: int) -> StudentAchievement | None:
        """The student's most recently completed achievement, if any."""
        try:
            result = await self.db.execute(
                select(StudentAchievement)
                .where(StudentAchievement.student_id == student_id)
                .order_by(StudentAchievement.completion_date.desc(), StudentAchievement.id.desc())
                .limit(1)
            )
        except SQLAlchemyError as e:
            logger.error(f"Latest achievement lookup failed for student {student_id}: {e}")
            raise
        return result.scalar_one_or_none()
