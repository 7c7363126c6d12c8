"""
Achievement Tracker - Report Assembler
Builds the printable achievement report for a student
"""
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.models.assessment import AttemptType, QuizAttempt
from achievement_tracker.schemas.assessment import (
    AchievementReport,
    AchievementResponse,
    QuizAttemptResponse,
    ReportDetails,
)
from achievement_tracker.schemas.user import StudentResponse
from achievement_tracker.services.achievements import AchievementService
from achievement_tracker.services.attempts import AttemptStore
from achievement_tracker.services.students import StudentService


def _details(total: int, correct: int, percentage: int, attempts: list[QuizAttempt]) -> ReportDetails:
    return ReportDetails(
        total_questions=total,
        correct_answers=correct,
        score_percentage=percentage,
        questions_attempted=tuple(QuizAttemptResponse.model_validate(a) for a in attempts),
    )


class ReportService:
    """
    Assembles a report from a student, one achievement and their attempts.

    The achievement's stored counts are authoritative for the report totals;
    the attempt lists are attached as evidence and are not re-scored.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_report(
        self,
        student_id: int,
        achievement_id: int | None = None,
    ) -> AchievementReport | None:
        """
        Report for a specific achievement, or the latest one when no id is given.

        Returns None when the student does not exist or no matching achievement
        belongs to them.
        """
        student = await StudentService(self.db).get_student(student_id)
        if student is None:
            return None

        achievements = AchievementService(self.db)
        if achievement_id is not None:
            achievement = await achievements.get_achievement(student_id, achievement_id)
        else:
            achievement = await achievements.get_latest_achievement(student_id)
        if achievement is None:
            return None

        attempt_store = AttemptStore(self.db)
        quiz_attempts = await attempt_store.list_attempts(student_id, AttemptType.QUIZ)
        assessment_attempts = await attempt_store.list_attempts(student_id, AttemptType.ASSESSMENT)

        return AchievementReport(
            student=StudentResponse.model_validate(student),
            achievement=AchievementResponse.model_validate(achievement),
            quiz_details=_details(
                achievement.total_quiz_questions,
                achievement.correct_quiz_answers,
                achievement.quiz_score,
                quiz_attempts,
            ),
            assessment_details=_details(
                achievement.total_assessment_questions,
                achievement.correct_assessment_answers,
                achievement.assessment_score,
                assessment_attempts,
            ),
        )
