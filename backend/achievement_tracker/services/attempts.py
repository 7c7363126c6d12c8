"""
Achievement Tracker - Attempt Store
Append-only record of every answered question
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.models.assessment import AttemptType, QuizAttempt
from achievement_tracker.schemas.assessment import SubmitAnswerRequest
from achievement_tracker.services.curriculum import CurriculumService
from achievement_tracker.services.errors import NotFoundError
from achievement_tracker.services.students import StudentService

logger = logging.getLogger(__name__)


class AttemptStore:
    """
    Stores one row per submitted answer.

    Correctness is decided once, against the question's answer key at the
    moment of submission. Attempts are never updated or deleted here.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit_answer(self, answer: SubmitAnswerRequest) -> QuizAttempt:
        """
        Grade and store an answer.

        Raises:
            NotFoundError: If the student or the question does not exist
        """
        try:
            await StudentService(self.db).require_student(answer.student_id)

            question = await CurriculumService(self.db).get_question(answer.question_id)
            if question is None:
                raise NotFoundError("Quiz question", answer.question_id)

            attempt = QuizAttempt(
                student_id=answer.student_id,
                question_id=answer.question_id,
                selected_answer=answer.selected_answer.value,
                is_correct=answer.selected_answer.value == question.correct_answer,
                attempt_type=answer.attempt_type.value,
            )
            self.db.add(attempt)
            await self.db.flush()
            await self.db.refresh(attempt)
        except SQLAlchemyError as e:
            logger.error(f"Submit answer failed for student {answer.student_id}: {e}")
            raise

        logger.info(
            f"Stored {answer.attempt_type.value} attempt {attempt.id} for student "
            f"{answer.student_id} (correct={attempt.is_correct})"
        )
        return attempt

    async def list_attempts(
        self,
        student_id: int,
        attempt_type: AttemptType | None = None,
    ) -> list[QuizAttempt]:
        """A student's attempts, oldest first, optionally of one kind only."""
        query = select(QuizAttempt).where(QuizAttempt.student_id == student_id)
        if attempt_type is not None:
            query = query.where(QuizAttempt.attempt_type == attempt_type.value)

        try:
            result = await self.db.execute(
                query.order_by(QuizAttempt.created_at.asc(), QuizAttempt.id.asc())
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing attempts failed for student {student_id}: {e}")
            raise
        return list(result.scalars().all())
