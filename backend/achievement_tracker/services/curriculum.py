"""
Achievement Tracker - Curriculum Service
Lesson material and the question bank
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.models.curriculum import MaterialSection, QuestionType, QuizQuestion
from achievement_tracker.schemas.curriculum import MaterialSectionCreate, QuizQuestionCreate

logger = logging.getLogger(__name__)


class CurriculumService:
    """Service for material sections and quiz questions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_material_section(self, section_data: MaterialSectionCreate) -> MaterialSection:
        """Add a section of lesson material."""
        section = MaterialSection(**section_data.model_dump())
        try:
            self.db.add(section)
            await self.db.flush()
            await self.db.refresh(section)
        except SQLAlchemyError as e:
            logger.error(f"Material section creation failed: {e}")
            raise
        return section

    async def list_material_sections(self) -> list[MaterialSection]:
        """Material sections in reading order."""
        try:
            result = await self.db.execute(
                select(MaterialSection).order_by(MaterialSection.order.asc(), MaterialSection.id.asc())
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing material sections failed: {e}")
            raise
        return list(result.scalars().all())

    async def create_question(self, question_data: QuizQuestionCreate) -> QuizQuestion:
        """Add a question to the bank."""
        question = QuizQuestion(**question_data.model_dump(mode="json"))
        try:
            self.db.add(question)
            await self.db.flush()
            await self.db.refresh(question)
        except SQLAlchemyError as e:
            logger.error(f"Quiz question creation failed: {e}")
            raise
        return question

    async def list_questions(self, question_type: QuestionType) -> list[QuizQuestion]:
        """Questions of one type, shuffled so every run-through differs."""
        try:
            result = await self.db.execute(
                select(QuizQuestion)
                .where(QuizQuestion.question_type == question_type.value)
                .order_by(func.random())
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing {question_type.value} questions failed: {e}")
            raise
        return list(result.scalars().all())

    async def get_question(self, question_id: int) -> QuizQuestion | None:
        """Get a question by ID, answer key included."""
        try:
            result = await self.db.execute(
                select(QuizQuestion).where(QuizQuestion.id == question_id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Question lookup failed for question {question_id}: {e}")
            raise
        return result.scalar_one_or_none()
