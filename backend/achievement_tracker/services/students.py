"""
Achievement Tracker - Student Service
Registration and lookup of students
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from achievement_tracker.models.user import Student
from achievement_tracker.schemas.user import StudentCreate
from achievement_tracker.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class StudentService:
    """Service for student records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_student(self, student_data: StudentCreate) -> Student:
        """
        Register a new student.

        Raises:
            IntegrityError: If the email is already registered
        """
        student = Student(**student_data.model_dump())
        try:
            self.db.add(student)
            await self.db.flush()
            await self.db.refresh(student)
        except SQLAlchemyError as e:
            logger.error(f"Student creation failed: {e}")
            raise

        logger.info(f"Created student {student.id}")
        return student

    async def list_students(self) -> list[Student]:
        """All students, newest first."""
        try:
            result = await self.db.execute(
                select(Student).order_by(Student.created_at.desc(), Student.id.desc())
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing students failed: {e}")
            raise
        return list(result.scalars().all())

    async def get_student(self, student_id: int) -> Student | None:
        """Get student by ID."""
        try:
            result = await self.db.execute(
                select(Student).where(Student.id == student_id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Student lookup failed for student {student_id}: {e}")
            raise
        return result.scalar_one_or_none()

    async def require_student(self, student_id: int) -> Student:
        """
        Load a student that a new row is about to reference.

        On PostgreSQL the row is held with FOR KEY SHARE until the surrounding
        transaction ends, so it cannot be deleted between this check and the
        dependent insert. Concurrent inserts for the same student do not block
        each other.

        Raises:
            NotFoundError: If the student does not exist
        """
        try:
            result = await self.db.execute(
                select(Student)
                .where(Student.id == student_id)
                .with_for_update(read=True, key_share=True)
            )
        except SQLAlchemyError as e:
            logger.error(f"Student lookup failed for student {student_id}: {e}")
            raise
        student = result.scalar_one_or_none()
        if student is None:
            raise NotFoundError("Student", student_id)
        return student
