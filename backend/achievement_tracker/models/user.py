"""
Achievement Tracker - Student Model
SQLAlchemy model for the learners who take quizzes and assessments
"""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from achievement_tracker.core.database import Base

if TYPE_CHECKING:
    from achievement_tracker.models.assessment import QuizAttempt, StudentAchievement


class Student(Base):
    """A learner working through the lesson, quiz and assessment."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    grade: Mapped[str] = mapped_column(String(50))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )

    # Relationships
    attempts: Mapped[list["QuizAttempt"]] = relationship(
        "QuizAttempt",
        back_populates="student",
        cascade="all, delete-orphan"
    )
    achievements: Mapped[list["StudentAchievement"]] = relationship(
        "StudentAchievement",
        back_populates="student",
        cascade="all, delete-orphan"
    )
