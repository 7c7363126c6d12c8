"""
Achievement Tracker - Assessment Models
SQLAlchemy models for answered questions and achievement snapshots
"""
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from achievement_tracker.core.database import Base
from achievement_tracker.models.curriculum import AnswerOption

if TYPE_CHECKING:
    from achievement_tracker.models.curriculum import QuizQuestion
    from achievement_tracker.models.user import Student


class AttemptType(str, Enum):
    """Practice quiz attempt or final assessment attempt."""
    QUIZ = "quiz"
    ASSESSMENT = "assessment"


class PerformanceLevel(str, Enum):
    """Qualitative tier derived from a score percentage."""
    EXCELLENT = "excellent"
    GOOD = "good"
    SATISFACTORY = "satisfactory"
    NEEDS_IMPROVEMENT = "needs_improvement"


class QuizAttempt(Base):
    """
    One student's answer to one question.

    Rows are append-only: `is_correct` is fixed when the answer is submitted
    and never recomputed.
    """

    __tablename__ = "quiz_attempts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        index=True
    )
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("quiz_questions.id", ondelete="CASCADE"),
        index=True
    )
    selected_answer: Mapped[AnswerOption] = mapped_column(String(1))
    is_correct: Mapped[bool] = mapped_column(Boolean)
    attempt_type: Mapped[AttemptType] = mapped_column(String(20), index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )

    # Relationships
    student: Mapped["Student"] = relationship("Student", back_populates="attempts")
    question: Mapped["QuizQuestion"] = relationship("QuizQuestion")


class StudentAchievement(Base):
    """Frozen snapshot of quiz and assessment outcomes at one completion event."""

    __tablename__ = "student_achievements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        index=True
    )

    # Score details (percentages are whole numbers 0-100)
    quiz_score: Mapped[int] = mapped_column(Integer)
    assessment_score: Mapped[int] = mapped_column(Integer)
    total_quiz_questions: Mapped[int] = mapped_column(Integer)
    correct_quiz_answers: Mapped[int] = mapped_column(Integer)
    total_assessment_questions: Mapped[int] = mapped_column(Integer)
    correct_assessment_answers: Mapped[int] = mapped_column(Integer)

    time_spent_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    performance_level: Mapped[PerformanceLevel] = mapped_column(String(20))

    completion_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )

    # Relationships
    student: Mapped["Student"] = relationship("Student", back_populates="achievements")
