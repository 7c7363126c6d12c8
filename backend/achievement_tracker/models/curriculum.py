"""
Achievement Tracker - Curriculum Models
SQLAlchemy models for learning material and the question bank
"""
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from achievement_tracker.core.database import Base


class AnswerOption(str, Enum):
    """The four fixed choices of a multiple-choice question."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class QuestionType(str, Enum):
    """Whether a question belongs to the practice quiz or the final assessment."""
    QUIZ = "quiz"
    ASSESSMENT = "assessment"


class DifficultyLevel(str, Enum):
    """Question difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MaterialSection(Base):
    """One section of lesson material, shown in `order`."""

    __tablename__ = "material_sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text)
    topic: Mapped[str] = mapped_column(String(200))
    order: Mapped[int] = mapped_column(Integer, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )


class QuizQuestion(Base):
    """A four-option question used by either the quiz or the assessment."""

    __tablename__ = "quiz_questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_text: Mapped[str] = mapped_column(Text)
    option_a: Mapped[str] = mapped_column(Text)
    option_b: Mapped[str] = mapped_column(Text)
    option_c: Mapped[str] = mapped_column(Text)
    option_d: Mapped[str] = mapped_column(Text)
    correct_answer: Mapped[AnswerOption] = mapped_column(String(1))
    question_type: Mapped[QuestionType] = mapped_column(String(20), index=True)
    difficulty_level: Mapped[DifficultyLevel] = mapped_column(String(20))
    topic: Mapped[str] = mapped_column(String(200))
    explanation: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )
