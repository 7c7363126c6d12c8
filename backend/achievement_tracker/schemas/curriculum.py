"""
Achievement Tracker - Curriculum Schemas
Pydantic schemas for lesson material and quiz questions
"""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from achievement_tracker.models.curriculum import (
    AnswerOption,
    DifficultyLevel,
    QuestionType,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]


# ============================================================================
# Material Sections
# ============================================================================

class MaterialSectionCreate(BaseModel):
    """Schema for adding a section of lesson material."""
    title: NonEmptyStr
    content: NonEmptyStr
    topic: NonEmptyStr
    order: int


class MaterialSectionResponse(MaterialSectionCreate):
    """Schema for material section responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


# ============================================================================
# Quiz Questions
# ============================================================================

class QuizQuestionBase(BaseModel):
    """Fields every question view shares."""
    question_text: NonEmptyStr
    option_a: NonEmptyStr
    option_b: NonEmptyStr
    option_c: NonEmptyStr
    option_d: NonEmptyStr
    question_type: QuestionType
    difficulty_level: DifficultyLevel
    topic: NonEmptyStr


class QuizQuestionCreate(QuizQuestionBase):
    """Schema for adding a question to the bank."""
    correct_answer: AnswerOption
    explanation: str | None = None


class QuizQuestionPublic(QuizQuestionBase):
    """Question as shown to a student before answering (no answer key)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class QuizQuestionResponse(QuizQuestionPublic):
    """Full question including the answer key."""
    correct_answer: AnswerOption
    explanation: str | None = None
