"""
Achievement Tracker - Assessment Schemas
Pydantic schemas for answers, scores, achievements and the printable report
"""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from achievement_tracker.core.grading import score_percentage
from achievement_tracker.models.assessment import AttemptType, PerformanceLevel
from achievement_tracker.models.curriculum import AnswerOption
from achievement_tracker.schemas.user import StudentResponse

Percentage = Annotated[int, Field(ge=0, le=100)]
Count = Annotated[int, Field(ge=0)]

# Primary keys are 32-bit integers on PostgreSQL
MAX_RECORD_ID = 2**31 - 1
RecordId = Annotated[int, Field(ge=1, le=MAX_RECORD_ID)]


# ============================================================================
# Attempts
# ============================================================================

class SubmitAnswerRequest(BaseModel):
    """A student's answer to one question."""
    student_id: RecordId
    question_id: RecordId
    selected_answer: AnswerOption
    attempt_type: AttemptType


class QuizAttemptResponse(BaseModel):
    """A stored attempt."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    student_id: int
    question_id: int
    selected_answer: AnswerOption
    is_correct: bool
    attempt_type: AttemptType
    created_at: datetime


# ============================================================================
# Scores
# ============================================================================

class ScoreSummary(BaseModel):
    """Aggregate over a student's attempts of one kind."""
    model_config = ConfigDict(frozen=True)

    total_questions: int
    correct_answers: int
    score_percentage: int
    performance_level: PerformanceLevel


# ============================================================================
# Achievements
# ============================================================================

class AchievementCreate(BaseModel):
    """
    Finalized quiz and assessment results for one completion event.

    Each score must be the rounded percentage of its own counts. When
    `performance_level` is omitted the recorder derives it from the combined
    quiz and assessment totals.
    """
    student_id: RecordId
    quiz_score: Percentage
    assessment_score: Percentage
    total_quiz_questions: Count
    correct_quiz_answers: Count
    total_assessment_questions: Count
    correct_assessment_answers: Count
    time_spent_minutes: Count | None = None
    performance_level: PerformanceLevel | None = None

    @model_validator(mode="after")
    def check_counts_match_scores(self) -> "AchievementCreate":
        blocks = [
            ("quiz", self.quiz_score, self.correct_quiz_answers, self.total_quiz_questions),
            ("assessment", self.assessment_score, self.correct_assessment_answers,
             self.total_assessment_questions),
        ]
        for kind, score, correct, total in blocks:
            if correct > total:
                raise ValueError(f"{kind}: correct answers ({correct}) exceed total questions ({total})")
            expected = score_percentage(correct, total)
            if score != expected:
                raise ValueError(
                    f"{kind}: score {score} does not match {correct}/{total} (expected {expected})"
                )
        return self


class AchievementResponse(BaseModel):
    """A stored achievement snapshot."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    student_id: int
    quiz_score: int
    assessment_score: int
    total_quiz_questions: int
    correct_quiz_answers: int
    total_assessment_questions: int
    correct_assessment_answers: int
    completion_date: datetime
    time_spent_minutes: int | None = None
    performance_level: PerformanceLevel
    created_at: datetime


# ============================================================================
# Report
# ============================================================================

class ReportDetails(BaseModel):
    """Counts for one attempt kind, with the attempts as supporting evidence."""
    model_config = ConfigDict(frozen=True)

    total_questions: int
    correct_answers: int
    score_percentage: int
    questions_attempted: tuple[QuizAttemptResponse, ...]


class AchievementReport(BaseModel):
    """Student, one achievement and per-kind detail, ready for display or print."""
    model_config = ConfigDict(frozen=True)

    student: StudentResponse
    achievement: AchievementResponse
    quiz_details: ReportDetails
    assessment_details: ReportDetails
