"""
Achievement Tracker - Assessment API
Endpoints for submitting answers, scoring them and recording achievements
"""
from fastapi import APIRouter, status

from achievement_tracker.api.deps import DbSession, StudentId, not_found
from achievement_tracker.models.assessment import AttemptType
from achievement_tracker.schemas.assessment import (
    AchievementCreate,
    AchievementResponse,
    QuizAttemptResponse,
    ScoreSummary,
    SubmitAnswerRequest,
)
from achievement_tracker.services.achievements import AchievementService
from achievement_tracker.services.attempts import AttemptStore
from achievement_tracker.services.errors import NotFoundError
from achievement_tracker.services.scoring import ScoreAggregator

router = APIRouter(tags=["Assessments"])


# ============================================================================
# Attempts
# ============================================================================

@router.post(
    "/attempts",
    response_model=QuizAttemptResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an answer",
    description="Grade one answer against the question's answer key and store it.",
)
async def submit_answer(
    answer: SubmitAnswerRequest,
    db: DbSession,
) -> QuizAttemptResponse:
    try:
        attempt = await AttemptStore(db).submit_answer(answer)
    except NotFoundError as e:
        raise not_found(e)
    return QuizAttemptResponse.model_validate(attempt)


@router.get(
    "/students/{student_id}/attempts",
    response_model=list[QuizAttemptResponse],
    summary="List a student's attempts",
)
async def list_attempts(
    student_id: StudentId,
    db: DbSession,
    attempt_type: AttemptType | None = None,
) -> list[QuizAttemptResponse]:
    attempts = await AttemptStore(db).list_attempts(student_id, attempt_type)
    return [QuizAttemptResponse.model_validate(a) for a in attempts]


@router.get(
    "/students/{student_id}/score",
    response_model=ScoreSummary,
    summary="Compute a student's score",
    description="Totals, percentage and performance level over all attempts of one kind.",
)
async def compute_score(
    student_id: StudentId,
    attempt_type: AttemptType,
    db: DbSession,
) -> ScoreSummary:
    return await ScoreAggregator(db).compute_score(student_id, attempt_type)


# ============================================================================
# Achievements
# ============================================================================

@router.post(
    "/achievements",
    response_model=AchievementResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an achievement",
    description="Store a snapshot of finalized quiz and assessment results.",
)
async def record_achievement(
    achievement_data: AchievementCreate,
    db: DbSession,
) -> AchievementResponse:
    try:
        achievement = await AchievementService(db).record_achievement(achievement_data)
    except NotFoundError as e:
        raise not_found(e)
    return AchievementResponse.model_validate(achievement)


@router.get(
    "/students/{student_id}/achievements",
    response_model=list[AchievementResponse],
    summary="List a student's achievements",
    description="Most recent completion first.",
)
async def list_achievements(
    student_id: StudentId,
    db: DbSession,
) -> list[AchievementResponse]:
    achievements = await AchievementService(db).list_achievements(student_id)
    return [AchievementResponse.model_validate(a) for a in achievements]
