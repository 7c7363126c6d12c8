"""
Achievement Tracker - Achievement Recorder Tests
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from achievement_tracker.models import PerformanceLevel, StudentAchievement
from achievement_tracker.schemas.assessment import AchievementCreate
from achievement_tracker.services.achievements import AchievementService
from achievement_tracker.services.errors import NotFoundError


def _achievement(student_id: int, **overrides) -> AchievementCreate:
    data = {
        "student_id": student_id,
        "quiz_score": 75,
        "assessment_score": 90,
        "total_quiz_questions": 4,
        "correct_quiz_answers": 3,
        "total_assessment_questions": 10,
        "correct_assessment_answers": 9,
        "time_spent_minutes": 25,
        "performance_level": PerformanceLevel.GOOD,
    }
    data.update(overrides)
    return AchievementCreate(**data)


@pytest.mark.asyncio
async def test_record_achievement(db_session, make_student):
    student = await make_student()

    achievement = await AchievementService(db_session).record_achievement(_achievement(student.id))

    assert achievement.id is not None
    assert achievement.student_id == student.id
    assert achievement.quiz_score == 75
    assert achievement.assessment_score == 90
    assert achievement.correct_assessment_answers == 9
    assert achievement.time_spent_minutes == 25
    assert achievement.performance_level == "good"
    assert achievement.completion_date is not None
    assert achievement.created_at is not None


@pytest.mark.asyncio
async def test_caller_tier_is_stored_as_given(db_session, make_student):
    student = await make_student()

    achievement = await AchievementService(db_session).record_achievement(
        _achievement(student.id, performance_level=PerformanceLevel.SATISFACTORY)
    )

    assert achievement.performance_level == "satisfactory"


@pytest.mark.asyncio
async def test_missing_tier_is_derived_from_combined_totals(db_session, make_student):
    student = await make_student()

    # 12 of 14 combined is 86%
    achievement = await AchievementService(db_session).record_achievement(
        _achievement(student.id, performance_level=None)
    )

    assert achievement.performance_level == "good"


@pytest.mark.asyncio
async def test_time_spent_is_optional(db_session, make_student):
    student = await make_student()

    achievement = await AchievementService(db_session).record_achievement(
        _achievement(student.id, time_spent_minutes=None)
    )

    assert achievement.time_spent_minutes is None


@pytest.mark.asyncio
async def test_unknown_student_is_rejected(db_session):
    with pytest.raises(NotFoundError) as exc_info:
        await AchievementService(db_session).record_achievement(_achievement(999))

    assert "999" in str(exc_info.value)
    result = await db_session.execute(select(func.count(StudentAchievement.id)))
    assert result.scalar_one() == 0


@pytest.mark.asyncio
async def test_many_achievements_per_student(db_session, make_student):
    student = await make_student()
    service = AchievementService(db_session)

    first = await service.record_achievement(_achievement(student.id))
    second = await service.record_achievement(_achievement(
        student.id,
        quiz_score=100,
        correct_quiz_answers=4,
        performance_level=PerformanceLevel.EXCELLENT,
    ))

    history = await service.list_achievements(student.id)
    assert [a.id for a in history] == [second.id, first.id]


@pytest.mark.asyncio
async def test_latest_follows_completion_date(db_session, make_student):
    student = await make_student()
    service = AchievementService(db_session)

    newer = await service.record_achievement(_achievement(student.id))
    older = await service.record_achievement(_achievement(student.id))
    older.completion_date = datetime.now(timezone.utc) - timedelta(days=1)
    await db_session.flush()

    latest = await service.get_latest_achievement(student.id)
    assert latest.id == newer.id


def test_score_must_match_counts():
    with pytest.raises(ValidationError):
        _achievement(1, quiz_score=80)


def test_correct_cannot_exceed_total():
    with pytest.raises(ValidationError):
        _achievement(1, correct_quiz_answers=5, quiz_score=125)
    with pytest.raises(ValidationError):
        _achievement(1, total_quiz_questions=2, correct_quiz_answers=3, quiz_score=100)


def test_zero_questions_require_zero_score():
    data = _achievement(
        1,
        quiz_score=0,
        total_quiz_questions=0,
        correct_quiz_answers=0,
    )
    assert data.quiz_score == 0
