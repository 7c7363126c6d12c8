"""
Achievement Tracker - Test Configuration
Pytest fixtures and configuration for testing
"""
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from achievement_tracker.core.database import Base, get_db
from achievement_tracker.main import app
from achievement_tracker.models import (
    AnswerOption,
    AttemptType,
    DifficultyLevel,
    QuestionType,
    QuizQuestion,
    Student,
)
from achievement_tracker.schemas.assessment import SubmitAnswerRequest
from achievement_tracker.services.attempts import AttemptStore


# Test database URL (in-memory SQLite shared by one connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with test_session_maker() as session:
        yield session

    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database session override."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_student_data() -> dict[str, Any]:
    """Sample student data."""
    return {
        "name": "Sarah Student",
        "email": "sarah@example.com",
        "grade": "Grade 5",
    }


@pytest.fixture
def sample_question_data() -> dict[str, Any]:
    """Sample quiz question whose answer is B."""
    return {
        "question_text": "What is 7 x 6?",
        "option_a": "36",
        "option_b": "42",
        "option_c": "48",
        "option_d": "54",
        "correct_answer": "B",
        "question_type": "quiz",
        "difficulty_level": "easy",
        "topic": "Multiplication",
        "explanation": "7 groups of 6 make 42.",
    }


@pytest_asyncio.fixture
async def make_student(db_session: AsyncSession):
    """Factory for persisted students."""
    counter = 0

    async def _make(name: str = "Student") -> Student:
        nonlocal counter
        counter += 1
        student = Student(name=f"{name} {counter}", email=f"student{counter}@example.com", grade="5")
        db_session.add(student)
        await db_session.flush()
        await db_session.refresh(student)
        return student

    return _make


@pytest_asyncio.fixture
async def make_question(db_session: AsyncSession):
    """Factory for persisted questions with a chosen answer key."""

    async def _make(
        correct_answer: AnswerOption = AnswerOption.A,
        question_type: QuestionType = QuestionType.QUIZ,
    ) -> QuizQuestion:
        question = QuizQuestion(
            question_text="Which option is right?",
            option_a="first",
            option_b="second",
            option_c="third",
            option_d="fourth",
            correct_answer=correct_answer.value,
            question_type=question_type.value,
            difficulty_level=DifficultyLevel.MEDIUM.value,
            topic="General",
        )
        db_session.add(question)
        await db_session.flush()
        await db_session.refresh(question)
        return question

    return _make


@pytest_asyncio.fixture
async def answer(db_session: AsyncSession, make_question):
    """Submit answers through the attempt store: answer(student, kind, correct=True)."""
    store = AttemptStore(db_session)

    async def _answer(student: Student, attempt_type: AttemptType, correct: bool):
        question = await make_question(AnswerOption.C)
        selected = AnswerOption.C if correct else AnswerOption.D
        return await store.submit_answer(SubmitAnswerRequest(
            student_id=student.id,
            question_id=question.id,
            selected_answer=selected,
            attempt_type=attempt_type,
        ))

    return _answer
