"""
Achievement Tracker - Curriculum API Routes
Endpoints for lesson material and the question bank
"""
from fastapi import APIRouter, status

from achievement_tracker.api.deps import DbSession
from achievement_tracker.models.curriculum import QuestionType
from achievement_tracker.schemas.curriculum import (
    MaterialSectionCreate,
    MaterialSectionResponse,
    QuizQuestionCreate,
    QuizQuestionPublic,
    QuizQuestionResponse,
)
from achievement_tracker.services.curriculum import CurriculumService

router = APIRouter(tags=["Curriculum"])


# ============================================================================
# Material Sections
# ============================================================================

@router.get(
    "/materials",
    response_model=list[MaterialSectionResponse],
    summary="List material sections",
    description="Lesson material in reading order.",
)
async def list_material_sections(db: DbSession) -> list[MaterialSectionResponse]:
    sections = await CurriculumService(db).list_material_sections()
    return [MaterialSectionResponse.model_validate(s) for s in sections]


@router.post(
    "/materials",
    response_model=MaterialSectionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create material section",
)
async def create_material_section(
    section_data: MaterialSectionCreate,
    db: DbSession,
) -> MaterialSectionResponse:
    section = await CurriculumService(db).create_material_section(section_data)
    return MaterialSectionResponse.model_validate(section)


# ============================================================================
# Questions
# ============================================================================

@router.get(
    "/questions",
    response_model=None,
    summary="List questions",
    description=(
        "Questions of one type in random order. The answer key is hidden unless "
        "include_answers=true."
    ),
)
async def list_questions(
    question_type: QuestionType,
    db: DbSession,
    include_answers: bool = False,
) -> list[QuizQuestionResponse] | list[QuizQuestionPublic]:
    questions = await CurriculumService(db).list_questions(question_type)
    if include_answers:
        return [QuizQuestionResponse.model_validate(q) for q in questions]
    return [QuizQuestionPublic.model_validate(q) for q in questions]


@router.post(
    "/questions",
    response_model=QuizQuestionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create question",
)
async def create_question(
    question_data: QuizQuestionCreate,
    db: DbSession,
) -> QuizQuestionResponse:
    question = await CurriculumService(db).create_question(question_data)
    return QuizQuestionResponse.model_validate(question)
