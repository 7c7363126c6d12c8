"""
Achievement Tracker - Student API Routes
Endpoints for registering and looking up students
"""
from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import IntegrityError

from achievement_tracker.api.deps import DbSession, StudentId, conflict
from achievement_tracker.schemas.user import StudentCreate, StudentResponse
from achievement_tracker.services.students import StudentService

router = APIRouter(prefix="/students", tags=["Students"])


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
    description="Register a new student. Emails are unique.",
)
async def create_student(
    student_data: StudentCreate,
    db: DbSession,
) -> StudentResponse:
    """Register a new student."""
    try:
        student = await StudentService(db).create_student(student_data)
    except IntegrityError as e:
        raise conflict(e)
    return StudentResponse.model_validate(student)


@router.get(
    "",
    response_model=list[StudentResponse],
    summary="List students",
    description="All students, newest first.",
)
async def list_students(db: DbSession) -> list[StudentResponse]:
    students = await StudentService(db).list_students()
    return [StudentResponse.model_validate(s) for s in students]


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student",
)
async def get_student(student_id: StudentId, db: DbSession) -> StudentResponse:
    student = await StudentService(db).get_student(student_id)
    if student is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Student with ID {student_id} not found",
        )
    return StudentResponse.model_validate(student)
