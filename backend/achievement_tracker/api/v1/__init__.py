"""Achievement Tracker - API v1 Router."""
from fastapi import APIRouter

from achievement_tracker.api.v1.students import router as students_router
from achievement_tracker.api.v1.curriculum import router as curriculum_router
from achievement_tracker.api.v1.assessment import router as assessment_router
from achievement_tracker.api.v1.reports import router as reports_router

api_router = APIRouter()

api_router.include_router(students_router)
api_router.include_router(curriculum_router)
api_router.include_router(assessment_router)
api_router.include_router(reports_router)
