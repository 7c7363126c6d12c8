"""
Achievement Tracker - Report API
Printable achievement report for a student
"""
from fastapi import APIRouter, HTTPException, status

from achievement_tracker.api.deps import AchievementId, DbSession, StudentId
from achievement_tracker.schemas.assessment import AchievementReport
from achievement_tracker.services.reports import ReportService

router = APIRouter(tags=["Reports"])


@router.get(
    "/students/{student_id}/report",
    response_model=AchievementReport,
    summary="Get achievement report",
    description=(
        "Report for the given achievement, or for the latest one when "
        "achievement_id is omitted."
    ),
)
async def get_report(
    student_id: StudentId,
    db: DbSession,
    achievement_id: AchievementId = None,
) -> AchievementReport:
    report = await ReportService(db).get_report(student_id, achievement_id)
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )
    return report
