"""Achievement Tracker - Services initialization."""
from achievement_tracker.services.errors import NotFoundError, ServiceError
from achievement_tracker.services.students import StudentService
from achievement_tracker.services.curriculum import CurriculumService
from achievement_tracker.services.attempts import AttemptStore
from achievement_tracker.services.scoring import ScoreAggregator
from achievement_tracker.services.achievements import AchievementService
from achievement_tracker.services.reports import ReportService

__all__ = [
    "ServiceError",
    "NotFoundError",
    "StudentService",
    "CurriculumService",
    "AttemptStore",
    "ScoreAggregator",
    "AchievementService",
    "ReportService",
]
