"""Achievement Tracker - Models initialization."""
from achievement_tracker.models.user import Student
from achievement_tracker.models.curriculum import (
    AnswerOption,
    DifficultyLevel,
    MaterialSection,
    QuestionType,
    QuizQuestion,
)
from achievement_tracker.models.assessment import (
    AttemptType,
    PerformanceLevel,
    QuizAttempt,
    StudentAchievement,
)


__all__ = [
    # Student
    "Student",
    # Curriculum models
    "MaterialSection",
    "QuizQuestion",
    "AnswerOption",
    "QuestionType",
    "DifficultyLevel",
    # Attempts & achievements
    "QuizAttempt",
    "StudentAchievement",
    "AttemptType",
    "PerformanceLevel",
]
